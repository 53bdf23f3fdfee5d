"""Factory functions for creating i18n components.

Provides convenience functions for initializing bundles with the
application's configuration.
"""

from importlib.resources import files
from pathlib import Path
from typing import Optional

from localekit.configuration import Settings, get_settings
from localekit.i18n.bundle import Bundle, new_bundle
from localekit.i18n.loader import TranslationSource
from localekit.logging import get_module_logger

logger = get_module_logger()


def embedded_locales() -> TranslationSource:
    """Message files shipped inside the localekit package."""
    return files("localekit") / "locales"


def create_bundle(
    translations_dir: Optional[TranslationSource] = None,
    default_language: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> Bundle:
    """Create and load a Bundle.

    Resolution order for the source: the translations_dir argument, then
    I18N_TRANSLATIONS_DIR, then the locales embedded in the package.

    Args:
        translations_dir: Directory or Traversable with message files.
        default_language: Default language (default: I18N_DEFAULT_LANGUAGE).
        settings: Settings instance (default: cached singleton).

    Returns:
        Bundle: Loaded bundle.

    Raises:
        TranslationSourceError: If the source cannot be enumerated.

    Usage:
        # Embedded locales, configured default language
        bundle = create_bundle()

        # Custom translations directory
        bundle = create_bundle(translations_dir=Path("/custom/locales"), default_language="es")
    """
    settings = settings or get_settings()

    if translations_dir is None and settings.i18n.TRANSLATIONS_DIR:
        translations_dir = Path(settings.i18n.TRANSLATIONS_DIR)
    source = translations_dir if translations_dir is not None else embedded_locales()
    default_language = default_language or settings.i18n.DEFAULT_LANGUAGE

    bundle = new_bundle(source, default_language)
    logger.info(
        "bundle_created",
        source=str(source),
        default_language=bundle.default_language,
        language_count=len(bundle.languages),
    )
    return bundle
