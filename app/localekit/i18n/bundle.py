"""Bundle: the loaded catalog and the entry point for localizers."""

from typing import Mapping, Optional

from localekit.i18n.formats import Decoder
from localekit.i18n.loader import MessageFileLoader, TranslationSource
from localekit.i18n.localizer import Localizer
from localekit.i18n.models import Catalog


class Bundle:
    """Holds every loaded translation for the lifetime of the process.

    The catalog is never mutated after loading, so a bundle can be shared
    by concurrent localizers without locking.
    """

    def __init__(self, catalog: Catalog):
        self._catalog = catalog

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def default_language(self) -> str:
        return self._catalog.default_language

    @property
    def languages(self) -> tuple[str, ...]:
        """Loaded language tags, default language first."""
        return self._catalog.languages

    def get_localizer(self, *langs: str) -> Localizer:
        """Create a localizer for languages in order of preference.

        Args:
            *langs: Tags or Accept-Language values, most preferred first
                (e.g., "es-CO", "es", "en-US").

        Returns:
            Localizer bound to this bundle. Never fails; unknown languages
            simply fall through to the default language.
        """
        return Localizer(self._catalog, langs)


def new_bundle(
    source: TranslationSource,
    default_language: str,
    formats: Optional[Mapping[str, Decoder]] = None,
) -> Bundle:
    """Load message files from a source into a new bundle.

    Args:
        source: Directory path, or a Traversable such as
            importlib.resources.files("mypackage") / "locales".
        default_language: Language served when no preference matches.
        formats: Extra extension -> decoder registrations.

    Returns:
        Bundle with every message file that could be parsed.

    Raises:
        TranslationSourceError: If the source cannot be enumerated.
        InvalidLanguageTagError: If default_language is not a language tag.

    Example:
        bundle = new_bundle(Path("locales"), "es")
        localizer = bundle.get_localizer("es-CO", "es")
        t(localizer, "WelcomeMessage", {"Name": "Carlos"})
    """
    loader = MessageFileLoader(source, default_language)
    for file_format, decoder in (formats or {}).items():
        loader.register_format(file_format, decoder)
    return Bundle(loader.load())
