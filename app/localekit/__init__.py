"""localekit - message bundle localization helper."""

from localekit.i18n import (
    Bundle,
    Localizer,
    TranslationService,
    create_bundle,
    new_bundle,
    t,
)

__all__ = [
    "Bundle",
    "Localizer",
    "TranslationService",
    "create_bundle",
    "new_bundle",
    "t",
]
