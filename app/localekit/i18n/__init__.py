"""i18n system - message bundles, localizers and lookup.

Loads YAML/TOML/JSON message files into an immutable catalog keyed by
language tag, binds ranked language preferences to it, and resolves message
ids with template data and plural counts.

Main components:
- models: PluralForm, MessageTemplate, Catalog
- loader: MessageFileLoader (catalog builder)
- bundle: Bundle and new_bundle()
- localizer: Localizer bound to language preferences
- translator: t() lookup helper, never raises
- factory/service: settings-driven construction and DI facade
"""

from localekit.i18n.bundle import Bundle, new_bundle
from localekit.i18n.errors import (
    I18nError,
    InvalidLanguageTagError,
    MessageFileError,
    MessageNotFoundError,
    PluralFormError,
    TemplateDataError,
    TranslationSourceError,
)
from localekit.i18n.factory import create_bundle, embedded_locales
from localekit.i18n.loader import MessageFileLoader
from localekit.i18n.localizer import Localizer
from localekit.i18n.models import Catalog, MessageTemplate, PluralForm
from localekit.i18n.resolvers import LanguageNegotiator, parse_accept_language
from localekit.i18n.service import TranslationService
from localekit.i18n.translator import t

__all__ = [
    "Bundle",
    "new_bundle",
    "create_bundle",
    "embedded_locales",
    "MessageFileLoader",
    "Localizer",
    "t",
    "TranslationService",
    "Catalog",
    "MessageTemplate",
    "PluralForm",
    "LanguageNegotiator",
    "parse_accept_language",
    "I18nError",
    "InvalidLanguageTagError",
    "MessageFileError",
    "MessageNotFoundError",
    "PluralFormError",
    "TemplateDataError",
    "TranslationSourceError",
]
