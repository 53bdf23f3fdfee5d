"""Translation service for dependency injection.

Provides a class-based interface to the i18n system for easier DI and testing.
"""

from typing import Any, Optional, Sequence

from localekit.i18n.bundle import Bundle
from localekit.i18n.factory import create_bundle
from localekit.i18n.localizer import Localizer
from localekit.i18n.plurals import PluralCount
from localekit.i18n.tags import normalize_tag
from localekit.i18n.translator import t


class TranslationService:
    """Class-based translation service.

    Thin facade over a Bundle; all actual work is delegated to the
    localizer and the t() helper.

    Usage:
        service = TranslationService()
        text = service.translate("WelcomeMessage", ["es-CO", "es"], {"Name": "Ana"})
    """

    def __init__(self, bundle: Optional[Bundle] = None):
        """Initialize translation service.

        Args:
            bundle: Optional pre-loaded Bundle. If not provided, creates
                the default one via the factory.
        """
        self._bundle = bundle or create_bundle()

    def localizer(self, *langs: str) -> Localizer:
        """Create a localizer for languages in order of preference."""
        return self._bundle.get_localizer(*langs)

    def translate(
        self,
        message_id: str,
        langs: Sequence[str] = (),
        template_data: Optional[Any] = None,
        plural_count: Optional[PluralCount] = None,
    ) -> str:
        """Translate a message for the given preferences.

        Returns:
            Translated text, or message_id if translation fails.
        """
        return t(
            self._bundle.get_localizer(*langs),
            message_id,
            template_data=template_data,
            plural_count=plural_count,
        )

    def has_message(self, message_id: str, lang: str) -> bool:
        """Check if a message exists in exactly this language.

        Raises:
            InvalidLanguageTagError: If lang is not a language tag.
        """
        return self._bundle.catalog.has_message(normalize_tag(lang), message_id)

    def available_languages(self) -> list[str]:
        """Get list of loaded language tags, default language first."""
        return list(self._bundle.languages)

    @property
    def bundle(self) -> Bundle:
        """Access the underlying Bundle."""
        return self._bundle
