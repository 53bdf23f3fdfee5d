"""Lookup helper that never raises for missing or broken translations."""

from typing import Any, Optional

from localekit.i18n.errors import I18nError
from localekit.i18n.localizer import Localizer
from localekit.i18n.plurals import PluralCount
from localekit.logging import get_module_logger

logger = get_module_logger()


def t(
    localizer: Localizer,
    message_id: str,
    template_data: Optional[Any] = None,
    plural_count: Optional[PluralCount] = None,
) -> str:
    """Translate a message, echoing its id when translation fails.

    Args:
        localizer: Localizer bound to the caller's language preferences.
        message_id: Message identifier.
        template_data: Mapping or object with placeholder values.
        plural_count: Optional count selecting the plural form.

    Returns:
        The translated text, or message_id if the message is missing, a
        placeholder has no value, or no plural form applies.

    Example:
        t(localizer, "WelcomeMessage", {"Name": "Carlos"})
        t(localizer, "CatsCount", plural_count=5)
    """
    try:
        return localizer.localize(
            message_id,
            template_data=template_data,
            plural_count=plural_count,
        )
    except I18nError as e:
        logger.debug(
            "translation_fell_back_to_message_id",
            message_id=message_id,
            candidates=list(localizer.candidates),
            error=str(e),
        )
        return message_id
