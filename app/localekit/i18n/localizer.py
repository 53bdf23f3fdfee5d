"""Localizer: a per-request view over a catalog bound to language preferences."""

from typing import Any, Iterable, Optional, Tuple, Union

from localekit.i18n.errors import MessageNotFoundError, PluralFormError
from localekit.i18n.models import Catalog, MessageTemplate, PluralForm
from localekit.i18n.plurals import PluralCount, plural_form
from localekit.i18n.resolvers import LanguageNegotiator, parse_accept_language
from localekit.i18n.templates import render


class Localizer:
    """Resolves messages for an ordered list of language preferences.

    Holds no state besides the preference order and the candidate languages
    derived from it; create one per request and discard it after use.

    Attributes:
        languages: Preferences as given (tags or Accept-Language values).
        preferences: Parsed, normalized preference tags.
        candidates: Catalog languages tried in order, default language last.
    """

    def __init__(self, catalog: Catalog, languages: Iterable[str] = ()):
        self._catalog = catalog
        self.languages = tuple(languages)
        self.preferences = tuple(
            tag for value in self.languages for tag in parse_accept_language(value)
        )
        self.candidates = LanguageNegotiator.candidate_chain(
            self.preferences,
            catalog.languages,
            catalog.default_language,
        )

    def find_message(self, message_id: str) -> Tuple[str, MessageTemplate]:
        """Find the first candidate language holding a message.

        Returns:
            (language tag, MessageTemplate)

        Raises:
            MessageNotFoundError: If no candidate language has the message.
        """
        for language in self.candidates:
            template = self._catalog.get_message(language, message_id)
            if template is not None:
                return language, template
        raise MessageNotFoundError(message_id, self.candidates)

    def localize_with_tag(
        self,
        message_id: str,
        template_data: Optional[Any] = None,
        plural_count: Optional[PluralCount] = None,
        default_message: Optional[Union[MessageTemplate, str]] = None,
    ) -> Tuple[str, str]:
        """Resolve a message and report the language that served it.

        Args:
            message_id: Message identifier.
            template_data: Mapping or object with placeholder values.
            plural_count: Count selecting the plural form. When set and
                template_data is None, the data becomes {"PluralCount": count}.
            default_message: Message used when no candidate has message_id;
                it is rendered with the default language's plural rule.

        Returns:
            (rendered text, language tag)

        Raises:
            MessageNotFoundError: If the message is absent everywhere and no
                default message is given.
            PluralFormError: If no plural form can be selected.
            TemplateDataError: If a placeholder has no value.
        """
        try:
            language, template = self.find_message(message_id)
        except MessageNotFoundError:
            if default_message is None:
                raise
            language = self._catalog.default_language
            if isinstance(default_message, str):
                template = MessageTemplate.from_value(message_id, default_message)
            else:
                template = default_message

        form = self._select_form(message_id, language, template, plural_count)
        text = template.get_form(form)
        if text is None:
            raise PluralFormError(message_id, language, form.value)

        if template_data is None and plural_count is not None:
            template_data = {"PluralCount": plural_count}

        return (
            render(
                text,
                template_data,
                message_id,
                template.left_delim,
                template.right_delim,
            ),
            language,
        )

    def localize(
        self,
        message_id: str,
        template_data: Optional[Any] = None,
        plural_count: Optional[PluralCount] = None,
        default_message: Optional[Union[MessageTemplate, str]] = None,
    ) -> str:
        """Resolve a message into text. See localize_with_tag()."""
        text, _ = self.localize_with_tag(
            message_id,
            template_data=template_data,
            plural_count=plural_count,
            default_message=default_message,
        )
        return text

    @staticmethod
    def _select_form(
        message_id: str,
        language: str,
        template: MessageTemplate,
        plural_count: Optional[PluralCount],
    ) -> PluralForm:
        # A message without plural variants serves every count
        if plural_count is None or not template.is_plural:
            return PluralForm.OTHER

        try:
            form = plural_form(language, plural_count)
        except (ValueError, ArithmeticError) as e:
            raise PluralFormError(message_id, language) from e
        if form is None:
            raise PluralFormError(message_id, language)
        return form

    def __repr__(self) -> str:
        return f"Localizer(candidates={list(self.candidates)!r})"
