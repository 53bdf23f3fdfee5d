"""Custom exceptions for the i18n system.

Catastrophic failures (the translation source cannot be enumerated) surface
as TranslationSourceError. Every other error is per-item: the catalog builder
skips files raising MessageFileError, and the lookup helper turns the lookup
errors into the message id.
"""

from typing import Optional


class I18nError(Exception):
    """Base exception for all i18n errors.

    Example:
        try:
            localizer.localize("welcome")
        except I18nError as e:
            logger.debug("translation_failed", error=str(e))
    """

    pass


class InvalidLanguageTagError(I18nError, ValueError):
    """Raised when a string is not a well-formed language tag."""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"Invalid language tag: {tag!r}")


class TranslationSourceError(I18nError):
    """Raised when the translation source cannot be enumerated at all."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot read translation source {source}: {reason}")


class MessageFileError(I18nError):
    """Raised when a single message file cannot be parsed."""

    def __init__(self, filename: str, reason: str):
        self.filename = filename
        self.reason = reason
        super().__init__(f"Invalid message file {filename}: {reason}")


class MessageNotFoundError(I18nError):
    """Raised when a message id is absent in every candidate language."""

    def __init__(self, message_id: str, languages: tuple[str, ...]):
        self.message_id = message_id
        self.languages = languages
        super().__init__(
            f"Message {message_id!r} not found in languages: {', '.join(languages)}"
        )


class TemplateDataError(I18nError):
    """Raised when a placeholder has no value in the template data."""

    def __init__(self, message_id: str, variable: str):
        self.message_id = message_id
        self.variable = variable
        super().__init__(
            f"Missing template data {variable!r} for message {message_id!r}"
        )


class PluralFormError(I18nError):
    """Raised when a plural form cannot be selected for a message."""

    def __init__(self, message_id: str, language: str, form: Optional[str] = None):
        self.message_id = message_id
        self.language = language
        self.form = form
        if form is None:
            detail = f"no plural rule for language {language}"
        else:
            detail = f"plural form {form!r} missing for language {language}"
        super().__init__(f"Cannot pluralize message {message_id!r}: {detail}")
