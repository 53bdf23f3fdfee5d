"""Localization settings."""

from typing import Optional

from pydantic import Field, field_validator

from localekit.configuration.base import FeatureSettings
from localekit.i18n.errors import InvalidLanguageTagError
from localekit.i18n.tags import normalize_tag


class I18nSettings(FeatureSettings):
    """Translation catalog configuration.

    Environment Variables:
        I18N_TRANSLATIONS_DIR: Directory holding message files. When unset,
            the locales embedded in the package are used.
        I18N_DEFAULT_LANGUAGE: Language served when no preference matches
            (default: en)

    Example:
        ```python
        from localekit.configuration import get_settings

        settings = get_settings()
        default_language = settings.i18n.DEFAULT_LANGUAGE
        ```
    """

    TRANSLATIONS_DIR: Optional[str] = Field(
        default=None, alias="I18N_TRANSLATIONS_DIR"
    )
    DEFAULT_LANGUAGE: str = Field(default="en", alias="I18N_DEFAULT_LANGUAGE")

    @field_validator("TRANSLATIONS_DIR", mode="before")
    @classmethod
    def validate_translations_dir(cls, v: Optional[str]) -> Optional[str]:
        """Treat an empty directory setting as unset."""
        if v is None or not str(v).strip():
            return None
        return str(v).strip()

    @field_validator("DEFAULT_LANGUAGE")
    @classmethod
    def validate_default_language(cls, v: str) -> str:
        """Normalize the default language tag."""
        try:
            return normalize_tag(v)
        except InvalidLanguageTagError as e:
            raise ValueError(
                f"I18N_DEFAULT_LANGUAGE is not a language tag: {v!r}"
            ) from e
