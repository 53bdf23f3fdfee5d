"""Translation models for i18n system.

Defines core data structures for message templates and the catalog.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

DEFAULT_LEFT_DELIM = "{{"
DEFAULT_RIGHT_DELIM = "}}"


class PluralForm(str, Enum):
    """CLDR plural categories."""

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"

    @classmethod
    def from_string(cls, form_str: str) -> "PluralForm":
        """Convert string to PluralForm enum.

        Raises:
            ValueError: If the string is not a CLDR plural category.
        """
        try:
            return cls(form_str.lower())
        except ValueError as e:
            raise ValueError(f"Unsupported plural form: {form_str}") from e


# Keys that mark a mapping as a single message rather than a group of messages
RESERVED_KEYS = frozenset(
    ["id", "description", "hash", "leftdelim", "rightdelim"]
    + [form.value for form in PluralForm]
)


@dataclass(frozen=True)
class MessageTemplate:
    """A translatable message for a single language.

    A plain string message only has the OTHER form. Frozen so templates can
    be shared by concurrent lookups.

    Attributes:
        id: Message identifier (e.g., "WelcomeMessage", "menu.open").
        forms: Plural form -> template string.
        description: Optional note for translators.
        hash: Optional source hash carried by the message file.
        left_delim: Placeholder opening delimiter.
        right_delim: Placeholder closing delimiter.
    """

    id: str
    forms: Mapping[PluralForm, str] = field(default_factory=dict)
    description: str = ""
    hash: str = ""
    left_delim: str = DEFAULT_LEFT_DELIM
    right_delim: str = DEFAULT_RIGHT_DELIM

    def __post_init__(self):
        object.__setattr__(self, "forms", MappingProxyType(dict(self.forms)))

    @classmethod
    def from_value(cls, message_id: str, value: Any) -> "MessageTemplate":
        """Build a template from a decoded message file value.

        Args:
            message_id: Identifier the message is registered under.
            value: A string, or a mapping of reserved keys to strings.

        Returns:
            MessageTemplate instance.

        Raises:
            ValueError: If the value is neither a string nor a message mapping.
        """
        if isinstance(value, str):
            return cls(id=message_id, forms={PluralForm.OTHER: value})

        if not isinstance(value, Mapping):
            raise ValueError(
                f"Message {message_id!r} must be a string or a mapping, "
                f"got {type(value).__name__}"
            )

        fields: Dict[str, str] = {}
        for key, item in value.items():
            key = str(key).lower()
            if key not in RESERVED_KEYS:
                continue
            if not isinstance(item, str):
                raise ValueError(
                    f"Message {message_id!r} key {key!r} must be a string"
                )
            fields[key] = item

        forms = {
            form: fields[form.value] for form in PluralForm if form.value in fields
        }
        return cls(
            id=message_id,
            forms=forms,
            description=fields.get("description", ""),
            hash=fields.get("hash", ""),
            left_delim=fields.get("leftdelim") or DEFAULT_LEFT_DELIM,
            right_delim=fields.get("rightdelim") or DEFAULT_RIGHT_DELIM,
        )

    @property
    def is_plural(self) -> bool:
        """True when the message carries forms other than OTHER."""
        return any(form is not PluralForm.OTHER for form in self.forms)

    def get_form(self, form: PluralForm) -> Optional[str]:
        """Get the template string for a plural form, or None if absent."""
        return self.forms.get(form)


@dataclass(frozen=True)
class Catalog:
    """Immutable set of messages for every loaded language.

    Built once by the loader and shared read-only afterwards.

    Attributes:
        default_language: Language served when no preference matches.
        messages: language tag -> {message id: MessageTemplate}.
        loaded_at: Timestamp (ISO 8601) when translations were loaded.
    """

    default_language: str
    messages: Mapping[str, Mapping[str, MessageTemplate]] = field(
        default_factory=dict
    )
    loaded_at: Optional[str] = None

    def __post_init__(self):
        frozen = {
            tag: MappingProxyType(dict(templates))
            for tag, templates in self.messages.items()
        }
        frozen.setdefault(self.default_language, MappingProxyType({}))
        object.__setattr__(self, "messages", MappingProxyType(frozen))

    @property
    def languages(self) -> tuple[str, ...]:
        """Loaded language tags, default language first."""
        others = sorted(tag for tag in self.messages if tag != self.default_language)
        return (self.default_language, *others)

    def get_message(self, language: str, message_id: str) -> Optional[MessageTemplate]:
        """Retrieve a message template, or None if not found."""
        return self.messages.get(language, {}).get(message_id)

    def has_message(self, language: str, message_id: str) -> bool:
        """Check if a message exists for a language."""
        return message_id in self.messages.get(language, {})

    def get_language(self, language: str) -> Mapping[str, MessageTemplate]:
        """Get all message templates for a language."""
        return self.messages.get(language, MappingProxyType({}))

    @property
    def message_count(self) -> int:
        """Total number of messages across languages."""
        return sum(len(templates) for templates in self.messages.values())
