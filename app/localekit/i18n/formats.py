"""Message file decoding and parsing.

A message file is named "<anything>.<language tag>.<format>" (or just
"<language tag>.<format>"); its format is picked from the extension and its
language from the segment right before it.

Expected content:
    WelcomeMessage: "Hola {{.Name}}"
    menu:
      open: "Abrir"          # registered as "menu.open"
    Cats:
      one: "{{.PluralCount}} gato"
      other: "{{.PluralCount}} gatos"
"""

import json
import tomllib
from typing import Any, Callable, Dict, List, Mapping, Tuple

import yaml

from localekit.i18n.errors import InvalidLanguageTagError, MessageFileError
from localekit.i18n.models import RESERVED_KEYS, MessageTemplate
from localekit.i18n.tags import is_known_language, normalize_tag

Decoder = Callable[[bytes], Any]


def _decode_yaml(data: bytes) -> Any:
    return yaml.safe_load(data)


def _decode_toml(data: bytes) -> Any:
    return tomllib.loads(data.decode("utf-8"))


def _decode_json(data: bytes) -> Any:
    return json.loads(data)


def default_decoders() -> Dict[str, Decoder]:
    """Decoders registered on every new loader, keyed by file extension."""
    return {
        "yaml": _decode_yaml,
        "yml": _decode_yaml,
        "toml": _decode_toml,
        "json": _decode_json,
    }


def parse_path(filename: str) -> Tuple[str, str]:
    """Split a message file name into (language tag, format).

    A bare "<tag>.<format>" name must name a language Babel knows, so
    "messages.yaml" is rejected while "es.yaml" is accepted.

    Example:
        >>> parse_path("active.es-CO.yaml")
        ('es-CO', 'yaml')

    Raises:
        MessageFileError: If the name has no extension or no language tag.
    """
    parts = filename.split(".")
    if len(parts) < 2 or not parts[-1]:
        raise MessageFileError(filename, "no file extension")

    try:
        tag = normalize_tag(parts[-2])
    except InvalidLanguageTagError as e:
        raise MessageFileError(filename, "no language tag in file name") from e

    if len(parts) == 2 and not is_known_language(tag):
        raise MessageFileError(filename, f"unknown language {tag!r} in file name")

    return tag, parts[-1].lower()


def is_message(value: Any) -> bool:
    """Check whether a decoded value is a single message.

    A value is a message when it is a string, or a mapping holding a string
    under at least one reserved key.
    """
    if isinstance(value, str):
        return True
    if isinstance(value, Mapping):
        return any(
            str(key).lower() in RESERVED_KEYS and isinstance(item, str)
            for key, item in value.items()
        )
    return False


def _collect_messages(
    data: Mapping, prefix: str, filename: str, out: List[MessageTemplate]
) -> None:
    for key, value in data.items():
        message_id = f"{prefix}.{key}" if prefix else str(key)
        if is_message(value):
            try:
                out.append(MessageTemplate.from_value(message_id, value))
            except ValueError as e:
                raise MessageFileError(filename, str(e)) from e
        elif isinstance(value, Mapping):
            _collect_messages(value, message_id, filename, out)
        else:
            raise MessageFileError(
                filename,
                f"unsupported value for {message_id!r}: {type(value).__name__}",
            )


def parse_messages(data: Any, filename: str) -> List[MessageTemplate]:
    """Turn decoded file content into message templates.

    Args:
        data: Decoded content (mapping, list of messages, or None).
        filename: Source file (for error reporting).

    Returns:
        Message templates in file order.

    Raises:
        MessageFileError: If the structure is not a message file.
    """
    messages: List[MessageTemplate] = []
    if data is None:
        return messages

    if isinstance(data, list):
        for item in data:
            if not isinstance(item, Mapping) or not isinstance(item.get("id"), str):
                raise MessageFileError(filename, "list entries need a string 'id'")
            try:
                messages.append(MessageTemplate.from_value(item["id"], item))
            except ValueError as e:
                raise MessageFileError(filename, str(e)) from e
        return messages

    if not isinstance(data, Mapping):
        raise MessageFileError(
            filename, f"expected a mapping, got {type(data).__name__}"
        )

    _collect_messages(data, "", filename, messages)
    return messages


def parse_message_file(
    filename: str,
    content: bytes,
    decoders: Mapping[str, Decoder],
) -> Tuple[str, List[MessageTemplate]]:
    """Parse one message file.

    Args:
        filename: File name; carries the language tag and format.
        content: Raw file content.
        decoders: Format -> decoder registry.

    Returns:
        (language tag, message templates)

    Raises:
        MessageFileError: If the file cannot be decoded or parsed.
    """
    tag, file_format = parse_path(filename)

    decoder = decoders.get(file_format)
    if decoder is None:
        raise MessageFileError(
            filename, f"no decoder registered for format {file_format!r}"
        )

    try:
        data = decoder(content)
    except (yaml.YAMLError, tomllib.TOMLDecodeError, ValueError) as e:
        # json.JSONDecodeError and UnicodeDecodeError are ValueErrors
        raise MessageFileError(filename, f"decode error: {e}") from e

    return tag, parse_messages(data, filename)
