"""Placeholder substitution for message templates.

Placeholders are written between the message delimiters, with an optional
leading dot: "{{.Name}}", "{{ Name }}", "{{.User.Name}}". Values come from
a mapping or from object attributes.
"""

import re
from functools import lru_cache
from typing import Any, Optional

from localekit.i18n.errors import TemplateDataError

_MISSING = object()


@lru_cache(maxsize=32)
def _placeholder_pattern(left_delim: str, right_delim: str) -> "re.Pattern[str]":
    return re.compile(
        re.escape(left_delim)
        + r"\s*\.?([A-Za-z_]\w*(?:\.[A-Za-z_]\w*)*)\s*"
        + re.escape(right_delim)
    )


def _lookup(data: Any, path: str) -> Any:
    value = data
    for name in path.split("."):
        if value is None:
            return _MISSING
        if isinstance(value, dict) or hasattr(value, "keys"):
            try:
                value = value[name]
            except (KeyError, TypeError):
                return _MISSING
        else:
            value = getattr(value, name, _MISSING)
        if value is _MISSING:
            return _MISSING
    return value


def render(
    text: str,
    data: Optional[Any],
    message_id: str,
    left_delim: str = "{{",
    right_delim: str = "}}",
) -> str:
    """Substitute placeholders in a template string.

    Args:
        text: Template string.
        data: Mapping or object providing placeholder values.
        message_id: Message being rendered (for error reporting).
        left_delim: Placeholder opening delimiter.
        right_delim: Placeholder closing delimiter.

    Returns:
        Rendered string. Text without the left delimiter is returned as is.

    Raises:
        TemplateDataError: If a placeholder has no value in data.
    """
    if left_delim not in text:
        return text

    def _replace(match: "re.Match[str]") -> str:
        value = _lookup(data, match.group(1))
        if value is _MISSING:
            raise TemplateDataError(message_id, match.group(1))
        return str(value)

    return _placeholder_pattern(left_delim, right_delim).sub(_replace, text)
