"""CLDR plural category selection backed by Babel."""

import math
from decimal import Decimal, InvalidOperation
from functools import lru_cache
from typing import Optional, Union

from babel import Locale as BabelLocale
from babel import UnknownLocaleError
from babel.plural import PluralRule

from localekit.i18n.models import PluralForm
from localekit.i18n.tags import parent_tags

PluralCount = Union[int, float, Decimal, str]


@lru_cache(maxsize=256)
def get_plural_rule(language: str) -> Optional[PluralRule]:
    """Get the plural rule for a language tag.

    Falls back to less specific tags ("es-CO" -> "es") when Babel has no
    data for the full tag.

    Returns:
        The Babel PluralRule, or None when no CLDR data exists.
    """
    for tag in parent_tags(language):
        try:
            return BabelLocale.parse(tag, sep="-").plural_form
        except (UnknownLocaleError, ValueError):
            continue
    return None


def to_operand(count: PluralCount) -> Union[int, float, Decimal]:
    """Convert a plural count to a number Babel can evaluate.

    Strings keep their visible fraction digits ("1.0" is not "1").

    Raises:
        ValueError: If count is not a finite number.
    """
    if isinstance(count, bool):
        raise ValueError(f"Invalid plural count: {count!r}")
    if isinstance(count, str):
        try:
            operand = Decimal(count.strip())
        except InvalidOperation as e:
            raise ValueError(f"Invalid plural count: {count!r}") from e
    elif isinstance(count, (int, float, Decimal)):
        operand = count
    else:
        raise ValueError(f"Invalid plural count: {count!r}")

    if isinstance(operand, Decimal):
        finite = operand.is_finite()
    elif isinstance(operand, float):
        finite = math.isfinite(operand)
    else:
        finite = True
    if not finite:
        raise ValueError(f"Invalid plural count: {count!r}")
    return operand


def plural_form(language: str, count: PluralCount) -> Optional[PluralForm]:
    """Select the plural category of count for a language.

    Example:
        >>> plural_form("en", 1)
        <PluralForm.ONE: 'one'>
        >>> plural_form("en", 5)
        <PluralForm.OTHER: 'other'>

    Returns:
        The PluralForm, or None when the language has no plural rule.

    Raises:
        ValueError: If count is not numeric.
    """
    rule = get_plural_rule(language)
    if rule is None:
        return None
    return PluralForm.from_string(rule(to_operand(count)))
