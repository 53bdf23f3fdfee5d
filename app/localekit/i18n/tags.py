"""Language tag helpers.

Tags follow IETF BCP 47 (e.g., "es", "es-CO", "zh-Hant-TW"). normalize_tag()
only checks the shape of a tag; is_known_language() asks Babel whether the
language exists.
"""

import re
from functools import lru_cache

from babel import Locale as BabelLocale
from babel import UnknownLocaleError

from localekit.i18n.errors import InvalidLanguageTagError

_TAG_PATTERN = re.compile(r"^[A-Za-z]{2,8}(?:-[A-Za-z0-9]{1,8})*$")


def is_valid_tag(tag: str) -> bool:
    """Check whether a string looks like a language tag."""
    return bool(tag) and bool(_TAG_PATTERN.match(tag.strip().replace("_", "-")))


def normalize_tag(tag: str) -> str:
    """Return the canonical casing of a language tag.

    Language is lower-cased, a four letter script is title-cased and a
    two letter region is upper-cased ("ES_co" -> "es-CO").

    Raises:
        InvalidLanguageTagError: If the string is not a language tag.
    """
    if not isinstance(tag, str) or not is_valid_tag(tag):
        raise InvalidLanguageTagError(str(tag))

    parts = tag.strip().replace("_", "-").split("-")
    normalized = [parts[0].lower()]
    for part in parts[1:]:
        if len(part) == 4 and part.isalpha():
            normalized.append(part.title())
        elif len(part) == 2 and part.isalpha():
            normalized.append(part.upper())
        else:
            normalized.append(part.lower())
    return "-".join(normalized)


def base_language(tag: str) -> str:
    """Get the language part of a tag (e.g., "es" from "es-CO")."""
    return tag.split("-")[0].lower()


def parent_tags(tag: str) -> list[str]:
    """List a tag and its progressively less specific prefixes.

    Example:
        >>> parent_tags("es-Latn-CO")
        ['es-Latn-CO', 'es-Latn', 'es']
    """
    parts = tag.split("-")
    return ["-".join(parts[:i]) for i in range(len(parts), 0, -1)]


@lru_cache(maxsize=256)
def is_known_language(tag: str) -> bool:
    """Check whether Babel has locale data for a tag or its base language."""
    try:
        BabelLocale.parse(base_language(tag))
    except (UnknownLocaleError, ValueError):
        return False
    return True
