"""Language preference parsing and negotiation.

Turns ranked language preferences into the ordered list of catalog
languages a lookup walks through.
"""

from typing import Iterable, List, Optional, Sequence

from localekit.i18n.errors import InvalidLanguageTagError
from localekit.i18n.tags import base_language, normalize_tag, parent_tags


def _quality(params: Sequence[str]) -> Optional[float]:
    """Read the q= parameter; None when it is not a number in [0, 1]."""
    for param in params:
        name, _, raw = param.partition("=")
        if name.strip().lower() != "q":
            continue
        try:
            quality = float(raw.strip())
        except ValueError:
            return None
        return quality if 0 <= quality <= 1 else None
    return 1.0


def parse_accept_language(value: Optional[str]) -> List[str]:
    """Parse a tag or an Accept-Language style list into normalized tags.

    Entries are ordered by quality; equal qualities keep their input order.
    Wildcards, malformed entries, entries with q=0 and entries whose quality
    is not a number between 0 and 1 are dropped. Parameters other than q
    are ignored.

    Example:
        >>> parse_accept_language("en-US,en;q=0.9,es-CO;q=0.95")
        ['en-US', 'es-CO', 'en']
    """
    if not value:
        return []

    # Parse "en-US,en;q=0.9" -> [(en-US, 1.0), (en, 0.9)]
    preferences = []
    for part in value.split(","):
        lang_range, *params = part.split(";")
        lang_range = lang_range.strip()
        quality = _quality(params)

        if not lang_range or lang_range == "*" or not quality:
            continue
        try:
            preferences.append((normalize_tag(lang_range), quality))
        except InvalidLanguageTagError:
            continue

    # sorted() is stable, so ties keep input order
    return [tag for tag, _ in sorted(preferences, key=lambda x: x[1], reverse=True)]


class LanguageNegotiator:
    """Matches requested language tags against the loaded languages."""

    @staticmethod
    def matches_language(
        requested: str,
        available: str,
        strict: bool = False,
    ) -> bool:
        """Check if available language matches requested language.

        Args:
            requested: Requested language tag (e.g., "en-US").
            available: Available language tag (e.g., "en").
            strict: If True, requires exact match. If False, allows language-only match.

        Returns:
            True if languages match.
        """
        if requested.lower() == available.lower():
            return True

        if strict:
            return False

        return base_language(requested) == base_language(available)

    @staticmethod
    def candidate_chain(
        preferences: Iterable[str],
        available: Sequence[str],
        default: str,
    ) -> tuple[str, ...]:
        """Build the ordered languages a lookup tries.

        For each preference: the exact tag, then its less specific prefixes
        ("es-CO" -> "es"), then any loaded tag with the same base language.
        The default language always closes the chain.

        Args:
            preferences: Normalized tags, most preferred first.
            available: Loaded language tags.
            default: Default language tag.

        Returns:
            Unique loaded tags in lookup order.
        """
        by_lower = {tag.lower(): tag for tag in available}
        chain: List[str] = []

        def _add(tag: str) -> None:
            if tag not in chain:
                chain.append(tag)

        for requested in preferences:
            for prefix in parent_tags(requested):
                match = by_lower.get(prefix.lower())
                if match:
                    _add(match)

            for avail_lang in available:
                if LanguageNegotiator.matches_language(
                    requested, avail_lang, strict=False
                ):
                    _add(avail_lang)

        _add(default)
        return tuple(chain)
