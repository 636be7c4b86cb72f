"""Interest vocabulary extraction.

Builds the list of interest labels offered to the user from the raw tag
table, merging the `tag` and `interest_name` columns and collapsing case
variants.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Iterable

from .models import InterestTag


def _starts_upper(value: str) -> bool:
    return value[:1] == value[:1].upper()


def collation_key(value: str) -> tuple[str, str]:
    """Case- and accent-insensitive sort key, ties broken by the raw value."""
    decomposed = unicodedata.normalize("NFKD", value)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), value


def extract_interest_vocabulary(tags: Iterable[InterestTag]) -> list[str]:
    """Deduplicate interest labels case-insensitively.

    A later spelling replaces an earlier one only when it starts with an
    upper-case character and the stored one does not, so "STEM" wins over
    "stem" in either order while the first of two capitalized spellings stays.

    Example:
        >>> extract_interest_vocabulary([InterestTag(tag="STEM"), InterestTag(tag="stem"), InterestTag(tag="Art")])
        ['Art', 'STEM']
    """
    by_key: dict[str, str] = {}
    for tag in tags:
        for label in tag.labels:
            key = label.lower()
            current = by_key.get(key)
            if current is None or (_starts_upper(label) and not _starts_upper(current)):
                by_key[key] = label

    return sorted(by_key.values(), key=collation_key)
