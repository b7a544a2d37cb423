"""Username canonicalization, collision resolution, and suggestions.

Canonical form: lowercase, word characters separated by single hyphens,
no leading or trailing hyphen.

INVARIANT: Normalization is pure. The ``existing`` collection is only read.
"""

from __future__ import annotations

import itertools
import re
from collections.abc import Collection, Iterator

_NON_WORD = re.compile(r"[^\w]")
_HYPHEN_RUN = re.compile(r"-+")


def canonicalize_username(raw: str) -> str:
    """Return the canonical base of *raw* without collision handling.

    Examples:
        >>> canonicalize_username("Jastine ")
        'jastine'
        >>> canonicalize_username("--Mary  Jane!!")
        'mary-jane'
        >>> canonicalize_username("?!")
        ''
    """
    text = raw.lower()
    text = _NON_WORD.sub("-", text)
    text = _HYPHEN_RUN.sub("-", text)
    return text.strip("-")


def conflict_base(raw: str) -> str:
    """Base string used for conflict suggestions.

    Same as :func:`canonicalize_username` except hyphen runs are kept.
    """
    return _NON_WORD.sub("-", raw.lower()).strip("-")


def is_canonical(value: str) -> bool:
    """Check whether *value* is a non-empty canonical username."""
    return bool(value) and canonicalize_username(value) == value


def _suffixed(base: str) -> Iterator[str]:
    for n in itertools.count(1):
        yield f"{base}{n}"


def normalize_username(raw: str, existing: Collection[str]) -> str:
    """Map *raw* to a canonical username absent from *existing*.

    Collisions append ``1``, ``2``, ... to the base with no separator and
    return the first free candidate. An empty base always takes a suffix.
    """
    base = canonicalize_username(raw)
    if base and base not in existing:
        return base
    return next(c for c in _suffixed(base) if c not in existing)


def suggest_alternatives(
    base: str,
    existing: Collection[str],
    max_suggestions: int = 3,
) -> list[str]:
    """Return up to *max_suggestions* free ``base + n`` names in suffix order."""
    if max_suggestions <= 0:
        return []
    free = (c for c in _suffixed(base) if c not in existing)
    return list(itertools.islice(free, max_suggestions))
