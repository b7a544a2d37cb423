"""Password strength policy.

Fixed rules, no configuration:
- at least MIN_PASSWORD_LENGTH characters and not blank
- no COMMON_WORDS entry anywhere in the lowercased password
- at least MIN_CHARACTER_CLASSES of upper / lower / digit / special
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field

MIN_PASSWORD_LENGTH = 8
MIN_CHARACTER_CLASSES = 3

COMMON_WORDS: tuple[str, ...] = (
    "password",
    "qwerty",
    "123456",
    "letmein",
    "welcome",
    "admin",
    "login",
    "master",
    "hello",
    "sunshine",
)


class CharacterClass(StrEnum):
    """Character classes counted toward password strength."""

    UPPER = "upper"
    LOWER = "lower"
    DIGIT = "digit"
    SPECIAL = "special"


def _classify(char: str) -> CharacterClass | None:
    # Uncased letters (e.g. CJK) fall through every branch.
    if char.isupper():
        return CharacterClass.UPPER
    if char.islower():
        return CharacterClass.LOWER
    if char.isdecimal():
        return CharacterClass.DIGIT
    if not (char.isalpha() or char.isdecimal()):
        return CharacterClass.SPECIAL
    return None


def character_classes(password: str) -> set[CharacterClass]:
    """Return the character classes present in *password*."""
    found: set[CharacterClass] = set()
    for char in password:
        cls = _classify(char)
        if cls is not None:
            found.add(cls)
    return found


def denied_words(password: str) -> list[str]:
    """Return every COMMON_WORDS entry contained in *password*, case-insensitive."""
    lowered = password.lower()
    hits: list[str] = []
    for word in COMMON_WORDS:
        if word in lowered:
            hits.append(word)
    return hits


def _too_short(password: str) -> bool:
    return not password or password.isspace() or len(password) < MIN_PASSWORD_LENGTH


def is_strong_password(password: str) -> bool:
    """Classify *password* as strong (True) or weak (False)."""
    if _too_short(password) or denied_words(password):
        return False
    return len(character_classes(password)) >= MIN_CHARACTER_CLASSES


class PasswordCheck(BaseModel):
    """Detailed breakdown of a password evaluation.

    ``strong`` always agrees with :func:`is_strong_password`.
    """

    model_config = {"frozen": True}

    strong: bool
    length: int
    classes: list[CharacterClass] = Field(default_factory=list)
    denied_words: list[str] = Field(default_factory=list)
    problems: list[str] = Field(default_factory=list)


def evaluate_password(password: str) -> PasswordCheck:
    """Evaluate *password* and explain every rule it breaks."""
    classes = character_classes(password)
    hits = denied_words(password)
    problems: list[str] = []

    if _too_short(password):
        problems.append(f"shorter than {MIN_PASSWORD_LENGTH} characters or blank")
    if hits:
        problems.append(f"contains common word(s): {', '.join(hits)}")
    if len(classes) < MIN_CHARACTER_CLASSES:
        problems.append(
            f"uses {len(classes)} of 4 character classes (need {MIN_CHARACTER_CLASSES})"
        )

    return PasswordCheck(
        strong=is_strong_password(password),
        length=len(password),
        classes=[c for c in CharacterClass if c in classes],
        denied_words=hits,
        problems=problems,
    )
