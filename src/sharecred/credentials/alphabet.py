"""Characters allowed in usernames and passwords."""

import string
from enum import Enum

LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
DIGITS = string.digits
SPECIAL = "!-.&*"

ALLOWED = LOWERCASE + UPPERCASE + DIGITS + SPECIAL
ALLOWED_SET = frozenset(ALLOWED)

# Shown to the operator in rejection hints
ALLOWED_DESCRIPTION = "a-z, A-Z, 0-9, " + ", ".join(SPECIAL)


class CharacterClass(str, Enum):
    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    DIGIT = "digit"
    SPECIAL = "special"

    @property
    def characters(self) -> str:
        return _CLASS_CHARACTERS[self]


_CLASS_CHARACTERS = {
    CharacterClass.LOWERCASE: LOWERCASE,
    CharacterClass.UPPERCASE: UPPERCASE,
    CharacterClass.DIGIT: DIGITS,
    CharacterClass.SPECIAL: SPECIAL,
}


def classify(char: str):
    """Return the CharacterClass of a single character, or None if not allowed."""
    for char_class, members in _CLASS_CHARACTERS.items():
        if char in members:
            return char_class
    return None
