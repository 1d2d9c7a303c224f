"""Username and password validation rules.

Both rules share one alphabet (see ``alphabet``). A password must also contain
at least one lowercase letter, one uppercase letter and one special character.
Digits are allowed but never required.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Optional, Tuple

from sharecred.credentials.alphabet import (
    ALLOWED_DESCRIPTION,
    ALLOWED_SET,
    CharacterClass,
    SPECIAL,
)

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 20
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 20

PASSWORD_REQUIRED_CLASSES = (
    CharacterClass.LOWERCASE,
    CharacterClass.UPPERCASE,
    CharacterClass.SPECIAL,
)


class RejectionReason(str, Enum):
    """Why a candidate was rejected, in the order the checks run."""

    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    DISALLOWED_CHARACTER = "disallowed_character"
    MISSING_LOWERCASE = "missing_lowercase"
    MISSING_UPPERCASE = "missing_uppercase"
    MISSING_SPECIAL = "missing_special"


_MISSING_CLASS_REASONS = {
    CharacterClass.LOWERCASE: RejectionReason.MISSING_LOWERCASE,
    CharacterClass.UPPERCASE: RejectionReason.MISSING_UPPERCASE,
    CharacterClass.SPECIAL: RejectionReason.MISSING_SPECIAL,
}


@dataclass(frozen=True)
class CredentialRule:
    """Length bounds (inclusive) and required character classes for one kind of credential."""

    name: str
    min_length: int
    max_length: int
    required_classes: Tuple[CharacterClass, ...] = ()
    allowed: FrozenSet[str] = field(default=ALLOWED_SET)

    def check(self, candidate: str) -> Optional[RejectionReason]:
        """Return the first rule the candidate breaks, or None if it passes."""
        if len(candidate) < self.min_length:
            return RejectionReason.TOO_SHORT
        if len(candidate) > self.max_length:
            return RejectionReason.TOO_LONG
        if any(char not in self.allowed for char in candidate):
            return RejectionReason.DISALLOWED_CHARACTER
        for char_class in self.required_classes:
            members = char_class.characters
            if not any(char in members for char in candidate):
                return _MISSING_CLASS_REASONS[char_class]
        return None

    def hint(self) -> str:
        return (
            f"{self.min_length}-{self.max_length} characters "
            f"consisting of: {ALLOWED_DESCRIPTION}"
        )


USERNAME_RULE = CredentialRule(
    name="username",
    min_length=USERNAME_MIN_LENGTH,
    max_length=USERNAME_MAX_LENGTH,
)

PASSWORD_RULE = CredentialRule(
    name="password",
    min_length=PASSWORD_MIN_LENGTH,
    max_length=PASSWORD_MAX_LENGTH,
    required_classes=PASSWORD_REQUIRED_CLASSES,
)


@dataclass(frozen=True)
class Validator:
    """Immutable pair of username and password rules.

    Build one at start-up and pass it to whatever needs to validate input.
    """

    username_rule: CredentialRule = USERNAME_RULE
    password_rule: CredentialRule = PASSWORD_RULE

    def check_username(self, candidate: str) -> Optional[RejectionReason]:
        return self.username_rule.check(candidate)

    def check_password(self, candidate: str) -> Optional[RejectionReason]:
        return self.password_rule.check(candidate)

    def is_valid_username(self, candidate: str) -> bool:
        return self.check_username(candidate) is None

    def is_valid_password(self, candidate: str) -> bool:
        return self.check_password(candidate) is None

    def username_message(self, reason: RejectionReason) -> str:
        return f"Invalid username. {self.username_rule.hint()}"

    def password_message(self, reason: RejectionReason) -> str:
        if reason is RejectionReason.MISSING_LOWERCASE:
            return "The password must contain at least one lowercase letter."
        if reason is RejectionReason.MISSING_UPPERCASE:
            return "The password must contain at least one uppercase letter."
        if reason is RejectionReason.MISSING_SPECIAL:
            return (
                "The password must contain at least one special character "
                f"(allowed: {', '.join(SPECIAL)})."
            )
        return f"Invalid password. {self.password_rule.hint()}"


DEFAULT_VALIDATOR = Validator()


def check_username(candidate: str) -> Optional[RejectionReason]:
    return DEFAULT_VALIDATOR.check_username(candidate)


def check_password(candidate: str) -> Optional[RejectionReason]:
    return DEFAULT_VALIDATOR.check_password(candidate)


def is_valid_username(candidate: str) -> bool:
    """True iff the candidate is 3-20 characters long and uses only allowed characters."""
    return DEFAULT_VALIDATOR.is_valid_username(candidate)


def is_valid_password(candidate: str) -> bool:
    """True iff the candidate is 8-20 allowed characters with a lowercase,
    an uppercase and a special character."""
    return DEFAULT_VALIDATOR.is_valid_password(candidate)
