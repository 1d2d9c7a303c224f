"""Secure password suggestions."""

import logging
import secrets
from typing import Callable, List, MutableSequence

from sharecred.credentials.alphabet import ALLOWED, LOWERCASE, SPECIAL, UPPERCASE
from sharecred.exceptions import RandomnessError

logger = logging.getLogger(__name__)

SUGGESTION_LENGTH = 10

# One guaranteed character from each class a password must contain
GUARANTEED_POOLS = (LOWERCASE, UPPERCASE, SPECIAL)


def random_index(upper: int, randbelow: Callable[[int], int] = secrets.randbelow) -> int:
    """Return a uniform integer in [0, upper) from the OS entropy source.

    ``secrets.randbelow`` draws whole bits and rejects out-of-range values, so
    there is no modulo bias. Any failure of the source is raised as
    RandomnessError.
    """
    if upper <= 0:
        raise ValueError(f"upper bound must be positive, got {upper}")
    try:
        return randbelow(upper)
    except (OSError, NotImplementedError) as e:
        logger.error(f"Secure random source failed: {e}")
        raise RandomnessError(f"secure random source failed: {e}") from e


def shuffle(items: MutableSequence, randbelow: Callable[[int], int] = secrets.randbelow):
    """Fisher-Yates shuffle in place."""
    for i in range(len(items) - 1, 0, -1):
        j = random_index(i + 1, randbelow)
        items[i], items[j] = items[j], items[i]


def generate_suggestion(
    length: int = SUGGESTION_LENGTH,
    randbelow: Callable[[int], int] = secrets.randbelow,
) -> str:
    """Generate a password that always passes the password rule.

    The first slots get one lowercase, one uppercase and one special
    character. The rest are drawn from the whole alphabet with replacement,
    then everything is shuffled so the guaranteed characters have no fixed
    position.
    """
    if length < len(GUARANTEED_POOLS):
        raise ValueError(
            f"suggestion length must be at least {len(GUARANTEED_POOLS)}, got {length}"
        )

    chars: List[str] = [pool[random_index(len(pool), randbelow)] for pool in GUARANTEED_POOLS]
    for _ in range(length - len(chars)):
        chars.append(ALLOWED[random_index(len(ALLOWED), randbelow)])

    shuffle(chars, randbelow)
    return "".join(chars)
