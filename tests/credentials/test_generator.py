import secrets
from collections import Counter

import pytest

from sharecred.credentials.alphabet import CharacterClass, classify
from sharecred.credentials.generator import (
    SUGGESTION_LENGTH,
    generate_suggestion,
    random_index,
    shuffle,
)
from sharecred.credentials.validator import is_valid_password
from sharecred.exceptions import RandomnessError


def test_suggestions_always_pass_password_rule():
    for _ in range(10_000):
        suggestion = generate_suggestion()
        assert len(suggestion) == SUGGESTION_LENGTH
        assert is_valid_password(suggestion), suggestion


def test_every_position_sees_every_class():
    positions = [Counter() for _ in range(SUGGESTION_LENGTH)]
    for _ in range(5_000):
        for index, char in enumerate(generate_suggestion()):
            positions[index][classify(char)] += 1

    for counter in positions:
        assert set(counter) == set(CharacterClass)


def test_guaranteed_characters_move_around():
    # Without a shuffle the special character would always sit at index 2
    special_positions = set()
    for _ in range(500):
        suggestion = generate_suggestion()
        special_positions.update(
            i for i, c in enumerate(suggestion) if classify(c) is CharacterClass.SPECIAL
        )
    assert special_positions == set(range(SUGGESTION_LENGTH))


def test_random_index_stays_in_range():
    seen = {random_index(5) for _ in range(2_000)}
    assert seen == {0, 1, 2, 3, 4}


def test_random_index_rejects_empty_range():
    with pytest.raises(ValueError):
        random_index(0)


def test_random_source_failure_is_fatal():
    def broken(_upper):
        raise OSError("entropy source unavailable")

    with pytest.raises(RandomnessError):
        generate_suggestion(randbelow=broken)


def test_random_source_failure_is_not_retried():
    calls = []

    def fails_once(upper):
        calls.append(upper)
        if len(calls) == 4:
            raise OSError("entropy source unavailable")
        return secrets.randbelow(upper)

    with pytest.raises(RandomnessError):
        generate_suggestion(randbelow=fails_once)
    assert len(calls) == 4


def test_shuffle_is_a_permutation():
    items = list("abcdefghij")
    shuffle(items)
    assert sorted(items) == list("abcdefghij")


def test_shuffle_walks_from_last_index_down():
    bounds = []

    def record(upper):
        bounds.append(upper)
        return 0

    shuffle(list("abcd"), randbelow=record)
    assert bounds == [4, 3, 2]


def test_custom_length_below_guarantees_is_rejected():
    with pytest.raises(ValueError):
        generate_suggestion(length=2)
