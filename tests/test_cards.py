from __future__ import annotations

import random
from collections import Counter

import pytest

from maverick.engine.cards import build_deck, discard, draw, refill


def test_build_deck_sets_aside_payments() -> None:
    deck = build_deck(random.Random(1), payments=1)
    assert len(deck) == 39
    counts = Counter(deck)
    assert set(counts) <= {1, 2, 3, 4, 5}
    assert all(n <= 8 for n in counts.values())
    assert sum(8 - counts[v] for v in range(1, 6)) == 1


def test_build_deck_without_payments_keeps_full_multiset() -> None:
    deck = build_deck(random.Random(2), payments=0)
    assert Counter(deck) == Counter({v: 8 for v in range(1, 6)})


def test_build_deck_is_deterministic_per_seed() -> None:
    assert build_deck(random.Random(5)) == build_deck(random.Random(5))
    assert build_deck(random.Random(5)) != build_deck(random.Random(6))


def test_build_deck_rejects_bad_payments() -> None:
    with pytest.raises(ValueError):
        build_deck(random.Random(1), payments=41)
    with pytest.raises(ValueError):
        build_deck(random.Random(1), payments=-1)


def test_draw_pops_from_tail_and_handles_empty() -> None:
    deck = [1, 2, 3]
    assert draw(deck) == 3
    assert deck == [1, 2]
    assert draw([]) is None


def test_discard_removes_by_index() -> None:
    hand = [5, 1, 3]
    assert discard(hand, 1) == 1
    assert hand == [5, 3]


def test_discard_out_of_range_asserts() -> None:
    with pytest.raises(AssertionError):
        discard([1, 2], 2)
    with pytest.raises(AssertionError):
        discard([1, 2], -1)


def test_refill_replaces_hand_up_to_limit() -> None:
    hand = [4, 4]
    deck = [1, 2, 3, 5, 5, 5, 5]
    assert refill(hand, deck, 5) == 5
    assert hand == [5, 5, 5, 5, 3]
    assert deck == [1, 2]


def test_refill_stops_when_deck_runs_out() -> None:
    hand = [4]
    deck = [1, 2]
    assert refill(hand, deck, 6) == 2
    assert hand == [2, 1]
    assert deck == []
