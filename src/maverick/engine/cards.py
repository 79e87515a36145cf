from __future__ import annotations

import random
from typing import Sequence


def build_deck(
    rng: random.Random,
    values: Sequence[int] = (1, 2, 3, 4, 5),
    copies: int = 8,
    payments: int = 1,
) -> list[int]:
    """Shuffle the action deck and set aside `payments` cards from the tail."""
    deck = [v for v in values for _ in range(copies)]
    if payments < 0 or payments > len(deck):
        raise ValueError(f"payments must be between 0 and {len(deck)}.")
    rng.shuffle(deck)
    for _ in range(payments):
        deck.pop()
    return deck


def draw(deck: list[int]) -> int | None:
    if not deck:
        return None
    return deck.pop()


def discard(hand: list[int], index: int) -> int:
    assert 0 <= index < len(hand), f"Hand index {index} out of range for hand of {len(hand)}"
    return hand.pop(index)


def refill(hand: list[int], deck: list[int], limit: int) -> int:
    """Replace the hand with up to `limit` cards from the deck.

    Returns the number of cards drawn.
    """
    hand.clear()
    for _ in range(limit):
        card = draw(deck)
        if card is None:
            break
        hand.append(card)
    return len(hand)
