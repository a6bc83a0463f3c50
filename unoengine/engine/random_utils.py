"""Pluggable shuffling and dealer selection.

A shuffler permutes a list of cards in place; a randomizer maps a player count
to a dealer index. Both are injected into Hand and Game so runs can be made
reproducible.
"""

import random
from typing import Callable, Iterable, List, Optional

from unoengine.engine.card import Card

Shuffler = Callable[[List[Card]], None]
Randomizer = Callable[[int], int]


def standard_shuffler(cards: List[Card]) -> None:
    """Shuffle in place with the module-level random generator."""
    random.shuffle(cards)


def standard_randomizer(bound: int) -> int:
    """Return a random index in [0, bound)."""
    return random.randrange(bound)


def seeded_shuffler(seed: Optional[int] = None) -> Shuffler:
    """Shuffler backed by its own ``random.Random(seed)``."""
    rng = random.Random(seed)

    def shuffle(cards: List[Card]) -> None:
        rng.shuffle(cards)

    return shuffle


def seeded_randomizer(seed: Optional[int] = None) -> Randomizer:
    """Randomizer backed by its own ``random.Random(seed)``."""
    rng = random.Random(seed)

    def randomize(bound: int) -> int:
        return rng.randrange(bound)

    return randomize


def _matches(card: Card, template: Card) -> bool:
    if card.type != template.type:
        return False
    if template.color is not None and card.color != template.color:
        return False
    if template.number is not None and card.number != template.number:
        return False
    return True


def stacked_shuffler(top_cards: Iterable[Card]) -> Shuffler:
    """Shuffler that stacks the deck once, then leaves the pile alone.

    On the first call the cards matching ``top_cards`` (by type, color and
    number) are moved to the front in the given order; the remaining cards keep
    their relative order. Every later call is a no-op, so reshuffles during
    play are predictable.

    With ``cards_per_player`` c, player i is dealt positions ``i*c`` to
    ``i*c + c - 1`` and the first discard is position ``players*c``.
    """
    templates = list(top_cards)
    used = False

    def shuffle(cards: List[Card]) -> None:
        nonlocal used
        if used:
            return
        used = True
        rest = list(cards)
        front: List[Card] = []
        for template in templates:
            for i, card in enumerate(rest):
                if _matches(card, template):
                    front.append(rest.pop(i))
                    break
            else:
                raise ValueError(f"No card left matching {template}")
        cards[:] = front + rest

    return shuffle
