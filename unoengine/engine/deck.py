"""Deck creation and the card pile container."""

from typing import Callable, Iterable, Iterator, List, Optional

from unoengine.engine.card import Card, CardType, Color
from unoengine.engine.random_utils import Shuffler, standard_shuffler


class Deck:
    """Ordered pile of cards. The front of the pile is the top."""

    def __init__(self, cards: Optional[Iterable[Card]] = None):
        self._cards: List[Card] = (
            list(cards) if cards is not None else Deck.create_initial_deck()
        )

    @staticmethod
    def create_initial_deck() -> List[Card]:
        """Create a standard 108-card UNO deck in canonical order.

        - 4 colors × (one 0, two each of 1-9): 76 cards
        - 4 colors × two each of Skip, Reverse, Draw Two: 24 cards
        - 4 Wild, 4 Wild Draw Four: 8 cards
        """
        cards: List[Card] = []

        for color in Color:
            cards.append(Card(CardType.NUMBERED, color, 0))
            for number in range(1, 10):
                cards.append(Card(CardType.NUMBERED, color, number))
                cards.append(Card(CardType.NUMBERED, color, number))

        for color in Color:
            for _ in range(2):
                cards.append(Card(CardType.SKIP, color))
                cards.append(Card(CardType.REVERSE, color))
                cards.append(Card(CardType.DRAW, color))

        for _ in range(4):
            cards.append(Card(CardType.WILD))
            cards.append(Card(CardType.WILD_DRAW))

        return cards

    def shuffle(self, shuffler: Shuffler = standard_shuffler) -> None:
        shuffler(self._cards)

    def deal(self) -> Optional[Card]:
        """Remove and return the top card, or None if the pile is empty."""
        if not self._cards:
            return None
        return self._cards.pop(0)

    def add_to_bottom(self, card: Card) -> None:
        self._cards.append(card)

    @property
    def size(self) -> int:
        return len(self._cards)

    def filter(self, predicate: Callable[[Card], bool]) -> "Deck":
        return Deck([c for c in self._cards if predicate(c)])

    def top(self) -> Optional[Card]:
        return self._cards[0] if self._cards else None

    def set_top_card(self, card: Card) -> None:
        self._cards.insert(0, card)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(list(self._cards))

    def __repr__(self) -> str:
        return f"Deck({len(self._cards)} cards)"


def create_initial_deck() -> Deck:
    """Return a new, unshuffled 108-card deck."""
    return Deck()
