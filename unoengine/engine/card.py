"""Card, CardType and Color types for UNO."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Color(str, Enum):
    """Card colors."""

    RED = "RED"
    BLUE = "BLUE"
    GREEN = "GREEN"
    YELLOW = "YELLOW"


class CardType(str, Enum):
    """Card kinds."""

    NUMBERED = "NUMBERED"
    SKIP = "SKIP"
    REVERSE = "REVERSE"
    DRAW = "DRAW"
    WILD = "WILD"
    WILD_DRAW = "WILD DRAW"


WILD_TYPES = (CardType.WILD, CardType.WILD_DRAW)
ACTION_TYPES = (CardType.SKIP, CardType.REVERSE, CardType.DRAW)


@dataclass
class Card:
    """A UNO card.

    Numbered cards carry a color and a number 0-9. Skip, Reverse and Draw Two
    carry a color only. Wild cards start without a color and get the chosen
    color written onto them when played.
    """

    type: CardType
    color: Optional[Color] = None
    number: Optional[int] = None

    def __post_init__(self) -> None:
        if self.type == CardType.NUMBERED:
            if self.number is None or not 0 <= self.number <= 9:
                raise ValueError(f"Invalid card number: {self.number}")
        elif self.number is not None:
            raise ValueError(f"Only numbered cards have a number, got {self.type.value}")
        if self.type not in WILD_TYPES and self.color is None:
            raise ValueError("Non-wild cards must have a color")

    @property
    def is_wild(self) -> bool:
        return self.type in WILD_TYPES

    def __str__(self) -> str:
        if self.type == CardType.NUMBERED:
            return f"{self.color.value.lower()}_{self.number}"
        name = self.type.value.lower().replace(" ", "_")
        if self.color is None:
            return name
        if self.is_wild:
            return f"{name}_{self.color.value.lower()}"
        return f"{self.color.value.lower()}_{name}"


def card_score(card: Card) -> int:
    """Points a card left in a losing hand is worth."""
    if card.type == CardType.NUMBERED:
        return card.number or 0
    if card.type in ACTION_TYPES:
        return 20
    return 50
