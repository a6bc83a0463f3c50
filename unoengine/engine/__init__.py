"""Game engine for UNO."""

from unoengine.engine.card import Card, CardType, Color, card_score
from unoengine.engine.deck import Deck, create_initial_deck
from unoengine.engine.errors import (
    ExtraneousColorError,
    HandEndedError,
    IllegalPlayError,
    IndexOutOfRangeError,
    InvalidConfigurationError,
    MissingColorError,
    UnoError,
)
from unoengine.engine.game import Game, create_game
from unoengine.engine.hand import (
    Hand,
    HandEnded,
    HandEndEvent,
    Ongoing,
    PlayOutcome,
)
from unoengine.engine.random_utils import (
    Randomizer,
    Shuffler,
    seeded_randomizer,
    seeded_shuffler,
    stacked_shuffler,
    standard_randomizer,
    standard_shuffler,
)

__all__ = [
    "Card",
    "CardType",
    "Color",
    "card_score",
    "Deck",
    "create_initial_deck",
    "UnoError",
    "InvalidConfigurationError",
    "HandEndedError",
    "IllegalPlayError",
    "MissingColorError",
    "ExtraneousColorError",
    "IndexOutOfRangeError",
    "Game",
    "create_game",
    "Hand",
    "HandEnded",
    "HandEndEvent",
    "Ongoing",
    "PlayOutcome",
    "Randomizer",
    "Shuffler",
    "seeded_randomizer",
    "seeded_shuffler",
    "stacked_shuffler",
    "standard_randomizer",
    "standard_shuffler",
]
