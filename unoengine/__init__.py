"""UNO rules engine."""

from unoengine.engine import Card, CardType, Color, Deck, Game, Hand, create_game

__version__ = "0.1.0"

__all__ = ["Card", "CardType", "Color", "Deck", "Game", "Hand", "create_game"]
