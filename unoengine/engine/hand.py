"""One hand of UNO: dealing, turns, legal plays and card effects."""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Union

from unoengine.engine.card import Card, CardType, Color, card_score
from unoengine.engine.deck import Deck
from unoengine.engine.errors import (
    ExtraneousColorError,
    HandEndedError,
    IllegalPlayError,
    IndexOutOfRangeError,
    InvalidConfigurationError,
    MissingColorError,
)
from unoengine.engine.random_utils import Shuffler, standard_shuffler

logger = logging.getLogger(__name__)

MIN_PLAYERS = 2
MAX_PLAYERS = 10
DEFAULT_CARDS_PER_PLAYER = 7
# 100 non-wild cards: at least one must stay undealt to start the discard pile
MAX_CARDS_DEALT = 99


@dataclass(frozen=True)
class HandEndEvent:
    """Sent to end callbacks when a player empties their hand."""

    winner: int


@dataclass
class Ongoing:
    """Outcome of a play that did not end the hand."""

    card: Card


@dataclass
class HandEnded:
    """Outcome of a play that emptied the player's hand."""

    card: Card
    winner: int
    score: int


PlayOutcome = Union[Ongoing, HandEnded]
EndCallback = Callable[[HandEndEvent], None]


class Hand:
    """A single round of play, from the deal until one player runs out of cards.

    All mutating calls (``draw``, ``play``, ``say_uno``, ``catch_uno_failure``)
    act on behalf of the player in turn unless they take an explicit player
    index, and raise ``HandEndedError`` once the hand is over.
    """

    def __init__(
        self,
        players: Sequence[str],
        dealer: int,
        shuffler: Shuffler = standard_shuffler,
        cards_per_player: int = DEFAULT_CARDS_PER_PLAYER,
        on_end: Optional[EndCallback] = None,
    ):
        if len(players) < MIN_PLAYERS or len(players) > MAX_PLAYERS:
            raise InvalidConfigurationError(
                f"Invalid number of players: {len(players)} "
                f"(must be {MIN_PLAYERS}-{MAX_PLAYERS})"
            )
        if not 0 <= dealer < len(players):
            raise IndexOutOfRangeError(f"Invalid dealer index: {dealer}")
        if cards_per_player < 1 or cards_per_player * len(players) > MAX_CARDS_DEALT:
            raise InvalidConfigurationError(
                f"Cannot deal {cards_per_player} cards to {len(players)} players"
            )

        self._players = list(players)
        self._dealer = dealer
        self._shuffler = shuffler
        self._player_hands: List[List[Card]] = [[] for _ in self._players]
        self._discard_pile = Deck([])
        self._current_player_index = (dealer + 1) % len(self._players)
        self._direction = 1
        self._has_ended = False
        self._winner: Optional[int] = None
        self._uno_said = [False] * len(self._players)
        self._last_played_card: Optional[Card] = None
        self._on_end_callbacks: List[EndCallback] = [on_end] if on_end else []

        deck = Deck()
        deck.shuffle(shuffler)
        for hand in self._player_hands:
            for _ in range(cards_per_player):
                card = deck.deal()
                if card is not None:
                    hand.append(card)
        self._draw_pile = deck
        self._start()

    def _start(self) -> None:
        """Turn the first card and apply its effect."""
        first_card = self._draw_pile.deal()
        while first_card is not None and first_card.is_wild:
            self._draw_pile.add_to_bottom(first_card)
            self._draw_pile.shuffle(self._shuffler)
            first_card = self._draw_pile.deal()
        if first_card is None:
            return

        self._discard_pile = Deck([first_card])
        self._last_played_card = first_card
        logger.debug(
            "Hand started: dealer=%s, first card %s", self._players[self._dealer], first_card
        )

        if first_card.type == CardType.REVERSE:
            self._direction = -1
            self._current_player_index = (self._dealer - 1 + len(self._players)) % len(
                self._players
            )
        elif first_card.type == CardType.SKIP:
            self._next_turn()
        elif first_card.type == CardType.DRAW:
            self._draw_cards(2)
            self._next_turn()

    # Commands

    def draw(self) -> Optional[Card]:
        """Draw one card for the player in turn.

        The player keeps the turn if they can now play; otherwise the turn
        passes. Returns the drawn card, or None if both piles are exhausted.
        """
        self._check_not_ended()
        card = self._deal_to(self._current_player_index)
        logger.debug("%s drew %s", self._players[self._current_player_index], card)
        if not self.can_play_any():
            self._next_turn()
        return card

    def play(self, card_index: int, chosen_color: Optional[Color] = None) -> PlayOutcome:
        """Play a card from the hand of the player in turn."""
        self._check_not_ended()
        hand = self._player_hands[self._current_player_index]
        if not 0 <= card_index < len(hand):
            raise IndexOutOfRangeError(f"Invalid card index: {card_index}")
        card = hand[card_index]

        if not self.is_valid_play(card):
            raise IllegalPlayError(f"Cannot play {card} on {self._last_played_card}")
        if card.is_wild and chosen_color is None:
            raise MissingColorError("Must choose a color for wild cards")
        if card.color is not None and chosen_color is not None:
            raise ExtraneousColorError(f"Cannot choose a color for {card}")

        player = self._current_player_index
        hand.pop(card_index)
        if chosen_color is not None:
            card.color = chosen_color
        self._discard_pile.set_top_card(card)
        self._last_played_card = card
        logger.debug("%s played %s", self._players[player], card)

        # A declaration only survives while the player sits on one card
        if len(hand) != 1:
            self._uno_said[player] = False

        if hand:
            self._apply_card_effect(card)
            return Ongoing(card)

        if card.type in (CardType.DRAW, CardType.WILD_DRAW):
            self._apply_card_effect(card)
        self._has_ended = True
        self._winner = player
        score = self._calculate_score()
        logger.info("%s won the hand, score %d", self._players[player], score)
        event = HandEndEvent(winner=player)
        for callback in list(self._on_end_callbacks):
            callback(event)
        return HandEnded(card=card, winner=player, score=score)

    def say_uno(self, player_index: int) -> None:
        """Declare UNO for a player holding one card, or two on their turn."""
        self._check_not_ended()
        self._check_player_index(player_index)
        held = len(self._player_hands[player_index])
        if held == 1 or (player_index == self._current_player_index and held == 2):
            self._uno_said[player_index] = True

    def catch_uno_failure(self, accuser: int, accused: int) -> bool:
        """Penalize ``accused`` with four cards for a missed UNO declaration.

        Only possible while the player right after ``accused`` holds the turn.
        Returns True if the penalty was applied.
        """
        self._check_not_ended()
        self._check_player_index(accused, "accused")
        if self._current_player_index != self._step(accused):
            return False
        if len(self._player_hands[accused]) != 1 or self._uno_said[accused]:
            return False

        for _ in range(4):
            self._deal_to(accused)
        self._uno_said[accused] = True
        logger.debug("Player %d caught %s without UNO", accuser, self._players[accused])
        return True

    def on_end(self, callback: EndCallback) -> None:
        self._on_end_callbacks.append(callback)

    # Rules

    def is_valid_play(self, card: Card) -> bool:
        """Check a card against the last played card for the player in turn."""
        last = self._last_played_card
        if last is None:
            return True
        if card.type == CardType.WILD:
            return True
        if card.type == CardType.WILD_DRAW:
            # Only allowed when the player cannot follow the color
            return not any(
                c.color == last.color for c in self._player_hands[self._current_player_index]
            )
        if card.type == CardType.NUMBERED and last.type == CardType.NUMBERED:
            return card.number == last.number or card.color == last.color
        return card.color == last.color or card.type == last.type

    def can_play(self, card_index: int) -> bool:
        if self._has_ended:
            return False
        hand = self._player_hands[self._current_player_index]
        if not 0 <= card_index < len(hand):
            return False
        return self.is_valid_play(hand[card_index])

    def can_play_any(self) -> bool:
        return any(
            self.is_valid_play(c) for c in self._player_hands[self._current_player_index]
        )

    def _apply_card_effect(self, card: Card) -> None:
        if card.type == CardType.SKIP:
            self._next_turn()
        elif card.type == CardType.REVERSE:
            self._direction *= -1
            if len(self._players) == 2:
                self._next_turn()
        elif card.type == CardType.DRAW:
            self._next_turn()
            self._draw_cards(2)
        elif card.type == CardType.WILD_DRAW:
            self._next_turn()
            self._draw_cards(4)
        self._next_turn()

    def _draw_cards(self, count: int) -> None:
        """Force the player in turn to draw ``count`` cards."""
        for _ in range(count):
            self._deal_to(self._current_player_index)
        logger.debug("%s drew %d cards", self._players[self._current_player_index], count)

    def _deal_to(self, player_index: int) -> Optional[Card]:
        if self._draw_pile.size == 0:
            self._reshuffle()
        card = self._draw_pile.deal()
        if card is None:
            return None
        self._player_hands[player_index].append(card)
        if self._draw_pile.size == 0:
            self._reshuffle()
        return card

    def _reshuffle(self) -> None:
        """Turn the discard pile, minus its top card, into a new draw pile."""
        top = self._discard_pile.deal()
        card = self._discard_pile.deal()
        while card is not None:
            if card.is_wild:
                card.color = None
            self._draw_pile.add_to_bottom(card)
            card = self._discard_pile.deal()
        if self._draw_pile.size > 0:
            self._draw_pile.shuffle(self._shuffler)
        self._discard_pile = Deck([top] if top is not None else [])
        logger.debug("Reshuffled discard pile: %d cards to draw", self._draw_pile.size)

    def _next_turn(self) -> None:
        self._current_player_index = self._step(self._current_player_index)

    def _step(self, index: int) -> int:
        return (index + self._direction + len(self._players)) % len(self._players)

    def _calculate_score(self) -> int:
        return sum(
            card_score(card)
            for i, hand in enumerate(self._player_hands)
            if i != self._winner
            for card in hand
        )

    def _check_not_ended(self) -> None:
        if self._has_ended:
            raise HandEndedError()

    def _check_player_index(self, index: int, role: str = "player") -> None:
        if not 0 <= index < len(self._players):
            raise IndexOutOfRangeError(f"Invalid {role} index: {index}")

    # Queries

    @property
    def player_count(self) -> int:
        return len(self._players)

    @property
    def dealer(self) -> int:
        return self._dealer

    @property
    def direction(self) -> int:
        return self._direction

    @property
    def last_played_card(self) -> Optional[Card]:
        return self._last_played_card

    def player(self, index: int) -> str:
        self._check_player_index(index)
        return self._players[index]

    def player_hand(self, index: int) -> List[Card]:
        self._check_player_index(index)
        return self._player_hands[index]

    def player_in_turn(self) -> Optional[int]:
        return None if self._has_ended else self._current_player_index

    def discard_pile(self) -> Deck:
        return self._discard_pile

    def draw_pile(self) -> Deck:
        return self._draw_pile

    def has_ended(self) -> bool:
        return self._has_ended

    def winner(self) -> Optional[int]:
        return self._winner

    def score(self) -> Optional[int]:
        """Points for the winner, or None while the hand is in progress."""
        if not self._has_ended:
            return None
        return self._calculate_score()
