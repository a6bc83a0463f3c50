"""A match of UNO: hands are played until someone reaches the target score."""

import logging
from typing import List, Optional, Sequence

from unoengine.engine.errors import IndexOutOfRangeError, InvalidConfigurationError
from unoengine.engine.hand import DEFAULT_CARDS_PER_PLAYER, Hand, HandEndEvent
from unoengine.engine.random_utils import (
    Randomizer,
    Shuffler,
    standard_randomizer,
    standard_shuffler,
)

logger = logging.getLogger(__name__)

DEFAULT_TARGET_SCORE = 500


class Game:
    """Sequences hands and keeps the running score of each player.

    The hand winner is credited with the hand score. A new hand, with a dealer
    picked by the randomizer, starts as soon as the previous one ends, until a
    player's total reaches ``target_score``; then ``current_hand()`` is None.
    """

    def __init__(
        self,
        players: Sequence[str] = ("A", "B"),
        target_score: int = DEFAULT_TARGET_SCORE,
        randomizer: Randomizer = standard_randomizer,
        shuffler: Shuffler = standard_shuffler,
        cards_per_player: int = DEFAULT_CARDS_PER_PLAYER,
    ):
        if len(players) < 2:
            raise InvalidConfigurationError("At least 2 players are required")
        if target_score <= 0:
            raise InvalidConfigurationError("Target score must be greater than 0")

        self.players: tuple[str, ...] = tuple(players)
        self.randomizer = randomizer
        self._target_score = target_score
        self._shuffler = shuffler
        self._cards_per_player = cards_per_player
        self._scores: List[int] = [0] * len(self.players)
        self._current_hand: Optional[Hand] = None
        self._hands_played = 0
        self._start_new_hand()

    @property
    def player_count(self) -> int:
        return len(self.players)

    @property
    def target_score(self) -> int:
        return self._target_score

    @property
    def hands_played(self) -> int:
        return self._hands_played

    def player(self, index: int) -> str:
        if not 0 <= index < len(self.players):
            raise IndexOutOfRangeError(f"Player index out of bounds: {index}")
        return self.players[index]

    def score(self, player_index: int) -> int:
        if not 0 <= player_index < len(self.players):
            raise IndexOutOfRangeError(f"Player index out of bounds: {player_index}")
        return self._scores[player_index]

    def scores(self) -> List[int]:
        return list(self._scores)

    def winner(self) -> Optional[int]:
        """First player, in seating order, whose score reached the target."""
        for i, score in enumerate(self._scores):
            if score >= self._target_score:
                return i
        return None

    def current_hand(self) -> Optional[Hand]:
        return self._current_hand

    def _start_new_hand(self) -> None:
        if self.winner() is not None:
            self._current_hand = None
            logger.info(
                "%s won the match with %d points",
                self.players[self.winner()],
                self._scores[self.winner()],
            )
            return
        dealer = self.randomizer(len(self.players))
        self._current_hand = Hand(
            self.players,
            dealer,
            shuffler=self._shuffler,
            cards_per_player=self._cards_per_player,
            on_end=self._handle_hand_end,
        )

    def _handle_hand_end(self, event: HandEndEvent) -> None:
        self._scores[event.winner] += self._current_hand.score()
        self._hands_played += 1
        logger.info("Scores after hand %d: %s", self._hands_played, self._scores)
        self._start_new_hand()


def create_game(
    players: Sequence[str] = ("A", "B"),
    target_score: int = DEFAULT_TARGET_SCORE,
    randomizer: Randomizer = standard_randomizer,
    shuffler: Shuffler = standard_shuffler,
    cards_per_player: int = DEFAULT_CARDS_PER_PLAYER,
) -> Game:
    """Create a game and deal its first hand."""
    return Game(
        players=players,
        target_score=target_score,
        randomizer=randomizer,
        shuffler=shuffler,
        cards_per_player=cards_per_player,
    )
