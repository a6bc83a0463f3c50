"""Play hands and matches to completion with a fixed, rule-following policy.

Every player declares UNO when holding two cards on their turn, then plays the
first legal card in hand, or draws. Used to exercise the engine end to end.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Optional

from unoengine.engine import Color, Game, Hand

logger = logging.getLogger(__name__)


@dataclass
class HandResult:
    """Result of an auto-played hand."""

    winner: Optional[int]
    score: Optional[int]
    num_turns: int


@dataclass
class MatchResult:
    """Result of an auto-played match."""

    winner: Optional[int]
    scores: list[int]
    hands_played: int


def _pick_color(hand: Hand, player: int) -> Color:
    """Most frequent color among the player's colored cards, RED if none."""
    counts = Counter(c.color for c in hand.player_hand(player) if c.color is not None)
    if not counts:
        return Color.RED
    return counts.most_common(1)[0][0]


def _take_turn(hand: Hand) -> None:
    player = hand.player_in_turn()
    cards = hand.player_hand(player)
    if len(cards) == 2:
        hand.say_uno(player)

    index = next((i for i in range(len(cards)) if hand.can_play(i)), None)
    if index is None:
        hand.draw()
        return

    card = cards[index]
    color = _pick_color(hand, player) if card.is_wild else None
    hand.play(index, color)


def play_hand(hand: Hand, max_turns: int = 1000) -> HandResult:
    """Drive ``hand`` until it ends or ``max_turns`` actions were taken."""
    num_turns = 0
    while not hand.has_ended() and num_turns < max_turns:
        _take_turn(hand)
        num_turns += 1

    if not hand.has_ended():
        logger.warning("Hand did not finish within %d turns", max_turns)
    return HandResult(winner=hand.winner(), score=hand.score(), num_turns=num_turns)


def play_match(game: Game, max_turns_per_hand: int = 1000) -> MatchResult:
    """Play hands of ``game`` until a player reaches the target score."""
    hand = game.current_hand()
    while hand is not None:
        result = play_hand(hand, max_turns=max_turns_per_hand)
        if result.winner is None:
            break
        hand = game.current_hand()

    return MatchResult(
        winner=game.winner(),
        scores=game.scores(),
        hands_played=game.hands_played,
    )
