"""Shared fixtures: hands dealt from a stacked deck."""

from typing import Callable, List, Optional, Sequence

import pytest

from unoengine.engine import Card, CardType, Color, Hand, stacked_shuffler


def num(color: Color, number: int) -> Card:
    return Card(CardType.NUMBERED, color, number)


def card(card_type: CardType, color: Optional[Color] = None) -> Card:
    return Card(card_type, color)


def total_cards(hand: Hand) -> int:
    held = sum(len(hand.player_hand(i)) for i in range(hand.player_count))
    return held + hand.draw_pile().size + hand.discard_pile().size


@pytest.fixture
def make_hand() -> Callable[..., Hand]:
    """Deal a hand whose player cards, first discard and next draws are fixed.

    All players must get the same number of cards. The dealer defaults to the
    last player, so player 0 starts (unless the first discard says otherwise).
    """

    def _make(
        hands: Sequence[List[Card]],
        discard: Card,
        draws: Sequence[Card] = (),
        dealer: Optional[int] = None,
        on_end=None,
    ) -> Hand:
        size = len(hands[0])
        assert all(len(h) == size for h in hands)
        stacked = [c for h in hands for c in h] + [discard] + list(draws)
        return Hand(
            [f"P{i}" for i in range(len(hands))],
            len(hands) - 1 if dealer is None else dealer,
            shuffler=stacked_shuffler(stacked),
            cards_per_player=size,
            on_end=on_end,
        )

    return _make
