"""Drivers that play hands and matches to completion."""

from unoengine.orchestration.autoplay import HandResult, MatchResult, play_hand, play_match

__all__ = ["HandResult", "MatchResult", "play_hand", "play_match"]
