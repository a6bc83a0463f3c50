"""Simulate a match between four seated players."""

import logging

from unoengine.engine import create_game, seeded_randomizer, seeded_shuffler
from unoengine.orchestration import play_match


def main():
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    players = ["p1", "p2", "p3", "p4"]
    game = create_game(
        players=players,
        target_score=300,
        randomizer=seeded_randomizer(42),
        shuffler=seeded_shuffler(42),
    )
    result = play_match(game)

    print(f"Match finished after {result.hands_played} hands")
    for name, score in zip(players, result.scores):
        print(f"  {name}: {score}")
    if result.winner is not None:
        print(f"Winner: {players[result.winner]}")


if __name__ == "__main__":
    main()
