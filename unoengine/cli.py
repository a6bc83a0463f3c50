"""CLI entry point."""

from __future__ import annotations

import logging
from typing import Optional

import typer

from unoengine.config import Settings
from unoengine.engine.errors import IndexOutOfRangeError, InvalidConfigurationError

app = typer.Typer(help="UNO rules engine: auto-play hands and matches")


def _parse_players(players: str) -> list[str]:
    names = [s.strip() for s in players.split(",") if s.strip()]
    if len(names) < 2:
        raise typer.BadParameter("At least 2 comma-separated player names are required.")
    if len(set(names)) != len(names):
        raise typer.BadParameter("Player names must be unique.")
    return names


def _setup(verbose: bool) -> Settings:
    try:
        settings = Settings.from_env()
    except InvalidConfigurationError as e:
        raise typer.BadParameter(str(e)) from e
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return settings


@app.command()
def hand(
    players: str = typer.Option("A,B,C,D", "--players", "-p", help="Comma-separated player names"),
    dealer: int = typer.Option(0, "--dealer", "-d", help="Index of the dealer"),
    cards_per_player: Optional[int] = typer.Option(
        None, "--cards-per-player", "-c", help="Cards dealt to each player"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every action"),
) -> None:
    """Auto-play a single hand."""
    from unoengine.engine import Hand, seeded_shuffler
    from unoengine.orchestration import play_hand

    settings = _setup(verbose)
    names = _parse_players(players)
    seed = seed if seed is not None else settings.seed
    if cards_per_player is None:
        cards_per_player = settings.cards_per_player
    try:
        h = Hand(names, dealer, shuffler=seeded_shuffler(seed), cards_per_player=cards_per_player)
    except (InvalidConfigurationError, IndexOutOfRangeError) as e:
        raise typer.BadParameter(str(e)) from e
    result = play_hand(h)
    winner = names[result.winner] if result.winner is not None else "None (unfinished)"
    typer.echo(f"Winner: {winner}")
    typer.echo(f"Score: {result.score if result.score is not None else 0}")
    typer.echo(f"Turns: {result.num_turns}")


@app.command()
def match(
    players: str = typer.Option("A,B", "--players", "-p", help="Comma-separated player names"),
    target_score: Optional[int] = typer.Option(
        None, "--target-score", "-t", help="Score needed to win the match"
    ),
    cards_per_player: Optional[int] = typer.Option(
        None, "--cards-per-player", "-c", help="Cards dealt to each player"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every action"),
) -> None:
    """Auto-play a match to the target score."""
    from unoengine.engine import create_game, seeded_randomizer, seeded_shuffler
    from unoengine.orchestration import play_match

    settings = _setup(verbose)
    names = _parse_players(players)
    seed = seed if seed is not None else settings.seed
    if target_score is None:
        target_score = settings.target_score
    if cards_per_player is None:
        cards_per_player = settings.cards_per_player
    try:
        game = create_game(
            players=names,
            target_score=target_score,
            randomizer=seeded_randomizer(seed),
            shuffler=seeded_shuffler(seed),
            cards_per_player=cards_per_player,
        )
    except (InvalidConfigurationError, IndexOutOfRangeError) as e:
        raise typer.BadParameter(str(e)) from e
    result = play_match(game)
    typer.echo("Match results:")
    for name, score in sorted(zip(names, result.scores), key=lambda x: -x[1]):
        typer.echo(f"  {name}: {score}")
    winner = names[result.winner] if result.winner is not None else "None (unfinished)"
    typer.echo(f"Winner: {winner}")
    typer.echo(f"Hands: {result.hands_played}")


if __name__ == "__main__":
    app()
