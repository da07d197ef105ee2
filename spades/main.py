"""Command line simulator: watch bots play complete games of Spades.

The human seat is played with the hint engine, so every seat is automated.

    spades-sim --games 5 --difficulty hard --seed 42
"""

import argparse
import logging
import random
import sys

from rich.console import Console
from rich.table import Table

from spades.config import settings
from spades.engine import GameController
from spades.models.enums import HUMAN_SEAT, SEAT_ORDER, Difficulty, GamePhase, Team
from spades.models.scoring import format_score

console = Console()
logger = logging.getLogger(__name__)

DEFAULT_MAX_ROUNDS = 100


def autoplay_human_turn(controller: GameController) -> None:
    """Make the human seat's move using the hint for the current state."""
    hint = controller.hint()
    if hint is None:
        msg = f"No hint available in phase {controller.state.phase.value}"
        raise RuntimeError(msg)
    if controller.state.phase == GamePhase.BIDDING:
        controller.submit_bid(hint)
    else:
        controller.submit_card(hint)


def play_game(
    controller: GameController,
    difficulty: Difficulty,
    max_rounds: int = DEFAULT_MAX_ROUNDS,
    verbose: bool = False,
) -> bool:
    """Play one game to the end.

    Returns:
        True if the game finished, False if it hit ``max_rounds`` first

    """
    controller.start_new_game(difficulty)

    while True:
        state = controller.run_until_human()

        if state.phase == GamePhase.GAME_OVER:
            return True
        if state.phase == GamePhase.ROUND_END:
            if verbose:
                print_round(controller)
            if state.round.round_number >= max_rounds:
                logger.warning("Game %s stopped after %d rounds", state.id, max_rounds)
                return False
            controller.next_round()
        elif state.round.current_player == HUMAN_SEAT:
            autoplay_human_turn(controller)


def print_round(controller: GameController) -> None:
    """Print bids, tricks and running scores of the round just scored."""
    state = controller.state
    table = Table(title=f"Round {state.round.round_number}")
    table.add_column("Seat", style="cyan")
    table.add_column("Bid", justify="right")
    table.add_column("Tricks", justify="right")
    for seat in SEAT_ORDER:
        player = state.players[seat]
        table.add_row(player.name, str(player.bid), str(player.tricks_won))
    console.print(table)
    console.print(
        f"  Your team: {state.player_team_score.score} "
        f"({format_score(state.player_team_score.round_score)}, "
        f"{state.player_team_score.bags} bags)  "
        f"Opponents: {state.opponent_team_score.score} "
        f"({format_score(state.opponent_team_score.round_score)}, "
        f"{state.opponent_team_score.bags} bags)"
    )


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Simulate Spades games between bots")
    parser.add_argument("--games", type=int, default=1, help="Number of games to play")
    parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=settings.default_difficulty.value,
        help="Bot difficulty",
    )
    parser.add_argument(
        "--seed", type=int, default=settings.rng_seed, help="Random seed for reproducible games"
    )
    parser.add_argument(
        "--max-rounds",
        type=int,
        default=DEFAULT_MAX_ROUNDS,
        help="Stop a game that has not finished after this many rounds",
    )
    parser.add_argument("--verbose", action="store_true", help="Print every round")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )

    difficulty = Difficulty(args.difficulty)
    controller = GameController(rng=random.Random(args.seed))  # noqa: S311

    console.print(f"[bold]Spades simulation[/bold]: {args.games} game(s), {difficulty.value} bots")

    results = Table(title="Results")
    results.add_column("Game", justify="right", style="cyan")
    results.add_column("Rounds", justify="right")
    results.add_column("Your team", justify="right", style="green")
    results.add_column("Opponents", justify="right", style="red")
    results.add_column("Winner")

    for number in range(1, args.games + 1):
        finished = play_game(controller, difficulty, args.max_rounds, args.verbose)
        state = controller.state
        if not finished:
            winner = "[dim]unfinished[/dim]"
        elif state.winner == Team.PLAYER:
            winner = "[green]Your team[/green]"
        else:
            winner = "[red]Opponents[/red]"
        results.add_row(
            str(number),
            str(state.round.round_number),
            f"{state.player_team_score.score} ({state.player_team_score.bags} bags)",
            f"{state.opponent_team_score.score} ({state.opponent_team_score.bags} bags)",
            winner,
        )

    console.print()
    console.print(results)

    stats = controller.stats
    console.print()
    console.print("[bold]Stats[/bold]")
    console.print(f"  Played: {stats.games_played}  Won: {stats.games_won}  Lost: {stats.games_lost}")
    console.print(f"  Win rate: {stats.win_rate:.0%}  Best streak: {stats.best_streak}")
    console.print(f"  Rounds: {stats.total_rounds}  High score: {stats.high_score}")


if __name__ == "__main__":
    main()
