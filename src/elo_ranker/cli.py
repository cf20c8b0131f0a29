"""CLI for Elo Ranker."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import structlog
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.prompt import Prompt

from elo_ranker import __version__
from elo_ranker.core.config import RankerConfig, load_config
from elo_ranker.core.errors import InvalidRosterError, RankerError
from elo_ranker.services.reporting import format_leaderboard
from elo_ranker.services.session import SessionController, SessionPhase

# Configure structlog
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

app = typer.Typer(
    name="elo-ranker",
    help="Elo Ranker - Pair people at random, pick winners, rank them by Elo",
    add_completion=False,
)
console = Console()

QUIT = "q"


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"elo-ranker v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
) -> None:
    """Elo Ranker CLI."""


def _load(config_path: Path | None) -> RankerConfig:
    if config_path is None:
        return RankerConfig()
    console.print(f"[bold]Loading config:[/bold] {config_path}")
    return load_config(config_path)


def _apply_cli_overrides(config: RankerConfig, rounds: int | None, seed: int | None) -> None:
    if rounds is not None:
        config.total_rounds = rounds
    if seed is not None:
        config.seed = seed


def _enter_names(controller: SessionController, names: str | None) -> None:
    """Start a session, asking again until the input yields a roster."""
    while True:
        raw = names if names is not None else Prompt.ask(
            "Enter names separated by commas", console=console
        )
        names = None
        try:
            controller.start_session(raw)
            return
        except InvalidRosterError as e:
            console.print(f"[red]{e}")


def _play_pairing(controller: SessionController) -> bool:
    """Ask for the winner of the pending pairing. Returns False on quit."""
    pairing = controller.current_pairing
    if pairing is None:
        return True

    console.print(f"\n[bold]Round {controller.round}[/bold] of {controller.total_rounds}")
    console.print(f"  [blue]1[/blue] {escape(pairing.first.name)}")
    console.print(f"  [green]2[/green] {escape(pairing.second.name)}")
    choice = Prompt.ask("Who won?", choices=["1", "2", QUIT], console=console)
    if choice == QUIT:
        return False

    winner = pairing.first if choice == "1" else pairing.second
    controller.choose_winner(winner.id)
    return True


def _finish(controller: SessionController) -> bool:
    """Show the leaderboard and apply the follow-up action. Returns False on quit."""
    console.print()
    console.print(format_leaderboard(controller.get_leaderboard()), markup=False)
    extra = controller.config.extension_rounds
    action = Prompt.ask(
        f"[bold]restart[/bold], play {extra} [bold]more[/bold] rounds, "
        "[bold]new[/bold] names or [bold]quit[/bold]",
        choices=["restart", "more", "new", "quit"],
        default="quit",
        console=console,
    )
    if action == "restart":
        controller.restart()
    elif action == "more":
        controller.extend_session()
    elif action == "new":
        controller.discard_session()
        _enter_names(controller, None)
    return action != "quit"


def run_session(controller: SessionController, names: str | None = None) -> None:
    """Drive a session from name entry until the user quits.

    Args:
        controller: Session controller to drive.
        names: Comma-separated names. Prompted for if None.
    """
    if controller.phase is SessionPhase.NAME_ENTRY:
        _enter_names(controller, names)

    while True:
        phase = controller.advance_if_round_complete()
        if phase is SessionPhase.FINISHED:
            if not _finish(controller):
                return
        elif not _play_pairing(controller):
            return


@app.command()
def play(
    config_path: Annotated[
        Path | None, typer.Option("--config", "-c", help="Path to config YAML file")
    ] = None,
    names: Annotated[
        str | None, typer.Option("--names", "-n", help="Comma-separated participant names")
    ] = None,
    rounds: Annotated[int | None, typer.Option("--rounds", help="Number of rounds", min=1)] = None,
    seed: Annotated[int | None, typer.Option("--seed", help="Seed for pairing shuffle")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-V", help="Verbose output")] = False,
) -> None:
    """Play an interactive ranking session.

    Args:
        config_path: Optional YAML configuration file.
        names: Comma-separated names. Prompted for if omitted.
        rounds: Override number of rounds.
        seed: Override pairing seed.
        verbose: Enable debug logging.
    """
    log_level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )

    try:
        config = _load(config_path)
        _apply_cli_overrides(config, rounds, seed)
        run_session(SessionController(config), names)
        console.print("[bold green]Thanks for playing![/bold green]")

    except FileNotFoundError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e
    except RankerError as e:
        console.print(f"[red]{e}")
        raise typer.Exit(1) from e


@app.command()
def validate(
    config_path: Annotated[Path, typer.Argument(help="Path to config YAML file")],
) -> None:
    """Validate a configuration file without playing.

    Args:
        config_path: Path to YAML configuration file.
    """
    try:
        config = load_config(config_path)
        console.print("[green]Configuration is valid![/green]")
        console.print(f"  Initial rating: {config.initial_rating}")
        console.print(f"  K-factor: {config.k_factor}")
        console.print(f"  Rating divisor: {config.rating_divisor}")
        console.print(f"  Rounds: {config.total_rounds}")
        console.print(f"  Extension rounds: {config.extension_rounds}")
        console.print(f"  Seed: {config.seed}")

    except FileNotFoundError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e
    except RankerError as e:
        console.print(f"[red]{e}")
        raise typer.Exit(1) from e
    except Exception as e:
        console.print(f"[red]Validation error:[/red] {e}")
        raise typer.Exit(1) from e


@app.command()
def info() -> None:
    """Show tool information and example commands."""
    console.print("[bold]Elo Ranker[/bold]")
    console.print(f"Version: {__version__}\n")

    console.print("[bold]Example Commands:[/bold]")
    console.print("  # Prompt for names and play 3 rounds")
    console.print("  uv run elo-ranker play\n")

    console.print("  # Give names up front")
    console.print('  uv run elo-ranker play --names "Alice, Bob, Carol, Dan"\n')

    console.print("  # Longer session with reproducible pairings")
    console.print("  uv run elo-ranker play --rounds 5 --seed 7\n")

    console.print("  # Validate config")
    console.print("  uv run elo-ranker validate config.yaml")


if __name__ == "__main__":
    app()
