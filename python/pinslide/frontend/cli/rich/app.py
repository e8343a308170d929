"""Rich terminal frontend — styled panels around the glyph diagram.

Uses the ``rich`` library for styled output while sharing the same
input handler, renderer and backend as the vanilla CLI.
"""

from __future__ import annotations

import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from pinslide.backend.engine.gameplay import GamePlay
from pinslide.backend.engine.gamesolver import SearchResult, Solver
from pinslide.backend.models.board import Board
from pinslide.frontend.cli.glyphs import PIN, render_board
from pinslide.frontend.cli.input_handler import action_to_move, get_key

console = Console()


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


def _render_board(board: Board) -> Text:
    """Return the glyph diagram with the pin highlighted."""
    text = Text(render_board(board), style="bright_white")
    text.highlight_words([PIN], style="bold red")
    return text


def _board_panel(board: Board, title: str, style: str = "bright_blue") -> Panel:
    return Panel(
        Align.center(_render_board(board)),
        title=title,
        border_style=style,
        padding=(1, 2),
        expand=False,
    )


# -- result report ------------------------------------------------------------


def show_result(board: Board, result: SearchResult) -> None:
    """Print a search result as a table of boards and moves."""
    console.print(_board_panel(board, "[bold cyan]Start[/bold cyan]"))

    if not result.solved:
        console.print(
            f"[red]No solution.[/red] [dim]{result.visited} boards visited, "
            f"max depth {result.max_depth}.[/dim]"
        )
        return

    actions = Solver.actions(result)
    table = Table(
        title=f"Solved in {result.moves} moves",
        title_style="bold green",
        box=rich.box.ROUNDED,
        border_style="dim",
        show_lines=True,
    )
    table.add_column("#", justify="right", style="dim", width=3)
    table.add_column("Board")
    table.add_column("Next move", style="yellow")
    for i, (step_board, move) in enumerate(zip(result.path, actions)):
        table.add_row(str(i), _render_board(step_board), str(move))

    console.print(table)
    console.print(f"[dim]{result.visited} boards visited.[/dim]")


# -- solver helpers -----------------------------------------------------------


def _apply_hint(game: GamePlay) -> str:
    hint = Solver.hint(game.board)
    if hint is None:
        return "[yellow]No hint available, the pin cannot get out from here.[/yellow]"
    game.move(hint)
    return f"[cyan]Hint:[/cyan] [bold]{hint}[/bold]"


def _auto_solve(game: GamePlay) -> str:
    result = Solver.solve(game.board)
    if not result.solved:
        return f"[red]No solution ({result.visited} boards visited).[/red]"

    actions = Solver.actions(result)
    for i, move in enumerate(actions):
        game.move(move)
        console.clear()

        progress = Text()
        progress.append(f"  Solving… move {i + 1}/{len(actions)} ", style="bold cyan")
        progress.append(f"({move})", style="dim")

        console.print()
        console.print(Align.center(_board_panel(game.board, "[bold cyan]Auto-Solve[/bold cyan]", "cyan")))
        console.print(Align.center(progress))
        time.sleep(0.3)

    return f"[bold green]Solved in {result.moves} moves![/bold green]"


# -- game screens -------------------------------------------------------------


def _controls() -> Text:
    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  slide   ", style="dim")
    controls.append("IJKL", style="bold cyan")
    controls.append("  pin   ", style="dim")
    controls.append("N", style="bold cyan")
    controls.append("  hint   ", style="dim")
    controls.append("V", style="bold cyan")
    controls.append("  solve   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  restart   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")
    return controls


def _stats(game: GamePlay) -> Text:
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(game.state.elapsed_time), style="bold yellow")
    return stats


def _draw_game(game: GamePlay, title: str, status: str = "") -> None:
    console.clear()
    console.print()
    console.print(Align.center(_board_panel(game.board, f"[bold cyan]{title}[/bold cyan]")))
    console.print(Align.center(_stats(game)))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(_controls()))


def _draw_win(game: GamePlay, title: str) -> None:
    console.clear()

    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("THE PIN IS OUT!", style="bold green")
    congrats.append("  ★\n", style="bold yellow")

    group = Group(
        Align.center(_render_board(game.board)),
        Align.center(congrats),
        Align.center(_stats(game)),
    )
    panel = Panel(
        group,
        title=f"[bold green]{title}[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))


# -- public entry point -------------------------------------------------------


def run(board: Board, title: str = "Pin Slide") -> None:
    """Play *board* interactively with Rich rendering."""
    game = GamePlay(board)
    status = ""

    while True:
        while not game.is_won:
            _draw_game(game, title, status)
            status = ""
            key = get_key()

            move = action_to_move(key)
            if move is not None:
                if not game.move(move):
                    status = f"[dim]Cannot {move}.[/dim]"
            elif key == "hint":
                status = _apply_hint(game)
            elif key == "solve":
                status = _auto_solve(game)
            elif key == "restart":
                game.restart()
            elif key == "quit":
                return

        _draw_win(game, title)
        if status:
            console.print(Align.center(Text.from_markup(f"  {status}")))
        console.print(
            Align.center(Text("\n  Press R to play again, Q to quit.\n", style="dim"))
        )

        while True:
            key = get_key()
            if key == "restart":
                game.restart()
                break
            if key == "quit":
                return
