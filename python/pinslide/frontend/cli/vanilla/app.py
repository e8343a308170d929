"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes, tty/termios) for rendering and input.
"""

from __future__ import annotations

import sys
import time

from pinslide.backend.engine.gameplay import GamePlay
from pinslide.backend.engine.gamesolver import SearchResult, Solver
from pinslide.backend.models.board import Board
from pinslide.frontend.cli.glyphs import render_board, render_path
from pinslide.frontend.cli.input_handler import action_to_move, get_key


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_DIM = "\033[2m"     # dim
_BOLD = "\033[1m"    # bold
_R = "\033[0m"       # reset


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m}:{s:02d}" if m else f"{s}s"


def _stats_line(game: GamePlay) -> str:
    return (
        f"  Moves: {_Y}{game.state.moves}{_R}  |  "
        f"Time: {_Y}{_format_time(game.state.elapsed_time)}{_R}"
    )


# -- result report ------------------------------------------------------------


def format_result(result: SearchResult) -> str:
    """Return the plain-text report of a search result."""
    if not result.solved:
        return (
            f"No solution. {result.visited} boards visited, "
            f"max depth {result.max_depth}."
        )
    actions = Solver.actions(result)
    captions = ["start"] + [str(m) for m in actions[:-1]]
    lines = [
        render_path(result.path, captions),
        "",
        f"Solved in {result.moves} moves, then {actions[-1]} leaves the board.",
        f"{result.visited} boards visited.",
    ]
    return "\n".join(lines)


def show_result(board: Board, result: SearchResult) -> None:
    print(render_board(board))
    print()
    print(format_result(result))


# -- solver helpers -----------------------------------------------------------


def _apply_hint(game: GamePlay) -> str:
    """Apply a single solver hint.  Returns a status message."""
    hint = Solver.hint(game.board)
    if hint is None:
        return f"{_Y}No hint available, the pin cannot get out from here.{_R}"
    game.move(hint)
    return f"{_C}Hint:{_R} {_BOLD}{hint}{_R}"


def _auto_solve(game: GamePlay) -> str:
    """Run the solver and animate moves.  Returns a status message."""
    result = Solver.solve(game.board)
    if not result.solved:
        return f"No solution ({result.visited} boards visited)."

    actions = Solver.actions(result)
    for i, move in enumerate(actions):
        game.move(move)
        _clear()
        print(f"  {_C}=== Solving… ==={_R}")
        print()
        print(render_board(game.board))
        print()
        print(f"  Move {i + 1}/{len(actions)}  ({move})")
        sys.stdout.flush()
        time.sleep(0.3)

    return f"{_G}Solved in {result.moves} moves!{_R}"


# -- game screens -------------------------------------------------------------


def _show_game(game: GamePlay, title: str, status: str = "") -> None:
    _clear()
    print(f"  {_C}=== {title} ==={_R}")
    print()
    print(render_board(game.board))
    print()
    print(
        f"  {_C}WASD{_R}/{_C}Arrows{_R}: slide  |  "
        f"{_C}IJKL{_R}: pin  |  "
        f"{_C}N{_R}: hint  |  "
        f"{_C}V{_R}: solve  |  "
        f"{_C}R{_R}: restart  |  "
        f"{_C}Q{_R}: quit"
    )
    if status:
        print(f"  {status}")
    print(f"\n{_stats_line(game)}")


def _show_win(game: GamePlay, title: str) -> None:
    _clear()
    print(f"  {_G}=== {title} ==={_R}")
    print()
    print(render_board(game.board))
    print()
    print(f"  {_G}★ The pin is out! ★{_R}")
    print()
    print(_stats_line(game))


# -- public entry point -------------------------------------------------------


def run(board: Board, title: str = "Pin Slide") -> None:
    """Play *board* interactively in the terminal."""
    game = GamePlay(board)
    status = ""

    while True:
        while not game.is_won:
            _show_game(game, title, status)
            status = ""
            key = get_key()

            move = action_to_move(key)
            if move is not None:
                if not game.move(move):
                    status = f"{_DIM}Cannot {move}.{_R}"
            elif key == "hint":
                status = _apply_hint(game)
            elif key == "solve":
                status = _auto_solve(game)
            elif key == "restart":
                game.restart()
            elif key == "quit":
                return

        _show_win(game, title)
        if status:
            print(f"  {status}")
        print(f"\n  Press {_C}R{_R} to play again, {_C}Q{_R} to quit.")

        while True:
            key = get_key()
            if key == "restart":
                game.restart()
                break
            if key == "quit":
                return
