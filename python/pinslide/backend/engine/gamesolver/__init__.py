from pinslide.backend.engine.gamesolver.solver import (
    BreadthFirstSearch,
    SearchNode,
    SearchPhase,
    SearchResult,
    Solver,
)

__all__ = ["BreadthFirstSearch", "SearchNode", "SearchPhase", "SearchResult", "Solver"]
