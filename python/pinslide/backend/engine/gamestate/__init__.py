from pinslide.backend.engine.gamestate.state import GameState

__all__ = ["GameState"]
