from pinslide.backend.engine.gameplay.game import GamePlay

__all__ = ["GamePlay"]
