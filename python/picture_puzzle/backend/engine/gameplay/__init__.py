from picture_puzzle.backend.engine.gameplay.game import GamePlay

__all__ = ["GamePlay"]
