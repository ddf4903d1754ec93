from picture_puzzle.backend.engine.gamestate.state import GameState, Phase

__all__ = ["GameState", "Phase"]
