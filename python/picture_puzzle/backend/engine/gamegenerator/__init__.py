from picture_puzzle.backend.engine.gamegenerator.generator import (
    GameGenerator,
    RandomSource,
)

__all__ = ["GameGenerator", "RandomSource"]
