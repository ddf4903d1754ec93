from picture_puzzle.backend.engine.gameclock.clock import SecondTicker

__all__ = ["SecondTicker"]
