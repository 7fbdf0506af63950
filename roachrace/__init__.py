"""Console cockroach racing game with player bets, a shared pot and persistent race statistics."""

__version__ = "0.1.0"
__all__ = ["__version__"]