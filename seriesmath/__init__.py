"""Elementary math functions computed from series expansions and iterative methods."""

__version__ = "0.1.0"
__all__ = ["basic", "exponential", "trig"]