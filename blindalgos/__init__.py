"""Classic algorithm solutions: arrays, searching, bit tricks and dynamic programming."""

__version__ = "0.1.0"
__all__ = ["arrays", "search", "bits", "dynamic"]