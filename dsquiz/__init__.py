"""Data structures with quiz-style operations, small algorithmic problems and a command-line driver."""

__version__ = "0.1.0"

__all__ = ["cli", "heap", "linkedlist", "pair", "problems", "queue", "songs", "stack", "vector"]