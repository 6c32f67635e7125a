"""A chunked deque, regular-expression automata and text adventure building blocks."""

__version__ = "0.1.0"