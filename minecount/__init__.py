"""Minesweeper board annotation and a small doubly linked list."""

__version__ = "0.1.0"

__all__ = ["annotate", "linkedlist"]