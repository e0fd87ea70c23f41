"""Introductory data-structure and algorithm routines, with a small command line."""

__version__ = "0.1.0"

__all__ = ["arith", "arrays", "cli", "matrix", "recursion", "search", "stacks"]