"""Solutions to classic programming-contest problems as plain functions, with a command line."""

__version__ = "0.1.0"
__all__ = ["cli", "numbers", "sequences", "text"]