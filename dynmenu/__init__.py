"""A terminal menu that filters lines from standard input, with a file-testing filter."""

__version__ = "4.9"
__all__ = ["__version__"]