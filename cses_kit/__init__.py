"""Solutions to classic CSES problems as a small Python library and command."""

__version__ = "0.1.0"