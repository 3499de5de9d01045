"""Shell built-in commands, an environment store, a line reader and C-style string helpers."""

__version__ = "0.1.0"
__all__ = ["builtins", "environment", "linereader", "printf", "textutils"]