"""A small interactive shell and a library of classic algorithm exercises."""

__version__ = "0.1.0"
__all__ = ["arith", "sorting", "structures", "text", "records", "history", "shell"]