"""Number theory routines and classic data structures for competitive programming."""

__version__ = "0.1.0"