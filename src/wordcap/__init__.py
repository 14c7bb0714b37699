"""WORDCAP

A small utility that normalizes lists of optional strings into capitalized
words. Absent or empty items are skipped with a notification; every other
item is split on spaces and each word is re-capitalized.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
