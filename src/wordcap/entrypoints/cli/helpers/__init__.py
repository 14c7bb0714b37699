"""Helpers for the WORDCAP CLI."""

from .log_level_parser import parse_log_level
from .output import OutputFormat, format_words, render_words

__all__ = ["OutputFormat", "format_words", "parse_log_level", "render_words"]
