"""Lexical highlighting for the PHP editor."""

from .highlighter import highlight
from .tokens import CONSTANTS, DEFAULT_THEME, KEYWORDS

__all__ = ["highlight", "KEYWORDS", "CONSTANTS", "DEFAULT_THEME"]
