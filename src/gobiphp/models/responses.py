from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..errors import ErrorKind


# Execution
@dataclass(frozen=True)
class ExecutionResult:
    output: str
    is_error: bool
    exit_code: int
    error_kind: Optional[ErrorKind] = None  # None when the run succeeded


# Highlighting
class TokenCategory(str, Enum):
    """Lexical categories a highlight span can carry."""

    KEYWORD = "keyword"
    CONSTANT = "constant"
    STRING = "string"
    COMMENT = "comment"
    NUMBER = "number"
    VARIABLE = "variable"
    PLAIN = "plain"


@dataclass(frozen=True)
class HighlightSpan:
    """Half-open ``[start, end)`` range of the source tagged with a category."""

    start: int
    end: int
    category: TokenCategory


# Interpreter status
@dataclass
class InterpreterStatus:
    """What the front end needs to render the header or the "not installed" screen."""

    available: bool
    discovery_complete: bool
    path: Optional[str] = None
    version: Optional[str] = None
    install_command: Optional[str] = None  # Present only when unavailable
    download_url: Optional[str] = None
