"""GobiPHP core: PHP interpreter discovery, script execution and highlighting."""

from .execution import ProcessRunner, ScriptExecutionService
from .highlight import highlight
from .models import ExecutionResult, HighlightSpan, InterpreterStatus, TokenCategory
from .runtime import InterpreterHandle, InterpreterLocator

__version__ = "0.1.0"

__all__ = [
    "ExecutionResult",
    "HighlightSpan",
    "InterpreterHandle",
    "InterpreterLocator",
    "InterpreterStatus",
    "ProcessRunner",
    "ScriptExecutionService",
    "TokenCategory",
    "highlight",
]
