"""Process execution and the script execution service."""

from .runner import ProcessRunner
from .service import ScriptExecutionService, unavailable_result

__all__ = [
    "ProcessRunner",
    "ScriptExecutionService",
    "unavailable_result",
]
