"""PHP interpreter discovery."""

from .locator import InterpreterLocator
from .specs import PHP_CANDIDATE_PATHS, PHP_SPEC
from .types import InterpreterHandle

__all__ = [
    "InterpreterLocator",
    "InterpreterHandle",
    "PHP_CANDIDATE_PATHS",
    "PHP_SPEC",
]
