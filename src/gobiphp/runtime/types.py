"""Data types for interpreter discovery."""

from dataclasses import dataclass


@dataclass(frozen=True)
class InterpreterHandle:
    """A verified interpreter, fixed for the lifetime of the session.

    Attributes:
        path: Absolute path to the interpreter executable
        version: First line of the interpreter's ``--version`` output
        source: How the interpreter was found
    """

    path: str
    version: str
    source: str = "candidate"  # "explicit_config", "candidate", "system"

    def __repr__(self) -> str:
        return f"<InterpreterHandle {self.version!r} @ {self.path} ({self.source})>"
