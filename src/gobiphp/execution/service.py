"""Script execution against the discovered interpreter."""

from __future__ import annotations

from typing import Optional

from ..errors import ErrorKind
from ..messages import DEFAULT_LOCALE, get_message
from ..models.responses import ExecutionResult
from ..runtime.specs import PHP_SPEC, InterpreterSpec
from ..runtime.types import InterpreterHandle
from .runner import ProcessRunner


class ScriptExecutionService:
    """Runs source text with ``php -r``.

    The handle is injected rather than looked up so tests can pass a fake
    one. ``None`` means discovery did not produce an interpreter.
    """

    def __init__(
        self,
        handle: Optional[InterpreterHandle],
        runner: Optional[ProcessRunner] = None,
        spec: InterpreterSpec = PHP_SPEC,
        locale: str = DEFAULT_LOCALE,
    ) -> None:
        self.handle = handle
        self.runner = runner or ProcessRunner(locale=locale)
        self.spec = spec
        self.locale = locale

    @property
    def is_available(self) -> bool:
        return self.handle is not None

    async def execute(self, source_text: str) -> ExecutionResult:
        """Execute source text once; failures are reported, never retried."""
        if self.handle is None:
            return unavailable_result(self.locale)

        return await self.runner.run(
            self.handle.path, [*self.spec.run_args, source_text]
        )


def unavailable_result(locale: str = DEFAULT_LOCALE) -> ExecutionResult:
    """The fixed result returned when no interpreter was found."""
    return ExecutionResult(
        output=get_message("interpreter_unavailable", locale),
        is_error=True,
        exit_code=-1,
        error_kind=ErrorKind.INTERPRETER_UNAVAILABLE,
    )
