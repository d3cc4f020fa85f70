from __future__ import annotations

import asyncio
import logging
from typing import List, Optional

from .config import GobiConfig, load_config
from .errors import ErrorKind
from .execution import ProcessRunner, ScriptExecutionService
from .highlight import highlight
from .messages import get_message
from .models.responses import ExecutionResult, HighlightSpan, InterpreterStatus
from .runtime import InterpreterHandle, InterpreterLocator

logger = logging.getLogger(__name__)


class GobiServer:
    """Session facade composing discovery, execution and highlighting.

    Discovery runs once as a task. Until it finishes, ``execute`` answers with
    the "not available" result: the execution service is swapped in a single
    assignment on the event loop, so callers never see a half-set handle.
    Only one execution may be in flight at a time.
    """

    def __init__(
        self,
        config: Optional[GobiConfig] = None,
        locator: Optional[InterpreterLocator] = None,
        runner: Optional[ProcessRunner] = None,
    ) -> None:
        self.config = config or load_config()
        self.runner = runner or ProcessRunner(locale=self.config.locale)
        self.locator = locator or InterpreterLocator.from_config(
            self.config, runner=self.runner
        )
        self.service = ScriptExecutionService(
            None, runner=self.runner, locale=self.config.locale
        )
        self._discovery: Optional["asyncio.Task[Optional[InterpreterHandle]]"] = None
        self._executing = False

    def start_discovery(self) -> "asyncio.Task[Optional[InterpreterHandle]]":
        """Launch discovery once; later calls return the same task.

        Front ends can attach ``add_done_callback`` to the returned task to
        learn when the interpreter status changes.
        """
        if self._discovery is None:
            self._discovery = asyncio.ensure_future(self._discover())
        return self._discovery

    async def start(self) -> Optional[InterpreterHandle]:
        """Run discovery (if not already running) and wait for it."""
        return await self.start_discovery()

    async def _discover(self) -> Optional[InterpreterHandle]:
        handle = await self.locator.locate()
        self.service = ScriptExecutionService(
            handle,
            runner=self.runner,
            spec=self.locator.spec,
            locale=self.config.locale,
        )
        return handle

    @property
    def handle(self) -> Optional[InterpreterHandle]:
        return self.service.handle

    @property
    def discovery_complete(self) -> bool:
        return self._discovery is not None and self._discovery.done()

    @property
    def is_executing(self) -> bool:
        return self._executing

    async def execute(self, source_text: str) -> ExecutionResult:
        """Execute source text through the current service.

        Blank source and overlapping requests are answered with an error
        result without spawning anything.
        """
        if not source_text.strip():
            return self._refusal("empty_source", ErrorKind.EMPTY_SOURCE)
        if self._executing:
            logger.debug("Rejecting execution: another one is in flight")
            return self._refusal("busy", ErrorKind.BUSY)

        service = self.service
        self._executing = True
        try:
            return await service.execute(source_text)
        finally:
            self._executing = False

    def highlight(self, source_text: str, include_plain: bool = False) -> List[HighlightSpan]:
        return highlight(source_text, include_plain=include_plain)

    def status(self) -> InterpreterStatus:
        """Describe the interpreter for the header or the "not installed" screen."""
        handle = self.handle
        if handle:
            return InterpreterStatus(
                available=True,
                discovery_complete=self.discovery_complete,
                path=handle.path,
                version=handle.version,
            )

        spec = self.locator.spec
        return InterpreterStatus(
            available=False,
            discovery_complete=self.discovery_complete,
            install_command=spec.install_command,
            download_url=spec.download_url,
        )

    def _refusal(self, key: str, kind: ErrorKind) -> ExecutionResult:
        return ExecutionResult(
            output=get_message(key, self.config.locale),
            is_error=True,
            exit_code=-1,
            error_kind=kind,
        )
