"""Out-of-process execution with combined output capture."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import Sequence

from ..errors import ErrorKind
from ..messages import DEFAULT_LOCALE, get_message
from ..models.responses import ExecutionResult

logger = logging.getLogger(__name__)


class ProcessRunner:
    """Runs one child process per call and captures stdout + stderr.

    Stateless: every call owns its own process handle and pipes, so
    concurrent calls never interfere.
    """

    def __init__(self, locale: str = DEFAULT_LOCALE) -> None:
        self.locale = locale

    async def run(self, executable: str, args: Sequence[str]) -> ExecutionResult:
        """Run an executable to completion.

        Both pipes are drained by independent reader tasks gathered together
        with the exit wait, so a child that writes more than the OS pipe
        buffer holds cannot deadlock against us.

        Args:
            executable: Path of the program to run
            args: Arguments passed after the executable

        Returns:
            ExecutionResult with stdout followed by stderr. If the process
            cannot be started, exit_code is -1 and output explains why.
        """
        try:
            process = await asyncio.create_subprocess_exec(
                executable,
                *args,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except (OSError, ValueError) as e:
            # ValueError: embedded NUL byte in an argument
            logger.warning("Failed to start %s: %s", executable, e)
            return ExecutionResult(
                output=get_message("spawn_failure", self.locale, reason=str(e)),
                is_error=True,
                exit_code=-1,
                error_kind=ErrorKind.SPAWN_FAILURE,
            )

        try:
            stdout, stderr, exit_code = await asyncio.gather(
                process.stdout.read(),
                process.stderr.read(),
                process.wait(),
            )
        except asyncio.CancelledError:
            with contextlib.suppress(ProcessLookupError):
                process.kill()
            await process.wait()
            raise

        logger.debug("%s exited with code %d", executable, exit_code)

        output = stdout.decode("utf-8", errors="replace") + stderr.decode(
            "utf-8", errors="replace"
        )
        return ExecutionResult(
            output=output,
            is_error=exit_code != 0,
            exit_code=exit_code,
            error_kind=ErrorKind.NON_ZERO_EXIT if exit_code != 0 else None,
        )
