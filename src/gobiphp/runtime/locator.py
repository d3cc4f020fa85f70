"""One-shot discovery of a usable PHP interpreter."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Iterator, Optional, Sequence, Tuple

from ..config import GobiConfig
from ..execution.runner import ProcessRunner
from .specs import PHP_SPEC, InterpreterSpec
from .types import InterpreterHandle

logger = logging.getLogger(__name__)


class InterpreterLocator:
    """Finds the first candidate interpreter that exists and answers a probe.

    Priority:
    1. Explicit path (``GOBI_PHP_PATH``)
    2. Candidate paths, in order
    3. The interpreter on PATH, if ``search_system_path`` is set

    Scanning stops at the first success. Nothing is cached: each call to
    ``locate`` is a fresh pass, and callers are expected to call it once.
    """

    def __init__(
        self,
        candidates: Optional[Sequence[str]] = None,
        runner: Optional[ProcessRunner] = None,
        spec: InterpreterSpec = PHP_SPEC,
        explicit_path: Optional[str] = None,
        search_system_path: bool = False,
    ):
        """Initialize locator.

        Args:
            candidates: Ordered absolute paths; defaults to the interpreter's built-in list
            runner: Runner used for probes
            spec: Interpreter specification
            explicit_path: Path probed before any candidate
            search_system_path: Probe ``shutil.which`` last
        """
        self.spec = spec
        self.candidates = tuple(spec.candidate_paths if candidates is None else candidates)
        self.runner = runner or ProcessRunner()
        self.explicit_path = explicit_path
        self.search_system_path = search_system_path

    @classmethod
    def from_config(
        cls,
        config: GobiConfig,
        runner: Optional[ProcessRunner] = None,
        spec: InterpreterSpec = PHP_SPEC,
    ) -> "InterpreterLocator":
        """Build a locator from configuration, extra paths first."""
        return cls(
            candidates=list(config.extra_paths) + list(spec.candidate_paths),
            runner=runner or ProcessRunner(locale=config.locale),
            spec=spec,
            explicit_path=config.php_path,
            search_system_path=config.search_system_path,
        )

    async def locate(self) -> Optional[InterpreterHandle]:
        """Probe candidates in priority order.

        Returns:
            InterpreterHandle for the first working candidate, or None if no
            candidate both exists and exits 0 on the version probe
        """
        tried = 0
        for path, source in self._iter_candidates():
            if not Path(path).exists():
                logger.debug("Skipping %s: not found", path)
                continue

            tried += 1
            handle = await self._probe(path, source)
            if handle:
                logger.info("Using %s", handle)
                return handle

        logger.warning(
            "%s not found (%d candidate(s) present, none usable)",
            self.spec.display_name,
            tried,
        )
        return None

    def _iter_candidates(self) -> Iterator[Tuple[str, str]]:
        """Yield (path, source) pairs in priority order, each path once."""
        seen = set()

        def fresh(path: str) -> bool:
            if path in seen:
                return False
            seen.add(path)
            return True

        if self.explicit_path and fresh(self.explicit_path):
            yield self.explicit_path, "explicit_config"

        for path in self.candidates:
            if fresh(path):
                yield path, "candidate"

        if self.search_system_path:
            # Looked up lazily so an earlier hit never touches PATH
            system_path = shutil.which(self.spec.executable_name)
            if system_path and fresh(system_path):
                yield system_path, "system"

    async def _probe(self, path: str, source: str) -> Optional[InterpreterHandle]:
        """Run the version check against one candidate."""
        logger.debug("Probing %s", path)
        result = await self.runner.run(path, list(self.spec.version_check.args))
        if result.exit_code != 0:
            logger.debug("Probe of %s failed with exit code %d", path, result.exit_code)
            return None

        lines = result.output.splitlines()
        version = lines[0] if lines else ""
        return InterpreterHandle(path=path, version=version, source=source)
