"""Unit tests for interpreter discovery."""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from gobiphp.config import GobiConfig
from gobiphp.errors import ErrorKind
from gobiphp.execution import ProcessRunner
from gobiphp.models import ExecutionResult
from gobiphp.runtime import PHP_CANDIDATE_PATHS, PHP_SPEC, InterpreterHandle, InterpreterLocator

VERSION_OUTPUT = "PHP 8.3.4 (cli) (built: Mar 12 2024)\nCopyright (c) The PHP Group\n"


def probe_runner(failing=()):
    """Runner whose probe succeeds unless the path is listed in ``failing``."""

    async def run(executable, args):
        if executable in failing:
            return ExecutionResult(
                output="boom", is_error=True, exit_code=1, error_kind=ErrorKind.NON_ZERO_EXIT
            )
        return ExecutionResult(output=VERSION_OUTPUT, is_error=False, exit_code=0)

    runner = MagicMock(spec=ProcessRunner)
    runner.run = AsyncMock(side_effect=run)
    return runner


@pytest.fixture
def installed(tmp_path: Path):
    """Create empty files standing in for installed interpreters."""

    def make(*names):
        paths = []
        for name in names:
            path = tmp_path / name / "php"
            path.parent.mkdir(parents=True)
            path.touch()
            paths.append(str(path))
        return paths

    return make


class TestHandle:
    """InterpreterHandle value type."""

    def test_handle_is_immutable(self):
        handle = InterpreterHandle(path="/usr/bin/php", version="PHP 8.3.4")
        with pytest.raises(AttributeError):
            handle.path = "/elsewhere"  # type: ignore[misc]

    def test_handle_repr(self):
        handle = InterpreterHandle(path="/usr/bin/php", version="PHP 8.3.4", source="system")
        text = repr(handle)
        assert "/usr/bin/php" in text
        assert "PHP 8.3.4" in text
        assert "system" in text


class TestDefaults:
    """Compiled-in candidate list."""

    def test_candidates_are_absolute(self):
        assert all(path.startswith("/") for path in PHP_CANDIDATE_PATHS)

    def test_pinned_versions_are_newest_first(self):
        pinned = [p for p in PHP_CANDIDATE_PATHS if "php@" in p]
        assert pinned == sorted(pinned, reverse=True)

    def test_default_locator_uses_spec_candidates(self):
        locator = InterpreterLocator()
        assert locator.candidates == PHP_SPEC.candidate_paths
        assert locator.search_system_path is False


class TestLocate:
    """InterpreterLocator.locate()."""

    @pytest.mark.asyncio
    async def test_no_candidate_exists(self, tmp_path: Path):
        runner = probe_runner()
        locator = InterpreterLocator(
            candidates=[str(tmp_path / "a" / "php"), str(tmp_path / "b" / "php")],
            runner=runner,
        )

        assert await locator.locate() is None
        runner.run.assert_not_called()

    @pytest.mark.asyncio
    async def test_empty_candidate_list(self):
        locator = InterpreterLocator(candidates=[], runner=probe_runner())
        assert await locator.locate() is None

    @pytest.mark.asyncio
    async def test_first_working_candidate_wins(self, tmp_path: Path, installed):
        first, second = installed("first", "second")
        runner = probe_runner()
        locator = InterpreterLocator(
            candidates=[str(tmp_path / "missing" / "php"), first, second],
            runner=runner,
        )

        handle = await locator.locate()

        assert handle == InterpreterHandle(
            path=first, version="PHP 8.3.4 (cli) (built: Mar 12 2024)", source="candidate"
        )
        # Scanning stops at the first success
        runner.run.assert_awaited_once_with(first, ["--version"])

    @pytest.mark.asyncio
    async def test_failing_probe_is_skipped(self, installed):
        broken, working = installed("broken", "working")
        runner = probe_runner(failing={broken})
        locator = InterpreterLocator(candidates=[broken, working], runner=runner)

        handle = await locator.locate()

        assert handle is not None
        assert handle.path == working
        assert runner.run.await_count == 2

    @pytest.mark.asyncio
    async def test_all_probes_fail(self, installed):
        paths = installed("one", "two")
        locator = InterpreterLocator(candidates=paths, runner=probe_runner(failing=set(paths)))
        assert await locator.locate() is None

    @pytest.mark.asyncio
    async def test_version_is_first_line_of_output(self, installed):
        (path,) = installed("php83")
        runner = MagicMock(spec=ProcessRunner)
        runner.run = AsyncMock(
            return_value=ExecutionResult(
                output="PHP 8.1.2-1ubuntu2.14 (cli)\r\nZend Engine v4.1.2\r\n",
                is_error=False,
                exit_code=0,
            )
        )
        locator = InterpreterLocator(candidates=[path], runner=runner)

        handle = await locator.locate()

        assert handle.version == "PHP 8.1.2-1ubuntu2.14 (cli)"

    @pytest.mark.asyncio
    async def test_empty_version_output(self, installed):
        (path,) = installed("silent")
        runner = MagicMock(spec=ProcessRunner)
        runner.run = AsyncMock(
            return_value=ExecutionResult(output="", is_error=False, exit_code=0)
        )
        locator = InterpreterLocator(candidates=[path], runner=runner)

        handle = await locator.locate()

        assert handle.version == ""

    @pytest.mark.asyncio
    async def test_explicit_path_has_priority(self, installed):
        candidate, explicit = installed("candidate", "explicit")
        runner = probe_runner()
        locator = InterpreterLocator(
            candidates=[candidate], runner=runner, explicit_path=explicit
        )

        handle = await locator.locate()

        assert handle.path == explicit
        assert handle.source == "explicit_config"

    @pytest.mark.asyncio
    async def test_missing_explicit_path_falls_through(self, tmp_path: Path, installed):
        (candidate,) = installed("candidate")
        locator = InterpreterLocator(
            candidates=[candidate],
            runner=probe_runner(),
            explicit_path=str(tmp_path / "typo" / "php"),
        )

        handle = await locator.locate()

        assert handle.path == candidate

    @pytest.mark.asyncio
    async def test_system_fallback(self, tmp_path: Path, installed):
        (system,) = installed("system")
        locator = InterpreterLocator(
            candidates=[str(tmp_path / "missing" / "php")],
            runner=probe_runner(),
            search_system_path=True,
        )

        with patch("gobiphp.runtime.locator.shutil.which", return_value=system) as which:
            handle = await locator.locate()

        which.assert_called_once_with("php")
        assert handle.path == system
        assert handle.source == "system"

    @pytest.mark.asyncio
    async def test_system_path_not_consulted_after_hit(self, installed):
        (candidate,) = installed("candidate")
        locator = InterpreterLocator(
            candidates=[candidate], runner=probe_runner(), search_system_path=True
        )

        with patch("gobiphp.runtime.locator.shutil.which") as which:
            await locator.locate()

        which.assert_not_called()

    @pytest.mark.asyncio
    async def test_duplicate_candidates_probed_once(self, installed):
        (path,) = installed("dup")
        runner = probe_runner(failing={path})
        locator = InterpreterLocator(
            candidates=[path, path], runner=runner, explicit_path=path
        )

        assert await locator.locate() is None
        runner.run.assert_awaited_once_with(path, ["--version"])


class TestFromConfig:
    """InterpreterLocator.from_config()."""

    def test_extra_paths_come_first(self):
        config = GobiConfig(
            php_path="/custom/php",
            extra_paths=["/opt/php/bin/php"],
            search_system_path=False,
        )

        locator = InterpreterLocator.from_config(config)

        assert locator.explicit_path == "/custom/php"
        assert locator.candidates[0] == "/opt/php/bin/php"
        assert locator.candidates[1:] == PHP_CANDIDATE_PATHS
        assert locator.search_system_path is False

    def test_runner_uses_config_locale(self):
        locator = InterpreterLocator.from_config(GobiConfig(locale="fr"))
        assert locator.runner.locale == "fr"
