"""Pytest configuration and shared fixtures."""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from gobiphp.config import GobiConfig
from gobiphp.execution import ProcessRunner
from gobiphp.models import ExecutionResult
from tests.helpers.process_helpers import (
    BROKEN_PHP_SCRIPT,
    FAKE_PHP_SCRIPT,
    write_executable,
)


@pytest.fixture
def fake_php(tmp_path: Path) -> Path:
    """An executable that behaves like a working php binary."""
    return write_executable(tmp_path / "php", FAKE_PHP_SCRIPT)


@pytest.fixture
def broken_php(tmp_path: Path) -> Path:
    """An executable that exists but fails the version probe."""
    broken_dir = tmp_path / "broken"
    broken_dir.mkdir()
    return write_executable(broken_dir / "php", BROKEN_PHP_SCRIPT)


@pytest.fixture
def missing_path(tmp_path: Path) -> str:
    """A path that does not exist on disk."""
    return str(tmp_path / "nowhere" / "php")


@pytest.fixture
def test_config() -> GobiConfig:
    """Configuration isolated from the host environment."""
    return GobiConfig(search_system_path=False)


@pytest.fixture
def mock_runner() -> MagicMock:
    """A ProcessRunner whose run() succeeds without spawning anything."""
    runner = MagicMock(spec=ProcessRunner)
    runner.run = AsyncMock(
        return_value=ExecutionResult(output="ok", is_error=False, exit_code=0)
    )
    return runner
