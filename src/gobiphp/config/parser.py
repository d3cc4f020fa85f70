"""Environment-driven configuration for GobiPHP.

The core has no configuration file of its own. Settings are read from the
environment, with a ``.env`` file loaded first when present.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from dotenv import load_dotenv

from ..messages import DEFAULT_LOCALE, MESSAGES

# Load environment variables from .env file if present
load_dotenv()

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class GobiConfig:
    """Runtime configuration.

    Attributes:
        php_path: Explicit interpreter path, probed before any candidate
        extra_paths: Additional candidates probed before the default list
        search_system_path: Fall back to ``php`` on PATH after the candidates
        locale: Message catalogue to use ("en" or "fr")
        log_level: Logging level name for the MCP entry point
    """

    php_path: Optional[str] = None
    extra_paths: List[str] = field(default_factory=list)
    search_system_path: bool = True
    locale: str = DEFAULT_LOCALE
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GobiConfig":
        """Build configuration from environment variables.

        Args:
            environ: Mapping to read from; defaults to ``os.environ``

        Returns:
            GobiConfig with defaults for anything unset or invalid
        """
        env = os.environ if environ is None else environ

        extra = env.get("GOBI_EXTRA_PATHS", "")
        locale = env.get("GOBI_LOCALE", DEFAULT_LOCALE).strip().lower()
        if locale not in MESSAGES:
            locale = DEFAULT_LOCALE
        log_level = env.get("GOBI_LOG_LEVEL", "WARNING").strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            log_level = "WARNING"

        return cls(
            php_path=env.get("GOBI_PHP_PATH") or None,
            extra_paths=[p for p in extra.split(os.pathsep) if p.strip()],
            search_system_path=_parse_bool(
                env.get("GOBI_SEARCH_SYSTEM_PATH"), default=True
            ),
            locale=locale,
            log_level=log_level,
        )


def _parse_bool(value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    return default


def load_config() -> GobiConfig:
    """Load configuration from the process environment."""
    return GobiConfig.from_env()
