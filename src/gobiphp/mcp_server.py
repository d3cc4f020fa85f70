"""MCP Server for GobiPHP.

Exposes the PHP playground as MCP tools using FastMCP.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from mcp.server import FastMCP

from .config import load_config
from .highlight import DEFAULT_THEME
from .server import GobiServer

logger = logging.getLogger(__name__)

# Global server instance, created on first tool call
_gobi_server: Optional[GobiServer] = None

mcp = FastMCP("GobiPHP")


async def get_gobi_server() -> GobiServer:
    """Get or create the server, waiting for interpreter discovery."""
    global _gobi_server
    if _gobi_server is None:
        _gobi_server = GobiServer()
    await _gobi_server.start()
    return _gobi_server


def _to_dict(obj: Any) -> Any:
    """Convert dataclass objects to dictionaries for JSON serialization."""
    if hasattr(obj, "__dataclass_fields__"):
        return asdict(obj)
    elif isinstance(obj, list):
        return [_to_dict(item) for item in obj]
    elif isinstance(obj, dict):
        return {k: _to_dict(v) for k, v in obj.items()}
    return obj


@mcp.tool()
async def get_php_status() -> Dict[str, Any]:
    """Report whether a PHP interpreter is available.

    Returns:
        - available: True if a working interpreter was found
        - path, version: The interpreter in use (when available)
        - install_command, download_url: How to install PHP (when unavailable)
    """
    server = await get_gobi_server()
    return _to_dict(server.status())


@mcp.tool()
async def run_php(code: str) -> Dict[str, Any]:
    """Run PHP code with ``php -r`` and return its combined output.

    Args:
        code: PHP source without the ``<?php`` opening tag

    Returns:
        - output: stdout followed by stderr
        - is_error: True when exit_code is non-zero
        - exit_code: Interpreter exit status, -1 if nothing ran
        - error_kind: Why the run failed, null on success
    """
    server = await get_gobi_server()
    result = await server.execute(code)
    return _to_dict(result)


@mcp.tool()
async def highlight_php(code: str, include_plain: bool = False) -> Dict[str, Any]:
    """Compute syntax highlight spans for PHP code.

    Args:
        code: PHP source text
        include_plain: Also return untagged gaps as "plain" spans

    Returns:
        - spans: List of {start, end, category} with half-open offsets
        - theme: Suggested colour name per category
    """
    server = await get_gobi_server()
    spans: List[Any] = server.highlight(code, include_plain=include_plain)
    return {
        "spans": _to_dict(spans),
        "theme": {category.value: colour for category, colour in DEFAULT_THEME.items()},
    }


# ============================================================================
# Entry Point
# ============================================================================


def main():
    """Run the MCP server.

    Configuration comes from the environment (see ``GobiConfig.from_env``).

    Example:
        GOBI_PHP_PATH=/usr/bin/php python -m gobiphp.mcp_server
    """
    config = load_config()

    # stdout is used for the MCP protocol
    logging.basicConfig(
        stream=sys.stderr,
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting GobiPHP MCP server")

    mcp.run()


if __name__ == "__main__":
    main()
