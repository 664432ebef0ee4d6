"""
MCP server entrypoint.

Imports all tool modules to trigger @mcp.tool() registration,
then starts the SSE server on mcp_host:mcp_port.
"""

import logging

import structlog

from investmate.app import mcp
from investmate.config import settings

# Side-effect imports register @mcp.tool() decorators
from investmate.tools import education, investing, risk  # noqa: F401

log = structlog.get_logger()


def configure_logging() -> None:
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(level))


def main() -> None:
    configure_logging()
    log.info(
        "server.startup",
        env=settings.app_env,
        host=settings.mcp_host,
        port=settings.mcp_port,
        cache_enabled=settings.cache_enabled,
    )
    mcp.run(transport="sse")


if __name__ == "__main__":
    main()
