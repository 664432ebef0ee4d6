"""Helpers shared by the tool modules."""

import json

import structlog

from investmate.engine.errors import InvestMateError

log = structlog.get_logger()


def rejected(tool: str, exc: InvestMateError) -> str:
    """Log a rejected call and return the error payload the agent sees."""
    log.warning("tool.rejected", tool=tool, error_type=exc.code, field=exc.field, error=str(exc))
    return json.dumps(exc.as_payload())
