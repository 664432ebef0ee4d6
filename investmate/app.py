"""
Singleton FastMCP instance.

Imported by tool modules (which register @mcp.tool() decorators)
and by server.py (which runs it).
"""

from mcp.server.fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse

from investmate.config import settings

mcp = FastMCP(
    name="investmate-tools",
    instructions=(
        "Tools for InvestMate, a friendly investing guide for first-time investors. "
        "Provides the user's investment profile, growth projections, time-horizon "
        "allocations, risk questionnaires, plain-language concept explanations, and "
        "automated investing plan drafts. All output is educational guidance, not "
        "financial advice."
    ),
    host=settings.mcp_host,
    port=settings.mcp_port,
)


@mcp.custom_route("/health", methods=["GET"])
async def health(request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok", "env": settings.app_env})
