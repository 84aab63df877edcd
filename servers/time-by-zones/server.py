"""
Time by Zones — the desktop-widget world clock as MCP tools.

Needs the ``timebyzones`` package importable: run ``pip install -e .`` from
the repository root before ``python servers/time-by-zones/server.py``.
"""

import sys

from mcp.server.fastmcp import FastMCP

from timebyzones.cli import usage_text
from timebyzones.formatter import get_time_in_zone
from timebyzones.registry import TIMEZONES
from timebyzones.reports import SEPARATOR, report_for_mode

mcp = FastMCP("time-by-zones")


@mcp.tool()
async def zone_report(mode: str = "default") -> str:
    """Get the current time in a preset group of locations, on one line.

    Args:
        mode: 'all' for every configured location, 'us' for US locations, 'help' for usage.
              Anything else shows UTC, IAD (Washington) and SFO (San Francisco).
    """
    try:
        if mode == "help":
            return usage_text("time-by-zones").strip("\n")
        return report_for_mode(mode).rstrip(SEPARATOR)
    except Exception as e:
        return f"Error: {e}"


@mcp.tool()
async def zone_time(timezone: str = "UTC", label: str = "") -> str:
    """Get the current HH:MM time in one timezone, marked (DST) when daylight saving is in effect.

    Args:
        timezone: IANA timezone name (e.g., 'Asia/Tokyo', 'America/New_York', 'UTC').
        label: Display label for the result. Defaults to the timezone name.
    """
    try:
        return get_time_in_zone(timezone, label or timezone)
    except Exception as e:
        return f"Error: {e}"


@mcp.tool()
async def list_zones() -> str:
    """List the configured locations and their IANA timezones."""
    try:
        lines = [f"  • {label:<4} {timezone_id}" for label, timezone_id in TIMEZONES.items()]
        return f"Configured locations ({len(lines)}):\n" + "\n".join(lines)
    except Exception as e:
        return f"Error: {e}"


# CLI wrapper for direct invocation
if __name__ == "__main__":
    import asyncio
    import json

    if len(sys.argv) > 1 and sys.argv[1] == "--call":
        _tools = {name: func.fn for name, func in mcp._tool_manager._tools.items()}
        func_name = sys.argv[2] if len(sys.argv) > 2 else None
        if func_name not in _tools:
            print(f"Error: Unknown tool '{func_name}'. Available: {', '.join(_tools.keys())}")
            sys.exit(1)
        try:
            args = json.loads(sys.argv[3]) if len(sys.argv) > 3 else {}
        except json.JSONDecodeError as e:
            print(f"Error: Invalid JSON arguments: {e}")
            sys.exit(1)
        result = asyncio.run(_tools[func_name](**args))
        print(result)
    else:
        mcp.run(transport="stdio")
