"""Garoon groupware tools."""

from functools import partial

from mcp_server_starter.server_core import ToolRegistry, get_tool_name
from . import schedule_events
from .client import GaroonClient
from .models import GetScheduleEventsArgs

SERVICE = "garoon"


def register_garoon_tools(registry: ToolRegistry, client: GaroonClient) -> None:
    """Register the schedule-events tool, bound to ``client``."""
    registry.register(
        get_tool_name(SERVICE, schedule_events.TOOL_NAME),
        description=schedule_events.TOOL_DESCRIPTION,
        func=partial(schedule_events.get_schedule_events, client),
        args_model=GetScheduleEventsArgs,
    )


__all__ = ["GaroonClient", "GetScheduleEventsArgs", "register_garoon_tools"]
