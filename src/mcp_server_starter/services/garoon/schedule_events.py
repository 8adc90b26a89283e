"""Schedule events tool: read Garoon calendar entries for a user, organization or facility."""

from typing import Dict, List, Optional, Sequence, Union

from mcp_server_starter.server_core import InvalidInputError, ToolResult, get_logger
from .client import GaroonClient
from .models import Attendee, EventDateTime, GetScheduleEventsArgs, ScheduleEvent, ScheduleEventsResponse, Watcher

logger = get_logger(__name__)

TOOL_NAME = "get-schedule-events"
TOOL_DESCRIPTION = (
    "Get schedule events from Garoon for a specific target (user, organization, or facility) within a date range"
)

NOTES_PREVIEW_LENGTH = 100
DIVIDER = "=" * 80


def validate_target(args: GetScheduleEventsArgs) -> None:
    """Check that target and targetType are given together or not at all.

    Raises:
        InvalidInputError: If only one of the two is present.
    """
    if args.target_type and not args.target:
        raise InvalidInputError(
            "Invalid parameters: 'targetType' requires 'target' to be specified. "
            "Either provide both 'target' and 'targetType', or omit both to get current user's schedule."
        )
    if args.target and not args.target_type:
        raise InvalidInputError(
            "Invalid parameters: 'target' requires 'targetType' to be specified. "
            "Please specify targetType as 'user', 'organization', or 'facility'."
        )


def build_query(args: GetScheduleEventsArgs) -> Dict[str, str]:
    """Collect the query parameters that were actually supplied."""
    params: Dict[str, str] = {}
    if args.target:
        params["target"] = args.target
        params["targetType"] = str(args.target_type)
    if args.range_start:
        params["rangeStart"] = args.range_start
    if args.range_end:
        params["rangeEnd"] = args.range_end
    if args.limit is not None:
        params["limit"] = str(args.limit)
    if args.offset is not None:
        params["offset"] = str(args.offset)
    return params


def _person_names(people: Sequence[Union[Attendee, Watcher]]) -> str:
    return ", ".join(p.name or p.code or p.id for p in people)


def _truncate(text: str, length: int = NOTES_PREVIEW_LENGTH) -> str:
    return text[:length] + "..." if len(text) > length else text


def _date_time(value: Optional[EventDateTime]) -> str:
    return (value.date_time if value is not None else None) or "N/A"


def format_event(event: ScheduleEvent, index: int) -> str:
    lines: List[str] = [f"Event {index + 1}: {event.subject or 'N/A'}", f"  ID: {event.id}"]

    if event.is_all_day:
        lines.append("  All Day Event")
    elif event.is_start_only:
        lines.append(f"  Start: {_date_time(event.start)}")
    else:
        lines.append(f"  Start: {_date_time(event.start)}")
        if event.end is not None:
            lines.append(f"  End: {_date_time(event.end)}")

    if event.event_type:
        lines.append(f"  Type: {event.event_type}")
    if event.event_menu:
        lines.append(f"  Menu: {event.event_menu}")
    if event.attendees:
        lines.append(f"  Attendees: {_person_names(event.attendees)}")
    if event.facilities:
        lines.append(f"  Facilities: {', '.join(f.name or f.code or '' for f in event.facilities)}")
    if event.facility_using_purpose:
        lines.append(f"  Facility Purpose: {event.facility_using_purpose}")
    if event.watchers:
        lines.append(f"  Watchers: {_person_names(event.watchers)}")
    if event.notes:
        lines.append(f"  Notes: {_truncate(event.notes)}")
    if event.visibility_type:
        lines.append(f"  Visibility: {event.visibility_type}")

    return "\n".join(lines)


def _date_range(args: GetScheduleEventsArgs) -> Optional[tuple[str, str]]:
    if args.range_start and args.range_end:
        return args.range_start, args.range_end
    return None


def format_empty(args: GetScheduleEventsArgs) -> str:
    target_info = f"target {args.target} ({args.target_type or 'user'})" if args.target else "specified criteria"
    date_range = _date_range(args)
    range_info = f" between {date_range[0]} and {date_range[1]}" if date_range else ""
    return f"No schedule events found for {target_info}{range_info}"


def format_summary(args: GetScheduleEventsArgs, data: ScheduleEventsResponse) -> str:
    count = len(data.events)
    lines = ["Schedule Events"]
    if args.target:
        lines.append(f"Target: {args.target_type or 'user'} {args.target}")
    date_range = _date_range(args)
    if date_range:
        lines.append(f"Period: {date_range[0]} to {date_range[1]}")
    lines.append(f"Found: {count} events")
    if data.has_next:
        lines.append(f"More results available (use offset={(args.offset or 0) + count})")
    else:
        lines.append("All results retrieved")
    lines.append(DIVIDER)
    return "\n".join(lines)


def format_schedule_events(args: GetScheduleEventsArgs, data: ScheduleEventsResponse) -> str:
    events_text = f"\n\n{DIVIDER}\n\n".join(format_event(e, i) for i, e in enumerate(data.events))
    return f"{format_summary(args, data)}\n\n{events_text}"


async def get_schedule_events(client: GaroonClient, args: GetScheduleEventsArgs) -> ToolResult:
    """Validate the target pair, query Garoon and format the events.

    Raises:
        InvalidInputError: If target and targetType are not given together.
        ConfigurationError: If the Garoon base URL is not configured.
        RemoteServiceError: If the Garoon call fails.
    """
    validate_target(args)
    data = await client.get_schedule_events(build_query(args))

    if not data.events:
        logger.info("No schedule events found for target=%s", args.target)
        return ToolResult.text(format_empty(args))

    return ToolResult.text(format_schedule_events(args, data))
