"""Argument model for the schedule-events tool and the Garoon response shapes."""

from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

TargetType = Literal["user", "organization", "facility"]


class GetScheduleEventsArgs(BaseModel):
    """
    Input of the schedule-events tool.

    If ``target`` is omitted the current authenticated user's schedule is read.
    If it is given, ``targetType`` must be given too; the handler enforces this.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    target: Optional[str] = Field(
        default=None,
        description=(
            "Optional. Target ID as a numeric string (e.g., '12345'). If omitted, retrieves current user's "
            "schedule. If provided, 'targetType' becomes REQUIRED."
        ),
    )
    target_type: Optional[TargetType] = Field(
        default=None,
        alias="targetType",
        description=(
            "REQUIRED if 'target' is provided. Type of target: 'user' (person), 'organization' "
            "(department/group), or 'facility' (meeting room/resource). Do NOT use without 'target'."
        ),
    )
    range_start: Optional[str] = Field(
        default=None,
        alias="rangeStart",
        description=(
            "Optional. Start datetime in RFC 3339 format (e.g., 2024-01-01T00:00:00+09:00 or "
            "2024-01-01T00:00:00Z). If omitted, defaults to current date."
        ),
    )
    range_end: Optional[str] = Field(
        default=None,
        alias="rangeEnd",
        description=(
            "Optional. End datetime in RFC 3339 format (e.g., 2024-01-07T23:59:59+09:00 or "
            "2024-01-07T23:59:59Z). Must be after rangeStart."
        ),
    )
    limit: Optional[int] = Field(
        default=None,
        ge=1,
        le=1000,
        description="Optional. Maximum number of events to return (1-1000). Default: server default (~100)",
    )
    offset: Optional[int] = Field(
        default=None,
        ge=0,
        description="Optional. Starting position for pagination (0 or greater). Default: 0",
    )

    @field_validator("target", "target_type", "range_start", "range_end", mode="before")
    @classmethod
    def _empty_as_absent(cls, value: Any) -> Any:
        return None if value == "" else value


class _GaroonModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, coerce_numbers_to_str=True)


class Attendee(_GaroonModel):
    id: str = ""
    type: Optional[str] = None
    name: Optional[str] = None
    code: Optional[str] = None


class Facility(_GaroonModel):
    id: str = ""
    name: Optional[str] = None
    code: Optional[str] = None


class Watcher(_GaroonModel):
    id: str = ""
    type: Optional[str] = None
    name: Optional[str] = None
    code: Optional[str] = None


class EventDateTime(_GaroonModel):
    date_time: Optional[str] = Field(default=None, alias="dateTime")
    time_zone: Optional[str] = Field(default=None, alias="timeZone")


class ScheduleEvent(_GaroonModel):
    """A Garoon calendar entry as returned by ``/api/v1/schedule/events``."""

    id: str
    subject: Optional[str] = None
    event_type: Optional[str] = Field(default=None, alias="eventType")
    event_menu: Optional[str] = Field(default=None, alias="eventMenu")
    notes: Optional[str] = None
    visibility_type: Optional[str] = Field(default=None, alias="visibilityType")
    is_start_only: bool = Field(default=False, alias="isStartOnly")
    is_all_day: bool = Field(default=False, alias="isAllDay")
    start: Optional[EventDateTime] = None
    end: Optional[EventDateTime] = None
    attendees: List[Attendee] = []
    facilities: List[Facility] = []
    facility_using_purpose: Optional[str] = Field(default=None, alias="facilityUsingPurpose")
    watchers: List[Watcher] = []


class ScheduleEventsResponse(_GaroonModel):
    events: List[ScheduleEvent] = []
    has_next: bool = Field(default=False, alias="hasNext")
