"""Alerts tool: active weather alerts for a US state."""

import re
from typing import List

from mcp_server_starter.server_core import InvalidInputError, ToolResult, get_logger
from .client import NWSClient
from .models import AlertFeature, AlertsArgs

logger = get_logger(__name__)

TOOL_NAME = "alerts"
TOOL_DESCRIPTION = "Get weather alerts for a US state"

_STATE_CODE = re.compile(r"[A-Z]{2}")


def normalize_state(state: str) -> str:
    """Uppercase a state code and check it is exactly two letters.

    Raises:
        InvalidInputError: If the result is not a two-letter code.
    """
    code = state.upper()
    if not _STATE_CODE.fullmatch(code):
        raise InvalidInputError(
            "Invalid state code. Please provide a two-letter US state code (e.g., 'CA', 'NY', 'TX')"
        )
    return code


def format_alert(feature: AlertFeature, index: int) -> str:
    props = feature.properties
    return (
        f"\nAlert {index + 1}:\n"
        f"- Event: {props.event}\n"
        f"- Severity: {props.severity}\n"
        f"- Urgency: {props.urgency}\n"
        f"- Areas: {props.area_desc}\n"
        f"- Headline: {props.headline}\n"
        f"- Description: {props.description}\n"
        f"- Instructions: {props.instruction or 'None provided'}\n"
        f"- Effective: {props.effective}\n"
        f"- Expires: {props.expires}\n"
    )


def format_alerts(state: str, features: List[AlertFeature]) -> str:
    body = ("\n" + "=" * 80 + "\n").join(format_alert(f, i) for i, f in enumerate(features))
    return f"Weather Alerts for {state}\n{'=' * 80}\n{body}"


async def get_alerts(client: NWSClient, args: AlertsArgs) -> ToolResult:
    """Fetch and format the active alerts for a state.

    Raises:
        InvalidInputError: If the state is not a two-letter code.
        RemoteServiceError: If the NWS call fails.
    """
    state = normalize_state(args.state)
    data = await client.get_alerts(state)

    if not data.features:
        logger.info("No active alerts for %s", state)
        return ToolResult.text(f"No active weather alerts for {state}")

    return ToolResult.text(format_alerts(state, data.features))
