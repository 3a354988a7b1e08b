"""Daily mission rules that are independent from HTTP and DB.

Rule of thumb:
- OK: freshness checks, key validation, parsing agent payloads.
- Not OK: touching DB sessions, aiohttp, FastAPI, time.time(), etc.
"""

import json
from typing import Any, List

from pydantic import ValidationError

from daily_mission.exceptions import FetchError
from daily_mission.models.dc_models import AgentMessageModel

DEFAULT_MISSION = "Default mission: Play 3 minigames today!"

# 24 hours
FRESHNESS_WINDOW_MS = 24 * 60 * 60 * 1000

MISSION_PROMPT = "Give me a daily mission for my beast"
AGENT_USER_ID = "user"
AGENT_USER_NAME = "User"


def is_valid_player_address(player_address: Any) -> bool:
    """Only non-empty strings can be used as a cache key."""
    return isinstance(player_address, str) and player_address != ""


def is_fresh(timestamp: int, now_ms: int, freshness_window_ms: int = FRESHNESS_WINDOW_MS) -> bool:
    """Return True while the record is younger than the freshness window.

    Args:
        timestamp (int): Creation time of the record in ms since epoch
        now_ms (int): Current time in ms since epoch
        freshness_window_ms (int, optional): Defaults to 24 hours.
    """
    return now_ms - timestamp < freshness_window_ms


def parse_agent_messages(raw_body: bytes | str) -> List[Any]:
    """Decode the agent response body. An empty body is an empty list."""
    if not raw_body:
        return []
    try:
        if isinstance(raw_body, bytes):
            raw_body = raw_body.decode("utf-8")
        return json.loads(raw_body)
    except ValueError as e:  # UnicodeDecodeError is a ValueError
        raise FetchError("unparseable body") from e


def extract_first_text(messages: Any, not_found: str = "no mission found") -> str:
    """Return the text of the first agent message.

    Raises:
        FetchError: The payload is not a list, is empty, or the first
            message carries no text.
    """
    if not isinstance(messages, list) or not messages:
        raise FetchError(not_found)

    first = messages[0]
    if not isinstance(first, dict):
        raise FetchError(not_found)
    try:
        message = AgentMessageModel.model_validate(first)
    except ValidationError as e:
        raise FetchError(not_found) from e

    if not message.text:
        raise FetchError(not_found)
    return message.text
