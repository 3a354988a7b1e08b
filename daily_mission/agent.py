import asyncio
import logging
from typing import Any

import aiohttp

from daily_mission.domain.mission_rules import (
    AGENT_USER_ID,
    AGENT_USER_NAME,
    MISSION_PROMPT,
    extract_first_text,
    parse_agent_messages,
)
from daily_mission.exceptions import FetchError
from daily_mission.models.dc_models import AgentRequestModel


async def post_agent_message(url: str, payload: AgentRequestModel, session: aiohttp.ClientSession | None = None) -> Any:
    """POST one message to an agent endpoint and return the decoded body.

    Args:
        url (str): Agent endpoint
        payload (AgentRequestModel): Request body sent as JSON
        session (aiohttp.ClientSession, optional): Reused when given, otherwise
            a session is opened for this request only.

    Raises:
        FetchError: Transport failure, non-ok status or unparseable body
    """
    if session is None:
        async with aiohttp.ClientSession() as own_session:
            return await post_agent_message(url, payload, own_session)

    try:
        async with session.post(
            url,
            json=payload.model_dump(),
            headers={"Content-Type": "application/json"},
        ) as resp:
            if not 200 <= resp.status < 300:
                raise FetchError("non-ok status")
            raw_body = await resp.read()
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        raise FetchError(f"request to agent failed: {e}") from e

    return parse_agent_messages(raw_body)


class RemoteMissionFetcher:
    """Asks the mission agent for today's mission. One request per call, no retry."""

    def __init__(self, url: str, session: aiohttp.ClientSession | None = None):
        self.url: str = url
        self.session: aiohttp.ClientSession | None = session

    async def fetch_mission(self) -> str:
        if not self.url:
            raise FetchError("mission agent url is not configured")

        payload = AgentRequestModel(text=MISSION_PROMPT, userId=AGENT_USER_ID, userName=AGENT_USER_NAME)
        messages = await post_agent_message(self.url, payload, self.session)
        mission = extract_first_text(messages)
        logging.debug(f"Fetched mission from agent: {mission}")
        return mission
