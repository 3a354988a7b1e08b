import logging
import random

import aiohttp

from daily_mission.agent import post_agent_message
from daily_mission.domain.mission_rules import AGENT_USER_NAME, extract_first_text
from daily_mission.exceptions import FetchError
from daily_mission.load_secrets import chat_api_base_url
from daily_mission.models.dc_models import AgentRequestModel, ChatAgent

FALLBACK_RESPONSES = [
    "Sorry, I'm having connection trouble. Can you try again?",
    "Sorry, I couldn't process your message right now.",
    "Oops! Something went wrong. Could you repeat your question?",
]

AGENT_MAP = {
    "wolf": ChatAgent.WolfPup,
    "dragon": ChatAgent.Solarius,
    "snake": ChatAgent.Foxling,
}


class ChatService:
    """Relays a player's message to the chat agent of their beast."""

    def __init__(self, base_url: str = chat_api_base_url, session: aiohttp.ClientSession | None = None):
        self.base_url: str = base_url.rstrip("/")
        self.session: aiohttp.ClientSession | None = session

    async def send_message(self, message: str, user_id: str, agent: ChatAgent) -> str:
        """Send a message and return the agent's reply

        Args:
            message (str): Player's message
            user_id (str): Identifies the player on the agent side
            agent (ChatAgent): Agent to talk to

        Returns:
            str: Agent reply, or one of FALLBACK_RESPONSES on any failure
        """
        url = f"{self.base_url}/{ChatAgent(agent).value}/message"
        payload = AgentRequestModel(text=message, userId=user_id, userName=AGENT_USER_NAME)
        try:
            messages = await post_agent_message(url, payload, self.session)
            return extract_first_text(messages, not_found="no reply found")
        except FetchError as e:
            logging.error(f"Chat API error: {e}")
            return random.choice(FALLBACK_RESPONSES)

    @staticmethod
    def get_agent_for_beast_type(beast_type: str | None = None) -> ChatAgent:
        if not beast_type:
            return ChatAgent.Solarius
        return AGENT_MAP.get(beast_type.lower(), ChatAgent.Solarius)
