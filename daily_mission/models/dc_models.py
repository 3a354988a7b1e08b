from pydantic import BaseModel
from enum import Enum
from typing import Optional


class ChatAgent(str, Enum):
    Solarius = "Solarius"
    Foxling = "Foxling"
    WolfPup = "WolfPup"


class AgentRequestModel(BaseModel):
    text: str
    userId: str
    userName: str


class AgentMessageModel(BaseModel):
    user: Optional[str] = None
    text: Optional[str] = None
    action: Optional[str] = None


class DailyMissionModel(BaseModel):
    player_address: str
    mission: str


class ChatRequestModel(BaseModel):
    message: str
    user_id: str
    beast_type: Optional[str] = None


class ChatResponseModel(BaseModel):
    agent: ChatAgent
    text: str
