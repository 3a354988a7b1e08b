from fastapi import APIRouter, Request

from daily_mission.chat_service import ChatService
from daily_mission.manager import MissionCacheManager
from daily_mission.models.dc_models import (
    ChatRequestModel,
    ChatResponseModel,
    DailyMissionModel,
)

mission_router = APIRouter()


class MissionAPI:
    @staticmethod
    @mission_router.get("/daily_mission/{player_address}", response_model=DailyMissionModel)
    async def get_daily_mission(player_address: str, request: Request):
        manager: MissionCacheManager = request.app.state.mission_manager
        mission = await manager.get_daily_mission(player_address)
        return DailyMissionModel(player_address=player_address, mission=mission)


class ChatAPI:
    @staticmethod
    @mission_router.post("/chat", response_model=ChatResponseModel)
    async def chat(chat_request: ChatRequestModel, request: Request):
        chat_service: ChatService = request.app.state.chat_service
        agent = ChatService.get_agent_for_beast_type(chat_request.beast_type)
        text = await chat_service.send_message(chat_request.message, chat_request.user_id, agent)
        return ChatResponseModel(agent=agent, text=text)
