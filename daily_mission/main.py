import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from daily_mission.agent import RemoteMissionFetcher
from daily_mission.chat_service import ChatService
from daily_mission.create_sqlite_engine import engine
from daily_mission.db import Session
from daily_mission.load_secrets import chat_api_base_url, freshness_window_ms, mission_agent_url
from daily_mission.manager import MissionCacheManager
from daily_mission.routers import mission
from daily_mission.services.mission_db import PersistentMissionStore

logging.basicConfig(level=logging.INFO)


@asynccontextmanager
async def lifespan(app):
    """Open the mission store once and share it with every request.
    This function is called to start the server.
    """
    store = PersistentMissionStore(engine, Session)
    await store.create_tables()
    if not mission_agent_url:
        logging.warning("MISSION_AGENT_URL is not set, every mission will be the default one")

    app.state.mission_manager = MissionCacheManager(
        store, RemoteMissionFetcher(mission_agent_url), freshness_window_ms
    )
    app.state.chat_service = ChatService(chat_api_base_url)
    try:
        yield
    finally:
        await store.close()
        logging.info("Stop Server")


app = FastAPI(lifespan=lifespan)
app.include_router(mission.mission_router)
