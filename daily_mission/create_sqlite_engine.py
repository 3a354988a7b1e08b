from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from daily_mission.load_secrets import mission_db_url


def create_mission_engine(url: str = mission_db_url) -> AsyncEngine:
    return create_async_engine(url=url, echo=False)


engine = create_mission_engine()
