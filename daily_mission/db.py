from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from daily_mission.create_sqlite_engine import engine


def create_session_factory(bind: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(
        autocommit=False,
        class_=AsyncSession,
        autoflush=True,
        expire_on_commit=False,
        bind=bind,
    )


# Centralized session factory to avoid creating it in router modules.
Session = create_session_factory(engine)
