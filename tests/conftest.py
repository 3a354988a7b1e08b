from __future__ import annotations

import asyncio

import pytest

from daily_mission.create_sqlite_engine import create_mission_engine
from daily_mission.services.mission_db import PersistentMissionStore

NOW_MS = 1_700_000_000_000


class FakeFetcher:
    """Stands in for RemoteMissionFetcher and counts agent calls."""

    def __init__(self, mission: str | None = "M2", error: Exception | None = None, delay: float = 0.0) -> None:
        self.mission = mission
        self.error = error
        self.delay = delay
        self.calls = 0

    async def fetch_mission(self) -> str:
        self.calls += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.mission


@pytest.fixture
async def store(tmp_path):
    engine = create_mission_engine(f"sqlite+aiosqlite:///{tmp_path / 'missions.sqlite3'}")
    mission_store = PersistentMissionStore(engine)
    await mission_store.create_tables()
    yield mission_store
    await mission_store.close()
