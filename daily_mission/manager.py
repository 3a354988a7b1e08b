import argparse
import asyncio
import logging
import time
from asyncio import Lock, Task
from typing import Any, Callable, Dict

from daily_mission.agent import RemoteMissionFetcher
from daily_mission.create_sqlite_engine import engine
from daily_mission.db import Session
from daily_mission.domain.mission_rules import (
    DEFAULT_MISSION,
    FRESHNESS_WINDOW_MS,
    is_fresh,
    is_valid_player_address,
)
from daily_mission.exceptions import FetchError, StorageError
from daily_mission.load_secrets import freshness_window_ms, mission_agent_url
from daily_mission.models.schema_models import MissionRecordSchema
from daily_mission.services.mission_db import PersistentMissionStore


def current_time_ms() -> int:
    return int(time.time() * 1000)


class MissionCacheManager:
    def __init__(
        self,
        store: PersistentMissionStore,
        fetcher: RemoteMissionFetcher,
        freshness_window_ms: int = FRESHNESS_WINDOW_MS,
        now_ms: Callable[[], int] = current_time_ms,
    ):
        self.store = store
        self.fetcher = fetcher
        self.freshness_window_ms = freshness_window_ms
        self.now_ms = now_ms
        self.in_flight: Dict[str, Task] = {}  # one pending lookup per player_address
        self.lock = Lock()  # protects in_flight

    async def get_daily_mission(self, player_address: Any) -> str:
        """Return today's mission of the player. Never raises.

        Concurrent calls for the same player_address share a single lookup, so
        the agent is asked at most once and at most one row is written.

        Args:
            player_address (Any): Wallet address of the player

        Returns:
            str: Cached or freshly fetched mission, DEFAULT_MISSION on any failure
        """
        if not is_valid_player_address(player_address):
            logging.error(f"Invalid player address: {player_address!r}")
            return DEFAULT_MISSION

        try:
            async with self.lock:
                task = self.in_flight.get(player_address)
                if task is None:
                    task = asyncio.create_task(self._resolve_mission(player_address))
                    self.in_flight[player_address] = task
                    task.add_done_callback(lambda done: self._clear_in_flight(player_address, done))
            return await asyncio.shield(task)
        except Exception:
            logging.exception(f"Error in get_daily_mission for {player_address}")
            return DEFAULT_MISSION

    def _clear_in_flight(self, player_address: str, done: Task) -> None:
        if self.in_flight.get(player_address) is done:
            del self.in_flight[player_address]

    async def _resolve_mission(self, player_address: str) -> str:
        try:
            record = await self.store.find_latest(player_address)
        except StorageError as e:
            logging.error(f"Failed to read cached mission, fetching instead: {e}")
            record = None

        if record is not None and is_fresh(record.timestamp, self.now_ms(), self.freshness_window_ms):
            logging.debug(f"Cache hit for {player_address}")
            return record.mission
        logging.debug(f"Cache miss for {player_address}")

        try:
            new_mission = await self.fetcher.fetch_mission()
        except FetchError as e:
            logging.error(f"Error fetching daily mission: {e}")
            return DEFAULT_MISSION
        if not new_mission:
            logging.error("Agent returned an empty mission")
            return DEFAULT_MISSION

        # A mission that could not be cached is discarded.
        try:
            await self.store.replace(
                MissionRecordSchema(
                    player_address=player_address,
                    mission=new_mission,
                    timestamp=self.now_ms(),
                )
            )
        except StorageError as e:
            logging.error(f"Failed to store daily mission: {e}")
            return DEFAULT_MISSION

        return new_mission


def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Daily mission lookup")
    parser.add_argument("--player-address", type=str, help="Wallet address of the player", required=True)
    return parser


async def main(player_address: str):
    store = PersistentMissionStore(engine, Session)
    await store.create_tables()
    manager = MissionCacheManager(store, RemoteMissionFetcher(mission_agent_url), freshness_window_ms)
    try:
        print(await manager.get_daily_mission(player_address))
    finally:
        await store.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    parser = get_parser()
    args = parser.parse_args()
    asyncio.run(main(args.player_address))
