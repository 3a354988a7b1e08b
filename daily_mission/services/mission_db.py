"""DB service layer for the daily mission cache.

- The cache manager does not touch DB sessions directly; it calls this module.
- This layer owns session/transaction boundaries.
- Any SQLAlchemy failure is re-raised as StorageError.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker

from daily_mission.crud import CreateData, DeleteData, ReadData
from daily_mission.db import create_session_factory
from daily_mission.exceptions import StorageError
from daily_mission.models.schema_models import MissionRecordSchema
from daily_mission.models.schemas import Base


class PersistentMissionStore:
    """Typed access to the daily_missions table.

    The store is opened once (``create_tables``) and shared by every call of the
    cache manager until ``close`` is awaited.
    """

    def __init__(self, engine: AsyncEngine, Session: async_sessionmaker | None = None):
        self.engine: AsyncEngine = engine
        self.Session: async_sessionmaker = Session or create_session_factory(engine)

    async def create_tables(self) -> None:
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to create mission tables: {e}") from e

    async def close(self) -> None:
        await self.engine.dispose()
        logging.info("Mission store closed")

    async def find_latest(self, player_address: str) -> MissionRecordSchema | None:
        """Return the most recently inserted mission of the player, or None."""
        try:
            async with self.Session() as session:
                return await ReadData.read_latest_mission_data(player_address, session)
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to read mission data: {e}") from e

    async def delete_all(self, player_address: str) -> int:
        try:
            async with self.Session() as session:
                async with session.begin():
                    return await DeleteData.delete_mission_data(player_address, session)
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to delete mission data: {e}") from e

    async def insert(self, record: MissionRecordSchema) -> None:
        self._check_record(record)
        try:
            async with self.Session() as session:
                async with session.begin():
                    await CreateData.add_mission_data(record, session)
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to insert mission data: {e}") from e

    async def replace(self, record: MissionRecordSchema) -> int:
        """Delete the player's previous missions and insert ``record`` in one transaction.

        Returns:
            int: Number of superseded rows
        """
        self._check_record(record)
        try:
            async with self.Session() as session:
                async with session.begin():
                    deleted = await DeleteData.delete_mission_data(record.player_address, session)
                    await CreateData.add_mission_data(record, session)
            return deleted
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to replace mission data: {e}") from e

    async def count(self, player_address: str) -> int:
        try:
            async with self.Session() as session:
                return await ReadData.count_mission_data(player_address, session)
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to count mission data: {e}") from e

    @staticmethod
    def _check_record(record: MissionRecordSchema) -> None:
        if not record.mission:
            raise StorageError("Refusing to store an empty mission")
