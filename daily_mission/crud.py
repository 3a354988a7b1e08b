"""CRUD helpers for the daily_missions table.

None of these helpers commit. The caller owns the transaction boundary
(``async with session.begin()``), so they can be combined in one transaction.
"""

from sqlalchemy import delete, desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from daily_mission.models.schema_models import MissionRecordSchema
from daily_mission.models.schemas import DailyMission


class CreateData:
    @staticmethod
    async def add_mission_data(record: MissionRecordSchema, session: AsyncSession) -> None:
        """Add a new mission row

        Args:
            record (MissionRecordSchema): Mission to be stored for the player
        """
        new_mission = DailyMission(
            player_address=record.player_address,
            mission=record.mission,
            timestamp=record.timestamp,
        )
        if record.mission_id is not None:
            new_mission.mission_id = record.mission_id
        session.add(new_mission)
        await session.flush()


class ReadData:
    @staticmethod
    async def read_latest_mission_data(player_address: str, session: AsyncSession) -> MissionRecordSchema | None:
        """Read the most recently inserted mission of the player

        Args:
            player_address (str): To identify the player

        Returns:
            MissionRecordSchema: None if the player has no mission yet
        """
        stmt = (
            select(DailyMission)
            .where(DailyMission.player_address == player_address)
            .order_by(desc(DailyMission.timestamp), desc(DailyMission.mission_id))
            .limit(1)
        )
        result = await session.execute(stmt)
        result = result.scalars().first()

        if result is None:
            return None
        return MissionRecordSchema.model_validate(result)

    @staticmethod
    async def count_mission_data(player_address: str, session: AsyncSession) -> int:
        stmt = select(DailyMission.mission_id).where(DailyMission.player_address == player_address)
        result = await session.execute(stmt)
        return len(result.scalars().all())


class DeleteData:
    @staticmethod
    async def delete_mission_data(player_address: str, session: AsyncSession) -> int:
        """Delete every mission row of the player

        Args:
            player_address (str): To identify the player

        Returns:
            int: Number of deleted rows, 0 when the player had none
        """
        stmt = delete(DailyMission).where(DailyMission.player_address == player_address)
        result = await session.execute(stmt)
        return result.rowcount or 0
