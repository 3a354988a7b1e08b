from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.schema import Column
from sqlalchemy.types import BigInteger, String, Uuid, TEXT
from uuid6 import uuid7


class Base(DeclarativeBase):
    pass


class DailyMission(Base):
    __tablename__ = "daily_missions"
    mission_id = Column(Uuid, primary_key=True, default=uuid7)
    player_address = Column(String, index=True, nullable=False)
    mission = Column(TEXT, nullable=False)
    timestamp = Column(BigInteger, nullable=False)  # ms since epoch
