from pydantic import BaseModel
from typing import Optional
from uuid import UUID


class MissionRecordSchema(BaseModel):
    player_address: str
    mission: str
    timestamp: int  # ms since epoch
    mission_id: Optional[UUID] = None

    class Config:
        from_attributes = True
