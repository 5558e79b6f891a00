from pydantic import Field, field_validator
from typing import List, Optional
from uuid import UUID

from course_planner.schemas.base import CamelModel


class RoomResponse(CamelModel):
    id: UUID
    campus: str
    name: str = Field(..., description="Building and room, e.g. 'SEC 2121'")
    capacity: Optional[int] = None


class RoomAvailabilityResponse(RoomResponse):
    meeting_titles: List[str] = Field(default_factory=list)


# --- Admin views ---

class CampusRef(CamelModel):
    id: UUID
    name: str


class BuildingRef(CamelModel):
    id: UUID
    name: str
    campus: CampusRef


class RoomAdminResponse(CamelModel):
    id: UUID
    name: str
    capacity: Optional[int] = None
    building: BuildingRef


class CampusRoom(CamelModel):
    id: UUID
    name: str
    capacity: Optional[int] = None


class CampusBuilding(CamelModel):
    id: UUID
    name: str
    rooms: List[CampusRoom] = Field(default_factory=list)


class CampusResponse(CamelModel):
    id: UUID
    name: str
    buildings: List[CampusBuilding] = Field(default_factory=list)


# --- Create / update ---

class CreateRoomRequest(CamelModel):
    campus: str = Field(..., min_length=1, max_length=100, json_schema_extra={"example": "Allston"})
    building: str = Field(..., min_length=1, max_length=100, json_schema_extra={"example": "SEC"})
    name: str = Field(..., min_length=1, max_length=100, json_schema_extra={"example": "2121"})
    capacity: Optional[int] = Field(None, ge=0)

    @field_validator('campus', 'building', 'name')
    @classmethod
    def strip_names(cls, v):
        if not v.strip():
            raise ValueError('Name cannot be empty')
        return v.strip()


class UpdateRoomRequest(CreateRoomRequest):
    pass
