from pydantic import Field, model_validator
from typing import List, Optional
from datetime import time
from uuid import UUID

from course_planner.models.meeting import Day
from course_planner.schemas.base import CamelModel
from course_planner.schemas.room import RoomResponse


class MeetingRequest(CamelModel):
    id: Optional[UUID] = None
    day: Day
    start_time: time = Field(..., json_schema_extra={"example": "12:00:00"})
    end_time: time = Field(..., json_schema_extra={"example": "13:30:00"})
    room_id: Optional[UUID] = None

    @model_validator(mode="after")
    def check_time_order(self):
        if self.start_time >= self.end_time:
            raise ValueError("startTime must be before endTime")
        return self


class MeetingSaveRequest(CamelModel):
    """Full list of meetings for a parent; meetings left out are removed."""
    meetings: List[MeetingRequest] = Field(default_factory=list)


class MeetingResponse(CamelModel):
    id: UUID
    day: Day
    start_time: time
    end_time: time
    room: Optional[RoomResponse] = None
