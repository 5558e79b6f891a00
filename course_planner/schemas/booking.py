from pydantic import Field, model_validator
from typing import List, Optional
from datetime import time
from uuid import UUID

from course_planner.models.academic import Term
from course_planner.models.meeting import Day
from course_planner.schemas.base import CamelModel


class BookingRecord(CamelModel):
    """One row of the booking index: a meeting projected onto its room and semester."""
    meeting_id: UUID
    room_id: Optional[UUID] = None
    room_name: Optional[str] = None
    term: Term
    calendar_year: int
    day: Day
    start_time: time
    end_time: time
    parent_id: UUID
    meeting_title: str


class TimeWindow(CamelModel):
    """A weekday time window within one semester"""
    calendar_year: int = Field(..., ge=1900, le=9999, json_schema_extra={"example": 2020})
    term: Term = Field(..., json_schema_extra={"example": "FALL"})
    day: Day = Field(..., json_schema_extra={"example": "MON"})
    start_time: time = Field(..., json_schema_extra={"example": "13:00:00"})
    end_time: time = Field(..., json_schema_extra={"example": "15:00:00"})
    exclude_parent: Optional[UUID] = Field(
        None, description="Course instance or non-class event whose meetings are ignored"
    )

    @model_validator(mode="after")
    def check_time_order(self):
        if self.start_time >= self.end_time:
            raise ValueError("startTime must be before endTime")
        return self


class RoomBookingQuery(TimeWindow):
    room_id: UUID


class RoomBooking(CamelModel):
    room_id: UUID
    room_name: str
    meeting_titles: List[str]
