from datetime import time
from typing import Optional
from uuid import UUID
from fastapi import Query
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from course_planner.models.academic import Term
from course_planner.models.meeting import Day
from course_planner.schemas.booking import TimeWindow


def get_time_window(
    calendar_year: int = Query(..., alias="calendarYear", description="Calendar year, e.g. 2020"),
    term: Term = Query(..., description="FALL or SPRING"),
    day: Day = Query(..., description="Weekday, MON to FRI"),
    start_time: time = Query(..., alias="startTime", description="HH:MM:SS"),
    end_time: time = Query(..., alias="endTime", description="HH:MM:SS"),
    exclude_parent: Optional[UUID] = Query(
        None, alias="excludeParent",
        description="Ignore meetings of this course instance or non-class event",
    ),
) -> TimeWindow:
    try:
        return TimeWindow(
            calendar_year=calendar_year,
            term=term,
            day=day,
            start_time=start_time,
            end_time=end_time,
            exclude_parent=exclude_parent,
        )
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False))
