from typing import List
from uuid import UUID
from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload

from course_planner.models.academic import CourseInstance, NonClassEvent
from course_planner.models.location import Building, Room
from course_planner.models.meeting import Meeting
from course_planner.repositories.base import BaseRepository


class MeetingRepository(BaseRepository[Meeting]):
    def __init__(self):
        super().__init__(Meeting)

    def get_for_parent(self, db: Session, parent_id: UUID) -> List[Meeting]:
        """Meetings of a parent ordered by weekday, start time, end time."""
        meetings = (
            db.query(Meeting)
            .options(joinedload(Meeting.room).joinedload(Room.building).joinedload(Building.campus))
            .filter(or_(
                Meeting.course_instance_id == parent_id,
                Meeting.non_class_event_id == parent_id,
            ))
            .all()
        )
        return sorted(meetings, key=lambda m: (m.day.position, m.start_time, m.end_time))


class CourseInstanceRepository(BaseRepository[CourseInstance]):
    def __init__(self):
        super().__init__(CourseInstance)


class NonClassEventRepository(BaseRepository[NonClassEvent]):
    def __init__(self):
        super().__init__(NonClassEvent)


meeting_repository = MeetingRepository()
course_instance_repository = CourseInstanceRepository()
non_class_event_repository = NonClassEventRepository()
