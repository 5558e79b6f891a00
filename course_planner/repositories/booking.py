from typing import List, Optional
from uuid import UUID
from sqlalchemy import select, func, case, and_
from sqlalchemy.orm import Session
from sqlalchemy.sql import Select

from course_planner.models.academic import Semester, Course, CourseInstance, NonClassParent, NonClassEvent
from course_planner.models.location import Campus, Building, Room
from course_planner.models.meeting import Meeting
from course_planner.schemas.booking import BookingRecord, TimeWindow


def overlaps(start_column, end_column, start_time, end_time):
    """Half-open overlap test: [a1, a2) and [b1, b2) overlap iff a1 < b2 and b1 < a2.

    Intervals that only touch (one ends exactly when the other starts) do not overlap.
    """
    return and_(start_column < end_time, end_column > start_time)


class BookingRepository:
    """Read model joining every meeting to its room, semester and display title.

    Built fresh on every query, never cached.
    """

    def index(self) -> Select:
        course_title = Course.prefix + " " + Course.number
        return (
            select(
                Meeting.id.label("meeting_id"),
                Room.id.label("room_id"),
                (Building.name + " " + Room.name).label("room_name"),
                Semester.term.label("term"),
                Semester.calendar_year.label("calendar_year"),
                Meeting.day.label("day"),
                Meeting.start_time.label("start_time"),
                Meeting.end_time.label("end_time"),
                func.coalesce(Meeting.course_instance_id, Meeting.non_class_event_id).label("parent_id"),
                case(
                    (Meeting.course_instance_id.isnot(None), course_title),
                    else_=NonClassParent.title,
                ).label("meeting_title"),
            )
            .select_from(Meeting)
            .outerjoin(Room, Room.id == Meeting.room_id)
            .outerjoin(Building, Building.id == Room.building_id)
            .outerjoin(CourseInstance, CourseInstance.id == Meeting.course_instance_id)
            .outerjoin(Course, Course.id == CourseInstance.course_id)
            .outerjoin(NonClassEvent, NonClassEvent.id == Meeting.non_class_event_id)
            .outerjoin(NonClassParent, NonClassParent.id == NonClassEvent.non_class_parent_id)
            .outerjoin(
                Semester,
                Semester.id == func.coalesce(CourseInstance.semester_id, NonClassEvent.semester_id),
            )
        )

    def get_all(self, db: Session) -> List[BookingRecord]:
        rows = db.execute(self.index()).mappings().all()
        return [BookingRecord.model_validate(dict(row)) for row in rows]

    def overlapping(self, window: TimeWindow, room_id: Optional[UUID] = None):
        """Subquery of bookings in the window's semester and day whose times overlap it."""
        b = self.index().subquery("b")
        query = select(b.c.room_id, b.c.room_name, b.c.meeting_title).where(
            b.c.calendar_year == window.calendar_year,
            b.c.term == window.term,
            b.c.day == window.day,
            overlaps(b.c.start_time, b.c.end_time, window.start_time, window.end_time),
        )
        if room_id is not None:
            query = query.where(b.c.room_id == room_id)
        if window.exclude_parent is not None:
            query = query.where(b.c.parent_id != window.exclude_parent)
        return query.subquery("overlapping")

    def find_conflicts(self, db: Session, window: TimeWindow, room_id: UUID):
        o = self.overlapping(window, room_id=room_id)
        return db.execute(
            select(o.c.room_id, o.c.room_name, o.c.meeting_title)
        ).all()

    def find_room_availability(self, db: Session, window: TimeWindow):
        """Every room left-joined to its overlapping bookings, ordered by campus then name.

        Rooms with no conflicts appear once with a NULL meeting title.
        """
        o = self.overlapping(window)
        room_name = Building.name + " " + Room.name
        return db.execute(
            select(
                Room.id.label("id"),
                Campus.name.label("campus"),
                room_name.label("name"),
                Room.capacity.label("capacity"),
                o.c.meeting_title,
            )
            .select_from(Room)
            .join(Building, Building.id == Room.building_id)
            .join(Campus, Campus.id == Building.campus_id)
            .outerjoin(o, o.c.room_id == Room.id)
            .order_by(Campus.name.asc(), room_name.asc(), Room.id)
        ).all()


booking_repository = BookingRepository()
