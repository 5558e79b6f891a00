from typing import List, Optional, Tuple, Union
from uuid import UUID
from sqlalchemy.orm import Session
import logging

from course_planner.core.exceptions import NotFoundException, RoomConflictException
from course_planner.models.academic import CourseInstance, NonClassEvent
from course_planner.models.location import Room
from course_planner.models.meeting import Meeting, MeetingParent, ParentKind
from course_planner.repositories.meeting import (
    meeting_repository, course_instance_repository, non_class_event_repository,
)
from course_planner.repositories.room import room_repository
from course_planner.schemas.booking import RoomBookingQuery
from course_planner.schemas.meeting import MeetingRequest, MeetingResponse
from course_planner.services.availability import room_availability_service
from course_planner.services.room import to_room_response

logger = logging.getLogger(__name__)

Parent = Union[CourseInstance, NonClassEvent]


class MeetingService:
    """Saves the meetings of a course instance or non-class event."""

    def __init__(self, availability_service=None):
        self.meeting_repo = meeting_repository
        self.course_instance_repo = course_instance_repository
        self.non_class_event_repo = non_class_event_repository
        self.room_repo = room_repository
        self.availability_service = availability_service or room_availability_service

    async def save_meetings(self, db: Session, parent_id: UUID, meetings: List[MeetingRequest]) -> List[MeetingResponse]:
        """Replace the parent's meetings with `meetings`.

        Every requested room is checked against the stored bookings of other
        parents before anything is written; one conflict aborts the whole save.
        Meetings missing from the request are deleted.
        """
        parent, kind = self._get_parent(db, parent_id)
        existing = {meeting.id: meeting for meeting in parent.meetings}

        validated = []
        for request in meetings:
            meeting = self._get_existing(existing, request.id)
            room = await self._check_room(db, parent, request)
            validated.append((request, meeting, room))

        try:
            saved = []
            for request, meeting, room in validated:
                meeting = meeting or Meeting()
                meeting.day = request.day
                meeting.start_time = request.start_time
                meeting.end_time = request.end_time
                meeting.parent = MeetingParent(kind, parent.id)
                meeting.room = room
                saved.append(meeting)

            parent.meetings = saved
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(f"Error saving meetings for {kind.value} {parent_id}: {e}")
            raise

        logger.info("Saved %d meetings for %s %s", len(saved), kind.value, parent_id)
        return [self._to_response(m) for m in self.meeting_repo.get_for_parent(db, parent.id)]

    def _get_parent(self, db: Session, parent_id: UUID) -> Tuple[Parent, ParentKind]:
        parent = self.course_instance_repo.get(db, parent_id)
        if parent is not None:
            return parent, ParentKind.COURSE_INSTANCE

        parent = self.non_class_event_repo.get(db, parent_id)
        if parent is not None:
            return parent, ParentKind.NON_CLASS_EVENT

        raise NotFoundException(f"Course Instance or Non-Class Event with id {parent_id} not found")

    def _get_existing(self, existing: dict, meeting_id: Optional[UUID]) -> Optional[Meeting]:
        if meeting_id is None:
            return None
        meeting = existing.get(meeting_id)
        if meeting is None:
            raise NotFoundException(f"Meeting with id {meeting_id} not found")
        return meeting

    async def _check_room(self, db: Session, parent: Parent, request: MeetingRequest) -> Optional[Room]:
        # Meetings without a room are allowed and skip the availability check
        if request.room_id is None:
            return None

        room = self.room_repo.get(db, request.room_id)
        if room is None:
            raise NotFoundException(f"Room with id {request.room_id} not found")

        bookings = await self.availability_service.check_room_bookings(
            db,
            RoomBookingQuery(
                room_id=room.id,
                calendar_year=parent.semester.calendar_year,
                term=parent.semester.term,
                day=request.day,
                start_time=request.start_time,
                end_time=request.end_time,
                exclude_parent=parent.id,
            ),
        )
        if bookings and bookings[0].meeting_titles:
            logger.info(
                "Room %s is booked on %s %s-%s by %s",
                bookings[0].room_name, request.day.value, request.start_time,
                request.end_time, bookings[0].meeting_titles,
            )
            raise RoomConflictException(
                request.day.value, request.start_time, request.end_time, bookings[0].meeting_titles
            )
        return room

    def _to_response(self, meeting: Meeting) -> MeetingResponse:
        return MeetingResponse(
            id=meeting.id,
            day=meeting.day,
            start_time=meeting.start_time,
            end_time=meeting.end_time,
            room=to_room_response(meeting.room) if meeting.room else None,
        )


meeting_service = MeetingService()
