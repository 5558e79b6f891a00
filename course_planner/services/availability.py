from typing import Dict, List
from uuid import UUID
from sqlalchemy.orm import Session
import logging

from course_planner.repositories.booking import booking_repository
from course_planner.schemas.booking import RoomBookingQuery, RoomBooking, TimeWindow
from course_planner.schemas.room import RoomAvailabilityResponse

logger = logging.getLogger(__name__)


class RoomAvailabilityService:
    """Answers which rooms are booked, and by what, during a weekday time window.

    Stateless: every call re-reads the current meetings. Two concurrent saves can
    both see a room as free; nothing here reserves or locks a slot.
    """

    def __init__(self, booking_repo=None):
        self.booking_repo = booking_repo or booking_repository

    async def check_room_bookings(self, db: Session, query: RoomBookingQuery) -> List[RoomBooking]:
        """Conflicting bookings for one room. An empty list means the room is free."""
        rows = self.booking_repo.find_conflicts(db, query, query.room_id)

        bookings: Dict[UUID, RoomBooking] = {}
        for row in rows:
            booking = bookings.get(row.room_id)
            if booking is None:
                booking = bookings[row.room_id] = RoomBooking(
                    room_id=row.room_id,
                    room_name=row.room_name,
                    meeting_titles=[],
                )
            booking.meeting_titles.append(row.meeting_title)

        logger.debug(
            "Room %s on %s %s-%s (%s %s): %d conflicting bookings",
            query.room_id, query.day.value, query.start_time, query.end_time,
            query.term.value, query.calendar_year, len(rows),
        )
        return list(bookings.values())

    async def list_rooms_with_availability(self, db: Session, window: TimeWindow) -> List[RoomAvailabilityResponse]:
        """Every room, in campus/name order, with the titles of meetings overlapping the window."""
        rows = self.booking_repo.find_room_availability(db, window)

        # dict keeps the campus/name order of the query
        rooms: Dict[UUID, RoomAvailabilityResponse] = {}
        for row in rows:
            room = rooms.get(row.id)
            if room is None:
                room = rooms[row.id] = RoomAvailabilityResponse(
                    id=row.id,
                    campus=row.campus,
                    name=row.name,
                    capacity=row.capacity,
                    meeting_titles=[],
                )
            # Rooms without bookings come back from the outer join with a NULL title
            if row.meeting_title is not None:
                room.meeting_titles.append(row.meeting_title)

        return list(rooms.values())


room_availability_service = RoomAvailabilityService()
