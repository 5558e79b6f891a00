from typing import List
from uuid import UUID
from sqlalchemy.orm import Session
import logging

from course_planner.core.exceptions import NotFoundException, BadRequestException
from course_planner.models.location import Campus, Building, Room
from course_planner.repositories.room import room_repository, campus_repository, building_repository
from course_planner.schemas.room import (
    RoomResponse, RoomAdminResponse, CampusResponse, CreateRoomRequest, UpdateRoomRequest,
)

logger = logging.getLogger(__name__)


def to_room_response(room: Room) -> RoomResponse:
    return RoomResponse(
        id=room.id,
        campus=room.building.campus.name,
        name=room.display_name,
        capacity=room.capacity,
    )


class LocationService:
    """Manages rooms, buildings and campuses."""

    def __init__(self):
        self.room_repo = room_repository
        self.campus_repo = campus_repository
        self.building_repo = building_repository

    async def get_room_list(self, db: Session) -> List[RoomResponse]:
        return [to_room_response(room) for room in self.room_repo.get_listing(db)]

    async def get_full_room_list(self, db: Session) -> List[RoomAdminResponse]:
        return [RoomAdminResponse.model_validate(room) for room in self.room_repo.get_admin_listing(db)]

    async def get_campus_metadata(self, db: Session) -> List[CampusResponse]:
        return [CampusResponse.model_validate(campus) for campus in self.campus_repo.get_with_buildings(db)]

    async def create_room(self, db: Session, request: CreateRoomRequest) -> RoomAdminResponse:
        campus = self._get_campus(db, request.campus)
        self._validate_room(db, campus, request)

        room = Room(
            name=request.name,
            capacity=request.capacity,
            building=self._get_or_build_building(db, campus, request.building),
        )
        try:
            db.add(room)
            db.commit()
            db.refresh(room)
        except Exception as e:
            db.rollback()
            logger.error(f"Error creating room {request.building} {request.name}: {e}")
            raise

        logger.info("Created room %s in %s", room.display_name, campus.name)
        return RoomAdminResponse.model_validate(room)

    async def update_room(self, db: Session, room_id: UUID, request: UpdateRoomRequest) -> RoomAdminResponse:
        room = self.room_repo.get(db, room_id)
        if room is None:
            raise NotFoundException(f"Room with id {room_id} not found")

        campus = self._get_campus(db, request.campus)
        self._validate_room(db, campus, request, exclude_id=room.id)

        try:
            room.name = request.name
            room.capacity = request.capacity
            room.building = self._get_or_build_building(db, campus, request.building)
            db.commit()
            db.refresh(room)
        except Exception as e:
            db.rollback()
            logger.error(f"Error updating room {room_id}: {e}")
            raise

        return RoomAdminResponse.model_validate(room)

    def _get_campus(self, db: Session, name: str) -> Campus:
        campus = self.campus_repo.get_by_field(db, "name", name)
        if campus is None:
            raise NotFoundException(f'Unable to find a campus called "{name}".')
        return campus

    def _validate_room(self, db: Session, campus: Campus, request: CreateRoomRequest, exclude_id: UUID = None) -> None:
        # A building cannot span campuses
        if self.building_repo.find_on_other_campuses(db, request.building, campus.id):
            raise BadRequestException(f"{request.building} already exists within another campus.")

        duplicates = self.room_repo.find_by_display_name(
            db, f"{request.building} {request.name}", exclude_id=exclude_id
        )
        if duplicates:
            raise BadRequestException(f"The room {request.name} already exists in {request.building}.")

    def _get_or_build_building(self, db: Session, campus: Campus, name: str) -> Building:
        building = self.building_repo.find_by_name(db, name)
        if building is None:
            building = Building(name=name, campus=campus)
        return building


location_service = LocationService()
