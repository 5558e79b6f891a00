from typing import List, Optional
from uuid import UUID
from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload, selectinload

from course_planner.models.location import Campus, Building, Room
from course_planner.repositories.base import BaseRepository


class RoomRepository(BaseRepository[Room]):
    def __init__(self):
        super().__init__(Room)

    def get_listing(self, db: Session) -> List[Room]:
        """All rooms with building and campus loaded, ordered by campus then display name"""
        return (
            db.query(Room)
            .join(Building, Building.id == Room.building_id)
            .join(Campus, Campus.id == Building.campus_id)
            .options(joinedload(Room.building).joinedload(Building.campus))
            .order_by(Campus.name, Building.name + " " + Room.name)
            .all()
        )

    def get_admin_listing(self, db: Session) -> List[Room]:
        return (
            db.query(Room)
            .join(Building, Building.id == Room.building_id)
            .join(Campus, Campus.id == Building.campus_id)
            .options(joinedload(Room.building).joinedload(Building.campus))
            .order_by(Campus.name, Building.name, Room.name)
            .all()
        )

    def find_by_display_name(self, db: Session, display_name: str, exclude_id: Optional[UUID] = None) -> List[Room]:
        """Case-insensitive match on "<building> <room>"."""
        query = (
            db.query(Room)
            .join(Building, Building.id == Room.building_id)
            .filter(func.lower(Building.name + " " + Room.name) == display_name.lower())
        )
        if exclude_id is not None:
            query = query.filter(Room.id != exclude_id)
        return query.all()


class CampusRepository(BaseRepository[Campus]):
    def __init__(self):
        super().__init__(Campus)

    def get_with_buildings(self, db: Session) -> List[Campus]:
        return (
            db.query(Campus)
            .options(selectinload(Campus.buildings).selectinload(Building.rooms))
            .order_by(Campus.name)
            .all()
        )


class BuildingRepository(BaseRepository[Building]):
    def __init__(self):
        super().__init__(Building)

    def find_on_other_campuses(self, db: Session, name: str, campus_id: UUID) -> List[Building]:
        return (
            db.query(Building)
            .filter(func.lower(Building.name) == name.lower())
            .filter(Building.campus_id != campus_id)
            .all()
        )

    def find_by_name(self, db: Session, name: str) -> Optional[Building]:
        return db.query(Building).filter(func.lower(Building.name) == name.lower()).first()


room_repository = RoomRepository()
campus_repository = CampusRepository()
building_repository = BuildingRepository()
