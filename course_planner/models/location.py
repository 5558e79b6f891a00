from sqlalchemy import Column, String, Integer, ForeignKey, UUID
from sqlalchemy.orm import relationship
from sqlalchemy.schema import UniqueConstraint

from course_planner.models.base import BaseModel


class Campus(BaseModel):
    __tablename__ = "campuses"

    name = Column(String(100), nullable=False, unique=True)

    buildings = relationship("Building", back_populates="campus", order_by="Building.name")


class Building(BaseModel):
    __tablename__ = "buildings"

    name = Column(String(100), nullable=False, unique=True)
    campus_id = Column(UUID(as_uuid=True), ForeignKey("campuses.id", ondelete="RESTRICT"), nullable=False)

    campus = relationship("Campus", back_populates="buildings")
    rooms = relationship("Room", back_populates="building", order_by="Room.name")


# A room's display name is "<building> <room>", e.g. "SEC 2121"
class Room(BaseModel):
    __tablename__ = "rooms"

    name = Column(String(100), nullable=False)
    capacity = Column(Integer, nullable=True)
    building_id = Column(UUID(as_uuid=True), ForeignKey("buildings.id", ondelete="RESTRICT"), nullable=False)

    __table_args__ = (
        UniqueConstraint("building_id", "name", name="uq_room_building_name"),
    )

    building = relationship("Building", back_populates="rooms")
    meetings = relationship("Meeting", back_populates="room")

    @property
    def display_name(self) -> str:
        return f"{self.building.name} {self.name}"
