from dataclasses import dataclass
from sqlalchemy import Column, Time, Enum, ForeignKey, CheckConstraint, UUID
from sqlalchemy.orm import relationship
from uuid import UUID as PyUUID

from course_planner.models.base import BaseModel
import enum


class Day(enum.Enum):
    MON = "MON"
    TUE = "TUE"
    WED = "WED"
    THU = "THU"
    FRI = "FRI"

    @property
    def position(self) -> int:
        return list(Day).index(self)


class ParentKind(enum.Enum):
    COURSE_INSTANCE = "course_instance"
    NON_CLASS_EVENT = "non_class_event"


@dataclass(frozen=True)
class MeetingParent:
    """The owner of a meeting: exactly one course instance or non-class event."""
    kind: ParentKind
    id: PyUUID


class Meeting(BaseModel):
    __tablename__ = "meetings"

    day = Column(Enum(Day, values_callable=lambda obj: [e.value for e in obj],
        native_enum=True, name='day'), nullable=False)
    # Wall-clock times, no time zone
    start_time = Column(Time(timezone=False), nullable=False)
    end_time = Column(Time(timezone=False), nullable=False)

    room_id = Column(UUID(as_uuid=True), ForeignKey('rooms.id', ondelete='RESTRICT'), nullable=True)
    course_instance_id = Column(UUID(as_uuid=True), ForeignKey('course_instances.id', ondelete='CASCADE'), nullable=True)
    non_class_event_id = Column(UUID(as_uuid=True), ForeignKey('non_class_events.id', ondelete='CASCADE'), nullable=True)

    __table_args__ = (
        CheckConstraint('start_time < end_time', name='meetings_time_range_check'),
        CheckConstraint(
            '(course_instance_id IS NULL) <> (non_class_event_id IS NULL)',
            name='meetings_single_parent_check',
        ),
    )

    room = relationship("Room", back_populates="meetings")
    course_instance = relationship("CourseInstance", back_populates="meetings")
    non_class_event = relationship("NonClassEvent", back_populates="meetings")

    @property
    def parent(self) -> MeetingParent:
        if self.course_instance_id is not None:
            return MeetingParent(ParentKind.COURSE_INSTANCE, self.course_instance_id)
        if self.non_class_event_id is not None:
            return MeetingParent(ParentKind.NON_CLASS_EVENT, self.non_class_event_id)
        raise ValueError(f"Meeting {self.id} has no parent")

    @parent.setter
    def parent(self, value: MeetingParent) -> None:
        if value.kind is ParentKind.COURSE_INSTANCE:
            self.course_instance_id = value.id
            self.non_class_event_id = None
        else:
            self.non_class_event_id = value.id
            self.course_instance_id = None
