from sqlalchemy import Column, String, Integer, Text, Enum, ForeignKey, UUID
from sqlalchemy.orm import relationship
from sqlalchemy.schema import UniqueConstraint

from course_planner.models.base import BaseModel
import enum

# --- ENUMERATIONS ---

class Term(enum.Enum):
    FALL = "FALL"
    SPRING = "SPRING"

# --- MODELS ---

class Semester(BaseModel):
    __tablename__ = "semesters"

    # Calendar year, not academic year: FALL 2020 and SPRING 2021 are one academic year
    calendar_year = Column(Integer, nullable=False)
    term = Column(Enum(Term, values_callable=lambda obj: [e.value for e in obj],
        native_enum=True, name='term'), nullable=False)

    __table_args__ = (
        UniqueConstraint('calendar_year', 'term', name='uq_semester_year_term'),
    )


class Course(BaseModel):
    __tablename__ = "courses"

    prefix = Column(String(20), nullable=False)
    number = Column(String(20), nullable=False)
    title = Column(String(255), nullable=False)

    instances = relationship("CourseInstance", back_populates="course")


class CourseInstance(BaseModel):
    __tablename__ = "course_instances"

    course_id = Column(UUID(as_uuid=True), ForeignKey('courses.id', ondelete='CASCADE'), nullable=False)
    semester_id = Column(UUID(as_uuid=True), ForeignKey('semesters.id', ondelete='RESTRICT'), nullable=False)

    course = relationship("Course", back_populates="instances")
    semester = relationship("Semester")
    meetings = relationship(
        "Meeting",
        back_populates="course_instance",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


# Non-class parents are the course analogue for reading groups, staff meetings, etc.
class NonClassParent(BaseModel):
    __tablename__ = "non_class_parents"

    title = Column(String(255), nullable=False)
    contact_name = Column(String(255), nullable=True)
    notes = Column(Text, nullable=True)

    events = relationship("NonClassEvent", back_populates="non_class_parent", cascade="all, delete-orphan")


class NonClassEvent(BaseModel):
    __tablename__ = "non_class_events"

    non_class_parent_id = Column(UUID(as_uuid=True), ForeignKey('non_class_parents.id', ondelete='CASCADE'), nullable=False)
    semester_id = Column(UUID(as_uuid=True), ForeignKey('semesters.id', ondelete='RESTRICT'), nullable=False)

    non_class_parent = relationship("NonClassParent", back_populates="events")
    semester = relationship("Semester")
    meetings = relationship(
        "Meeting",
        back_populates="non_class_event",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
