# tests/conftest.py
import os
import tempfile

# Must be set before course_planner.core.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "course_planner_test_logs"))

import pytest
from datetime import time
from unittest.mock import MagicMock
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from course_planner.models import (
    Campus, Building, Room, Semester, Term, Course, CourseInstance,
    NonClassParent, NonClassEvent, Meeting, Day, MeetingParent, ParentKind,
)
from course_planner.models.base import Base


class Seeder:
    """Builds rooms, semesters, parents and meetings in a test database."""

    def __init__(self, db: Session):
        self.db = db
        self._campuses = {}
        self._buildings = {}
        self._semesters = {}

    def room(self, building: str, name: str, capacity: int = 30, campus: str = "Allston") -> Room:
        if campus not in self._campuses:
            self._campuses[campus] = Campus(name=campus)
            self.db.add(self._campuses[campus])
        if building not in self._buildings:
            self._buildings[building] = Building(name=building, campus=self._campuses[campus])
            self.db.add(self._buildings[building])
        room = Room(name=name, capacity=capacity, building=self._buildings[building])
        self.db.add(room)
        self.db.flush()
        return room

    def semester(self, calendar_year: int = 2020, term: Term = Term.FALL) -> Semester:
        key = (calendar_year, term)
        if key not in self._semesters:
            self._semesters[key] = Semester(calendar_year=calendar_year, term=term)
            self.db.add(self._semesters[key])
            self.db.flush()
        return self._semesters[key]

    def course_instance(self, prefix: str, number: str, calendar_year: int = 2020, term: Term = Term.FALL) -> CourseInstance:
        course = Course(prefix=prefix, number=number, title=f"{prefix} {number} title")
        instance = CourseInstance(course=course, semester=self.semester(calendar_year, term))
        self.db.add(instance)
        self.db.flush()
        return instance

    def non_class_event(self, title: str, calendar_year: int = 2020, term: Term = Term.FALL) -> NonClassEvent:
        parent = NonClassParent(title=title)
        event = NonClassEvent(non_class_parent=parent, semester=self.semester(calendar_year, term))
        self.db.add(event)
        self.db.flush()
        return event

    def meeting(self, parent, room, day: Day, start: str, end: str) -> Meeting:
        kind = ParentKind.COURSE_INSTANCE if isinstance(parent, CourseInstance) else ParentKind.NON_CLASS_EVENT
        meeting = Meeting(
            day=day,
            start_time=time.fromisoformat(start),
            end_time=time.fromisoformat(end),
            room=room,
        )
        meeting.parent = MeetingParent(kind, parent.id)
        self.db.add(meeting)
        self.db.commit()
        return meeting


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    session = sessionmaker(bind=engine)()
    yield session
    session.close()


@pytest.fixture
def seed(db_session):
    return Seeder(db_session)


@pytest.fixture
def mock_db_session():
    """Fake DB session for repository-level mocks"""
    session = MagicMock(spec=Session)
    # Mock chaining query (db.query().filter()...)
    session.query.return_value.filter.return_value = session.query.return_value
    session.query.return_value.options.return_value = session.query.return_value
    session.query.return_value.join.return_value = session.query.return_value
    session.query.return_value.order_by.return_value = session.query.return_value
    return session


@pytest.fixture
def client(db_session):
    from fastapi.testclient import TestClient
    from course_planner.core.database import get_db
    from course_planner.main import app

    app.dependency_overrides[get_db] = lambda: db_session
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
