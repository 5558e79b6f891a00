from .location import Campus, Building, Room
from .academic import Semester, Term, Course, CourseInstance, NonClassParent, NonClassEvent
from .meeting import Meeting, Day, MeetingParent, ParentKind
