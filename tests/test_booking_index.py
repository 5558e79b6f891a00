from datetime import time

from course_planner.models import Day, Term
from course_planner.repositories.booking import booking_repository


def test_course_meeting_is_titled_by_catalog_number(db_session, seed):
    room = seed.room("SEC", "2121")
    instance = seed.course_instance("AC", "209a")
    meeting = seed.meeting(instance, room, Day.MON, "13:00", "15:00")

    [record] = booking_repository.get_all(db_session)

    assert record.meeting_id == meeting.id
    assert record.meeting_title == "AC 209a"
    assert record.parent_id == instance.id
    assert record.room_id == room.id
    assert record.room_name == "SEC 2121"
    assert record.calendar_year == 2020
    assert record.term == Term.FALL
    assert record.day == Day.MON
    assert record.start_time == time(13, 0)
    assert record.end_time == time(15, 0)


def test_non_class_meeting_is_titled_by_parent_title(db_session, seed):
    room = seed.room("MD", "G125")
    event = seed.non_class_event("Reading Group", calendar_year=2021, term=Term.SPRING)
    seed.meeting(event, room, Day.THU, "09:00", "10:00")

    [record] = booking_repository.get_all(db_session)

    assert record.meeting_title == "Reading Group"
    assert record.parent_id == event.id
    assert record.calendar_year == 2021
    assert record.term == Term.SPRING


def test_one_record_per_meeting_including_meetings_without_room(db_session, seed):
    room = seed.room("SEC", "2121")
    instance = seed.course_instance("CS", "50")
    seed.meeting(instance, room, Day.MON, "10:00", "11:00")
    seed.meeting(instance, room, Day.WED, "10:00", "11:00")
    seed.meeting(instance, None, Day.FRI, "10:00", "11:00")

    records = booking_repository.get_all(db_session)

    assert len(records) == 3
    roomless = [r for r in records if r.room_id is None]
    assert len(roomless) == 1
    assert roomless[0].room_name is None
    assert roomless[0].meeting_title == "CS 50"


def test_index_reflects_latest_meeting_data(db_session, seed):
    room = seed.room("SEC", "2121")
    instance = seed.course_instance("CS", "50")
    meeting = seed.meeting(instance, room, Day.MON, "10:00", "11:00")
    assert booking_repository.get_all(db_session)[0].day == Day.MON

    meeting.day = Day.TUE
    db_session.commit()

    assert booking_repository.get_all(db_session)[0].day == Day.TUE
