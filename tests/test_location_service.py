from uuid import uuid4
import pytest

from course_planner.core.exceptions import NotFoundException, BadRequestException
from course_planner.models import Building, Campus
from course_planner.schemas.room import CreateRoomRequest, UpdateRoomRequest
from course_planner.services.room import location_service


@pytest.fixture
def campuses(db_session, seed):
    seed.room("SEC", "2121", campus="Allston")
    seed.room("MD", "G125", campus="Cambridge")
    db_session.commit()


@pytest.mark.asyncio
async def test_room_list_uses_building_and_room_name(db_session, campuses):
    rooms = await location_service.get_room_list(db_session)

    assert [(r.campus, r.name) for r in rooms] == [("Allston", "SEC 2121"), ("Cambridge", "MD G125")]


@pytest.mark.asyncio
async def test_create_room_in_existing_building(db_session, campuses):
    created = await location_service.create_room(
        db_session, CreateRoomRequest(campus="Allston", building="SEC", name="1.321", capacity=40)
    )

    assert created.name == "1.321"
    assert created.capacity == 40
    assert created.building.name == "SEC"
    assert created.building.campus.name == "Allston"
    assert db_session.query(Building).count() == 2


@pytest.mark.asyncio
async def test_create_room_creates_missing_building(db_session, campuses):
    created = await location_service.create_room(
        db_session, CreateRoomRequest(campus="Cambridge", building="Pierce", name="301")
    )

    assert created.building.name == "Pierce"
    assert created.building.campus.name == "Cambridge"
    assert db_session.query(Building).filter(Building.name == "Pierce").count() == 1


@pytest.mark.asyncio
async def test_create_room_on_unknown_campus(db_session, campuses):
    with pytest.raises(NotFoundException) as exc_info:
        await location_service.create_room(
            db_session, CreateRoomRequest(campus="Longwood", building="SEC", name="318a")
        )
    assert exc_info.value.detail == 'Unable to find a campus called "Longwood".'


@pytest.mark.asyncio
async def test_building_cannot_move_to_another_campus(db_session, campuses):
    with pytest.raises(BadRequestException) as exc_info:
        await location_service.create_room(
            db_session, CreateRoomRequest(campus="Cambridge", building="sec", name="100")
        )
    assert exc_info.value.detail == "sec already exists within another campus."


@pytest.mark.asyncio
async def test_duplicate_room_is_rejected_case_insensitively(db_session, campuses):
    with pytest.raises(BadRequestException) as exc_info:
        await location_service.create_room(
            db_session, CreateRoomRequest(campus="Cambridge", building="MD", name="g125")
        )
    assert exc_info.value.detail == "The room g125 already exists in MD."


@pytest.mark.asyncio
async def test_update_room(db_session, seed, campuses):
    room = seed.room("SEC", "1.413", capacity=10)
    db_session.commit()

    updated = await location_service.update_room(
        db_session, room.id, UpdateRoomRequest(campus="Allston", building="SEC", name="1.413", capacity=25)
    )

    assert updated.id == room.id
    assert updated.capacity == 25


@pytest.mark.asyncio
async def test_update_room_cannot_take_another_rooms_name(db_session, seed, campuses):
    room = seed.room("SEC", "1.413")
    db_session.commit()

    with pytest.raises(BadRequestException):
        await location_service.update_room(
            db_session, room.id, UpdateRoomRequest(campus="Allston", building="SEC", name="2121")
        )


@pytest.mark.asyncio
async def test_update_missing_room(db_session, campuses):
    with pytest.raises(NotFoundException):
        await location_service.update_room(
            db_session, uuid4(), UpdateRoomRequest(campus="Allston", building="SEC", name="1")
        )


@pytest.mark.asyncio
async def test_campus_metadata_nests_buildings_and_rooms(db_session, seed, campuses):
    seed.room("Pierce", "301", campus="Cambridge")
    db_session.commit()

    metadata = await location_service.get_campus_metadata(db_session)

    assert [c.name for c in metadata] == ["Allston", "Cambridge"]
    cambridge = metadata[1]
    assert [b.name for b in cambridge.buildings] == ["MD", "Pierce"]
    assert [r.name for r in cambridge.buildings[1].rooms] == ["301"]
    assert db_session.query(Campus).count() == 2


@pytest.mark.asyncio
async def test_admin_list_orders_by_campus_building_room(db_session, seed, campuses):
    seed.room("SEC", "1.321", campus="Allston")
    db_session.commit()

    rooms = await location_service.get_full_room_list(db_session)

    assert [(r.building.campus.name, r.building.name, r.name) for r in rooms] == [
        ("Allston", "SEC", "1.321"),
        ("Allston", "SEC", "2121"),
        ("Cambridge", "MD", "G125"),
    ]
