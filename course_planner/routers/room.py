from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from uuid import UUID

from course_planner.core.database import get_db
from course_planner.dependencies import get_time_window
from course_planner.schemas.booking import TimeWindow, RoomBookingQuery, RoomBooking
from course_planner.schemas.room import (
    RoomResponse, RoomAvailabilityResponse, RoomAdminResponse, CampusResponse,
    CreateRoomRequest, UpdateRoomRequest,
)
from course_planner.services.availability import room_availability_service
from course_planner.services.room import location_service

router = APIRouter(prefix="/rooms", tags=["Rooms"])


@router.get("/", response_model=List[RoomResponse])
async def get_rooms(db: Session = Depends(get_db)):
    """All rooms with their campus and capacity"""
    return await location_service.get_room_list(db)


@router.get("/availability", response_model=List[RoomAvailabilityResponse])
async def get_room_availability(
    window: TimeWindow = Depends(get_time_window),
    db: Session = Depends(get_db),
):
    """Every room, with the meetings (if any) that overlap the requested time window"""
    return await room_availability_service.list_rooms_with_availability(db, window)


@router.get("/admin", response_model=List[RoomAdminResponse])
async def get_full_room_list(db: Session = Depends(get_db)):
    return await location_service.get_full_room_list(db)


@router.get("/campuses", response_model=List[CampusResponse])
async def get_campus_metadata(db: Session = Depends(get_db)):
    return await location_service.get_campus_metadata(db)


@router.get("/{room_id}/bookings", response_model=List[RoomBooking])
async def get_room_bookings(
    room_id: UUID,
    window: TimeWindow = Depends(get_time_window),
    db: Session = Depends(get_db),
):
    """Bookings of one room that conflict with the window; empty when the room is free"""
    query = RoomBookingQuery(room_id=room_id, **window.model_dump())
    return await room_availability_service.check_room_bookings(db, query)


@router.post("/", response_model=RoomAdminResponse, status_code=status.HTTP_201_CREATED)
async def create_room(room: CreateRoomRequest, db: Session = Depends(get_db)):
    return await location_service.create_room(db, room)


@router.put("/{room_id}", response_model=RoomAdminResponse)
async def update_room(room_id: UUID, room: UpdateRoomRequest, db: Session = Depends(get_db)):
    return await location_service.update_room(db, room_id, room)
