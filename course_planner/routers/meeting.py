from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from uuid import UUID

from course_planner.core.database import get_db
from course_planner.schemas.meeting import MeetingSaveRequest, MeetingResponse
from course_planner.services.meeting import meeting_service

router = APIRouter(prefix="/meetings", tags=["Meetings"])


@router.put("/{parent_id}", response_model=List[MeetingResponse])
async def save_meetings(
    parent_id: UUID,
    request: MeetingSaveRequest,
    db: Session = Depends(get_db),
):
    """
    Create, update or remove the meetings of a course instance or non-class event.
    Meetings of the parent that are not in the request are deleted; an empty list
    removes them all.
    """
    return await meeting_service.save_meetings(db, parent_id, request.meetings)
