from fastapi import HTTPException, status


class NotFoundException(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class BadRequestException(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class RoomConflictException(BadRequestException):
    """Raised when a meeting is saved into a room that is already booked."""

    def __init__(self, day, start_time, end_time, meeting_titles):
        self.meeting_titles = list(meeting_titles)
        super().__init__(
            f"This room is not available on {day} between {start_time} and {end_time}. "
            f"It is already booked for {', '.join(self.meeting_titles)}."
        )
