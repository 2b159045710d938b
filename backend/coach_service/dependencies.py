from typing import TypeVar

from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session

from .core.results import Conflict, NotFound, Ok, Result, ValidationError
from .database import get_db
from .repositories.coach import SqlAlchemyCoachRepository
from .services.coach_manager import CoachManager

T = TypeVar("T")


def get_coach_manager(db: Session = Depends(get_db)) -> CoachManager:
    return CoachManager(SqlAlchemyCoachRepository(db))


def unwrap(result: Result[T]) -> T:
    """Return the success value or raise the HTTP error matching the failure kind."""
    if isinstance(result, Ok):
        return result.value
    if isinstance(result, ValidationError):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=[{"field": v.field, "message": v.message} for v in result.violations],
        )
    if isinstance(result, NotFound):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=result.message)
    if isinstance(result, Conflict):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=result.message)
    raise TypeError(f"Unexpected result: {result!r}")
