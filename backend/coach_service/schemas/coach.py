from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CoachDTO(BaseModel):
    """Wire representation of a coach, shared by requests and responses.

    Field constraints are enforced by ``validate_coach`` so that every
    violation is reported together with a 400 rather than a 422.
    """

    model_config = ConfigDict(populate_by_name=True)

    coach_id: Optional[int] = Field(default=None, alias="coachId")
    name: Optional[str] = None
    specialization: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")


class CoachDeleted(BaseModel):
    message: str
    id: str


class CoachCount(BaseModel):
    total_coaches: int = Field(alias="totalCoaches")

    model_config = ConfigDict(populate_by_name=True)


class ServiceHealth(BaseModel):
    status: str
    service: str
    version: str
