import logging
from datetime import datetime
from typing import Callable, Optional

from sqlalchemy.exc import IntegrityError

from ..core.results import Conflict, NotFound, Ok, Result, ValidationError
from ..models.coach import Coach, utcnow
from ..repositories.coach import CoachRepository
from ..schemas.coach import CoachDTO
from .validation import validate_coach

logger = logging.getLogger(__name__)


class CoachManager:
    """Business rules for coach records.

    Every mutating operation validates its input before touching storage and
    reports domain failures as ``ValidationError``, ``NotFound`` or
    ``Conflict`` values. The unique index on ``coaches.email`` is the final
    authority on duplicates; the ``exists_by_email`` checks only give the
    caller a precise message before the write is attempted.
    """

    def __init__(
        self,
        repository: CoachRepository,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._repository = repository
        self._clock = clock

    def list_coaches(self) -> list[CoachDTO]:
        logger.info("Fetching all coaches")
        return [to_dto(coach) for coach in self._repository.find_all()]

    def get_coach(self, coach_id: int) -> Result[CoachDTO]:
        logger.info("Fetching coach with id: %s", coach_id)
        coach = self._repository.find_by_id(coach_id)
        if coach is None:
            return _not_found(coach_id)
        return Ok(to_dto(coach))

    def create_coach(self, dto: CoachDTO) -> Result[CoachDTO]:
        logger.info("Creating new coach: %s", dto.name)
        violations = validate_coach(dto)
        if violations:
            return ValidationError(violations)

        email = dto.email
        if email is not None and self._repository.exists_by_email(email):
            return _duplicate_email(email)

        now = self._clock()
        coach = Coach(
            name=dto.name,
            specialization=dto.specialization,
            phone=dto.phone,
            email=email,
            created_at=now,
            updated_at=now,
        )
        try:
            saved = self._repository.save(coach)
        except IntegrityError:
            if not self._email_taken(email):
                raise
            return _duplicate_email(email)
        logger.info("Coach created successfully with id: %s", saved.id)
        return Ok(to_dto(saved))

    def update_coach(self, coach_id: int, dto: CoachDTO) -> Result[CoachDTO]:
        logger.info("Updating coach with id: %s", coach_id)
        violations = validate_coach(dto)
        if violations:
            return ValidationError(violations)

        existing = self._repository.find_by_id(coach_id)
        if existing is None:
            return _not_found(coach_id)

        email = dto.email
        if (
            email is not None
            and email != existing.email
            and self._repository.exists_by_email(email)
        ):
            return _duplicate_email(email)

        existing.name = dto.name
        existing.specialization = dto.specialization
        existing.phone = dto.phone
        existing.email = email
        existing.updated_at = self._clock()
        try:
            updated = self._repository.save(existing)
        except IntegrityError:
            if not self._email_taken(email):
                raise
            return _duplicate_email(email)
        logger.info("Coach updated successfully with id: %s", coach_id)
        return Ok(to_dto(updated))

    def delete_coach(self, coach_id: int) -> Result[int]:
        logger.info("Deleting coach with id: %s", coach_id)
        if not self._repository.exists_by_id(coach_id):
            return _not_found(coach_id)
        self._repository.delete_by_id(coach_id)
        logger.info("Coach deleted successfully with id: %s", coach_id)
        return Ok(coach_id)

    def search_by_name(self, name: str) -> list[CoachDTO]:
        logger.info("Searching coaches with name: %s", name)
        return [to_dto(coach) for coach in self._repository.find_by_name_containing(name)]

    def list_by_specialization(self, specialization: str, ignore_case: bool = False) -> list[CoachDTO]:
        logger.info("Fetching coaches with specialization: %s", specialization)
        coaches = self._repository.find_by_specialization(specialization, ignore_case=ignore_case)
        return [to_dto(coach) for coach in coaches]

    def count_coaches(self) -> int:
        logger.info("Fetching total coach count")
        return self._repository.count()

    def _email_taken(self, email: Optional[str]) -> bool:
        # A concurrent writer may claim the email between the check and the commit.
        if email is None or not self._repository.exists_by_email(email):
            return False
        logger.warning("Email %s was taken by a concurrent request", email)
        return True


def to_dto(coach: Coach) -> CoachDTO:
    return CoachDTO(
        coach_id=coach.id,
        name=coach.name,
        specialization=coach.specialization,
        phone=coach.phone,
        email=coach.email,
        created_at=coach.created_at,
        updated_at=coach.updated_at,
    )


def _not_found(coach_id: int) -> NotFound:
    return NotFound(f"Coach not found with id: {coach_id}")


def _duplicate_email(email: str) -> Conflict:
    return Conflict(f"Email already exists: {email}")
