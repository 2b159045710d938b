from __future__ import annotations

from coach_service.core.results import Ok
from coach_service.database import session_scope
from coach_service.repositories.coach import SqlAlchemyCoachRepository
from coach_service.schemas.coach import CoachDTO
from coach_service.services.coach_manager import CoachManager

SAMPLE_COACHES = [
    CoachDTO(
        name="Rahul Dravid",
        specialization="Batting",
        phone="9876543210",
        email="rahul.dravid@example.com",
    ),
    CoachDTO(
        name="Anil Kumble",
        specialization="Spin Bowling",
        phone="9876543211",
        email="anil.kumble@example.com",
    ),
    CoachDTO(
        name="Jonty Rhodes",
        specialization="Fielding",
        email="jonty.rhodes@example.com",
    ),
]


def ensure_coach(manager: CoachManager, repository: SqlAlchemyCoachRepository, dto: CoachDTO) -> int:
    existing = repository.find_by_email(dto.email)
    if existing:
        return existing.id
    result = manager.create_coach(dto)
    if not isinstance(result, Ok):
        raise RuntimeError(f"Could not seed coach {dto.name}: {result}")
    return result.value.coach_id


def main() -> None:
    with session_scope() as db:
        repository = SqlAlchemyCoachRepository(db)
        manager = CoachManager(repository)
        ids = [ensure_coach(manager, repository, dto) for dto in SAMPLE_COACHES]
        print(f"Seed data ready. Coaches: {ids} (total {manager.count_coaches()})")


if __name__ == "__main__":
    main()
