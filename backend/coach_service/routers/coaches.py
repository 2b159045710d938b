import logging

from fastapi import APIRouter, Depends, Query, status

from ..core.config import get_settings
from ..dependencies import get_coach_manager, unwrap
from ..schemas.coach import CoachCount, CoachDeleted, CoachDTO, ServiceHealth
from ..services.coach_manager import CoachManager

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/coaches", tags=["coaches"])


@router.get("", response_model=list[CoachDTO])
def list_coaches(manager: CoachManager = Depends(get_coach_manager)) -> list[CoachDTO]:
    logger.info("REST request to get all coaches")
    return manager.list_coaches()


@router.get("/search", response_model=list[CoachDTO])
def search_coaches(
    name: str = Query(...),
    manager: CoachManager = Depends(get_coach_manager),
) -> list[CoachDTO]:
    logger.info("REST request to search coaches by name: %s", name)
    return manager.search_by_name(name)


@router.get("/specialization/{specialization}", response_model=list[CoachDTO])
def list_coaches_by_specialization(
    specialization: str,
    ignore_case: bool = False,
    manager: CoachManager = Depends(get_coach_manager),
) -> list[CoachDTO]:
    logger.info("REST request to get coaches by specialization: %s", specialization)
    return manager.list_by_specialization(specialization, ignore_case=ignore_case)


@router.get("/count", response_model=CoachCount)
def count_coaches(manager: CoachManager = Depends(get_coach_manager)) -> CoachCount:
    logger.info("REST request to get total coach count")
    return CoachCount(total_coaches=manager.count_coaches())


@router.get("/health", response_model=ServiceHealth)
def healthcheck() -> ServiceHealth:
    settings = get_settings()
    return ServiceHealth(status="UP", service=settings.service_name, version=settings.service_version)


@router.get("/{coach_id}", response_model=CoachDTO)
def read_coach(coach_id: int, manager: CoachManager = Depends(get_coach_manager)) -> CoachDTO:
    logger.info("REST request to get coach by id: %s", coach_id)
    return unwrap(manager.get_coach(coach_id))


@router.post("", response_model=CoachDTO, status_code=status.HTTP_201_CREATED)
def create_coach(
    payload: CoachDTO,
    manager: CoachManager = Depends(get_coach_manager),
) -> CoachDTO:
    logger.info("REST request to create new coach: %s", payload.name)
    return unwrap(manager.create_coach(payload))


@router.put("/{coach_id}", response_model=CoachDTO)
def update_coach(
    coach_id: int,
    payload: CoachDTO,
    manager: CoachManager = Depends(get_coach_manager),
) -> CoachDTO:
    logger.info("REST request to update coach with id: %s", coach_id)
    return unwrap(manager.update_coach(coach_id, payload))


@router.delete("/{coach_id}", response_model=CoachDeleted)
def delete_coach(coach_id: int, manager: CoachManager = Depends(get_coach_manager)) -> CoachDeleted:
    logger.info("REST request to delete coach with id: %s", coach_id)
    deleted_id = unwrap(manager.delete_coach(coach_id))
    return CoachDeleted(message="Coach deleted successfully", id=str(deleted_id))
