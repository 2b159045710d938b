"""Data access for the ``coaches`` table.

``CoachRepository`` is the contract the coach manager depends on;
``SqlAlchemyCoachRepository`` fulfils it with a single SQLAlchemy session.
Writes commit immediately, so each mutation is its own transaction.
"""

import logging
from typing import Optional, Protocol

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..models.coach import Coach

logger = logging.getLogger(__name__)


class CoachRepository(Protocol):
    def find_all(self) -> list[Coach]: ...
    def find_by_id(self, coach_id: int) -> Optional[Coach]: ...
    def find_by_email(self, email: str) -> Optional[Coach]: ...
    def exists_by_email(self, email: str) -> bool: ...
    def find_by_specialization(self, specialization: str, ignore_case: bool = False) -> list[Coach]: ...
    def find_by_name_containing(self, name: str) -> list[Coach]: ...
    def save(self, coach: Coach) -> Coach: ...
    def delete_by_id(self, coach_id: int) -> None: ...
    def exists_by_id(self, coach_id: int) -> bool: ...
    def count(self) -> int: ...


class SqlAlchemyCoachRepository:
    def __init__(self, db: Session) -> None:
        self._db = db

    def find_all(self) -> list[Coach]:
        return list(self._db.scalars(select(Coach).order_by(Coach.id)))

    def find_by_id(self, coach_id: int) -> Optional[Coach]:
        return self._db.get(Coach, coach_id)

    def find_by_email(self, email: str) -> Optional[Coach]:
        return self._db.scalars(select(Coach).where(Coach.email == email)).first()

    def exists_by_email(self, email: str) -> bool:
        query = select(Coach.id).where(Coach.email == email).limit(1)
        return self._db.scalar(query) is not None

    def find_by_specialization(self, specialization: str, ignore_case: bool = False) -> list[Coach]:
        if ignore_case:
            condition = func.lower(Coach.specialization) == specialization.lower()
        else:
            condition = Coach.specialization == specialization
        return list(self._db.scalars(select(Coach).where(condition).order_by(Coach.id)))

    def find_by_name_containing(self, name: str) -> list[Coach]:
        query = (
            select(Coach)
            .where(func.lower(Coach.name).contains(name.lower(), autoescape=True))
            .order_by(Coach.id)
        )
        return list(self._db.scalars(query))

    def save(self, coach: Coach) -> Coach:
        self._db.add(coach)
        try:
            self._db.commit()
        except IntegrityError:
            self._db.rollback()
            logger.warning("Integrity violation while saving coach %s", coach.email)
            raise
        self._db.refresh(coach)
        return coach

    def delete_by_id(self, coach_id: int) -> None:
        coach = self._db.get(Coach, coach_id)
        if coach is None:
            return
        self._db.delete(coach)
        self._db.commit()

    def exists_by_id(self, coach_id: int) -> bool:
        query = select(Coach.id).where(Coach.id == coach_id)
        return self._db.scalar(query) is not None

    def count(self) -> int:
        return self._db.scalar(select(func.count()).select_from(Coach)) or 0
