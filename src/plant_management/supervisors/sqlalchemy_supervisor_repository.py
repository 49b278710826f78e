from __future__ import annotations

from typing import Iterable, Optional, Sequence

from sqlalchemy.orm import Session

from .model import Supervisor
from .repository import SupervisorRepository


class SQLAlchemySupervisorRepository(SupervisorRepository):
    def __init__(self, session: Session):
        self._session = session

    def find_by_id(self, supervisor_id: int) -> Optional[Supervisor]:
        return self._session.get(Supervisor, int(supervisor_id))

    def find_all(self) -> Sequence[Supervisor]:
        return self._session.query(Supervisor).order_by(Supervisor.supervisor_id).all()

    def save(self, supervisor: Supervisor) -> Supervisor:
        self._session.add(supervisor)
        self._session.flush()
        return supervisor

    def save_all(self, supervisors: Iterable[Supervisor]) -> Sequence[Supervisor]:
        items = list(supervisors)
        self._session.add_all(items)
        self._session.flush()
        return items

    def delete(self, supervisor: Supervisor) -> None:
        self._session.delete(supervisor)
        self._session.flush()
