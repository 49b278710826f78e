from __future__ import annotations

import logging
from contextlib import nullcontext
from typing import Optional, Sequence

from ..common.validators import require_non_empty
from ..core.exceptions import SupervisorNotFoundError
from ..database.session import TransactionFactory
from .model import Supervisor
from .repository import SupervisorRepository

logger = logging.getLogger(__name__)


class SupervisorService:
    """Use cases: maintain the supervisor roster."""

    def __init__(self, supervisors: SupervisorRepository, *, transaction: Optional[TransactionFactory] = None):
        self._supervisors = supervisors
        self._transaction = transaction or nullcontext

    def get(self, supervisor_id: int) -> Supervisor:
        supervisor = self._supervisors.find_by_id(supervisor_id)
        if not supervisor:
            raise SupervisorNotFoundError(supervisor_id)
        return supervisor

    def list_all(self) -> Sequence[Supervisor]:
        return self._supervisors.find_all()

    def create(self, *, full_name: str, email: Optional[str] = None) -> Supervisor:
        full_name = require_non_empty(full_name, "full_name")
        with self._transaction():
            supervisor = self._supervisors.save(Supervisor(full_name=full_name, email=email or None))
        logger.info("Created supervisor %s", supervisor.supervisor_id)
        return supervisor

    def update(self, supervisor_id: int, *, full_name: Optional[str] = None, email: Optional[str] = None) -> Supervisor:
        with self._transaction():
            supervisor = self.get(supervisor_id)
            if full_name is not None:
                supervisor.full_name = require_non_empty(full_name, "full_name")
            if email is not None:
                supervisor.email = email or None
            return self._supervisors.save(supervisor)

    def delete(self, supervisor_id: int) -> None:
        with self._transaction():
            supervisor = self.get(supervisor_id)
            self._supervisors.delete(supervisor)
        logger.info("Deleted supervisor %s", supervisor_id)
