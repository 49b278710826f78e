from __future__ import annotations

import logging
from contextlib import nullcontext
from typing import Optional, Sequence

from ..common.validators import require_int, require_non_empty, require_non_negative
from ..core.constants import DEFAULT_ABSENCES, DEFAULT_LEAVES
from ..core.exceptions import EmployeeNotFoundError, SupervisorNotFoundError
from ..database.session import TransactionFactory
from ..supervisors.repository import SupervisorRepository
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use cases: hire, look up, edit and remove employees."""

    def __init__(
        self,
        employees: EmployeeRepository,
        supervisors: SupervisorRepository,
        *,
        transaction: Optional[TransactionFactory] = None,
    ):
        self._employees = employees
        self._supervisors = supervisors
        self._transaction = transaction or nullcontext

    def _require_supervisor(self, supervisor_id: int):
        supervisor = self._supervisors.find_by_id(supervisor_id)
        if not supervisor:
            raise SupervisorNotFoundError(supervisor_id)
        return supervisor

    def get(self, employee_id: int) -> Employee:
        employee = self._employees.find_by_id(employee_id)
        if not employee:
            raise EmployeeNotFoundError(employee_id)
        return employee

    def list_all(self) -> Sequence[Employee]:
        return self._employees.find_all()

    def list_for_supervisor(self, supervisor_id: int) -> Sequence[Employee]:
        self._require_supervisor(supervisor_id)
        return self._employees.find_by_supervisor(supervisor_id)

    def create(
        self,
        *,
        full_name: str,
        supervisor_id: Optional[int] = None,
        leaves: int = DEFAULT_LEAVES,
        absences: int = DEFAULT_ABSENCES,
    ) -> Employee:
        employee = Employee(
            full_name=require_non_empty(full_name, "full_name"),
            leaves=require_non_negative(leaves, "leaves"),
            absences=require_non_negative(absences, "absences"),
        )
        with self._transaction():
            if supervisor_id is not None:
                employee.supervisor = self._require_supervisor(supervisor_id)
            employee = self._employees.save(employee)
        logger.info("Created employee %s (leaves=%s)", employee.employee_id, employee.leaves)
        return employee

    def update(
        self,
        employee_id: int,
        *,
        full_name: Optional[str] = None,
        supervisor_id: Optional[int] = None,
        leaves: Optional[int] = None,
        absences: Optional[int] = None,
    ) -> Employee:
        """Apply only the fields that were given.

        Counters are taken as-is here (an HR correction may legitimately set a negative
        leave balance), they only have to be integers.
        """
        with self._transaction():
            employee = self.get(employee_id)
            if full_name is not None:
                employee.full_name = require_non_empty(full_name, "full_name")
            if supervisor_id is not None:
                employee.supervisor = self._require_supervisor(supervisor_id)
            if leaves is not None:
                employee.leaves = require_int(leaves, "leaves")
            if absences is not None:
                employee.absences = require_non_negative(absences, "absences")
            return self._employees.save(employee)

    def delete(self, employee_id: int) -> None:
        with self._transaction():
            employee = self.get(employee_id)
            self._employees.delete(employee)
        logger.info("Deleted employee %s", employee_id)
