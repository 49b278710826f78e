from __future__ import annotations

from typing import Iterable, Optional, Sequence

from sqlalchemy.orm import Session

from .model import Employee
from .repository import EmployeeRepository


class SQLAlchemyEmployeeRepository(EmployeeRepository):
    def __init__(self, session: Session):
        self._session = session

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._session.get(Employee, int(employee_id))

    def find_all(self) -> Sequence[Employee]:
        return self._session.query(Employee).order_by(Employee.employee_id).all()

    def find_by_supervisor(self, supervisor_id: int) -> Sequence[Employee]:
        return (
            self._session.query(Employee)
            .filter(Employee.supervisor_id == int(supervisor_id))
            .order_by(Employee.employee_id)
            .all()
        )

    def save(self, employee: Employee) -> Employee:
        self._session.add(employee)
        self._session.flush()
        return employee

    def save_all(self, employees: Iterable[Employee]) -> Sequence[Employee]:
        items = list(employees)
        self._session.add_all(items)
        self._session.flush()
        return items

    def delete(self, employee: Employee) -> None:
        self._session.delete(employee)
        self._session.flush()
