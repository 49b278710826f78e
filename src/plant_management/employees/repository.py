from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def find_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def find_by_supervisor(self, supervisor_id: int) -> Sequence[Employee]:
        raise NotImplementedError

    def save(self, employee: Employee) -> Employee:
        raise NotImplementedError

    def save_all(self, employees: Iterable[Employee]) -> Sequence[Employee]:
        raise NotImplementedError

    def delete(self, employee: Employee) -> None:
        raise NotImplementedError
