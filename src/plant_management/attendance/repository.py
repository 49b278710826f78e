from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Protocol, Sequence

from .model import Attendance


class AttendanceRepository(Protocol):
    """Data-access interface for attendance rows.

    Writes add and flush only. The caller owns the transaction and decides when to commit.
    Implementations raise DuplicateAttendanceError when a write would create a second row
    for the same employee and date.
    """

    def find_by_id(self, attendance_id: int) -> Optional[Attendance]:
        raise NotImplementedError

    def find_all(self) -> Sequence[Attendance]:
        raise NotImplementedError

    def find_by_employee_and_date(self, employee_id: int, work_date: date) -> Optional[Attendance]:
        raise NotImplementedError

    def find_all_by_date(self, work_date: date) -> Sequence[Attendance]:
        raise NotImplementedError

    def find_by_employee(self, employee_id: int) -> Sequence[Attendance]:
        """All rows of one employee, newest date first."""

        raise NotImplementedError

    def save(self, attendance: Attendance) -> Attendance:
        raise NotImplementedError

    def save_all(self, records: Iterable[Attendance]) -> Sequence[Attendance]:
        raise NotImplementedError
