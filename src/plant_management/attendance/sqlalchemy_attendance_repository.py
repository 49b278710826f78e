from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..core.exceptions import DuplicateAttendanceError
from .model import Attendance
from .repository import AttendanceRepository


class SQLAlchemyAttendanceRepository(AttendanceRepository):
    def __init__(self, session: Session):
        self._session = session

    def find_by_id(self, attendance_id: int) -> Optional[Attendance]:
        return self._session.get(Attendance, int(attendance_id))

    def find_all(self) -> Sequence[Attendance]:
        return (
            self._session.query(Attendance)
            .order_by(Attendance.work_date.desc(), Attendance.employee_id.asc())
            .all()
        )

    def find_by_employee_and_date(self, employee_id: int, work_date: date) -> Optional[Attendance]:
        return (
            self._session.query(Attendance)
            .filter(Attendance.employee_id == int(employee_id), Attendance.work_date == work_date)
            .one_or_none()
        )

    def find_all_by_date(self, work_date: date) -> Sequence[Attendance]:
        return (
            self._session.query(Attendance)
            .filter(Attendance.work_date == work_date)
            .order_by(Attendance.employee_id.asc())
            .all()
        )

    def find_by_employee(self, employee_id: int) -> Sequence[Attendance]:
        return (
            self._session.query(Attendance)
            .filter(Attendance.employee_id == int(employee_id))
            .order_by(Attendance.work_date.desc())
            .all()
        )

    def save(self, attendance: Attendance) -> Attendance:
        self._session.add(attendance)
        self._flush()
        return attendance

    def save_all(self, records: Iterable[Attendance]) -> Sequence[Attendance]:
        items = list(records)
        self._session.add_all(items)
        self._flush()
        return items

    def _flush(self) -> None:
        try:
            self._session.flush()
        except IntegrityError as e:
            raise DuplicateAttendanceError("Attendance already recorded for this employee and date") from e
