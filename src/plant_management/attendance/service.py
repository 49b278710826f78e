from __future__ import annotations

import logging
from contextlib import nullcontext
from datetime import date, time
from typing import List, Optional, Sequence

from ..core.enums import AttendanceStatus
from ..core.exceptions import AttendanceNotFoundError, DuplicateAttendanceError, EmployeeNotFoundError
from ..database.session import TransactionFactory
from ..employees.repository import EmployeeRepository
from .model import Attendance
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        *,
        transaction: Optional[TransactionFactory] = None,
    ):
        self._attendance = attendance
        self._employees = employees
        self._transaction = transaction or nullcontext

    def mark_attendance(
        self,
        employee_id: int,
        work_date: date,
        clock_in: Optional[time],
        clock_out: Optional[time],
    ) -> Attendance:
        """Record clock times for an employee on a date.

        Reuses the (employee, date) row when one exists. The status follows the clock-in:
        present when given, absent otherwise.
        """
        with self._transaction():
            employee = self._employees.find_by_id(employee_id)
            if not employee:
                raise EmployeeNotFoundError(employee_id)

            attendance = self._attendance.find_by_employee_and_date(employee_id, work_date) or Attendance()

            attendance.employee = employee
            attendance.work_date = work_date
            attendance.clock_in = clock_in
            attendance.clock_out = clock_out
            attendance.status = AttendanceStatus.PRESENT if clock_in is not None else AttendanceStatus.ABSENT

            return self._attendance.save(attendance)

    def get_attendance_history(self, employee_id: int) -> Sequence[Attendance]:
        return self._attendance.find_by_employee(employee_id)

    def initialize_attendance_for_date(self, work_date: date) -> Sequence[Attendance]:
        """Make sure every employee has an attendance row for the date.

        When the date already has rows they are returned unchanged. Otherwise one row with
        no status is created per employee and the new rows are returned.
        """
        logger.info("Initializing attendance records for date: %s", work_date)

        try:
            with self._transaction():
                existing = self._attendance.find_all_by_date(work_date)
                logger.info("Found %d existing records for date %s", len(existing), work_date)

                if existing:
                    logger.info("Returning existing records for date %s", work_date)
                    return existing

                employees = self._employees.find_all()
                logger.info("Found %d employees to create attendance records for", len(employees))

                new_records: List[Attendance] = []
                for employee in employees:
                    try:
                        if self._attendance.find_by_employee_and_date(employee.employee_id, work_date):
                            logger.info(
                                "Record already exists for employee %s on date %s", employee.employee_id, work_date
                            )
                            continue

                        new_records.append(Attendance(employee, work_date, status=None))
                        logger.info(
                            "Created new attendance record for employee %s on date %s", employee.employee_id, work_date
                        )
                    except Exception as e:
                        logger.error(
                            "Error creating attendance record for employee %s on date %s: %s",
                            employee.employee_id,
                            work_date,
                            e,
                        )

                saved = self._attendance.save_all(new_records)
        except DuplicateAttendanceError:
            # Another initializer committed rows for this date first; its rows are the result.
            logger.warning("Concurrent initialization detected for date %s, returning stored records", work_date)
            return self._attendance.find_all_by_date(work_date)

        logger.info("Saved %d new attendance records for date %s", len(saved), work_date)
        return saved

    def get_attendance_by_date(self, work_date: date) -> Sequence[Attendance]:
        return self._attendance.find_all_by_date(work_date)

    def get_attendance_by_id(self, attendance_id: int) -> Optional[Attendance]:
        return self._attendance.find_by_id(attendance_id)

    def save_attendance(self, attendance: Attendance) -> Attendance:
        with self._transaction():
            return self._attendance.save(attendance)

    def mark_absent(self, attendance: Attendance) -> Attendance:
        """Mark the record absent and charge the absence to the employee.

        Absences go up by one and leaves go down by one; leaves may go negative.
        Both rows are written in the same transaction.
        """
        employee = attendance.employee
        logger.info("Marking employee %s as absent for date %s", employee.employee_id, attendance.work_date)

        with self._transaction():
            attendance.status = AttendanceStatus.ABSENT

            employee.absences = employee.absences + 1
            employee.leaves = employee.leaves - 1
            self._employees.save(employee)

            logger.info(
                "Updated employee %s absence count to %s and leaves to %s",
                employee.employee_id,
                employee.absences,
                employee.leaves,
            )

            return self._attendance.save(attendance)

    def mark_absent_by_id(self, attendance_id: int) -> Attendance:
        attendance = self._attendance.find_by_id(attendance_id)
        if not attendance:
            raise AttendanceNotFoundError(attendance_id)
        return self.mark_absent(attendance)
