from __future__ import annotations

from datetime import date, time
from typing import Optional

from ..common.datetime_utils import format_clock_time
from ..core.enums import AttendanceStatus
from ..extensions import db


class Attendance(db.Model):
    """One employee's attendance for one work date.

    Created with no status by daily initialization, then filled in when the employee
    clocks in/out or is marked absent. At most one row exists per (employee, date).
    """

    __tablename__ = "attendance"
    __table_args__ = (
        db.UniqueConstraint("employee_id", "work_date", name="uq_attendance_employee_date"),
    )

    attendance_id = db.Column(db.Integer, primary_key=True)
    employee_id = db.Column(
        db.Integer, db.ForeignKey("employees.employee_id", ondelete="CASCADE"), nullable=False, index=True
    )
    work_date = db.Column(db.Date, nullable=False, index=True)

    clock_in = db.Column(db.Time)
    clock_out = db.Column(db.Time)

    status = db.Column(
        db.Enum(
            AttendanceStatus,
            name="attendance_status",
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        nullable=True,
    )

    employee = db.relationship("Employee", back_populates="attendances")

    def __init__(
        self,
        employee=None,
        work_date: Optional[date] = None,
        *,
        clock_in: Optional[time] = None,
        clock_out: Optional[time] = None,
        status: Optional[AttendanceStatus] = None,
        attendance_id: Optional[int] = None,
    ):
        self.attendance_id = attendance_id
        if employee is not None:
            self.employee = employee
        self.work_date = work_date
        self.clock_in = clock_in
        self.clock_out = clock_out
        self.status = status

    def to_dict(self) -> dict:
        return {
            "attendance_id": self.attendance_id,
            "employee_id": self.employee.employee_id if self.employee else self.employee_id,
            "employee_name": self.employee.full_name if self.employee else None,
            "date": self.work_date.isoformat() if self.work_date else None,
            "clock_in": format_clock_time(self.clock_in),
            "clock_out": format_clock_time(self.clock_out),
            "status": self.status.value if self.status else None,
        }

    def __repr__(self) -> str:
        return f"<Attendance {self.attendance_id}: employee={self.employee_id} date={self.work_date} status={self.status}>"
