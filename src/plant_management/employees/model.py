from __future__ import annotations

from typing import Optional

from ..core.constants import DEFAULT_ABSENCES, DEFAULT_LEAVES
from ..extensions import db


class Employee(db.Model):
    """A plant employee with running absence and leave counters."""

    __tablename__ = "employees"

    employee_id = db.Column(db.Integer, primary_key=True)
    full_name = db.Column(db.String(100), nullable=False)
    absences = db.Column(db.Integer, nullable=False, default=DEFAULT_ABSENCES)
    # Remaining leave allowance. Not floored at zero: overdrawn leave shows up as negative.
    leaves = db.Column(db.Integer, nullable=False, default=DEFAULT_LEAVES)

    supervisor_id = db.Column(
        db.Integer, db.ForeignKey("supervisors.supervisor_id", ondelete="SET NULL"), nullable=True, index=True
    )

    supervisor = db.relationship("Supervisor", back_populates="employees")
    attendances = db.relationship(
        "Attendance", back_populates="employee", lazy=True, cascade="all, delete-orphan"
    )

    def __init__(
        self,
        full_name: str,
        *,
        absences: int = DEFAULT_ABSENCES,
        leaves: int = DEFAULT_LEAVES,
        supervisor=None,
        supervisor_id: Optional[int] = None,
        employee_id: Optional[int] = None,
    ):
        self.employee_id = employee_id
        self.full_name = full_name
        self.absences = absences
        self.leaves = leaves
        if supervisor is not None:
            self.supervisor = supervisor
        else:
            self.supervisor_id = supervisor_id

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "full_name": self.full_name,
            "absences": self.absences,
            "leaves": self.leaves,
            "supervisor_id": self.supervisor_id,
        }

    def __repr__(self) -> str:
        return f"<Employee {self.employee_id}: {self.full_name}>"
