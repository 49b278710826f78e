from __future__ import annotations

from typing import Optional

from ..extensions import db


class Supervisor(db.Model):
    """A plant supervisor. Employees may report to one."""

    __tablename__ = "supervisors"

    supervisor_id = db.Column(db.Integer, primary_key=True)
    full_name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(120))

    employees = db.relationship("Employee", back_populates="supervisor", lazy=True)

    def __init__(self, full_name: str, email: Optional[str] = None, supervisor_id: Optional[int] = None):
        self.supervisor_id = supervisor_id
        self.full_name = full_name
        self.email = email

    def to_dict(self) -> dict:
        return {
            "supervisor_id": self.supervisor_id,
            "full_name": self.full_name,
            "email": self.email,
        }

    def __repr__(self) -> str:
        return f"<Supervisor {self.supervisor_id}: {self.full_name}>"
