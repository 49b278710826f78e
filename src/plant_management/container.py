from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.orm import Session

from .attendance.service import AttendanceService
from .attendance.sqlalchemy_attendance_repository import SQLAlchemyAttendanceRepository
from .database.session import transaction_factory
from .employees.service import EmployeeService
from .employees.sqlalchemy_employee_repository import SQLAlchemyEmployeeRepository
from .supervisors.service import SupervisorService
from .supervisors.sqlalchemy_supervisor_repository import SQLAlchemySupervisorRepository


@dataclass(frozen=True)
class Container:
    supervisors_repo: SQLAlchemySupervisorRepository
    employees_repo: SQLAlchemyEmployeeRepository
    attendance_repo: SQLAlchemyAttendanceRepository

    supervisor_service: SupervisorService
    employee_service: EmployeeService
    attendance_service: AttendanceService


def build_container(*, session: Session) -> Container:
    """Wire repositories and services around one session.

    With Flask-SQLAlchemy pass ``db.session``: it is scoped, so every request gets its own.
    """
    tx = transaction_factory(session)

    supervisors_repo = SQLAlchemySupervisorRepository(session)
    employees_repo = SQLAlchemyEmployeeRepository(session)
    attendance_repo = SQLAlchemyAttendanceRepository(session)

    supervisor_service = SupervisorService(supervisors_repo, transaction=tx)
    employee_service = EmployeeService(employees_repo, supervisors_repo, transaction=tx)
    attendance_service = AttendanceService(attendance_repo, employees_repo, transaction=tx)

    return Container(
        supervisors_repo=supervisors_repo,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        supervisor_service=supervisor_service,
        employee_service=employee_service,
        attendance_service=attendance_service,
    )
