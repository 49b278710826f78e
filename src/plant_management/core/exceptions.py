class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a requested entity does not exist."""


class EmployeeNotFoundError(NotFoundError):
    def __init__(self, employee_id: int):
        super().__init__(f"Employee not found with ID: {employee_id}")
        self.employee_id = employee_id


class SupervisorNotFoundError(NotFoundError):
    def __init__(self, supervisor_id: int):
        super().__init__(f"Supervisor not found with ID: {supervisor_id}")
        self.supervisor_id = supervisor_id


class AttendanceNotFoundError(NotFoundError):
    def __init__(self, attendance_id: int):
        super().__init__(f"Attendance record not found with ID: {attendance_id}")
        self.attendance_id = attendance_id


class ConflictError(DomainError):
    """Raised when a write collides with data already stored."""


class DuplicateAttendanceError(ConflictError):
    """Raised when a second attendance row is written for the same employee and date."""
