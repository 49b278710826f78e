from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Status stored on an attendance row. A freshly initialized row has no status (NULL)."""

    PRESENT = "present"
    ABSENT = "absent"
