from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence

from .model import Supervisor


class SupervisorRepository(Protocol):
    """Data-access interface for supervisors.

    The service layer depends on this interface, not on a concrete database.
    """

    def find_by_id(self, supervisor_id: int) -> Optional[Supervisor]:
        raise NotImplementedError

    def find_all(self) -> Sequence[Supervisor]:
        raise NotImplementedError

    def save(self, supervisor: Supervisor) -> Supervisor:
        raise NotImplementedError

    def save_all(self, supervisors: Iterable[Supervisor]) -> Sequence[Supervisor]:
        raise NotImplementedError

    def delete(self, supervisor: Supervisor) -> None:
        raise NotImplementedError
