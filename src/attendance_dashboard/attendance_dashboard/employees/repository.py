from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for the employee roster.

    Note (DIP): the service layer depends on this interface, not on a concrete
    store (JSON registry file or database table).
    """

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def add(self, employee: Employee) -> Employee:
        raise NotImplementedError

    def delete(self, employee_id: str) -> bool:
        raise NotImplementedError
