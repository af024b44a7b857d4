"""Abstract repository for the Bill aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Bills are append-only: there is no update.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from shopcalc.domain.model.bill import Bill


class BillRepository(ABC):

    @abstractmethod
    def add(self, bill: Bill) -> Bill:
        """Persist a new bill and return it with its assigned ID."""

    @abstractmethod
    def get_by_id(self, bill_id: int) -> Bill | None:
        """Return a bill by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Bill]:
        """Return every bill, newest first."""

    @abstractmethod
    def list_between(self, start: datetime, end: datetime) -> list[Bill]:
        """Return bills created within [start, end], newest first."""

    @abstractmethod
    def delete(self, bill_id: int) -> bool:
        """Delete a bill; return False if there was nothing to delete."""

    @abstractmethod
    def delete_all(self) -> int:
        """Delete every bill and return how many were removed."""
