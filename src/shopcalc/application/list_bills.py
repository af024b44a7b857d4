"""Application service: List Bills use case (query)."""

from __future__ import annotations

from datetime import datetime, timezone

from shopcalc.application.dto import BillDTO
from shopcalc.domain.repository.bill_repository import BillRepository

_EARLIEST = datetime.min.replace(tzinfo=timezone.utc)
_LATEST = datetime.max.replace(tzinfo=timezone.utc)


class ListBillsHandler:

    def __init__(self, bill_repo: BillRepository) -> None:
        self._bill_repo = bill_repo

    def handle(
        self,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[BillDTO]:
        """Return bills newest first, optionally within [start, end]."""
        if start is None and end is None:
            bills = self._bill_repo.list_all()
        else:
            bills = self._bill_repo.list_between(start or _EARLIEST, end or _LATEST)
        return [BillDTO.from_bill(bill) for bill in bills]
