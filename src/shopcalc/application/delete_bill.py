"""Application service: Delete Bill use cases.

Deleting is the only thing that can happen to a stored bill. Deleting an
ID that is not there is not an error.
"""

from __future__ import annotations

import logging

from shopcalc.domain.repository.bill_repository import BillRepository

logger = logging.getLogger(__name__)


class DeleteBillHandler:

    def __init__(self, bill_repo: BillRepository) -> None:
        self._bill_repo = bill_repo

    def handle(self, bill_id: int) -> bool:
        removed = self._bill_repo.delete(bill_id)
        if removed:
            logger.info("Deleted bill #%d", bill_id)
        return removed

    def handle_all(self) -> int:
        """Wipe the sales history. Products and expenses are untouched."""
        count = self._bill_repo.delete_all()
        logger.info("Deleted all %d bill(s)", count)
        return count
