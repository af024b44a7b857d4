"""Bill writer: the asynchronous boundary between the till and storage.

``submit()`` only *issues* the write and hands back a Future. Whoever
needs to know that a bill is durably stored waits on that Future;
nothing else in the billing flow blocks on storage.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from concurrent.futures import Future, ThreadPoolExecutor

from shopcalc.domain.model.bill import Bill
from shopcalc.domain.repository.bill_repository import BillRepository

logger = logging.getLogger(__name__)


class BillWriter(ABC):

    @abstractmethod
    def submit(self, bill: Bill) -> Future[Bill]:
        """Issue the write; the Future resolves to the stored bill."""

    def shutdown(self, wait: bool = True) -> None:
        """Release any resources; pending writes finish if ``wait``."""


class BackgroundBillWriter(BillWriter):
    """Writes bills on a single worker thread.

    No retries: a failed write is logged and left on the Future for the
    caller to inspect.
    """

    def __init__(self, bill_repo: BillRepository) -> None:
        self._bill_repo = bill_repo
        self._executor = ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="bill-writer"
        )

    def submit(self, bill: Bill) -> Future[Bill]:
        future = self._executor.submit(self._bill_repo.add, bill)
        future.add_done_callback(_log_outcome)
        return future

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)


def _log_outcome(future: Future[Bill]) -> None:
    if future.cancelled():
        logger.warning("Bill write was cancelled")
        return
    exc = future.exception()
    if exc is not None:
        logger.error("Bill write failed: %s", exc, exc_info=exc)
        return
    bill = future.result()
    logger.info("Stored bill #%s for %s (%s)", bill.id, bill.customer_name, bill.final_total)
