"""Application service: Export Bills use case.

Formatting is delegated to a ``BillExporter`` (CSV in the
infrastructure layer); this handler only feeds it the full bill list.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TextIO

from shopcalc.domain.model.bill import Bill
from shopcalc.domain.repository.bill_repository import BillRepository


class BillExporter(ABC):

    @abstractmethod
    def write(self, bills: list[Bill], out: TextIO) -> None:
        """Write ``bills`` to ``out`` in the exporter's format."""


class ExportBillsHandler:

    def __init__(self, bill_repo: BillRepository, exporter: BillExporter) -> None:
        self._bill_repo = bill_repo
        self._exporter = exporter

    def handle(self, out: TextIO) -> int:
        """Write every bill, newest first; return how many were written."""
        bills = self._bill_repo.list_all()
        self._exporter.write(bills, out)
        return len(bills)
