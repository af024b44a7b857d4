"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging
from pathlib import Path

from shopcalc.application.bill_writer import BackgroundBillWriter
from shopcalc.application.feedback import Feedback, NoFeedback
from shopcalc.infrastructure.export.csv_bill_exporter import CsvBillExporter
from shopcalc.infrastructure.persistence.json_bill_repository import (
    JsonBillRepository,
)
from shopcalc.infrastructure.persistence.json_expense_repository import (
    JsonExpenseRepository,
)
from shopcalc.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from shopcalc.infrastructure.terminal_feedback import TerminalBell

logger = logging.getLogger(__name__)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

_data_dir = DEFAULT_DATA_DIR
_bell = False


def configure(data_dir: Path | None = None, bell: bool = False) -> None:
    """Point the repositories at ``data_dir`` and pick the feedback device."""
    global _data_dir, _bell
    _data_dir = Path(data_dir) if data_dir is not None else DEFAULT_DATA_DIR
    _bell = bell
    logger.debug("Using data directory %s (bell=%s)", _data_dir, _bell)


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(_data_dir / "products.json")


def bill_repository() -> JsonBillRepository:
    return JsonBillRepository(_data_dir / "bills.json")


def expense_repository() -> JsonExpenseRepository:
    return JsonExpenseRepository(_data_dir / "expenses.json")


def bill_writer(repo: JsonBillRepository | None = None) -> BackgroundBillWriter:
    return BackgroundBillWriter(repo or bill_repository())


def bill_exporter() -> CsvBillExporter:
    return CsvBillExporter()


def feedback() -> Feedback:
    return TerminalBell() if _bell else NoFeedback()
