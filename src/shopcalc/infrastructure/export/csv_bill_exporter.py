"""CSV implementation of BillExporter.

One row per bill under the header the shop's spreadsheet expects. Dates
are shown in local time as ``dd MMM, hh:mm a`` (e.g. ``05 Mar, 02:30 PM``).
"""

from __future__ import annotations

import csv
from typing import TextIO

from shopcalc.application.export_bills import BillExporter
from shopcalc.domain.model.bill import Bill

HEADER = ["Date", "Customer", "Phone", "Subtotal", "Discount", "Tax", "Total", "Payment"]
DATE_FORMAT = "%d %b, %I:%M %p"


class CsvBillExporter(BillExporter):

    def write(self, bills: list[Bill], out: TextIO) -> None:
        writer = csv.writer(out, lineterminator="\n")
        writer.writerow(HEADER)
        for bill in bills:
            writer.writerow(
                [
                    bill.created_at.astimezone().strftime(DATE_FORMAT),
                    bill.customer_name,
                    bill.customer_phone,
                    bill.subtotal.rounded(),
                    bill.discount.rounded(),
                    bill.tax.rounded(),
                    bill.final_total.rounded(),
                    bill.payment_method.value,
                ]
            )
