"""
Receipt report generator.

Produces:
- Structured receipt reports (line items plus totals)
- CSV and JSON export
"""

from __future__ import annotations

import csv
import io
import json
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Any, Optional

from receipt_engine.basket import Receipt


class _DecimalEncoder(json.JSONEncoder):
    """JSON encoder that writes Decimal amounts as two-decimal strings."""

    def default(self, o: Any) -> Any:
        if isinstance(o, Decimal):
            return f"{o:.2f}"
        if isinstance(o, date):
            return o.isoformat()
        return super().default(o)


class ReportGenerator:
    """
    Builds receipt reports and writes them out.

    Reports are plain dicts so they can be exported to CSV/JSON files
    under ``output_dir``.
    """

    def __init__(self, output_dir: Optional[str] = None) -> None:
        self.output_dir = Path(output_dir) if output_dir else Path("reports")

    def _write(self, filename: str, content: str) -> None:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        (self.output_dir / filename).write_text(content, encoding="utf-8")

    def receipt_report(self, receipt: Receipt) -> dict[str, Any]:
        """Generate a structured report for a rendered receipt."""
        return {
            "report_type": "receipt",
            "header": receipt.header,
            "generated_date": date.today().isoformat(),
            "items": [
                {
                    "quantity": item.quantity,
                    "name": item.name,
                    "imported": item.is_imported,
                    "cost": item.cost,
                    "tax": item.tax_amount,
                    "total": item.total_cost,
                }
                for item in receipt.items
            ],
            "summary": {
                "item_count": len(receipt.items),
                "sales_taxes": receipt.sales_taxes,
                "total": receipt.total,
            },
        }

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def to_json(
        self,
        report: dict[str, Any],
        filename: Optional[str] = None,
    ) -> str:
        """Serialize a report to JSON, writing it out if a filename is given."""
        json_str = json.dumps(report, cls=_DecimalEncoder, indent=2)
        if filename:
            self._write(filename, json_str)
        return json_str

    def to_csv(
        self,
        report: dict[str, Any],
        filename: Optional[str] = None,
    ) -> str:
        """Export the report's line items to CSV. Returns the CSV string."""
        rows = report.get("items", [])
        if not rows:
            return ""

        output = io.StringIO()
        writer = csv.DictWriter(output, fieldnames=list(rows[0].keys()))
        writer.writeheader()
        for row in rows:
            writer.writerow(
                {k: f"{v:.2f}" if isinstance(v, Decimal) else v for k, v in row.items()}
            )

        csv_str = output.getvalue()
        if filename:
            self._write(filename, csv_str)
        return csv_str
