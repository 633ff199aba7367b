from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Sequence

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.table import Table, TableStyleInfo

from sfm.domain.models import client_type_label

log = logging.getLogger(__name__)


class ExcelService:
    """Writes the current list snapshot of a screen to an .xlsx file."""

    def export_rows(self, path: Path | str, title: str, headers: Sequence[str], rows: Iterable[Sequence]) -> Path:
        wb = Workbook()
        ws = wb.active
        ws.title = title[:31]

        ws.append(list(headers))
        for c in ws[1]:
            c.font = Font(bold=True)

        count = 0
        for row in rows:
            ws.append(["" if v is None else v for v in row])
            count += 1

        for i, h in enumerate(headers, start=1):
            ws.column_dimensions[get_column_letter(i)].width = max(12, len(str(h)) + 4)

        # Excel tables need at least one data row
        if count:
            ref = f"A1:{get_column_letter(len(headers))}{count + 1}"
            tab = Table(displayName=f"{title.replace(' ', '')}Table", ref=ref)
            tab.tableStyleInfo = TableStyleInfo(name="TableStyleMedium9", showRowStripes=True, showColumnStripes=False)
            ws.add_table(tab)

        out = Path(path)
        out.parent.mkdir(parents=True, exist_ok=True)
        wb.save(out)
        log.info("excel_exported path=%s title=%s rows=%s", out, title, count)
        return out

    def export_clients(self, path: Path | str, clients: Iterable[dict]) -> Path:
        rows = ((c.get("id"), c.get("nombre"), c.get("ciudad"), client_type_label(c.get("tipo"))) for c in clients)
        return self.export_rows(path, "Clients", ["ID", "Name", "City", "Type"], rows)

    def export_products(self, path: Path | str, products: Iterable[dict]) -> Path:
        rows = ((p.get("productoID"), p.get("nombre"), p.get("precio"), p.get("stock")) for p in products)
        return self.export_rows(path, "Products", ["ID", "Name", "Price", "Stock"], rows)

    def export_sales_results(self, path: Path | str, results: Iterable[dict]) -> Path:
        rows = (
            (v.get("ventaId"), v.get("productoId"), v.get("cantidad"), v.get("subtotal"), v.get("fecha"))
            for v in results
        )
        return self.export_rows(path, "Sales", ["Sale ID", "Product ID", "Qty", "Subtotal", "Date"], rows)
