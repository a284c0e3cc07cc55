"""Spreadsheet export of a complaint result set."""

from __future__ import annotations

import io
import logging
import zipfile
from datetime import datetime
from pathlib import Path
from typing import Sequence

import openpyxl
from openpyxl.styles import Alignment, Font
from openpyxl.utils import get_column_letter
from openpyxl.writer.excel import ExcelWriter

from .models import ComplaintResult

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "analise-reclame-aqui.xlsx"
DEFAULT_SHEET_NAME = "Análise Reclame Aqui"
XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

HEADERS = ("URL", "Title", "Complaint Text", "Date")

_MAX_COLUMN_WIDTH = 80
# Pinned so exports of the same results carry the same document properties.
_FIXED_TIMESTAMP = datetime(2000, 1, 1)


def build_rows(results: Sequence[ComplaintResult]) -> list[list[str]]:
    """Header row followed by one row per result, in result order."""
    rows = [list(HEADERS)]
    for result in results:
        rows.append([result.url, result.title, result.complaint_text, result.date])
    return rows


def render_xlsx(
    results: Sequence[ComplaintResult],
    sheet_name: str = DEFAULT_SHEET_NAME,
) -> bytes:
    """Serialize *results* into a single-sheet XLSX workbook.

    The header row is bold and frozen; columns are sized to the longest
    value (capped), and the complaint text column wraps.

    Raises:
        ValueError: If *results* is empty.
    """
    if not results:
        raise ValueError("nothing to export: result set is empty")

    wb = openpyxl.Workbook()
    wb.properties.created = _FIXED_TIMESTAMP
    wb.properties.modified = _FIXED_TIMESTAMP
    ws = wb.active
    ws.title = sheet_name[:31]  # Excel limit

    rows = build_rows(results)
    for row in rows:
        ws.append(row)
    for cell in ws[1]:
        cell.font = Font(bold=True)
    ws.freeze_panes = "A2"

    for col_idx, header in enumerate(HEADERS, start=1):
        max_len = max(len(str(row[col_idx - 1])) for row in rows)
        ws.column_dimensions[get_column_letter(col_idx)].width = min(max_len + 2, _MAX_COLUMN_WIDTH)

    text_col = HEADERS.index("Complaint Text") + 1
    for (cell,) in ws.iter_rows(min_row=2, min_col=text_col, max_col=text_col):
        cell.alignment = Alignment(wrap_text=True, vertical="top")

    buf = io.BytesIO()
    # wb.save() would stamp "modified" with the current time.
    ExcelWriter(wb, zipfile.ZipFile(buf, "w", zipfile.ZIP_DEFLATED, allowZip64=True)).save()
    data = buf.getvalue()
    logger.info("xlsx rendered", extra={"rows": len(results), "bytes": len(data)})
    return data


def write_xlsx(
    results: Sequence[ComplaintResult],
    path: str | Path = DEFAULT_FILENAME,
    sheet_name: str = DEFAULT_SHEET_NAME,
) -> Path:
    """Write the workbook to *path* and return the resolved path."""
    target = Path(path)
    target.write_bytes(render_xlsx(results, sheet_name=sheet_name))
    logger.info("xlsx written", extra={"path": str(target), "rows": len(results)})
    return target
