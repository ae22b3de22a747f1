from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from openpyxl import Workbook, load_workbook
from openpyxl.worksheet.worksheet import Worksheet

from ..core.errors import MissingSourceFileError

logger = logging.getLogger(__name__)


def open_workbook(path: Path) -> Workbook:
    p = Path(path)
    if not p.exists() or not p.is_file():
        raise MissingSourceFileError("Excel file", p)
    return load_workbook(p)


def main_worksheet(wb: Workbook) -> Worksheet:
    return wb.worksheets[0]


def credit_worksheet(wb: Workbook, name: str) -> Optional[Worksheet]:
    """Credit detail sheet by name; None when the workbook has no such sheet."""
    if name in wb.sheetnames:
        return wb[name]
    logger.info("No '%s' sheet in workbook, credit notes disabled", name)
    return None


def save_workbook(wb: Workbook, path: Path) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    wb.save(p)
