from __future__ import annotations

import sys
from datetime import date
from pathlib import Path
from typing import Any, Callable, List, Optional

import pytest
from docx import Document
from openpyxl import Workbook

from brokernotes.docs.notes import CreditNote, DebitNote


def pytest_sessionstart(session):
    """
    Make sure backend/ (where the brokernotes package lives) is on sys.path,
    even when pytest is started from the repository root.
    """
    backend_dir = Path(__file__).resolve().parents[1]  # .../backend
    p = str(backend_dir)
    if p not in sys.path:
        sys.path.insert(0, p)


FIXED_TODAY = date(2025, 3, 5)

CREDIT_HEADERS = [
    "Debit Note No.",
    "Reinsurer Name",
    "Reinsurer Share %",
    "Rate %",
    "Brokerage %",
    "Ceding Commission %",
    "Processed",
    "Fac Premium 100%",
    "Share Premium",
    "Ceding Commission Amount",
    "Gross Brokerage",
    "Net Payable",
    "Credit Note No.",
    "Reinsured Name",
    "Reinsurer Address",
]


def _main_row_values(
    note_no: Any = "DN-100",
    doc_date: Any = "01-Jan-2025",
    *,
    si: Any = 1_000_000,
    cedent_rate: Any = 10,
    reins_rate: Any = None,
    share: Any = 50,
    brokerage: Any = 10,
    ceding_pct: Any = 20,
    processed: Any = None,
) -> List[Any]:
    """22 cells: inputs 0..10, outputs 11..20 (15 = ceding %), marker 21."""
    row: List[Any] = [None] * 22
    row[0:11] = [
        note_no,
        doc_date,
        "Hull & Machinery",
        "Acme Shipping Ltd",
        "Ocean Insurance Co",
        "01-Jan-2025 to 31-Dec-2025",
        si,
        cedent_rate,
        reins_rate,
        share,
        brokerage,
    ]
    row[15] = ceding_pct
    row[21] = processed
    return row


def _credit_row_values(
    debit_no: str = "DN-100",
    reinsurer: Optional[str] = "Alpha Re",
    share: Any = 30,
    *,
    rate: Any = None,
    brokerage: Any = None,
    ceding: Any = None,
    processed: Any = None,
    credit_no: Optional[str] = None,
    reinsured: Optional[str] = None,
    address: Optional[str] = None,
) -> List[Any]:
    return [
        debit_no, reinsurer, share, rate, brokerage, ceding, processed,
        None, None, None, None, None,
        credit_no, reinsured, address,
    ]


@pytest.fixture
def make_workbook(tmp_path: Path) -> Callable[..., Path]:
    """Write a workbook with a main sheet and (optionally) a credit sheet."""

    def _make(
        main_rows: List[List[Any]],
        credit_rows: Optional[List[List[Any]]] = None,
        *,
        credit_headers: Optional[List[str]] = None,
        name: str = "DebitNoteCalculations.xlsx",
    ) -> Path:
        wb = Workbook()
        ws = wb.active
        ws.title = "Main"
        ws.append([f"col{i}" for i in range(22)])
        for row in main_rows:
            ws.append(row)
        if credit_rows is not None:
            cs = wb.create_sheet("CreditNoteDetails")
            cs.append(credit_headers or CREDIT_HEADERS)
            for row in credit_rows:
                cs.append(row)
        path = tmp_path / name
        wb.save(path)
        return path

    return _make


def _write_template(path: Path, rows: int, with_to: bool) -> Path:
    doc = Document()
    doc.add_paragraph("BROKER NOTE")
    if with_to:
        doc.add_paragraph("To: [recipient]")
    table = doc.add_table(rows=rows, cols=3)
    for r in range(rows):
        table.cell(r, 0).text = f"label {r}"
        table.cell(r, 1).text = ":"
        table.cell(r, 2).text = "[value]"
    doc.add_paragraph("Total payable as above.")
    path.parent.mkdir(parents=True, exist_ok=True)
    doc.save(str(path))
    return path


@pytest.fixture
def debit_template(tmp_path: Path) -> Path:
    return _write_template(tmp_path / "resources" / "DebitNoteTemplate.docx", 13, with_to=False)


@pytest.fixture
def credit_template(tmp_path: Path) -> Path:
    return _write_template(tmp_path / "resources" / "CreditNoteTemplate.docx", 14, with_to=True)


class RecordingRenderer:
    """Collects fill requests instead of writing .docx files."""

    def __init__(self, fail_for: Optional[set[str]] = None) -> None:
        self.debits: List[DebitNote] = []
        self.credits: List[CreditNote] = []
        self.fail_for = fail_for or set()

    def render_debit(self, note: DebitNote, out_path: Path) -> None:
        self.debits.append(note)

    def render_credit(self, note: CreditNote, out_path: Path) -> None:
        if note.reinsurer_name in self.fail_for:
            raise OSError(f"disk full while writing {out_path.name}")
        self.credits.append(note)


@pytest.fixture
def main_row() -> Callable[..., List[Any]]:
    return _main_row_values


@pytest.fixture
def credit_row() -> Callable[..., List[Any]]:
    return _credit_row_values


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def failing_renderer() -> Callable[..., RecordingRenderer]:
    """Renderer that raises for the given reinsurer names."""
    return lambda *names: RecordingRenderer(fail_for=set(names))


@pytest.fixture
def today() -> Callable[[], date]:
    return lambda: FIXED_TODAY
