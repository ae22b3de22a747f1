# backend/brokernotes/pipeline/processor.py
from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Callable, Optional

from ..calc.debit import compute_debit
from ..contracts.notes import MainRow
from ..docs.docx_writer import NoteRenderer
from ..docs.notes import build_debit_note
from ..excel.sheets import MainSheet
from ..normalize.dates import format_doc_date
from .fanout import CreditFanout
from .report import RowOutcome, RowStatus, RunReport

logger = logging.getLogger(__name__)


def default_note_number(row_index: int) -> str:
    return f"DN-{row_index:03d}"


class RowProcessor:
    """
    Main sheet loop:
      blank -> already processed -> incomplete -> process (first match wins).

    Only PROCESSED rows are written to. Writing the "Yes" marker is what makes
    a second run over the saved workbook a no-op.
    """

    def __init__(
        self,
        sheet: MainSheet,
        renderer: NoteRenderer,
        output_dir: Path,
        *,
        fanout: Optional[CreditFanout] = None,
        today: Callable[[], date] = date.today,
        explicit_zero_overrides: bool = False,
    ) -> None:
        self.sheet = sheet
        self.renderer = renderer
        self.output_dir = Path(output_dir)
        self.fanout = fanout
        self.today = today
        self.explicit_zero_overrides = explicit_zero_overrides

    def run(self, report: Optional[RunReport] = None) -> RunReport:
        report = report if report is not None else RunReport()
        for r in self.sheet.row_indices():
            outcome, row = self.process_row(r)
            report.main.append(outcome)
            if row is not None and self.fanout is not None:
                report.credit.extend(self.fanout.run(row))
        return report

    def process_row(self, r: int) -> tuple[RowOutcome, Optional[MainRow]]:
        """Outcome for row r, plus the defaulted row when it was processed."""
        if self.sheet.is_blank(r):
            logger.info("Skipping blank row %s", r)
            return RowOutcome("main", r, RowStatus.SKIPPED_BLANK), None

        if self.sheet.is_processed(r):
            logger.info("Skipping main row %s (already processed)", r)
            return RowOutcome("main", r, RowStatus.SKIPPED_PROCESSED), None

        row = self.sheet.read(r)
        if not row.is_complete:
            logger.info("Skipping incomplete main row %s", r)
            return RowOutcome("main", r, RowStatus.SKIPPED_INCOMPLETE, note_no=row.note_number or None), None

        row, date_defaulted = self._apply_defaults(row)

        amounts = compute_debit(
            sum_insured=row.sum_insured,
            cedent_rate=row.cedent_rate,
            reinsurer_rate=row.reinsurer_rate,
            share_pct=row.share_pct,
            brokerage_pct=row.brokerage_pct,
            ceding_commission_pct=row.ceding_commission_pct,
            explicit_zero=self.explicit_zero_overrides,
        )

        if date_defaulted:
            self.sheet.set_document_date(r, row.document_date)
        self.sheet.write_debit(row, amounts)
        self.sheet.mark_processed(r)

        note = build_debit_note(row, amounts)
        out_path = self.output_dir / f"{note.file_stem}.docx"
        self.renderer.render_debit(note, out_path)
        logger.info("Main debit note generated: %s", row.note_number)

        outcome = RowOutcome(
            "main", r, RowStatus.PROCESSED, note_no=row.note_number, out_path=str(out_path)
        )
        return outcome, row

    def _apply_defaults(self, row: MainRow) -> tuple[MainRow, bool]:
        update: dict[str, str] = {}
        if not row.note_number:
            update["note_number"] = default_note_number(row.row_index)
        if not row.document_date:
            update["document_date"] = format_doc_date(self.today())
        if not update:
            return row, False
        return row.model_copy(update=update), "document_date" in update
