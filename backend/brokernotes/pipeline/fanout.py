# backend/brokernotes/pipeline/fanout.py
from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Callable, Dict, List, Optional

from ..calc.credit import compute_credit, resolve_credit_terms
from ..contracts.notes import MainRow, normalize_note_key
from ..docs.docx_writer import NoteRenderer
from ..docs.notes import build_credit_note
from ..excel.sheets import CreditSheet
from ..normalize.dates import format_doc_date
from .report import RowOutcome, RowStatus

logger = logging.getLogger(__name__)


class CreditFanout:
    """
    Per-reinsurer credit notes for one processed main row.

    Credit rows are indexed by debit note number once, up front; each visit
    re-reads the row so a marker written earlier in the same run is seen.
    A failure on one credit row is logged and isolated: the row stays
    unprocessed and its siblings carry on.
    """

    def __init__(
        self,
        sheet: Optional[CreditSheet],
        renderer: NoteRenderer,
        output_dir: Path,
        *,
        today: Callable[[], date] = date.today,
        explicit_zero_overrides: bool = False,
    ) -> None:
        self.sheet = sheet
        self.renderer = renderer
        self.output_dir = Path(output_dir)
        self.today = today
        self.explicit_zero_overrides = explicit_zero_overrides
        self._index: Dict[str, List[int]] = sheet.index_by_debit_note() if sheet else {}

    def linked_rows(self, note_no: str) -> List[int]:
        return list(self._index.get(normalize_note_key(note_no), []))

    def run(self, main: MainRow) -> List[RowOutcome]:
        if self.sheet is None:
            return []
        return [self._process_one(self.sheet, main, r) for r in self.linked_rows(main.note_number)]

    def _process_one(self, sheet: CreditSheet, main: MainRow, r: int) -> RowOutcome:
        # indexed rows always carry a debit note number; same rule as main rows
        if sheet.is_blank(r):
            logger.info("Skipping blank credit row %s", r)
            return RowOutcome("credit", r, RowStatus.SKIPPED_BLANK)

        credit = sheet.read(r)
        if credit.processed:
            logger.info(
                "Skipping credit row %s for %s (already processed)", r, credit.linked_debit_note_no
            )
            return RowOutcome("credit", r, RowStatus.SKIPPED_PROCESSED)

        terms = resolve_credit_terms(
            cedent_rate=main.cedent_rate,
            reinsurer_rate=main.reinsurer_rate,
            brokerage_pct=main.brokerage_pct,
            ceding_commission_pct=main.ceding_commission_pct,
            rate_override=credit.rate_override,
            brokerage_override=credit.brokerage_override,
            ceding_commission_override=credit.ceding_commission_override,
            explicit_zero=self.explicit_zero_overrides,
        )
        amounts = compute_credit(
            sum_insured=main.sum_insured,
            reinsurer_share_pct=credit.reinsurer_share_pct,
            terms=terms,
        )
        note = build_credit_note(
            main, credit, terms, amounts, document_date=format_doc_date(self.today())
        )
        out_path = self.output_dir / f"{note.file_stem}.docx"

        try:
            self.renderer.render_credit(note, out_path)
        except Exception as e:  # noqa: BLE001
            logger.exception(
                "Failed to generate credit note for %s (linked to %s): %s",
                note.reinsurer_name,
                main.note_number,
                e,
            )
            return RowOutcome("credit", r, RowStatus.FAILED, note_no=note.note_no, error=str(e))

        sheet.write_credit(r, amounts)
        sheet.mark_processed(r)
        logger.info(
            "Credit note %s generated for %s (linked to %s)",
            note.note_no,
            note.reinsurer_name,
            main.note_number,
        )
        return RowOutcome(
            "credit", r, RowStatus.PROCESSED, note_no=note.note_no, out_path=str(out_path)
        )
