# backend/brokernotes/services/generation_service.py

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Callable, Optional

from ..config import Settings
from ..core.errors import MissingSourceFileError
from ..docs.docx_writer import DocxNoteRenderer, NoteRenderer
from ..excel.sheets import CreditSheet, MainSheet
from ..excel.workbook import credit_worksheet, main_worksheet, open_workbook, save_workbook
from ..pipeline.fanout import CreditFanout
from ..pipeline.processor import RowProcessor
from ..pipeline.report import RowStatus, RunReport
from ..utils.open_folder import open_folder

logger = logging.getLogger(__name__)


class NoteGenerationService:
    """
    Facade for one run over the workbook:
      - open workbook (missing -> MissingSourceFileError, nothing touched)
      - main rows -> debit notes, linked credit rows -> credit notes
      - save workbook once, at the end

    IMPORTANT SEMANTICS:
      - any unclassified exception before the save aborts the run and the
        workbook on disk is left as it was
      - a credit note failure is NOT unclassified: it is logged per row and
        the run continues
    """

    def __init__(
        self,
        settings: Settings,
        *,
        renderer: Optional[NoteRenderer] = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._settings = settings
        self._renderer = renderer
        self._today = today

    @property
    def settings(self) -> Settings:
        return self._settings

    def _check_debit_template(self) -> None:
        # a missing credit template fails each credit row instead
        s = self._settings
        if not s.debit_template_path.is_file():
            raise MissingSourceFileError("Debit template", s.debit_template_path)

    @staticmethod
    def _warn_stranded(report: RunReport) -> None:
        for o in report.credit:
            if o.status is RowStatus.FAILED:
                logger.warning(
                    "Credit row %s (%s) left unprocessed; its debit note is marked processed, "
                    "so later runs will not regenerate it",
                    o.row_index,
                    o.note_no,
                )

    def run(self) -> RunReport:
        s = self._settings
        wb = open_workbook(s.workbook_path)

        main_ws = main_worksheet(wb)
        credit_ws = credit_worksheet(wb, s.credit_sheet_name)

        renderer = self._renderer
        if renderer is None:
            self._check_debit_template()
            renderer = DocxNoteRenderer(s.debit_template_path, s.credit_template_path)

        s.output_dir.mkdir(parents=True, exist_ok=True)

        fanout = CreditFanout(
            CreditSheet(credit_ws) if credit_ws is not None else None,
            renderer,
            s.output_dir,
            today=self._today,
            explicit_zero_overrides=s.explicit_zero_overrides,
        )
        processor = RowProcessor(
            MainSheet(main_ws),
            renderer,
            s.output_dir,
            fanout=fanout,
            today=self._today,
            explicit_zero_overrides=s.explicit_zero_overrides,
        )

        report = RunReport(workbook_path=str(s.workbook_path), output_dir=str(s.output_dir))
        processor.run(report)
        self._warn_stranded(report)

        save_workbook(wb, s.workbook_path)
        logger.info("Workbook saved: %s", s.workbook_path)

        if s.open_output_folder:
            open_folder(s.output_dir)

        return report
