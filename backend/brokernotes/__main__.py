from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from .config import Settings
from .core.errors import NoteGenError
from .pipeline.report import RowStatus, RunReport
from .services.generation_service import NoteGenerationService

logger = logging.getLogger("brokernotes")

EXIT_OK = 0
EXIT_FATAL = 1
EXIT_USER_ERROR = 2


def _build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="brokernotes",
        description="Generate reinsurance debit / credit notes from the calculations workbook",
    )
    p.add_argument(
        "command",
        nargs="?",
        default="run",
        choices=["run"],
        help="Only 'run' is supported (default).",
    )
    p.add_argument("--base-dir", dest="base_dir", type=Path, default=None,
                   help="Directory searched for resources/ (default: current directory).")
    p.add_argument("--workbook", dest="workbook_path", type=Path, default=None,
                   help="Path to DebitNoteCalculations.xlsx (updated in place).")
    p.add_argument("--debit-template", dest="debit_template_path", type=Path, default=None)
    p.add_argument("--credit-template", dest="credit_template_path", type=Path, default=None)
    p.add_argument("--output-dir", dest="output_dir", type=Path, default=None)
    p.add_argument("--credit-sheet", dest="credit_sheet_name", default=None,
                   help='Name of the credit detail sheet (default: "CreditNoteDetails").')
    p.add_argument("--open-output", dest="open_output_folder", action="store_true", default=None,
                   help="Open the output folder when done.")
    p.add_argument("--explicit-zero-overrides", dest="explicit_zero_overrides",
                   action="store_true", default=None,
                   help="Treat 0 in an override cell as a real value instead of 'inherit'.")
    p.add_argument("--log-level", dest="log_level",
                   default=os.getenv("BROKERNOTES_LOG_LEVEL", "INFO"),
                   help="Logging level (default: INFO).")
    return p


def _print_banner(settings: Settings) -> None:
    print("==============================================")
    print("   Reinsurance Debit & Credit Note Generator")
    print("==============================================")
    print(f"[INFO] Excel file:      {settings.workbook_path}")
    print(f"[INFO] Debit template:  {settings.debit_template_path}")
    print(f"[INFO] Credit template: {settings.credit_template_path}")
    print(f"[INFO] Output folder:   {settings.output_dir}")
    print()


def _print_summary(report: RunReport) -> None:
    main = report.main_counts()
    credit = report.credit_counts()
    print()
    print("[RESULT]")
    print(f"  debit notes:   {main[RowStatus.PROCESSED.value]}")
    print(f"  credit notes:  {credit[RowStatus.PROCESSED.value]}")
    print(f"  credit failed: {credit[RowStatus.FAILED.value]}")
    print(
        "  skipped:       "
        f"{main[RowStatus.SKIPPED_PROCESSED.value]} already processed, "
        f"{main[RowStatus.SKIPPED_INCOMPLETE.value]} incomplete, "
        f"{main[RowStatus.SKIPPED_BLANK.value]} blank"
    )
    print(f"  workbook saved: {report.workbook_path}")
    print("All Debit & Credit Notes processed and Excel updated.")


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = Settings.from_env(
            base_dir=args.base_dir,
            workbook_path=args.workbook_path,
            debit_template_path=args.debit_template_path,
            credit_template_path=args.credit_template_path,
            output_dir=args.output_dir,
            credit_sheet_name=args.credit_sheet_name,
            open_output_folder=args.open_output_folder,
            explicit_zero_overrides=args.explicit_zero_overrides,
        )
        _print_banner(settings)
        report = NoteGenerationService(settings).run()
    except NoteGenError as e:
        logger.error("%s", e)
        return EXIT_USER_ERROR
    except Exception as e:  # noqa: BLE001
        logger.exception("Run aborted, workbook not saved: %s", e)
        return EXIT_FATAL

    _print_summary(report)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
