# backend/brokernotes/excel/sheets.py
from __future__ import annotations

import logging
from dataclasses import fields
from decimal import Decimal
from typing import Dict, Iterator, List, Optional

from openpyxl.worksheet.worksheet import Worksheet

from ..calc.credit import CreditAmounts
from ..calc.debit import DebitAmounts
from ..contracts.notes import CreditRow, MainRow, normalize_note_key
from .cells import (
    get_number,
    get_optional_number,
    get_str,
    get_value,
    header_map,
    is_blank_value,
    is_row_blank,
    last_row,
    set_money,
    set_number,
    set_str,
)
from .layout import (
    PROCESSED_MARK,
    CreditSheetHeaders,
    MainSheetLayout,
    is_processed_mark,
)

logger = logging.getLogger(__name__)


class MainSheet:
    """Fixed-column view over the main (debit) sheet."""

    def __init__(self, ws: Worksheet, layout: Optional[MainSheetLayout] = None) -> None:
        self.ws = ws
        self.layout = layout or MainSheetLayout()

    def row_indices(self) -> Iterator[int]:
        return iter(range(1, last_row(self.ws) + 1))

    def is_blank(self, r: int) -> bool:
        return is_row_blank(self.ws, r, range(0, self.layout.last_input + 1))

    def is_processed(self, r: int) -> bool:
        return is_processed_mark(get_str(self.ws, r, self.layout.processed))

    def read(self, r: int) -> MainRow:
        ws, lay = self.ws, self.layout
        return MainRow(
            row_index=r,
            note_number=get_str(ws, r, lay.note_number),
            document_date=get_str(ws, r, lay.document_date),
            interest=get_str(ws, r, lay.interest),
            insured_name=get_str(ws, r, lay.insured_name),
            default_reinsured_name=get_str(ws, r, lay.default_reinsured_name),
            period=get_str(ws, r, lay.period),
            sum_insured=get_number(ws, r, lay.sum_insured),
            cedent_rate=get_number(ws, r, lay.cedent_rate),
            reinsurer_rate=get_optional_number(ws, r, lay.reinsurer_rate),
            share_pct=get_number(ws, r, lay.share_pct),
            brokerage_pct=get_number(ws, r, lay.brokerage_pct),
            ceding_commission_pct=get_number(ws, r, lay.ceding_commission_pct),
            processed=self.is_processed(r),
        )

    def set_document_date(self, r: int, value: str) -> None:
        set_str(self.ws, r, self.layout.document_date, value)

    def write_debit(self, row: MainRow, amounts: DebitAmounts) -> None:
        ws, lay, r = self.ws, self.layout, row.row_index

        set_money(ws, r, lay.gross_premium_cedent, amounts.gross_premium_cedent)
        set_money(ws, r, lay.share_premium_cedent, amounts.share_premium_cedent)
        set_money(ws, r, lay.gross_premium_reinsurer, amounts.gross_premium_reinsurer)
        set_money(ws, r, lay.share_premium_reinsurer, amounts.share_premium_reinsurer)
        set_number(ws, r, lay.ceding_commission_pct, row.ceding_commission_pct)
        set_money(ws, r, lay.ceding_commission_amount, amounts.ceding_commission_amount)
        set_money(ws, r, lay.gross_brokerage, amounts.gross_brokerage)
        set_money(ws, r, lay.net_brokerage, amounts.net_brokerage)
        set_money(ws, r, lay.net_premium_from_you, amounts.net_premium_from_you)
        set_money(ws, r, lay.net_premium_to_you, amounts.net_premium_to_you)

    def mark_processed(self, r: int) -> None:
        set_str(self.ws, r, self.layout.processed, PROCESSED_MARK)


class CreditSheet:
    """
    Header-driven view over the credit detail sheet.

    Columns are located by (lowercased) header text, so added or reordered
    columns do not break anything. A missing header reads as blank/zero and
    writes to it are dropped, except "Processed", which is appended on first
    use so the marker is never lost.
    """

    def __init__(self, ws: Worksheet, headers: Optional[CreditSheetHeaders] = None) -> None:
        self.ws = ws
        self.headers = headers or CreditSheetHeaders()
        self._cols = self._resolve_columns()

    def _resolve_columns(self) -> Dict[str, int]:
        found = header_map(self.ws)
        cols: Dict[str, int] = {}
        for f in fields(self.headers):
            name, aliases = f.name, getattr(self.headers, f.name)
            if name == "input_fields":
                continue
            for alias in aliases:
                idx = found.get(alias.lower())
                if idx is not None:
                    cols[name] = idx
                    break
        missing = sorted({f.name for f in fields(self.headers)} - set(cols) - {"input_fields"})
        if missing:
            logger.debug("credit sheet %r: headers not found: %s", self.ws.title, missing)
        return cols

    def has(self, field: str) -> bool:
        return field in self._cols

    # -----------------------------
    # Field accessors
    # -----------------------------
    def _str(self, r: int, field: str) -> str:
        col = self._cols.get(field)
        return "" if col is None else get_str(self.ws, r, col)

    def _num(self, r: int, field: str) -> Decimal:
        col = self._cols.get(field)
        return Decimal("0") if col is None else get_number(self.ws, r, col)

    def _opt(self, r: int, field: str) -> Optional[Decimal]:
        col = self._cols.get(field)
        return None if col is None else get_optional_number(self.ws, r, col)

    def _set_money(self, r: int, field: str, value: Decimal) -> None:
        col = self._cols.get(field)
        if col is not None:
            set_money(self.ws, r, col, value)

    # -----------------------------
    # Rows
    # -----------------------------
    def row_indices(self) -> Iterator[int]:
        return iter(range(1, last_row(self.ws) + 1))

    def is_blank(self, r: int) -> bool:
        for field in self.headers.input_fields:
            col = self._cols.get(field)
            if col is not None and not is_blank_value(get_value(self.ws, r, col)):
                return False
        return True

    def is_processed(self, r: int) -> bool:
        return is_processed_mark(self._str(r, "processed"))

    def read(self, r: int) -> CreditRow:
        return CreditRow(
            row_index=r,
            linked_debit_note_no=self._str(r, "linked_debit_note_no"),
            credit_note_no=self._str(r, "credit_note_no"),
            reinsured_name=self._str(r, "reinsured_name"),
            reinsurer_name=self._str(r, "reinsurer_name"),
            reinsurer_address=self._str(r, "reinsurer_address"),
            reinsurer_share_pct=self._num(r, "reinsurer_share_pct"),
            rate_override=self._opt(r, "rate_override"),
            brokerage_override=self._opt(r, "brokerage_override"),
            ceding_commission_override=self._opt(r, "ceding_commission_override"),
            processed=self.is_processed(r),
        )

    def index_by_debit_note(self) -> Dict[str, List[int]]:
        """Normalized debit note key -> credit row indices, in sheet order."""
        index: Dict[str, List[int]] = {}
        for r in self.row_indices():
            key = normalize_note_key(self._str(r, "linked_debit_note_no"))
            if key:
                index.setdefault(key, []).append(r)
        return index

    def write_credit(self, r: int, amounts: CreditAmounts) -> None:
        self._set_money(r, "gross_premium", amounts.gross_premium)
        self._set_money(r, "share_premium", amounts.share_premium)
        self._set_money(r, "commission_amount", amounts.commission_amount)
        self._set_money(r, "gross_brokerage", amounts.gross_brokerage)
        self._set_money(r, "net_payable", amounts.net_payable)

    def mark_processed(self, r: int) -> None:
        col = self._cols.get("processed")
        if col is None:
            col = self.ws.max_column  # next free 0-based column
            set_str(self.ws, 0, col, "Processed")
            self._cols["processed"] = col
            logger.info("credit sheet %r: added 'Processed' column", self.ws.title)
        set_str(self.ws, r, col, PROCESSED_MARK)
