# backend/brokernotes/docs/notes.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, List, Tuple

from ..calc.credit import CreditAmounts, CreditTerms
from ..calc.debit import DebitAmounts
from ..contracts.notes import CreditRow, MainRow
from .formatting import money, percent, safe_filename, share_of_100

# Value column of the template table
VALUE_COL = 2

CellMap = Dict[Tuple[int, int], str]

REINSURER_PLACEHOLDER = "Reinsurer"


@dataclass(frozen=True)
class DebitNote:
    """Document-fill request for one debit note."""

    note_no: str
    document_date: str
    interest: str
    insured: str
    reinsured: str
    period: str
    sum_insured: Decimal
    rate: Decimal
    fac_premium: Decimal
    share_pct: Decimal
    share_premium: Decimal
    net_premium: Decimal

    @property
    def file_stem(self) -> str:
        return safe_filename(self.note_no)

    def cells(self) -> CellMap:
        # row 2 of the template is a spacer
        rows = {
            0: self.note_no,
            1: self.document_date,
            3: self.interest,
            4: self.insured,
            5: self.reinsured,
            6: self.period,
            7: money(self.sum_insured),
            8: percent(self.rate),
            9: money(self.fac_premium),
            10: share_of_100(self.share_pct),
            11: money(self.share_premium),
            12: money(self.net_premium),
        }
        return {(r, VALUE_COL): text for r, text in rows.items()}


@dataclass(frozen=True)
class CreditNote:
    """Document-fill request for one reinsurer's credit note."""

    note_no: str
    debit_note_no: str
    document_date: str
    interest: str
    insured: str
    reinsured: str
    period: str
    sum_insured: Decimal
    rate: Decimal
    fac_premium: Decimal
    share_pct: Decimal
    share_premium: Decimal
    gross_brokerage: Decimal
    net_payable: Decimal
    reinsurer_name: str
    reinsurer_address: str = ""

    @property
    def file_stem(self) -> str:
        return safe_filename(self.note_no)

    def recipient_lines(self) -> List[str]:
        lines = [f"To: {self.reinsurer_name}"]
        lines.extend(
            ln.strip() for ln in self.reinsurer_address.splitlines() if ln.strip()
        )
        return lines

    def cells(self) -> CellMap:
        rows = {
            0: self.note_no,
            1: self.document_date,
            3: self.interest,
            4: self.insured,
            5: self.reinsured,
            6: self.period,
            7: money(self.sum_insured),
            8: percent(self.rate),
            9: money(self.fac_premium),
            10: share_of_100(self.share_pct),
            11: money(self.share_premium),
            12: money(self.gross_brokerage),
            13: money(self.net_payable),
        }
        return {(r, VALUE_COL): text for r, text in rows.items()}


# ----------------------------
# Builders
# ----------------------------

def build_debit_note(row: MainRow, amounts: DebitAmounts) -> DebitNote:
    return DebitNote(
        note_no=row.note_number,
        document_date=row.document_date,
        interest=row.interest,
        insured=row.insured_name,
        reinsured=row.default_reinsured_name,
        period=row.period,
        sum_insured=row.sum_insured,
        rate=row.cedent_rate,
        fac_premium=amounts.gross_premium_cedent,
        share_pct=row.share_pct,
        share_premium=amounts.share_premium_cedent,
        net_premium=amounts.net_premium_from_you,
    )


def credit_note_number(main: MainRow, credit: CreditRow) -> str:
    """
    Supplied credit note number, else CN-<debit note>-<reinsurer>-R<row>.
    The row suffix keeps two lines for the same reinsurer apart.
    """
    if credit.credit_note_no:
        return credit.credit_note_no
    suffix = f"R{credit.row_index:03d}"
    if credit.reinsurer_name:
        return f"CN-{main.note_number}-{credit.reinsurer_name}-{suffix}"
    return f"CN-{main.note_number}-{suffix}"


def build_credit_note(
    main: MainRow,
    credit: CreditRow,
    terms: CreditTerms,
    amounts: CreditAmounts,
    *,
    document_date: str,
) -> CreditNote:
    return CreditNote(
        note_no=credit_note_number(main, credit),
        debit_note_no=main.note_number,
        document_date=document_date,
        interest=main.interest,
        insured=main.insured_name,
        reinsured=credit.reinsured_name or main.default_reinsured_name,
        period=main.period,
        sum_insured=main.sum_insured,
        rate=terms.rate,
        fac_premium=amounts.gross_premium,
        share_pct=credit.reinsurer_share_pct,
        share_premium=amounts.share_premium,
        gross_brokerage=amounts.gross_brokerage,
        net_payable=amounts.net_payable,
        reinsurer_name=credit.reinsurer_name or REINSURER_PLACEHOLDER,
        reinsurer_address=credit.reinsurer_address,
    )
