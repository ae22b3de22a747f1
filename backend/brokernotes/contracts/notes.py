from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ----------------------------
# Sheet rows (as read, before defaults)
# ----------------------------

class MainRow(BaseModel):
    """
    One cedent-level transaction from the main sheet.

    Percentages are 0..100. Nothing is range-checked: negative values are
    carried through the arithmetic unchanged.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    row_index: int = Field(..., ge=1)

    note_number: str = ""
    document_date: str = ""
    interest: str = ""
    insured_name: str = ""
    default_reinsured_name: str = ""
    period: str = ""

    sum_insured: Decimal = Decimal("0")
    cedent_rate: Decimal = Decimal("0")
    # None == blank cell
    reinsurer_rate: Optional[Decimal] = None
    share_pct: Decimal = Decimal("0")
    brokerage_pct: Decimal = Decimal("0")
    ceding_commission_pct: Decimal = Decimal("0")

    processed: bool = False

    @property
    def is_complete(self) -> bool:
        return not (
            self.sum_insured == 0 or self.cedent_rate == 0 or self.share_pct == 0
        )


class CreditRow(BaseModel):
    """
    One reinsurer's share of a main row, linked by debit note number.

    Override fields are None when the cell is blank.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    row_index: int = Field(..., ge=1)

    linked_debit_note_no: str = ""
    credit_note_no: str = ""
    reinsured_name: str = ""
    reinsurer_name: str = ""
    reinsurer_address: str = ""

    reinsurer_share_pct: Decimal = Decimal("0")
    rate_override: Optional[Decimal] = None
    brokerage_override: Optional[Decimal] = None
    ceding_commission_override: Optional[Decimal] = None

    processed: bool = False


def normalize_note_key(note_no: str) -> str:
    """Key used to link credit rows to their debit note (case-insensitive)."""
    return (note_no or "").strip().casefold()
