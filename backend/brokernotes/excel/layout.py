from __future__ import annotations

from dataclasses import dataclass

# ---------------------------------------------------------------------
# Processed marker
# ---------------------------------------------------------------------

PROCESSED_MARK = "Yes"
PROCESSED_VALUES = frozenset({"yes", "processed"})


def is_processed_mark(value: str) -> bool:
    return (value or "").strip().lower() in PROCESSED_VALUES


# ---------------------------------------------------------------------
# Main sheet: fixed 0-based column indices
# ---------------------------------------------------------------------

@dataclass(frozen=True)
class MainSheetLayout:
    # inputs
    note_number: int = 0
    document_date: int = 1
    interest: int = 2
    insured_name: int = 3
    default_reinsured_name: int = 4
    period: int = 5
    sum_insured: int = 6
    cedent_rate: int = 7
    reinsurer_rate: int = 8
    share_pct: int = 9
    brokerage_pct: int = 10
    # blank-row check looks at note_number..brokerage_pct
    last_input: int = 10

    # outputs
    gross_premium_cedent: int = 11
    share_premium_cedent: int = 12
    gross_premium_reinsurer: int = 13
    share_premium_reinsurer: int = 14
    # input, echoed back on processing
    ceding_commission_pct: int = 15
    ceding_commission_amount: int = 16
    gross_brokerage: int = 17
    net_brokerage: int = 18
    net_premium_from_you: int = 19
    net_premium_to_you: int = 20

    processed: int = 21


# ---------------------------------------------------------------------
# Credit sheet: header-driven, lowercase aliases per logical field
# ---------------------------------------------------------------------

DEFAULT_CREDIT_SHEET = "CreditNoteDetails"


@dataclass(frozen=True)
class CreditSheetHeaders:
    linked_debit_note_no: tuple[str, ...] = ("debit note no.", "debit note no", "debit note number")
    credit_note_no: tuple[str, ...] = ("credit note no.", "credit note no", "credit note number")
    reinsured_name: tuple[str, ...] = ("reinsured name", "reinsured")
    reinsurer_name: tuple[str, ...] = ("reinsurer name", "reinsurer")
    reinsurer_address: tuple[str, ...] = ("reinsurer address", "address")
    reinsurer_share_pct: tuple[str, ...] = ("reinsurer share %", "share %", "reinsurer share")
    rate_override: tuple[str, ...] = ("rate %", "reinsurer rate %", "rate")
    brokerage_override: tuple[str, ...] = ("brokerage %", "brokerage")
    ceding_commission_override: tuple[str, ...] = ("ceding commission %", "ceding commission")

    gross_premium: tuple[str, ...] = ("fac premium 100%", "gross premium")
    share_premium: tuple[str, ...] = ("share premium",)
    commission_amount: tuple[str, ...] = ("ceding commission amount", "commission amount")
    gross_brokerage: tuple[str, ...] = ("gross brokerage",)
    net_payable: tuple[str, ...] = ("net payable",)

    processed: tuple[str, ...] = ("processed",)

    # fields whose cells decide whether a credit row is blank
    input_fields: tuple[str, ...] = (
        "linked_debit_note_no",
        "credit_note_no",
        "reinsured_name",
        "reinsurer_name",
        "reinsurer_address",
        "reinsurer_share_pct",
        "rate_override",
        "brokerage_override",
        "ceding_commission_override",
    )
