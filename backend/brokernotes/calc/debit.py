# backend/brokernotes/calc/debit.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

HUNDRED = Decimal("100")
# broker's take is split 50/50
BROKERAGE_SPLIT = Decimal("2")


def pct_of(amount: Decimal, pct: Decimal) -> Decimal:
    return amount * (pct / HUNDRED)


def is_set(value: Optional[Decimal], *, explicit_zero: bool = False) -> bool:
    """
    Whether an optional rate/percentage counts as supplied.

    Historically 0 and blank both mean "inherit". With explicit_zero=True only
    a blank (None) inherits.
    """
    if value is None:
        return False
    if explicit_zero:
        return True
    return value > 0


@dataclass(frozen=True)
class DebitAmounts:
    gross_premium_cedent: Decimal
    share_premium_cedent: Decimal
    effective_reinsurer_rate: Decimal
    gross_premium_reinsurer: Decimal
    share_premium_reinsurer: Decimal
    ceding_commission_amount: Decimal
    gross_brokerage: Decimal
    net_brokerage: Decimal
    net_premium_from_you: Decimal  # debit note headline
    net_premium_to_you: Decimal


def compute_debit(
    *,
    sum_insured: Decimal,
    cedent_rate: Decimal,
    reinsurer_rate: Optional[Decimal],
    share_pct: Decimal,
    brokerage_pct: Decimal,
    ceding_commission_pct: Decimal,
    explicit_zero: bool = False,
) -> DebitAmounts:
    """
    Cedent-side figures for one main row.

    Order matters only for readability; every figure is derived from the
    inputs and the ones above it. No validation happens here: the caller has
    already dropped incomplete rows.
    """
    gross_cedent = sum_insured * (cedent_rate / HUNDRED)
    share_cedent = pct_of(gross_cedent, share_pct)

    eff_rate = reinsurer_rate if is_set(reinsurer_rate, explicit_zero=explicit_zero) else cedent_rate
    gross_reins = sum_insured * (eff_rate / HUNDRED)
    share_reins = pct_of(gross_reins, share_pct)

    ceding_amt = pct_of(share_cedent, ceding_commission_pct)
    gross_brk = pct_of(share_reins, brokerage_pct)
    net_brk = gross_brk / BROKERAGE_SPLIT

    return DebitAmounts(
        gross_premium_cedent=gross_cedent,
        share_premium_cedent=share_cedent,
        effective_reinsurer_rate=eff_rate,
        gross_premium_reinsurer=gross_reins,
        share_premium_reinsurer=share_reins,
        ceding_commission_amount=ceding_amt,
        gross_brokerage=gross_brk,
        net_brokerage=net_brk,
        net_premium_from_you=share_cedent - ceding_amt,
        net_premium_to_you=share_reins - net_brk - ceding_amt,
    )
