# backend/brokernotes/calc/credit.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from .debit import BROKERAGE_SPLIT, HUNDRED, is_set, pct_of


@dataclass(frozen=True)
class CreditTerms:
    """Effective inputs for one reinsurer after override resolution."""

    rate: Decimal
    brokerage_pct: Decimal
    ceding_commission_pct: Decimal


@dataclass(frozen=True)
class CreditAmounts:
    gross_premium: Decimal      # fac premium at 100%
    share_premium: Decimal
    commission_amount: Decimal
    gross_brokerage: Decimal
    net_brokerage: Decimal
    net_payable: Decimal        # credit note headline


def resolve_credit_terms(
    *,
    cedent_rate: Decimal,
    reinsurer_rate: Optional[Decimal],
    brokerage_pct: Decimal,
    ceding_commission_pct: Decimal,
    rate_override: Optional[Decimal],
    brokerage_override: Optional[Decimal],
    ceding_commission_override: Optional[Decimal],
    explicit_zero: bool = False,
) -> CreditTerms:
    """
    Priority per field: credit row override -> main row value.
    Rate has one more step: override -> main reinsurer rate -> cedent rate.
    """
    if is_set(rate_override, explicit_zero=explicit_zero):
        rate = rate_override
    elif is_set(reinsurer_rate, explicit_zero=explicit_zero):
        rate = reinsurer_rate
    else:
        rate = cedent_rate

    brokerage = (
        brokerage_override
        if is_set(brokerage_override, explicit_zero=explicit_zero)
        else brokerage_pct
    )
    ceding = (
        ceding_commission_override
        if is_set(ceding_commission_override, explicit_zero=explicit_zero)
        else ceding_commission_pct
    )
    return CreditTerms(rate=rate, brokerage_pct=brokerage, ceding_commission_pct=ceding)


def compute_credit(
    *,
    sum_insured: Decimal,
    reinsurer_share_pct: Decimal,
    terms: CreditTerms,
) -> CreditAmounts:
    gross = sum_insured * (terms.rate / HUNDRED)
    share = pct_of(gross, reinsurer_share_pct)
    commission = pct_of(share, terms.ceding_commission_pct)
    gross_brk = pct_of(share, terms.brokerage_pct)
    net_brk = gross_brk / BROKERAGE_SPLIT

    return CreditAmounts(
        gross_premium=gross,
        share_premium=share,
        commission_amount=commission,
        gross_brokerage=gross_brk,
        net_brokerage=net_brk,
        net_payable=share - net_brk - commission,
    )
