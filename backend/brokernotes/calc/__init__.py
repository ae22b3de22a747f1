"""
Calc - pure premium / commission / brokerage arithmetic.

Components:
- debit: cedent-side figures for a main row
- credit: override resolution and per-reinsurer figures
"""

from .credit import CreditAmounts, CreditTerms, compute_credit, resolve_credit_terms
from .debit import DebitAmounts, compute_debit

__all__ = [
    "CreditAmounts",
    "CreditTerms",
    "DebitAmounts",
    "compute_credit",
    "compute_debit",
    "resolve_credit_terms",
]
