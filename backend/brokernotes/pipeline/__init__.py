"""
Pipeline - row processing over the workbook.

Components:
- processor: main sheet loop (skip rules, debit calc, debit note)
- fanout: credit notes per linked reinsurer
- report: per-row outcomes and run summary
"""

from .fanout import CreditFanout
from .processor import RowProcessor
from .report import RowOutcome, RowStatus, RunReport

__all__ = [
    "CreditFanout",
    "RowProcessor",
    "RowOutcome",
    "RowStatus",
    "RunReport",
]
