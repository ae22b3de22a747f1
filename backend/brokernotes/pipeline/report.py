from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class RowStatus(str, Enum):
    SKIPPED_BLANK = "SKIPPED_BLANK"
    SKIPPED_PROCESSED = "SKIPPED_PROCESSED"
    SKIPPED_INCOMPLETE = "SKIPPED_INCOMPLETE"
    PROCESSED = "PROCESSED"
    FAILED = "FAILED"  # credit rows only


@dataclass
class RowOutcome:
    sheet: str  # "main" | "credit"
    row_index: int
    status: RowStatus
    note_no: Optional[str] = None
    out_path: Optional[str] = None
    error: Optional[str] = None


@dataclass
class RunReport:
    main: List[RowOutcome] = field(default_factory=list)
    credit: List[RowOutcome] = field(default_factory=list)
    workbook_path: Optional[str] = None
    output_dir: Optional[str] = None

    @staticmethod
    def _counts(items: List[RowOutcome]) -> dict[str, int]:
        c = Counter(o.status.value for o in items)
        return {s.value: c.get(s.value, 0) for s in RowStatus}

    def main_counts(self) -> dict[str, int]:
        return self._counts(self.main)

    def credit_counts(self) -> dict[str, int]:
        return self._counts(self.credit)

    @property
    def documents(self) -> List[str]:
        return [
            o.out_path
            for o in (*self.main, *self.credit)
            if o.status is RowStatus.PROCESSED and o.out_path
        ]

    def to_dict(self) -> dict:
        return {
            "workbook": self.workbook_path,
            "output_dir": self.output_dir,
            "main": self.main_counts(),
            "credit": self.credit_counts(),
            "documents": len(self.documents),
            "items": [o.__dict__ | {"status": o.status.value} for o in (*self.main, *self.credit)],
        }
