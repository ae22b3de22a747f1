from __future__ import annotations

from datetime import date, datetime

# 05-Mar-2025
DOC_DATE_FMT = "%d-%b-%Y"


def format_doc_date(d: date | datetime) -> str:
    return d.strftime(DOC_DATE_FMT)
