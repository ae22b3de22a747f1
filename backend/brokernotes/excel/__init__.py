"""
Excel - workbook access for the main and credit detail sheets.

Everything openpyxl-specific lives here; the calculators never see a cell.
"""

from .layout import DEFAULT_CREDIT_SHEET, CreditSheetHeaders, MainSheetLayout
from .sheets import CreditSheet, MainSheet
from .workbook import credit_worksheet, main_worksheet, open_workbook, save_workbook

__all__ = [
    "DEFAULT_CREDIT_SHEET",
    "CreditSheetHeaders",
    "MainSheetLayout",
    "CreditSheet",
    "MainSheet",
    "credit_worksheet",
    "main_worksheet",
    "open_workbook",
    "save_workbook",
]
