"""
Tests for the main / credit sheet views.
"""

from decimal import Decimal

import pytest
from openpyxl import Workbook, load_workbook

from brokernotes.calc.credit import CreditAmounts
from brokernotes.calc.debit import compute_debit
from brokernotes.excel.sheets import CreditSheet, MainSheet


class TestMainSheet:
    @pytest.fixture
    def sheet(self, make_workbook, main_row):
        path = make_workbook(
            [
                main_row("DN-1", si="1,000,000", reins_rate=None),
                main_row(None, None, si=None, cedent_rate=None, share=None, brokerage=None, ceding_pct=None),
                main_row("DN-3", processed="processed"),
            ]
        )
        return MainSheet(load_workbook(path).worksheets[0])

    def test_row_indices_cover_data_rows(self, sheet):
        assert list(sheet.row_indices()) == [1, 2, 3]

    def test_read_main_row(self, sheet):
        row = sheet.read(1)
        assert row.row_index == 1
        assert row.note_number == "DN-1"
        assert row.insured_name == "Acme Shipping Ltd"
        assert row.default_reinsured_name == "Ocean Insurance Co"
        assert row.sum_insured == Decimal("1000000")
        assert row.reinsurer_rate is None
        assert row.ceding_commission_pct == Decimal("20")
        assert row.is_complete
        assert not row.processed

    def test_blank_and_processed(self, sheet):
        # row 2 still carries text in cols 2..5, so it is not blank
        assert not sheet.is_blank(2)
        assert not sheet.read(2).is_complete
        assert sheet.is_processed(3)
        assert not sheet.is_processed(1)

    def test_write_debit_and_mark(self, sheet):
        row = sheet.read(1)
        amounts = compute_debit(
            sum_insured=row.sum_insured,
            cedent_rate=row.cedent_rate,
            reinsurer_rate=row.reinsurer_rate,
            share_pct=row.share_pct,
            brokerage_pct=row.brokerage_pct,
            ceding_commission_pct=row.ceding_commission_pct,
        )
        sheet.write_debit(row, amounts)
        sheet.mark_processed(1)

        ws = sheet.ws
        values = [ws.cell(row=2, column=c).value for c in range(12, 23)]
        assert values == [
            100000.0, 50000.0, 100000.0, 50000.0, 20.0,
            10000.0, 5000.0, 2500.0, 40000.0, 37500.0, "Yes",
        ]
        assert sheet.is_processed(1)


class TestCreditSheet:
    def _sheet(self, rows, headers):
        wb = Workbook()
        ws = wb.active
        ws.append(headers)
        for r in rows:
            ws.append(r)
        return CreditSheet(ws)

    def test_header_driven_read_with_reordered_columns(self):
        sheet = self._sheet(
            [["Alpha Re", "12 Main St\nLondon", "dn-100", "30", None, 0, "5"]],
            ["Reinsurer Name", "Reinsurer Address", "DEBIT NOTE NO.", "Reinsurer Share %",
             "Rate %", "Brokerage %", "Ceding Commission %"],
        )
        row = sheet.read(1)
        assert row.linked_debit_note_no == "dn-100"
        assert row.reinsurer_name == "Alpha Re"
        assert row.reinsurer_address == "12 Main St\nLondon"
        assert row.reinsurer_share_pct == Decimal("30")
        assert row.rate_override is None
        assert row.brokerage_override == Decimal("0")
        assert row.ceding_commission_override == Decimal("5")
        # no such headers: blank
        assert row.credit_note_no == ""
        assert row.reinsured_name == ""
        assert not row.processed

    def test_index_is_case_insensitive_and_ordered(self):
        sheet = self._sheet(
            [["DN-1", "A"], ["dn-2", "B"], ["Dn-1", "C"], [None, "D"]],
            ["Debit Note No.", "Reinsurer Name"],
        )
        assert sheet.index_by_debit_note() == {"dn-1": [1, 3], "dn-2": [2]}

    def test_writes_to_missing_output_headers_are_dropped(self):
        sheet = self._sheet([["DN-1", "A"]], ["Debit Note No.", "Reinsurer Name", "Net Payable"])
        amounts = CreditAmounts(*(Decimal(v) for v in ("1", "2", "3", "4", "5", "6")))
        sheet.write_credit(1, amounts)
        ws = sheet.ws
        assert ws.max_column == 3
        assert ws.cell(row=2, column=3).value == 6.0

    def test_processed_column_appended_when_absent(self):
        sheet = self._sheet([["DN-1", "A"]], ["Debit Note No.", "Reinsurer Name"])
        assert not sheet.is_processed(1)
        sheet.mark_processed(1)
        ws = sheet.ws
        assert ws.cell(row=1, column=3).value == "Processed"
        assert ws.cell(row=2, column=3).value == "Yes"
        assert sheet.is_processed(1)

    def test_blank_row(self):
        sheet = self._sheet([[None, "  ", 0], ["DN-1", None, None]], ["Debit Note No.", "Reinsurer Name", "Reinsurer Share %"])
        assert sheet.is_blank(1)
        assert not sheet.is_blank(2)
