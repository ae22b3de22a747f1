from pathlib import Path

from brokernotes.__main__ import EXIT_OK, EXIT_USER_ERROR, main


def test_run_prints_summary(tmp_path: Path, make_workbook, main_row, debit_template, capsys):
    make_workbook([main_row("DN-100"), main_row("DN-101", si=0)], name="resources/DebitNoteCalculations.xlsx")

    rc = main(["run", "--base-dir", str(tmp_path)])

    assert rc == EXIT_OK
    out = capsys.readouterr().out
    assert "[INFO] Excel file:" in out
    assert "debit notes:   1" in out
    assert "1 incomplete" in out
    assert (tmp_path / "resources" / "output" / "DN-100.docx").is_file()


def test_missing_workbook_exit_code(tmp_path: Path, capsys):
    rc = main(["--base-dir", str(tmp_path)])

    assert rc == EXIT_USER_ERROR
    assert "[RESULT]" not in capsys.readouterr().out


def test_explicit_paths(tmp_path: Path, make_workbook, main_row, debit_template):
    wb = make_workbook([main_row("DN-100")], name="book.xlsx")
    out_dir = tmp_path / "notes"

    rc = main([
        "--workbook", str(wb),
        "--debit-template", str(debit_template),
        "--output-dir", str(out_dir),
        "--base-dir", str(tmp_path),
    ])

    assert rc == EXIT_OK
    assert (out_dir / "DN-100.docx").is_file()
