from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Protocol

from docx import Document
from docx.document import Document as DocxDocument
from docx.table import _Cell
from docx.text.paragraph import Paragraph

from ..core.errors import DocumentGenerationError, MissingSourceFileError
from .notes import CellMap, CreditNote, DebitNote

logger = logging.getLogger(__name__)


class NoteRenderer(Protocol):
    """Anything that turns a fill request into a file on disk."""

    def render_debit(self, note: DebitNote, out_path: Path) -> None: ...

    def render_credit(self, note: CreditNote, out_path: Path) -> None: ...


# ---------------------------------------------------------------------
# Low-level fill helpers
# ---------------------------------------------------------------------

def _replace_paragraph_text(paragraph: Paragraph, lines: List[str]) -> None:
    """
    Put `lines` into the paragraph, one line break between each.
    Formatting of the first run is kept; other runs are dropped.
    """
    runs = paragraph.runs
    if runs:
        first = runs[0]
        for extra in runs[1:]:
            extra._element.getparent().remove(extra._element)
    else:
        first = paragraph.add_run()
    # Run.text turns "\n" into <w:br/>
    first.text = "\n".join(lines)


def set_cell_text(cell: _Cell, text: str) -> None:
    paragraphs = cell.paragraphs
    for extra in paragraphs[1:]:
        extra._element.getparent().remove(extra._element)
    _replace_paragraph_text(paragraphs[0], [text])


def fill_table(doc: DocxDocument, cells: CellMap) -> None:
    """Fill the first table at fixed (row, col) positions; missing positions are skipped."""
    if not doc.tables:
        raise ValueError("template has no table")
    table = doc.tables[0]
    rows = table.rows
    for (r, c), text in cells.items():
        if r >= len(rows):
            logger.debug("template table has no row %s", r)
            continue
        row_cells = rows[r].cells
        if c >= len(row_cells):
            logger.debug("template table row %s has no column %s", r, c)
            continue
        set_cell_text(row_cells[c], text)


def find_recipient_paragraph(doc: DocxDocument) -> Optional[Paragraph]:
    for p in doc.paragraphs:
        if p.text.strip().lower().startswith("to"):
            return p
    return None


def set_recipient(doc: DocxDocument, lines: List[str]) -> bool:
    p = find_recipient_paragraph(doc)
    if p is None:
        return False
    _replace_paragraph_text(p, lines)
    return True


# ---------------------------------------------------------------------
# Renderer
# ---------------------------------------------------------------------

class DocxNoteRenderer:
    """Fills the debit / credit .docx templates with python-docx."""

    def __init__(self, debit_template: Path, credit_template: Optional[Path] = None) -> None:
        self.debit_template = Path(debit_template)
        self.credit_template = Path(credit_template) if credit_template else None

    def render_debit(self, note: DebitNote, out_path: Path) -> None:
        self._render(self.debit_template, note.note_no, note.cells(), None, out_path)

    def render_credit(self, note: CreditNote, out_path: Path) -> None:
        if self.credit_template is None:
            raise MissingSourceFileError("Credit template", "<not configured>")
        self._render(
            self.credit_template,
            note.note_no,
            note.cells(),
            note.recipient_lines(),
            out_path,
        )

    def _render(
        self,
        template: Path,
        note_no: str,
        cells: CellMap,
        recipient: Optional[List[str]],
        out_path: Path,
    ) -> None:
        if not template.exists():
            raise MissingSourceFileError("Word template", template)

        try:
            doc = Document(str(template))
            fill_table(doc, cells)
            if recipient and not set_recipient(doc, recipient):
                logger.warning("%s: no 'To' paragraph in %s", note_no, template.name)

            out_path = Path(out_path)
            out_path.parent.mkdir(parents=True, exist_ok=True)
            doc.save(str(out_path))
        except Exception as e:  # noqa: BLE001
            raise DocumentGenerationError(note_no, out_path, str(e)) from e
