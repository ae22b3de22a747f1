"""
Docs - debit / credit note documents.

Components:
- notes: fill requests (what goes where in the template)
- formatting: USD / percent / filename formatting
- docx_writer: python-docx template filling
"""

from .docx_writer import DocxNoteRenderer, NoteRenderer
from .notes import CreditNote, DebitNote, build_credit_note, build_debit_note

__all__ = [
    "DocxNoteRenderer",
    "NoteRenderer",
    "CreditNote",
    "DebitNote",
    "build_credit_note",
    "build_debit_note",
]
