"""
Services layer - one generation run end to end.

Ties configuration, workbook access, document rendering and the row
processing pipeline together.
"""

from .generation_service import NoteGenerationService

__all__ = [
    "NoteGenerationService",
]
