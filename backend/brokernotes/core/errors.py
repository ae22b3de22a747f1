from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class NoteGenError(Exception):
    """
    An error that is safe and useful to show directly to the operator.
    """
    code: str
    message: str
    details: Optional[dict[str, Any]] = None
    stage: Optional[str] = None

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.stage:
            out["stage"] = self.stage
        if self.details:
            out["details"] = self.details
        return out


class MissingSourceFileError(NoteGenError):
    """Workbook or template is not where the run expects it. Fatal."""

    def __init__(self, kind: str, path: Any) -> None:
        super().__init__(
            code="missing_source_file",
            message=f"{kind} not found! Expected at: {path}",
            details={"kind": kind, "path": str(path)},
            stage="open",
        )


class DocumentGenerationError(NoteGenError):
    """Template could not be filled or the output document could not be saved."""

    def __init__(self, note_no: str, path: Any, reason: str) -> None:
        super().__init__(
            code="document_generation_failed",
            message=f"Cannot generate {note_no} -> {path}: {reason}",
            details={"note_no": note_no, "path": str(path)},
            stage="render",
        )
