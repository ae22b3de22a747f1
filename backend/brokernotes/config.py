from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from .excel.layout import DEFAULT_CREDIT_SHEET

WORKBOOK_NAME = "DebitNoteCalculations.xlsx"
DEBIT_TEMPLATE_NAME = "DebitNoteTemplate.docx"
CREDIT_TEMPLATE_NAME = "CreditNoteTemplate.docx"
OUTPUT_DIR_NAME = "output"

ENV_PREFIX = "BROKERNOTES_"

# Searched in order; the first one holding the workbook wins.
RESOURCE_DIR_CANDIDATES = (
    Path("resources"),
    Path("src") / "main" / "resources",
)


def _parse_bool(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "on"}


def resolve_resources_dir(base_dir: Path) -> Path:
    """
    First candidate directory under base_dir that contains the workbook.
    None found -> the first (packaged) candidate, so errors name that path.
    """
    for rel in RESOURCE_DIR_CANDIDATES:
        cand = base_dir / rel
        if (cand / WORKBOOK_NAME).is_file():
            return cand
    return base_dir / RESOURCE_DIR_CANDIDATES[0]


class Settings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    base_dir: Path = Field(default_factory=Path.cwd)

    workbook_path: Path
    debit_template_path: Path
    credit_template_path: Path
    output_dir: Path

    credit_sheet_name: str = DEFAULT_CREDIT_SHEET
    open_output_folder: bool = False
    # 0 in an override cell counts as a value, not as "inherit"
    explicit_zero_overrides: bool = False

    @classmethod
    def resolve(
        cls,
        base_dir: Optional[Path] = None,
        *,
        workbook_path: Optional[Path] = None,
        debit_template_path: Optional[Path] = None,
        credit_template_path: Optional[Path] = None,
        output_dir: Optional[Path] = None,
        **kwargs,
    ) -> "Settings":
        """Fill any path left as None from the resources directory fallback."""
        base = Path(base_dir) if base_dir else Path.cwd()
        res = resolve_resources_dir(base)
        return cls(
            base_dir=base,
            workbook_path=workbook_path or res / WORKBOOK_NAME,
            debit_template_path=debit_template_path or res / DEBIT_TEMPLATE_NAME,
            credit_template_path=credit_template_path or res / CREDIT_TEMPLATE_NAME,
            output_dir=output_dir or res / OUTPUT_DIR_NAME,
            **kwargs,
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "Settings":
        """
        Settings from BROKERNOTES_* variables; keyword overrides (e.g. CLI
        flags) win over the environment when not None.
        """
        env = os.environ if environ is None else environ

        def _path(name: str) -> Optional[Path]:
            v = (env.get(ENV_PREFIX + name) or "").strip()
            return Path(v) if v else None

        values = {
            "base_dir": _path("BASE_DIR"),
            "workbook_path": _path("WORKBOOK"),
            "debit_template_path": _path("DEBIT_TEMPLATE"),
            "credit_template_path": _path("CREDIT_TEMPLATE"),
            "output_dir": _path("OUTPUT_DIR"),
            "credit_sheet_name": (env.get(ENV_PREFIX + "CREDIT_SHEET") or "").strip()
            or DEFAULT_CREDIT_SHEET,
            "open_output_folder": _parse_bool(env.get(ENV_PREFIX + "OPEN_OUTPUT")),
            "explicit_zero_overrides": _parse_bool(env.get(ENV_PREFIX + "EXPLICIT_ZERO_OVERRIDES")),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})

        base_dir = values.pop("base_dir")
        return cls.resolve(base_dir, **values)
