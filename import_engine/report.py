"""
import_engine.report - Structured result of a successful import run.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class ImportReport:
    file_name: str | None
    source: str                     # "file" | "pasted" | "body" | "seed"
    loaded_at: datetime
    layout: str = ""
    total_rows: int = 0
    imported: int = 0

    def to_dict(self) -> dict:
        return {
            "file_name": self.file_name,
            "source": self.source,
            "loaded_at": self.loaded_at.isoformat(),
            "layout": self.layout,
            "total_rows": self.total_rows,
            "imported": self.imported,
        }
