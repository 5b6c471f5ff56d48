from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List

import pandas as pd


@dataclass
class ColumnDefinition:
    """Display descriptor for one column of a rendered table."""

    field: str
    label: str
    kind: str = "number"  # number | year
    attr: str | None = None
    format: str | None = None
    help: str | None = None


@dataclass
class TableModel:
    """Container for a table schema."""

    name: str
    columns: List[ColumnDefinition] = field(default_factory=list)

    def fields(self) -> List[str]:
        return [col.field for col in self.columns]

    def create_empty_df(self) -> pd.DataFrame:
        return pd.DataFrame(columns=self.fields())

    def to_payload(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "columns": [
                {
                    "field": col.field,
                    "label": col.label,
                    "kind": col.kind,
                    "format": col.format,
                    "help": col.help,
                }
                for col in self.columns
            ],
        }
