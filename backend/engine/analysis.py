import math
from dataclasses import dataclass
from typing import Iterable, List, Sequence

import pandas as pd

from ..data_model import RESULTS_TABLE, YearRow, rows_to_frame


@dataclass(frozen=True)
class Banner:
    level: str  # success | danger
    message: str
    year: int | None = None


def first_deficit_year(rows: Iterable[YearRow]) -> int | None:
    for row in rows:
        if row.balance < 0:
            return row.year
    return None


def deficit_banner(rows: Sequence[YearRow]) -> Banner:
    year = first_deficit_year(rows)
    if year is None:
        return Banner("success", "Balance stays non-negative for the whole horizon.")
    return Banner("danger", f"First year with a negative balance: {year}", year)


def balance_series(rows: Sequence[YearRow]) -> pd.Series:
    """End-of-year balance per year, rounded to whole units for charting."""
    frame = rows_to_frame(rows)
    series = pd.Series(
        [_whole(value) for value in frame["Balance"]],
        index=pd.Index(frame["Year"].astype(int), name="Year"),
        name="Balance",
        dtype="int64",
    )
    return series


def _whole(value) -> int:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    return int(round(number)) if math.isfinite(number) else 0


def format_amount(value) -> str:
    return f"{_whole(value):,}"


def table_records(rows: Sequence[YearRow]) -> List[dict]:
    """Display rows for the results table; ``Deficit`` marks negative balances."""
    records: List[dict] = []
    for row in rows:
        record = {}
        for col in RESULTS_TABLE.columns:
            value = getattr(row, col.attr)
            record[col.field] = value if col.kind == "year" else format_amount(value)
        record["Deficit"] = row.balance < 0
        records.append(record)
    return records
