from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

import pandas as pd

from .base import ColumnDefinition, TableModel


@dataclass(frozen=True)
class YearRow:
    year: int
    gross: float
    income_tax: float
    resident_tax: float
    social_ins: float
    living: float
    housing: float
    education: float
    insurance: float
    investment_return: float
    annual_add: float
    cashflow: float
    balance: float


class ResultsTableModel(TableModel):
    def __init__(self) -> None:
        columns = [
            ColumnDefinition("Year", "Year", kind="year", attr="year"),
            ColumnDefinition("Gross", "Gross Income", attr="gross", format=",.0f"),
            ColumnDefinition("IncomeTax", "Income Tax", attr="income_tax", format=",.0f"),
            ColumnDefinition("ResidentTax", "Resident Tax", attr="resident_tax", format=",.0f"),
            ColumnDefinition("SocialInsurance", "Social Insurance", attr="social_ins", format=",.0f"),
            ColumnDefinition("Living", "Living", attr="living", format=",.0f"),
            ColumnDefinition("Housing", "Housing", attr="housing", format=",.0f"),
            ColumnDefinition("Education", "Education", attr="education", format=",.0f"),
            ColumnDefinition("Insurance", "Insurance", attr="insurance", format=",.0f"),
            ColumnDefinition(
                "InvestmentReturn",
                "Investment Return",
                attr="investment_return",
                format=",.0f",
                help="Earned on start-of-year portfolio balances",
            ),
            ColumnDefinition("AnnualContribution", "Contribution", attr="annual_add", format=",.0f"),
            ColumnDefinition("Cashflow", "Net Cashflow", attr="cashflow", format=",.0f"),
            ColumnDefinition("Balance", "Balance (end of year)", attr="balance", format=",.0f"),
        ]
        super().__init__("results", columns)


RESULTS_TABLE = ResultsTableModel()


def rows_to_frame(rows: Iterable[YearRow]) -> pd.DataFrame:
    """Flatten year rows into a frame keyed by the results-table fields."""
    records: List[dict] = []
    for row in rows:
        records.append({col.field: getattr(row, col.attr) for col in RESULTS_TABLE.columns})
    if not records:
        return RESULTS_TABLE.create_empty_df()
    return pd.DataFrame(records, columns=RESULTS_TABLE.fields())
