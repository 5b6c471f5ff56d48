import math

from backend.data_model import YearRow, rows_to_frame
from backend.engine.analysis import (
    balance_series,
    deficit_banner,
    first_deficit_year,
    format_amount,
    table_records,
)
from backend.engine.state import ResultState


def _row(year: int, balance: float) -> YearRow:
    return YearRow(
        year=year,
        gross=0.0,
        income_tax=0.0,
        resident_tax=0.0,
        social_ins=0.0,
        living=0.0,
        housing=0.0,
        education=0.0,
        insurance=0.0,
        investment_return=0.0,
        annual_add=0.0,
        cashflow=0.0,
        balance=balance,
    )


def test_first_deficit_year_in_shrinking_balance():
    rows = [_row(2024, 1_500_000), _row(2025, 0.0), _row(2026, -0.4), _row(2027, -900_000)]

    assert first_deficit_year(rows) == 2026


def test_no_deficit_reported_when_balance_never_negative():
    rows = [_row(2024, 10.0), _row(2025, 0.0)]

    assert first_deficit_year(rows) is None
    assert first_deficit_year([]) is None
    banner = deficit_banner(rows)
    assert banner.level == "success"
    assert banner.year is None


def test_banner_names_the_deficit_year():
    banner = deficit_banner([_row(2024, 5.0), _row(2025, -5.0)])

    assert banner.level == "danger"
    assert banner.year == 2025
    assert "2025" in banner.message


def test_balance_series_is_rounded_and_indexed_by_year():
    series = balance_series([_row(2024, 1_234.6), _row(2025, -0.4), _row(2026, math.nan)])

    assert list(series.index) == [2024, 2025, 2026]
    assert list(series.values) == [1_235, 0, 0]
    assert series.name == "Balance"


def test_table_records_format_amounts_and_flag_deficits():
    records = table_records([_row(2024, 1_500_000.4), _row(2025, -2_000_000)])

    assert records[0]["Year"] == 2024
    assert records[0]["Balance"] == "1,500,000"
    assert records[0]["Deficit"] is False
    assert records[1]["Balance"] == "-2,000,000"
    assert records[1]["Deficit"] is True
    assert format_amount(math.inf) == "0"


def test_rows_to_frame_uses_display_columns():
    frame = rows_to_frame([_row(2024, 1.0), _row(2025, 2.0)])

    assert list(frame["Year"]) == [2024, 2025]
    assert list(frame["Balance"]) == [1.0, 2.0]
    assert "InvestmentReturn" in frame.columns
    assert rows_to_frame([]).empty


def test_result_state_is_replaced_wholesale():
    state = ResultState()
    assert not state.has_result()

    first = [_row(2024, 1.0)]
    state.replace(first)
    snapshot = state.get()
    state.replace([_row(2030, 2.0), _row(2031, 3.0)])

    assert snapshot == (first[0],)
    assert [row.year for row in state.get()] == [2030, 2031]
    first.append(_row(2025, 9.0))
    assert len(state.get()) == 2

    state.clear()
    assert state.get() == ()
