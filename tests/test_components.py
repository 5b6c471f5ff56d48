from backend.data_model import YearRow
from components.results import (
    balance_figure,
    build_banner,
    build_results,
    build_table,
    deficit_row_styles,
)


def _row(year: int, balance: float) -> YearRow:
    return YearRow(year, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, balance)


def test_banner_colour_follows_deficit():
    assert build_banner([_row(2024, 1.0)]).color == "success"
    alert = build_banner([_row(2024, 1.0), _row(2025, -1.0)])
    assert alert.color == "danger"
    assert "2025" in alert.children


def test_balance_figure_plots_each_year():
    figure = balance_figure([_row(2024, 10.4), _row(2025, -3.6)])

    trace = figure["data"][0]
    assert trace["x"] == [2024, 2025]
    assert trace["y"] == [10, -4]


def test_table_highlights_negative_rows_only():
    records = [{"Deficit": False}, {"Deficit": True}, {"Deficit": True}]
    styles = deficit_row_styles(records)
    assert [style["if"]["row_index"] for style in styles] == [1, 2]

    table = build_table([_row(2024, 1.0), _row(2025, -1.0)]).children
    assert table.style_data_conditional[0]["if"] == {"row_index": 1}
    assert "Deficit" not in table.data[0]


def test_empty_results_placeholder():
    assert build_results([]).id == "results-empty"
    assert build_results([_row(2024, 1.0)]).id == "results"
