# components/results.py
from __future__ import annotations

from typing import Sequence

import dash_bootstrap_components as dbc
from dash import dash_table, dcc, html

from backend.data_model import RESULTS_TABLE, YearRow
from backend.engine.analysis import balance_series, deficit_banner, table_records

DEFICIT_STYLE = {"backgroundColor": "#4a1010", "color": "#ffd6d6"}


def build_banner(rows: Sequence[YearRow]):
    banner = deficit_banner(rows)
    return dbc.Alert(banner.message, id="deficit-banner", color=banner.level, className="mb-3")


def balance_figure(rows: Sequence[YearRow]) -> dict:
    series = balance_series(rows)
    return {
        "data": [
            {
                "type": "scatter",
                "mode": "lines+markers",
                "name": "Balance",
                "x": [int(year) for year in series.index],
                "y": [int(value) for value in series.values],
                "line": {"shape": "spline", "smoothing": 0.4},
            }
        ],
        "layout": {
            "title": {"text": "Balance by year"},
            "xaxis": {"title": {"text": "Year"}},
            "yaxis": {"title": {"text": "Balance"}, "tickformat": ",d"},
            "showlegend": True,
        },
    }


def build_chart(rows: Sequence[YearRow]):
    return dcc.Graph(id="balance-chart", figure=balance_figure(rows))


def _table_config():
    columns = []
    for col in RESULTS_TABLE.columns:
        col_def = {"name": col.label, "id": col.field}
        if col.kind == "year":
            col_def["type"] = "numeric"
        columns.append(col_def)
    return columns


RESULTS_COLUMNS = _table_config()


def deficit_row_styles(records: Sequence[dict]) -> list[dict]:
    return [
        {"if": {"row_index": index}, **DEFICIT_STYLE}
        for index, record in enumerate(records)
        if record.get("Deficit")
    ]


def build_table(rows: Sequence[YearRow]):
    records = table_records(rows)
    data = [{key: value for key, value in record.items() if key != "Deficit"} for record in records]
    table = dash_table.DataTable(
        id="results-table",
        data=data,
        columns=RESULTS_COLUMNS,
        style_table={"height": "auto", "overflowX": "auto"},
        style_header={"backgroundColor": "#222", "color": "#eee", "fontWeight": "bold"},
        style_data={"backgroundColor": "#111", "color": "#eee"},
        style_cell={"textAlign": "right"},
        style_data_conditional=deficit_row_styles(records),
        fill_width=True,
    )
    return html.Div(table, style={"maxHeight": "480px", "overflowY": "auto"})


def build_results(rows: Sequence[YearRow]):
    if not rows:
        return html.Div("Run a projection to see results.", id="results-empty")
    return html.Div([build_banner(rows), build_chart(rows), build_table(rows)], id="results")


__all__ = [
    "RESULTS_COLUMNS",
    "balance_figure",
    "build_banner",
    "build_chart",
    "build_results",
    "build_table",
    "deficit_row_styles",
]
