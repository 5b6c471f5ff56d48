# components/form.py
from __future__ import annotations

from typing import Any, Dict

import dash_bootstrap_components as dbc
from dash import dcc, html

from backend.data_model import default_household_payload
from backend.data_model.defaults import DEFAULT_CURRENT_AGE, DEFAULT_HORIZON
from backend.data_model.numbers import to_number

FORM_FIELDS = [
    "current-age",
    "horizon",
    "inflation",
    "salary-base",
    "salary-bonus",
    "salary-growth",
    "cash",
    "housing-type",
    "rent-amount",
    "rent-end-year",
    "loan-principal",
    "loan-rate",
    "loan-years",
]


def _number_input(id_value: str, label: str, value, step: Any = "any", **kwargs):
    return html.Div(
        [
            dbc.Label(label, html_for=id_value),
            dbc.Input(id=id_value, type="number", value=value, step=step, **kwargs),
        ],
        className="mb-2",
    )


def build_form(start_year: int):
    defaults = default_household_payload(start_year)
    salary = defaults["income"]["salary"][0]
    rent = defaults["expenses"]["housing"]
    loan = default_household_payload(start_year, housing_type="loan")["expenses"]["housing"]
    return dbc.Card(
        [
            html.H4("Household", className="card-title"),
            _number_input("current-age", "Current Age", DEFAULT_CURRENT_AGE, step=1, min=0, max=120),
            _number_input("horizon", "Years to Project", DEFAULT_HORIZON, step=1, min=1, max=100),
            _number_input("inflation", "Inflation (e.g. 0.02)", defaults["settings"]["inflation"]),

            html.Hr(),
            html.H5("Salary"),
            _number_input("salary-base", "Base", salary["base"]),
            _number_input("salary-bonus", "Bonus", salary["bonus"]),
            _number_input("salary-growth", "Growth (e.g. 0.02)", salary["growth"]),

            html.Hr(),
            html.H5("Assets"),
            _number_input("cash", "Cash", defaults["assets"]["cash"]),

            html.Hr(),
            html.H5("Housing"),
            dcc.RadioItems(
                id="housing-type",
                options=[
                    {"label": "Rent", "value": "rent"},
                    {"label": "Loan", "value": "loan"},
                ],
                value="rent",
                inline=True,
            ),
            _number_input("rent-amount", "Annual Rent", rent["amount"]),
            _number_input("rent-end-year", "Rent Until (year)", rent["endYear"], step=1),
            _number_input("loan-principal", "Loan Principal", loan["principal"]),
            _number_input("loan-rate", "Loan Rate (e.g. 0.012)", loan["rate"]),
            _number_input("loan-years", "Loan Years", loan["years"], step=1, min=0),

            html.Hr(),
            dbc.Button("Run", id="run-button", color="primary", className="mt-2 w-100"),
        ],
        body=True,
    )


def payload_from_form(
    start_year: int,
    current_age=None,
    horizon=None,
    inflation=None,
    salary_base=None,
    salary_bonus=None,
    salary_growth=None,
    cash=None,
    housing_type="rent",
    rent_amount=None,
    rent_end_year=None,
    loan_principal=None,
    loan_rate=None,
    loan_years=None,
) -> Dict[str, Any]:
    """Household payload for the form values, on top of the defaults.

    Blank fields arrive as None. The payload parser turns blank numbers into
    0 and a blank rent end year into "no end".
    """
    housing_type = housing_type if housing_type in {"rent", "loan"} else "rent"
    age = to_number(current_age) or 0
    payload = default_household_payload(start_year, current_age=int(age), housing_type=housing_type)

    payload["settings"]["horizon"] = horizon
    payload["settings"]["inflation"] = inflation
    salary = payload["income"]["salary"][0]
    salary.update(base=salary_base, bonus=salary_bonus, growth=salary_growth)
    payload["assets"]["cash"] = cash

    housing = payload["expenses"]["housing"]
    if housing_type == "loan":
        housing.update(principal=loan_principal, rate=loan_rate, years=loan_years)
    else:
        housing.update(amount=rent_amount, endYear=rent_end_year)
    return payload


__all__ = ["FORM_FIELDS", "build_form", "payload_from_form"]
