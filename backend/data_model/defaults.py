from __future__ import annotations

from typing import Any, Dict, Literal

DEFAULT_CURRENT_AGE = 32
DEFAULT_HORIZON = 60


def default_tax_settings() -> Dict[str, Any]:
    return {
        "policy": {"type": "progressive"},
        "socialInsRate": 0.14,
        "residentRate": 0.10,
        "baseDeduction": 480_000.0,
        "salaryDeductionRate": 0.20,
    }


def default_housing(start_year: int, housing_type: Literal["rent", "loan"] = "rent") -> Dict[str, Any]:
    if housing_type == "loan":
        return {
            "type": "loan",
            "principal": 35_000_000.0,
            "rate": 0.012,
            "years": 35,
            "startYear": start_year,
        }
    return {"type": "rent", "amount": 1_800_000.0, "endYear": start_year + 20}


def default_household_payload(
    start_year: int,
    current_age: int = DEFAULT_CURRENT_AGE,
    housing_type: Literal["rent", "loan"] = "rent",
) -> Dict[str, Any]:
    """Payload the input form starts with before the user edits anything."""
    return {
        "members": [
            {"name": "Head of household", "birthYear": start_year - current_age, "retireAge": 65},
        ],
        "settings": {
            "startYear": start_year,
            "horizon": DEFAULT_HORIZON,
            "inflation": 0.02,
            "tax": default_tax_settings(),
        },
        "income": {
            "salary": [{"base": 6_500_000.0, "bonus": 1_000_000.0, "growth": 0.02}],
        },
        "expenses": {
            "living": {"method": "fixed", "base": 3_600_000.0},
            "housing": default_housing(start_year, housing_type),
            "education": [],
            "insurance": [{"premium": 120_000.0}],
        },
        "assets": {
            "cash": 3_000_000.0,
            "portfolios": [
                {"name": "Index Fund", "balance": 1_000_000.0, "expReturn": 0.03, "annualAdd": 600_000.0},
            ],
        },
    }
