"""Build a :class:`Household` from a JSON-style payload.

The payload mirrors what the input form sends: camelCase keys (snake_case is
accepted too), blank strings for fields the user left empty. Blank or invalid
numbers become 0. Blank salary and insurance end years, or an end year of 0,
mean "no end". A rent end year is kept as given, so 0 means the rent has
already ended.
"""
from __future__ import annotations

import math
from typing import Any, List, Mapping

from .expenses import (
    EducationCost,
    EducationProfile,
    Expenses,
    FixedLiving,
    InsurancePolicy,
    LoanHousing,
    RatioLiving,
    RentHousing,
)
from .household import Assets, Household, HouseholdError, Member, Portfolio, Settings
from .income import Income, PensionEntry, SalaryStream, SeverancePayment, SideJob
from .tax import DEFAULT_BRACKETS, FlatTaxPolicy, ProgressiveTaxPolicy, TaxBracket, TaxConfig, TaxPolicy


def _extract(payload: Mapping[str, Any], *keys: str, default=None):
    for key in keys:
        if key in payload and payload[key] is not None:
            return payload[key]
    return default


def _to_float(value: Any) -> float:
    if value is None or (isinstance(value, str) and not value.strip()):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def _to_int(value: Any) -> int:
    return int(_to_float(value))


def _to_optional_year(value: Any) -> int | None:
    year = _to_int(value)
    return year if year > 0 else None


def _to_year_or_none(value: Any) -> int | None:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return int(number) if math.isfinite(number) else None


def _section(payload: Mapping[str, Any], *keys: str) -> Mapping[str, Any]:
    value = _extract(payload, *keys)
    if not isinstance(value, Mapping):
        raise HouseholdError(f"Missing required section '{keys[0]}'.")
    return value


def _rows(payload: Mapping[str, Any], *keys: str) -> List[Mapping[str, Any]]:
    value = _extract(payload, *keys, default=[])
    if isinstance(value, Mapping):
        value = [value]
    return [row for row in value or [] if isinstance(row, Mapping)]


def parse_tax_policy(raw: Any) -> TaxPolicy:
    if not raw:
        return ProgressiveTaxPolicy()
    if isinstance(raw, str):
        raw = {"type": raw}
    policy_type = str(_extract(raw, "type", default="progressive")).strip().lower()
    if policy_type == "flat":
        return FlatTaxPolicy(rate=_to_float(raw.get("rate")))
    if policy_type == "progressive":
        brackets = raw.get("brackets")
        if not brackets:
            return ProgressiveTaxPolicy(DEFAULT_BRACKETS)
        parsed = []
        for entry in brackets:
            if isinstance(entry, Mapping):
                upper, rate, deduction = entry.get("upper"), entry.get("rate"), entry.get("deduction")
            else:
                upper, rate, deduction = (list(entry) + [None, None, None])[:3]
            parsed.append(
                TaxBracket(
                    upper=None if upper in (None, "") else _to_float(upper),
                    rate=_to_float(rate),
                    deduction=_to_float(deduction),
                )
            )
        return ProgressiveTaxPolicy(tuple(parsed))
    raise HouseholdError(f"Unknown tax policy type '{policy_type}'.")


def parse_settings(raw: Mapping[str, Any]) -> Settings:
    tax_raw = _extract(raw, "tax", default={}) or {}
    try:
        policy = parse_tax_policy(_extract(tax_raw, "policy", "incomeTax", "income_tax"))
    except HouseholdError:
        raise
    except ValueError as exc:
        raise HouseholdError(f"Invalid tax brackets: {exc}") from exc
    tax = TaxConfig(
        income_tax=policy,
        social_ins_rate=_to_float(_extract(tax_raw, "socialInsRate", "social_ins_rate")),
        resident_rate=_to_float(_extract(tax_raw, "residentRate", "resident_rate")),
        base_deduction=_to_float(_extract(tax_raw, "baseDeduction", "base_deduction")),
        salary_deduction_rate=_to_float(_extract(tax_raw, "salaryDeductionRate", "salary_deduction_rate")),
    )
    return Settings(
        start_year=_to_int(_extract(raw, "startYear", "start_year")),
        horizon=_to_int(_extract(raw, "horizon")),
        inflation=_to_float(_extract(raw, "inflation")),
        tax=tax,
    )


def parse_members(rows: List[Mapping[str, Any]]) -> List[Member]:
    members: List[Member] = []
    for row in rows:
        members.append(
            Member(
                name=str(row.get("name", "")).strip(),
                birth_year=_to_int(_extract(row, "birthYear", "birth_year")),
                retire_age=_to_int(_extract(row, "retireAge", "retire_age", default=65)),
            )
        )
    return members


def parse_income(raw: Mapping[str, Any]) -> Income:
    salary = [
        SalaryStream(
            base=_to_float(row.get("base")),
            growth=_to_float(row.get("growth")),
            bonus=_to_float(row.get("bonus")),
            end_year=_to_optional_year(_extract(row, "endYear", "end_year")),
        )
        for row in _rows(raw, "salary")
    ]
    side_jobs = [
        SideJob(start=_to_int(row.get("start")), end=_to_int(row.get("end")), amount=_to_float(row.get("amount")))
        for row in _rows(raw, "sideJobs", "side_jobs")
    ]
    pension = [
        PensionEntry(
            start_age=_to_int(_extract(row, "startAge", "start_age")),
            est_annual=_to_float(_extract(row, "estAnnual", "est_annual")),
        )
        for row in _rows(raw, "pension")
    ]
    severance = [
        SeverancePayment(year=_to_int(row.get("year")), amount=_to_float(row.get("amount")))
        for row in _rows(raw, "severance")
    ]
    return Income(salary=salary, side_jobs=side_jobs, pension=pension, severance=severance)


def parse_living(raw: Any) -> FixedLiving | RatioLiving:
    if not isinstance(raw, Mapping):
        raise HouseholdError("Missing required section 'expenses.living'.")
    method = str(raw.get("method", "fixed")).strip().lower()
    if method == "fixed":
        return FixedLiving(base=_to_float(raw.get("base")))
    if method == "ratio":
        ratio = _extract(raw, "ratioOfNet", "ratio_of_net")
        return RatioLiving(ratio_of_net=None if ratio in (None, "") else _to_float(ratio))
    raise HouseholdError(f"Unknown living expense method '{method}'.")


def parse_housing(raw: Any) -> RentHousing | LoanHousing | None:
    if not raw:
        return None
    housing_type = str(raw.get("type", "")).strip().lower()
    if housing_type == "rent":
        return RentHousing(
            amount=_to_float(raw.get("amount")),
            end_year=_to_year_or_none(_extract(raw, "endYear", "end_year")),
        )
    if housing_type == "loan":
        return LoanHousing(
            principal=_to_float(raw.get("principal")),
            rate=_to_float(raw.get("rate")),
            years=_to_int(raw.get("years")),
            start_year=_to_int(_extract(raw, "startYear", "start_year")),
        )
    raise HouseholdError(f"Unknown housing type '{housing_type}'.")


def parse_expenses(raw: Mapping[str, Any]) -> Expenses:
    education = []
    for row in _rows(raw, "education"):
        entries = [
            EducationCost(year=_to_int(entry.get("year")), amount=_to_float(entry.get("amount")))
            for entry in _rows(row, "profile", "entries")
        ]
        education.append(EducationProfile(entries=entries))
    insurance = [
        InsurancePolicy(
            premium=_to_float(row.get("premium")),
            until_year=_to_optional_year(_extract(row, "untilYear", "until_year")),
        )
        for row in _rows(raw, "insurance")
    ]
    return Expenses(
        living=parse_living(raw.get("living")),
        housing=parse_housing(raw.get("housing")),
        education=education,
        insurance=insurance,
    )


def parse_assets(raw: Mapping[str, Any]) -> Assets:
    portfolios: List[Portfolio] = []
    for row in _rows(raw, "portfolios"):
        portfolios.append(
            Portfolio(
                name=str(row.get("name", "")).strip() or f"Portfolio {len(portfolios) + 1}",
                balance=_to_float(row.get("balance")),
                exp_return=_to_float(_extract(row, "expReturn", "exp_return")),
                annual_add=_to_float(_extract(row, "annualAdd", "annual_add")),
            )
        )
    return Assets(cash=_to_float(raw.get("cash")), portfolios=portfolios)


def household_from_payload(payload: Mapping[str, Any]) -> Household:
    if not isinstance(payload, Mapping):
        raise HouseholdError("Household payload must be an object.")
    return Household(
        members=parse_members(_rows(payload, "members")),
        settings=parse_settings(_section(payload, "settings")),
        income=parse_income(_section(payload, "income")),
        expenses=parse_expenses(_section(payload, "expenses")),
        assets=parse_assets(_section(payload, "assets")),
    )
