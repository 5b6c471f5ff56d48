import logging
import math
from dataclasses import dataclass
from typing import Any, List

from ..data_model import (
    FixedLiving,
    Household,
    HouseholdError,
    Income,
    LoanHousing,
    Portfolio,
    RatioLiving,
    RentHousing,
    TaxConfig,
    YearRow,
)
from ..data_model.numbers import to_number

logger = logging.getLogger(__name__)


def safe_finite(value: Any, label: str | None = None) -> float:
    """Return ``value`` as a float, or 0.0 when it is missing or not finite."""
    if value is None:
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        number = math.nan
    if math.isfinite(number):
        return number
    if label:
        logger.debug("Clamped non-finite %s (%r) to 0", label, value)
    return 0.0


def compound(rate: float, periods: int) -> float:
    """Growth multiplier ``(1 + rate) ** periods``; 0.0 when it overflows."""
    try:
        return safe_finite((1 + rate) ** periods, "compound factor")
    except OverflowError:
        logger.debug("Compound factor overflowed for rate=%r periods=%r", rate, periods)
        return 0.0


def amortized_payment(principal: float, rate: float, years: int) -> float:
    """Level annual payment that retires a fixed-rate loan over ``years``."""
    principal = safe_finite(principal)
    rate = safe_finite(rate)
    years = safe_finite(years)
    if principal <= 0 or years <= 0:
        return 0.0
    if rate <= 0:
        return principal / years
    return safe_finite(principal * rate / (1 - compound(rate, -years)), "loan payment")


@dataclass
class PortfolioState:
    """Engine-owned working copy of one portfolio for a single projection."""

    name: str
    balance: float
    exp_return: float
    annual_add: float

    @classmethod
    def from_portfolio(cls, portfolio: Portfolio) -> "PortfolioState":
        return cls(
            name=portfolio.name,
            balance=safe_finite(portfolio.balance),
            exp_return=safe_finite(portfolio.exp_return),
            annual_add=safe_finite(portfolio.annual_add),
        )

    def expected_return(self) -> float:
        return self.balance * self.exp_return


def roll_forward(states: List[PortfolioState]) -> None:
    """Apply one year of growth and contributions to ``states`` in place.

    Each portfolio grows by its own return rate. Its configured contribution
    is scaled by its share of the combined balance, so only a lone portfolio
    receives its full contribution.
    """
    if not states:
        return
    total_balance = sum(state.balance for state in states)
    weights = [state.balance / total_balance if total_balance > 0 else 0.0 for state in states]
    for state, weight in zip(states, weights):
        state.balance = safe_finite(
            state.balance + state.expected_return() + state.annual_add * weight,
            f"balance of portfolio '{state.name}'",
        )


def _require(household: Household, name: str):
    value = getattr(household, name, None)
    if value is None:
        raise HouseholdError(f"Household is missing required section '{name}'.")
    return value


def _gross_income(income: Income, year: int, years_from_start: int, birth_year: float | None) -> float:
    salary = 0.0
    for stream in income.salary:
        if not stream.is_active(year):
            continue
        growth = safe_finite(stream.growth)
        salary += safe_finite(stream.base) * compound(growth, max(0, years_from_start)) + safe_finite(stream.bonus)

    side = sum(safe_finite(job.amount) for job in income.side_jobs if job.is_active(year))

    pension = 0.0
    if birth_year is not None:
        age = year - birth_year
        pension = sum(safe_finite(entry.est_annual) for entry in income.pension if entry.is_eligible(age))

    severance = sum(safe_finite(pay.amount) for pay in income.severance if pay.pays_in(year))
    return safe_finite(salary + side + pension + severance, "gross income")


def _living_expense(living, take_home: float, inflation_factor: float) -> float:
    if isinstance(living, FixedLiving):
        return safe_finite(living.base) * inflation_factor
    if isinstance(living, RatioLiving):
        return take_home * safe_finite(living.ratio())
    raise HouseholdError(f"Unsupported living expense: {living!r}")


def _housing_expense(housing, year: int, inflation_factor: float, loan_payment: float) -> float:
    if housing is None:
        return 0.0
    if isinstance(housing, RentHousing):
        return safe_finite(housing.amount) * inflation_factor if housing.is_active(year) else 0.0
    if isinstance(housing, LoanHousing):
        return loan_payment if housing.is_active(year) else 0.0
    raise HouseholdError(f"Unsupported housing arrangement: {housing!r}")


def simulate(household: Household) -> List[YearRow]:
    """Project the household year by year over its horizon.

    The household is read-only; portfolio balances roll forward in a private
    working copy. Returns one row per year starting at ``settings.start_year``,
    or an empty list for a non-positive horizon.
    """
    settings = _require(household, "settings")
    income = _require(household, "income")
    expenses = _require(household, "expenses")
    assets = _require(household, "assets")
    if expenses.living is None:
        raise HouseholdError("Household is missing required section 'expenses.living'.")

    horizon = int(safe_finite(settings.horizon))
    if horizon <= 0:
        return []
    start_year = int(safe_finite(settings.start_year))

    tax = settings.tax or TaxConfig()
    policy = tax.policy()
    salary_deduction_rate = safe_finite(tax.salary_deduction_rate)
    base_deduction = safe_finite(tax.base_deduction)
    resident_rate = safe_finite(tax.resident_rate)
    social_ins_rate = safe_finite(tax.social_ins_rate)
    inflation = safe_finite(settings.inflation)

    birth_year = to_number(household.primary_member().birth_year) if income.pension else None

    housing = expenses.housing
    loan_payment = 0.0
    if isinstance(housing, LoanHousing):
        loan_payment = amortized_payment(housing.principal, housing.rate, housing.years)

    portfolios = [PortfolioState.from_portfolio(p) for p in assets.portfolios]
    balance = safe_finite(assets.cash) + sum(state.balance for state in portfolios)

    logger.debug(
        "Projecting %d years from %d with %d portfolio(s)", horizon, start_year, len(portfolios)
    )

    rows: List[YearRow] = []
    for year in range(start_year, start_year + horizon):
        years_from_start = year - start_year

        gross = _gross_income(income, year, years_from_start, birth_year)

        taxable_base = gross * (1 - salary_deduction_rate)
        taxable = max(0.0, taxable_base - base_deduction)

        income_tax = safe_finite(policy.compute_tax(taxable), "income tax")
        resident_tax = safe_finite(taxable * resident_rate, "resident tax")
        social_ins = safe_finite(gross * social_ins_rate, "social insurance")

        inflation_factor = compound(inflation, years_from_start)

        take_home = max(0.0, gross - income_tax - resident_tax - social_ins)

        living = safe_finite(_living_expense(expenses.living, take_home, inflation_factor), "living")
        housing_cost = safe_finite(_housing_expense(housing, year, inflation_factor, loan_payment), "housing")
        education = safe_finite(
            sum(safe_finite(profile.amount_for(year)) * inflation_factor for profile in expenses.education),
            "education",
        )
        insurance = safe_finite(
            sum(safe_finite(cover.premium) * inflation_factor for cover in expenses.insurance if cover.is_active(year)),
            "insurance",
        )

        annual_add = sum(state.annual_add for state in portfolios)
        investment_return = safe_finite(
            sum(state.expected_return() for state in portfolios), "investment return"
        )

        cashflow = safe_finite(take_home - (living + housing_cost + education + insurance), "cashflow")
        balance = safe_finite(balance + cashflow + annual_add + investment_return, "balance")

        roll_forward(portfolios)

        rows.append(
            YearRow(
                year=year,
                gross=gross,
                income_tax=income_tax,
                resident_tax=resident_tax,
                social_ins=social_ins,
                living=living,
                housing=housing_cost,
                education=education,
                insurance=insurance,
                investment_return=investment_return,
                annual_add=annual_add,
                cashflow=cashflow,
                balance=balance,
            )
        )

    return rows
