from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Protocol, Tuple, runtime_checkable


@runtime_checkable
class TaxPolicy(Protocol):
    """Anything that maps taxable income to an income-tax amount."""

    def compute_tax(self, taxable: float) -> float:
        ...


@dataclass(frozen=True)
class TaxBracket:
    upper: float | None
    rate: float
    deduction: float = 0.0


# Approximate progressive table; not an authoritative tax code.
DEFAULT_BRACKETS: Tuple[TaxBracket, ...] = (
    TaxBracket(1_950_000, 0.05, 0),
    TaxBracket(3_300_000, 0.10, 97_500),
    TaxBracket(6_950_000, 0.20, 427_500),
    TaxBracket(9_000_000, 0.23, 636_000),
    TaxBracket(18_000_000, 0.33, 1_536_000),
    TaxBracket(40_000_000, 0.40, 2_796_000),
    TaxBracket(None, 0.45, 4_796_000),
)


@dataclass(frozen=True)
class ProgressiveTaxPolicy:
    """Bracket table evaluated lowest bracket first; the first bracket whose
    (exclusive) upper bound exceeds the taxable amount wins.

    Each bracket yields ``taxable * rate - deduction``. The last bracket must be
    open-ended (``upper=None``).
    """

    brackets: Tuple[TaxBracket, ...] = field(default=DEFAULT_BRACKETS)

    def __post_init__(self) -> None:
        brackets = tuple(self.brackets)
        if not brackets:
            raise ValueError("A progressive tax policy needs at least one bracket.")
        if brackets[-1].upper is not None:
            raise ValueError("The last tax bracket must be open-ended (upper=None).")
        previous = None
        for bracket in brackets[:-1]:
            if bracket.upper is None:
                raise ValueError("Only the last tax bracket may be open-ended.")
            if previous is not None and bracket.upper <= previous:
                raise ValueError("Tax brackets must have strictly increasing upper bounds.")
            previous = bracket.upper
        object.__setattr__(self, "brackets", brackets)

    def compute_tax(self, taxable: float) -> float:
        if taxable <= 0:
            return 0.0
        for bracket in self.brackets:
            if bracket.upper is None or taxable < bracket.upper:
                return taxable * bracket.rate - bracket.deduction
        return 0.0


@dataclass(frozen=True)
class FlatTaxPolicy:
    rate: float = 0.0

    def compute_tax(self, taxable: float) -> float:
        if taxable <= 0:
            return 0.0
        return taxable * self.rate


@dataclass(frozen=True)
class CallableTaxPolicy:
    """Adapts a plain ``taxable -> tax`` function to the policy interface."""

    func: Callable[[float], float]

    def compute_tax(self, taxable: float) -> float:
        return self.func(taxable)


DEFAULT_TAX_POLICY = ProgressiveTaxPolicy()


def default_income_tax(taxable: float) -> float:
    return DEFAULT_TAX_POLICY.compute_tax(taxable)


def resolve_tax_policy(value: TaxPolicy | Callable[[float], float] | None) -> TaxPolicy:
    if value is None:
        return DEFAULT_TAX_POLICY
    if isinstance(value, TaxPolicy):
        return value
    if callable(value):
        return CallableTaxPolicy(value)
    raise TypeError(f"Unsupported tax policy: {value!r}")


@dataclass
class TaxConfig:
    income_tax: TaxPolicy | Callable[[float], float] | None = None
    social_ins_rate: float = 0.0
    resident_rate: float = 0.0
    base_deduction: float = 0.0
    salary_deduction_rate: float = 0.0

    def policy(self) -> TaxPolicy:
        return resolve_tax_policy(self.income_tax)
