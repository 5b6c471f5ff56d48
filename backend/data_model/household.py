# data_model/household.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .expenses import Expenses
from .income import Income
from .tax import TaxConfig


class HouseholdError(ValueError):
    """Raised when a household description is structurally incomplete."""


@dataclass
class Member:
    name: str
    birth_year: int
    retire_age: int = 65


@dataclass
class Settings:
    start_year: int
    horizon: int
    inflation: float = 0.0
    tax: TaxConfig = field(default_factory=TaxConfig)


@dataclass
class Portfolio:
    name: str
    balance: float
    exp_return: float = 0.0
    annual_add: float = 0.0


@dataclass
class Assets:
    cash: float = 0.0
    portfolios: List[Portfolio] = field(default_factory=list)

    def starting_total(self) -> float:
        return (self.cash or 0.0) + sum(p.balance or 0.0 for p in self.portfolios)


@dataclass
class Household:
    members: List[Member]
    settings: Settings
    income: Income
    expenses: Expenses
    assets: Assets = field(default_factory=Assets)

    def primary_member(self) -> Member:
        # Only the first member drives age-based rules.
        if not self.members:
            raise HouseholdError("Household has no members; age-based income needs a primary member.")
        return self.members[0]
