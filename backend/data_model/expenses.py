from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Union

from .numbers import to_number

DEFAULT_RATIO_OF_NET = 0.6


@dataclass
class FixedLiving:
    """Fixed annual living cost, inflated every year."""

    base: float


@dataclass
class RatioLiving:
    """Living cost as a share of the year's take-home pay (not inflated)."""

    ratio_of_net: float | None = None

    def ratio(self) -> float:
        return DEFAULT_RATIO_OF_NET if self.ratio_of_net is None else self.ratio_of_net


LivingExpense = Union[FixedLiving, RatioLiving]


@dataclass
class RentHousing:
    amount: float
    end_year: int | None = None

    def is_active(self, year: int) -> bool:
        end = to_number(self.end_year)
        return end is None or year <= end


@dataclass
class LoanHousing:
    """Fixed-rate loan repaid with a level annual payment."""

    principal: float
    rate: float
    years: int
    start_year: int

    def is_active(self, year: int) -> bool:
        # Missing start year or term counts as 0.
        start = to_number(self.start_year) or 0.0
        years = to_number(self.years) or 0.0
        return start <= year <= start + years - 1


Housing = Union[RentHousing, LoanHousing]


@dataclass
class EducationCost:
    year: int
    amount: float


@dataclass
class EducationProfile:
    entries: List[EducationCost] = field(default_factory=list)

    def amount_for(self, year: int) -> float:
        # Sparse profile: only the first entry for a given year counts.
        for entry in self.entries:
            if to_number(entry.year) == year:
                return entry.amount
        return 0.0


@dataclass
class InsurancePolicy:
    premium: float
    until_year: int | None = None

    def is_active(self, year: int) -> bool:
        until = to_number(self.until_year)
        return until is None or year <= until


@dataclass
class Expenses:
    living: LivingExpense
    housing: Housing | None = None
    education: List[EducationProfile] = field(default_factory=list)
    insurance: List[InsurancePolicy] = field(default_factory=list)
