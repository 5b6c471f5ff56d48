from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .numbers import to_number


@dataclass
class SalaryStream:
    base: float
    growth: float = 0.0
    bonus: float = 0.0
    end_year: int | None = None

    def is_active(self, year: int) -> bool:
        end = to_number(self.end_year)
        return end is None or year <= end


@dataclass
class SideJob:
    start: int
    end: int
    amount: float

    def is_active(self, year: int) -> bool:
        start, end = to_number(self.start), to_number(self.end)
        if start is None or end is None:
            return False
        return start <= year <= end


@dataclass
class PensionEntry:
    start_age: int
    est_annual: float

    def is_eligible(self, age: float) -> bool:
        start_age = to_number(self.start_age)
        return start_age is not None and age >= start_age


@dataclass
class SeverancePayment:
    year: int
    amount: float

    def pays_in(self, year: int) -> bool:
        return to_number(self.year) == year


@dataclass
class Income:
    salary: List[SalaryStream] = field(default_factory=list)
    side_jobs: List[SideJob] = field(default_factory=list)
    pension: List[PensionEntry] = field(default_factory=list)
    severance: List[SeverancePayment] = field(default_factory=list)
