from .defaults import default_household_payload
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
from .payload import household_from_payload
from .results import RESULTS_TABLE, ResultsTableModel, YearRow, rows_to_frame
from .tax import (
    DEFAULT_BRACKETS,
    CallableTaxPolicy,
    FlatTaxPolicy,
    ProgressiveTaxPolicy,
    TaxBracket,
    TaxConfig,
    TaxPolicy,
    default_income_tax,
    resolve_tax_policy,
)

__all__ = [
    "DEFAULT_BRACKETS",
    "RESULTS_TABLE",
    "Assets",
    "CallableTaxPolicy",
    "EducationCost",
    "EducationProfile",
    "Expenses",
    "FixedLiving",
    "FlatTaxPolicy",
    "Household",
    "HouseholdError",
    "Income",
    "InsurancePolicy",
    "LoanHousing",
    "Member",
    "PensionEntry",
    "Portfolio",
    "ProgressiveTaxPolicy",
    "RatioLiving",
    "RentHousing",
    "ResultsTableModel",
    "SalaryStream",
    "SeverancePayment",
    "Settings",
    "SideJob",
    "TaxBracket",
    "TaxConfig",
    "TaxPolicy",
    "YearRow",
    "default_household_payload",
    "default_income_tax",
    "household_from_payload",
    "resolve_tax_policy",
    "rows_to_frame",
]
