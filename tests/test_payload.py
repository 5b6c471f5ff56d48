import pytest

from backend.data_model import (
    FixedLiving,
    FlatTaxPolicy,
    HouseholdError,
    LoanHousing,
    ProgressiveTaxPolicy,
    RatioLiving,
    RentHousing,
    default_household_payload,
    household_from_payload,
)


def test_default_payload_builds_the_form_household():
    household = household_from_payload(default_household_payload(2025, current_age=40))

    assert household.members[0].birth_year == 1985
    assert household.settings.start_year == 2025
    assert household.settings.horizon == 60
    assert household.settings.tax.base_deduction == 480_000
    assert isinstance(household.settings.tax.policy(), ProgressiveTaxPolicy)
    assert household.income.salary[0].base == 6_500_000
    assert household.expenses.living == FixedLiving(3_600_000)
    assert household.expenses.housing == RentHousing(amount=1_800_000, end_year=2045)
    assert household.expenses.insurance[0].until_year is None
    assert household.assets.portfolios[0].annual_add == 600_000


def test_default_payload_with_loan():
    household = household_from_payload(default_household_payload(2025, housing_type="loan"))

    assert household.expenses.housing == LoanHousing(principal=35_000_000, rate=0.012, years=35, start_year=2025)


def test_blank_and_invalid_numbers_default_to_zero():
    payload = default_household_payload(2025)
    payload["assets"]["cash"] = ""
    payload["income"]["salary"] = [{"base": "abc", "bonus": None, "growth": "0.03", "endYear": ""}]
    payload["expenses"]["housing"] = {"type": "rent", "amount": "1000", "endYear": 0}

    household = household_from_payload(payload)

    assert household.assets.cash == 0.0
    stream = household.income.salary[0]
    assert (stream.base, stream.bonus, stream.growth, stream.end_year) == (0.0, 0.0, 0.03, None)
    assert household.expenses.housing == RentHousing(amount=1000.0, end_year=0)


@pytest.mark.parametrize("raw, expected", [("", None), (None, None), ("soon", None), ("2030", 2030), (0, 0)])
def test_rent_end_year_keeps_zero(raw, expected):
    payload = default_household_payload(2025)
    payload["expenses"]["housing"] = {"type": "rent", "amount": 1000, "endYear": raw}

    assert household_from_payload(payload).expenses.housing.end_year == expected


def test_salary_and_insurance_zero_end_year_means_no_end():
    payload = default_household_payload(2025)
    payload["income"]["salary"][0]["endYear"] = 0
    payload["expenses"]["insurance"] = [{"premium": 10, "untilYear": 0}]

    household = household_from_payload(payload)

    assert household.income.salary[0].end_year is None
    assert household.expenses.insurance[0].until_year is None


def test_snake_case_keys_and_optional_sections():
    payload = {
        "members": [{"name": "A", "birth_year": 1970}],
        "settings": {"start_year": 2024, "horizon": 2, "tax": {"policy": {"type": "flat", "rate": 0.2}}},
        "income": {
            "salary": [{"base": 100}],
            "side_jobs": [{"start": 2024, "end": 2025, "amount": 10}],
            "pension": [{"start_age": 65, "est_annual": 50}],
            "severance": [{"year": 2025, "amount": 1_000}],
        },
        "expenses": {
            "living": {"method": "ratio", "ratio_of_net": 0.4},
            "education": [{"profile": [{"year": 2025, "amount": 20}]}],
            "insurance": [{"premium": 5, "until_year": 2024}],
        },
        "assets": {"cash": 1, "portfolios": [{"balance": 2, "exp_return": 0.05, "annual_add": 3}]},
    }

    household = household_from_payload(payload)

    assert household.members[0].retire_age == 65
    assert household.settings.tax.policy() == FlatTaxPolicy(0.2)
    assert household.income.side_jobs[0].amount == 10
    assert household.income.pension[0].start_age == 65
    assert household.expenses.living == RatioLiving(0.4)
    assert household.expenses.housing is None
    assert household.expenses.education[0].amount_for(2025) == 20
    assert household.expenses.insurance[0].until_year == 2024
    assert household.assets.portfolios[0].name == "Portfolio 1"


def test_ratio_without_value_keeps_default():
    payload = default_household_payload(2025)
    payload["expenses"]["living"] = {"method": "ratio"}

    living = household_from_payload(payload).expenses.living

    assert living.ratio() == pytest.approx(0.6)


def test_custom_brackets():
    payload = default_household_payload(2025)
    payload["settings"]["tax"]["policy"] = {"type": "progressive", "brackets": [[1_000, 0.1, 0], [None, 0.2, 100]]}

    policy = household_from_payload(payload).settings.tax.policy()

    assert policy.compute_tax(2_000) == pytest.approx(300)


@pytest.mark.parametrize(
    "mutate",
    [
        lambda p: p.pop("settings"),
        lambda p: p.pop("income"),
        lambda p: p.pop("assets"),
        lambda p: p["expenses"].pop("living"),
        lambda p: p["expenses"].update(housing={"type": "boat"}),
        lambda p: p["expenses"].update(living={"method": "guess"}),
        lambda p: p["settings"]["tax"].update(policy={"type": "lottery"}),
        lambda p: p["settings"]["tax"].update(policy={"brackets": [[100, 0.1, 0]]}),
    ],
)
def test_structural_problems_raise(mutate):
    payload = default_household_payload(2025)
    mutate(payload)

    with pytest.raises(HouseholdError):
        household_from_payload(payload)


def test_non_mapping_payload_raises():
    with pytest.raises(HouseholdError):
        household_from_payload(["not", "a", "household"])
