import math
from dataclasses import replace

import pytest

from src.config import settings
from src.core.business_models import (
    BreakEvenPoint,
    BusinessInputs,
    CalculatedResults,
    NeverRecovers,
    NoBreakEven,
    Recoverable,
    Scenario,
)
from src.core.risk_classifier import Severity, fixed_cost_ratio, identify_risks
from src.core.viability_engine import compute


@pytest.fixture()
def healthy_inputs() -> BusinessInputs:
    # revenue 10,000, net profit 6,300, payback ~1.6 months, fixed costs 10%
    return BusinessInputs(
        initial_investment=10_000.0,
        monthly_fixed_cost=1_000.0,
        variable_cost_per_unit=10.0,
        selling_price_per_unit=50.0,
        monthly_sales_volume=200.0,
        tax_rate=10.0,
    )


@pytest.fixture()
def healthy_result(healthy_inputs: BusinessInputs) -> CalculatedResults:
    return compute(healthy_inputs)


@pytest.fixture()
def reference_inputs() -> BusinessInputs:
    return BusinessInputs(
        initial_investment=50_000.0,
        monthly_fixed_cost=5_000.0,
        variable_cost_per_unit=15.0,
        selling_price_per_unit=50.0,
        monthly_sales_volume=200.0,
        tax_rate=15.0,
    )


def _codes(risks):
    return [r.code for r in risks]


def test_healthy_business_gets_single_low_finding(
    healthy_result: CalculatedResults, healthy_inputs: BusinessInputs
):
    risks = identify_risks(healthy_result, healthy_inputs)

    assert len(risks) == 1
    assert risks[0].severity is Severity.LOW
    assert risks[0].code == "solid_position"


def test_low_margin_is_one_high_finding(
    healthy_result: CalculatedResults, healthy_inputs: BusinessInputs
):
    result = replace(healthy_result, margin_percent=5.0)
    risks = identify_risks(result, healthy_inputs)

    margin_risks = [r for r in risks if r.code in ("low_margin", "moderate_margin")]
    assert len(margin_risks) == 1
    assert margin_risks[0].code == "low_margin"
    assert margin_risks[0].severity is Severity.HIGH
    assert "5.0%" in margin_risks[0].description


@pytest.mark.parametrize(
    "margin, expected",
    [
        (0.5, ["low_margin"]),
        (9.99, ["low_margin"]),
        (10.0, ["moderate_margin"]),
        (19.99, ["moderate_margin"]),
        (20.0, ["solid_position"]),
    ],
)
def test_margin_bands(
    healthy_result: CalculatedResults,
    healthy_inputs: BusinessInputs,
    margin: float,
    expected: list,
):
    result = replace(healthy_result, margin_percent=margin)
    assert _codes(identify_risks(result, healthy_inputs)) == expected


@pytest.mark.parametrize(
    "months, expected",
    [
        (30.0, ["long_payback"]),
        (24.0, ["moderate_payback"]),
        (12.5, ["moderate_payback"]),
        (12.0, ["solid_position"]),
    ],
)
def test_payback_bands(
    healthy_result: CalculatedResults,
    healthy_inputs: BusinessInputs,
    months: float,
    expected: list,
):
    result = replace(healthy_result, payback_months=Recoverable(months=months))
    risks = identify_risks(result, healthy_inputs)
    assert _codes(risks) == expected


def test_never_recovering_payback_adds_no_payback_band(
    healthy_result: CalculatedResults, healthy_inputs: BusinessInputs
):
    result = replace(healthy_result, payback_months=NeverRecovers())
    codes = _codes(identify_risks(result, healthy_inputs))
    assert "long_payback" not in codes
    assert "moderate_payback" not in codes


@pytest.mark.parametrize(
    "fixed_cost, expected",
    [
        (6_000.0, "high_fixed_costs"),
        (5_000.01, "high_fixed_costs"),
        (4_000.0, "significant_fixed_costs"),
        (3_000.0, None),
    ],
)
def test_fixed_cost_bands_use_entered_fixed_cost(
    healthy_result: CalculatedResults,
    healthy_inputs: BusinessInputs,
    fixed_cost: float,
    expected,
):
    inputs = replace(healthy_inputs, monthly_fixed_cost=fixed_cost)
    codes = _codes(identify_risks(healthy_result, inputs))
    fixed_codes = [c for c in codes if c.endswith("fixed_costs")]
    assert fixed_codes == ([expected] if expected else [])


def test_fixed_cost_ratio_without_revenue_is_unbounded(
    healthy_result: CalculatedResults, healthy_inputs: BusinessInputs
):
    result = replace(healthy_result, monthly_revenue=0.0)
    assert math.isinf(fixed_cost_ratio(result, healthy_inputs))

    risks = identify_risks(result, healthy_inputs)
    assert "high_fixed_costs" in _codes(risks)


@pytest.mark.parametrize(
    "break_even, fires",
    [
        (180.0, False),
        (180.5, True),
        (200.0, True),
        (200.5, False),
    ],
)
def test_near_break_even_window(
    healthy_result: CalculatedResults,
    healthy_inputs: BusinessInputs,
    break_even: float,
    fires: bool,
):
    result = replace(healthy_result, break_even_units=BreakEvenPoint(units=break_even))
    codes = _codes(identify_risks(result, healthy_inputs))
    assert ("near_break_even" in codes) is fires


def test_no_break_even_never_counts_as_near(
    healthy_result: CalculatedResults, healthy_inputs: BusinessInputs
):
    result = replace(healthy_result, break_even_units=NoBreakEven())
    assert "near_break_even" not in _codes(identify_risks(result, healthy_inputs))


def test_reference_realistic_findings_in_rule_order(reference_inputs: BusinessInputs):
    result = compute(reference_inputs, Scenario.REALISTIC)
    risks = identify_risks(result, reference_inputs)

    assert _codes(risks) == [
        "moderate_margin",
        "long_payback",
        "significant_fixed_costs",
    ]
    assert [r.severity for r in risks] == [
        Severity.MEDIUM,
        Severity.HIGH,
        Severity.MEDIUM,
    ]


def test_reference_pessimistic_findings(reference_inputs: BusinessInputs):
    result = compute(reference_inputs, Scenario.PESSIMISTIC)
    risks = identify_risks(result, reference_inputs)

    assert _codes(risks) == [
        "high_fixed_costs",
        "negative_margin",
        "unrecoverable_investment",
    ]
    assert all(r.severity is Severity.HIGH for r in risks)
    assert f"-{settings.CURRENCY_SYMBOL}140" in risks[-1].description


def test_not_viable_always_has_findings(reference_inputs: BusinessInputs):
    for price in (5.0, 15.0, 20.0, 30.0, 40.0):
        inputs = replace(reference_inputs, selling_price_per_unit=price)
        for scenario in Scenario:
            result = compute(inputs, scenario)
            if result.is_viable:
                continue
            risks = identify_risks(result, inputs)
            assert risks
            assert "unrecoverable_investment" in _codes(risks)
            assert all(r.severity is not Severity.LOW for r in risks)


def test_identify_risks_is_deterministic(reference_inputs: BusinessInputs):
    result = compute(reference_inputs, Scenario.OPTIMISTIC)
    assert identify_risks(result, reference_inputs) == identify_risks(
        result, reference_inputs
    )
