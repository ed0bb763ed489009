import pytest

from src.config import settings
from src.core.business_models import BusinessInputs, Scenario
from src.core.cashflow_projection import project_cumulative_cashflow, project_scenarios
from src.core.viability_engine import compute, compute_all_scenarios


@pytest.fixture()
def inputs() -> BusinessInputs:
    return BusinessInputs(
        initial_investment=50_000.0,
        monthly_fixed_cost=5_000.0,
        variable_cost_per_unit=15.0,
        selling_price_per_unit=50.0,
        monthly_sales_volume=200.0,
        tax_rate=15.0,
    )


def test_cumulative_cashflow_shape_and_columns(inputs: BusinessInputs):
    df = project_cumulative_cashflow(compute(inputs), inputs)

    assert list(df.columns) == ["month", "label", "cumulative_cashflow"]
    assert len(df) == settings.CASHFLOW_PROJECTION_MONTHS
    assert df["month"].iloc[0] == 1
    assert df["label"].iloc[0] == "M1"
    assert df["label"].iloc[-1] == f"M{settings.CASHFLOW_PROJECTION_MONTHS}"


def test_cumulative_cashflow_values(inputs: BusinessInputs):
    df = project_cumulative_cashflow(compute(inputs), inputs, months=36)

    # net profit 1,700 / month against a 50,000 outlay
    assert df["cumulative_cashflow"].iloc[0] == pytest.approx(-48_300.0)
    assert df["cumulative_cashflow"].iloc[11] == pytest.approx(-29_600.0)
    assert df["cumulative_cashflow"].iloc[-1] == pytest.approx(11_200.0)


def test_cumulative_cashflow_crosses_zero_at_payback(inputs: BusinessInputs):
    result = compute(inputs)
    df = project_cumulative_cashflow(result, inputs, months=36)

    first_positive = df.loc[df["cumulative_cashflow"] >= 0, "month"].iloc[0]
    assert first_positive == int(result.payback_months.months) + 1


def test_loss_making_cashflow_keeps_falling(inputs: BusinessInputs):
    result = compute(inputs, Scenario.PESSIMISTIC)
    df = project_cumulative_cashflow(result, inputs)

    assert df["cumulative_cashflow"].is_monotonic_decreasing
    assert (df["cumulative_cashflow"] < -inputs.initial_investment).all()


@pytest.mark.parametrize("months", [0, -3])
def test_non_positive_horizon_is_rejected(inputs: BusinessInputs, months: int):
    with pytest.raises(ValueError):
        project_cumulative_cashflow(compute(inputs), inputs, months=months)
    with pytest.raises(ValueError):
        project_scenarios(inputs, months=months)


def test_project_scenarios_has_one_column_per_scenario(inputs: BusinessInputs):
    df = project_scenarios(inputs, months=12)

    assert list(df.columns) == [
        "month",
        "label",
        "Pessimistic",
        "Realistic",
        "Optimistic",
    ]
    assert len(df) == 12


def test_project_scenarios_matches_single_projection(inputs: BusinessInputs):
    scenario_results = compute_all_scenarios(inputs)
    wide = project_scenarios(inputs, months=12, scenario_results=scenario_results)

    for scenario, result in scenario_results.items():
        single = project_cumulative_cashflow(result, inputs, months=12)
        assert wide[scenario.label].tolist() == pytest.approx(
            single["cumulative_cashflow"].tolist()
        )


def test_optimistic_line_stays_above_pessimistic(inputs: BusinessInputs):
    df = project_scenarios(inputs)
    assert (df["Optimistic"] >= df["Realistic"]).all()
    assert (df["Realistic"] >= df["Pessimistic"]).all()
