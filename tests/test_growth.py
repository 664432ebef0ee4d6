import itertools
import math

import pytest

from investmate.engine.errors import OutOfRangeInput
from investmate.engine.growth import ProjectionInput, project_growth


def simulate_monthly(initial, monthly, annual_return_percent, years):
    r = annual_return_percent / 100 / 12
    balance = initial
    for _ in range(years * 12):
        balance = balance * (1 + r) + monthly
    return balance


def project(initial, monthly, rate, years):
    return project_growth(ProjectionInput(initial, monthly, rate, years))


@pytest.mark.parametrize(
    "initial, monthly, rate, years",
    list(itertools.product((0.0, 1000.0, 25000.5), (0.0, 50.0, 750.0), (0.0, 1.2e-9, 1.2e-8, 0.5, 7.0, 20.0), (0, 1, 10, 50))),
)
def test_closed_form_matches_month_by_month(initial, monthly, rate, years):
    result = project(initial, monthly, rate, years)
    expected = simulate_monthly(initial, monthly, rate, years)
    assert result.projected_total == pytest.approx(expected, rel=1e-6)


def test_negative_rate_matches_month_by_month():
    result = project(10000.0, 200.0, -5.0, 15)
    assert result.projected_total == pytest.approx(simulate_monthly(10000.0, 200.0, -5.0, 15), rel=1e-6)
    assert result.projected_earnings < 0


def test_zero_rate_is_simple_sum():
    result = project(1234.56, 78.9, 0.0, 17)
    assert result.projected_total == 1234.56 + 78.9 * (17 * 12)
    assert result.projected_earnings == 0
    assert result.earnings_share_percent == 0


def test_totals_are_consistent():
    result = project(5000.0, 500.0, 7.0, 20)
    assert result.projected_total == pytest.approx(result.total_contributed + result.projected_earnings)
    assert 0 < result.earnings_share_percent <= 100


def test_reference_scenario():
    result = project(5000.0, 500.0, 7.0, 20)

    r = 7.0 / 100 / 12
    growth = (1 + r) ** 240
    expected = 5000.0 * growth + 500.0 * (growth - 1) / r

    assert result.total_contributed == 125000.0
    assert result.projected_total == pytest.approx(expected, abs=0.005)
    assert 280_000 < result.projected_total < 281_500


def test_monotonic_in_every_input():
    base = project(5000.0, 500.0, 7.0, 20).projected_total
    assert project(6000.0, 500.0, 7.0, 20).projected_total > base
    assert project(5000.0, 600.0, 7.0, 20).projected_total > base
    assert project(5000.0, 500.0, 8.0, 20).projected_total > base
    assert project(5000.0, 500.0, 7.0, 21).projected_total > base

    totals = [project(1000.0, 100.0, rate, 10).projected_total for rate in (0.0, 1e-13, 1.2e-9, 1.2e-8, 1e-6, 0.1, 3.0, 12.0)]
    assert totals == sorted(totals)


def test_earnings_share_is_zero_when_total_is_zero():
    assert project(0.0, 0.0, 7.0, 30).earnings_share_percent == 0


@pytest.mark.parametrize(
    "kwargs, field",
    [
        ({"initial_amount": -1.0}, "initial_amount"),
        ({"monthly_contribution": -0.01}, "monthly_contribution"),
        ({"years": -1}, "years"),
        ({"years": 101}, "years"),
        ({"annual_return_percent": -100.0}, "expected_return"),
        ({"annual_return_percent": -250.0}, "expected_return"),
    ],
)
def test_out_of_range_inputs_are_rejected(kwargs, field):
    values = {"initial_amount": 1000.0, "monthly_contribution": 100.0, "annual_return_percent": 7.0, "years": 10}
    values.update(kwargs)
    with pytest.raises(OutOfRangeInput) as err:
        ProjectionInput(**values)
    assert err.value.field == field


def test_overflow_is_rejected_not_infinite():
    with pytest.raises(OutOfRangeInput):
        project(1000.0, 100.0, 50_000.0, 100)


def test_large_but_finite_projection_stays_finite():
    result = project(1_000_000.0, 10_000.0, 20.0, 100)
    assert math.isfinite(result.projected_total)


@pytest.mark.parametrize("rate", [1.2e-9, 1.3e-9, 1.2e-8, 1.2e-7])
def test_tiny_rates_do_not_inflate_contributions(rate):
    result = project(0.0, 500.0, rate, 50)
    assert result.projected_total == pytest.approx(simulate_monthly(0.0, 500.0, rate, 50), rel=1e-9)
    assert 0 <= result.projected_earnings < 0.05
