"""
Estimator Test - regression, derived parameters, Gamma function, degenerate cases
Reference values are recomputed independently with numpy / scipy rather than
hardcoded.
"""

import math

import numpy as np
import pytest
from scipy.special import gamma as scipy_gamma

from weibull import analyze_text, estimate, fit, gamma, normalize
from weibull.weibull_types import FailureStatus, RankedPoint

NINE_FAILURES = "100\n120\n135\n150\n210\n240\n300\n350\n400"
WITH_SUSPENSIONS = "100\n120 S\n150\n200\n260 S\n300"


def _assert_degenerate(result):
    assert result.beta == 0
    assert result.eta == 0
    assert result.mttf == 0
    assert result.r_squared == 0
    assert result.line_points == ()
    assert result.is_degenerate


# ---------------------------------------------------------------------------#
#  Gamma
# ---------------------------------------------------------------------------#
def test_gamma_known_values():
    assert gamma(1) == pytest.approx(1.0, rel=1e-9)
    assert gamma(2) == pytest.approx(1.0, rel=1e-9)
    assert gamma(0.5) == pytest.approx(math.sqrt(math.pi), rel=1e-6)
    assert gamma(5) == pytest.approx(24.0, rel=1e-9)


@pytest.mark.parametrize("z", [0.1, 0.3, 0.75, 1.2, 1.5, 2.5, 3.7, 10.0, -0.5, -1.5])
def test_gamma_matches_scipy(z):
    assert gamma(z) == pytest.approx(float(scipy_gamma(z)), rel=1e-9)


def test_gamma_pole_and_overflow():
    assert gamma(0) == math.inf
    assert gamma(500) == math.inf


# ---------------------------------------------------------------------------#
#  Regression
# ---------------------------------------------------------------------------#
def test_nine_failures_matches_hand_regression():
    times = np.array([100, 120, 135, 150, 210, 240, 300, 350, 400], dtype=float)
    n = len(times)
    ranks = (np.arange(1, n + 1) - 0.3) / (n + 0.4)
    x = np.log(times)
    y = np.log(-np.log(1 - ranks))
    slope, intercept = np.polyfit(x, y, 1)

    result = analyze_text(NINE_FAILURES)

    assert result.beta == pytest.approx(slope, rel=1e-9)
    assert result.eta == pytest.approx(math.exp(-intercept / slope), rel=1e-9)
    assert 1.7 < result.beta < 2.3
    assert 250 < result.eta < 290
    assert result.mttf == pytest.approx(result.eta * float(scipy_gamma(1 + 1 / result.beta)), rel=1e-9)

    expected_r2 = np.corrcoef(x, y)[0, 1] ** 2
    assert result.r_squared == pytest.approx(expected_r2, rel=1e-9)
    assert 0 < result.r_squared <= 1


def test_suspensions_excluded_from_regression():
    result = estimate(normalize(WITH_SUSPENSIONS))

    failures = [p for p in result.points if p.is_failure]
    suspensions = [p for p in result.points if not p.is_failure]
    assert len(failures) == 4
    assert all(p.median_rank == 0 for p in suspensions)

    x = np.array([p.x for p in failures])
    y = np.array([p.y for p in failures])
    slope, intercept = np.polyfit(x, y, 1)
    assert result.beta == pytest.approx(slope, rel=1e-9)
    assert result.eta == pytest.approx(math.exp(-intercept / slope), rel=1e-9)


def test_suspensions_raise_order_numbers_over_failure_only_fit():
    censored = estimate(normalize(WITH_SUSPENSIONS))
    uncensored = estimate(normalize("100\n150\n200\n300"))

    censored_orders = [p.order_number for p in censored.failures]
    plain_orders = [p.order_number for p in uncensored.failures]
    assert all(c >= p for c, p in zip(censored_orders, plain_orders))
    assert censored_orders[-1] > plain_orders[-1]
    # Suspended units lengthen the estimated life
    assert censored.eta > uncensored.eta


def test_perfectly_linear_points_fit_exactly():
    points = [
        RankedPoint(
            time=math.exp(x), status=FailureStatus.FAILURE, sequence_index=i,
            order_number=i + 1, median_rank=0.5, x=x, y=2.0 * x - 10.0,
        )
        for i, x in enumerate([4.0, 4.5, 5.0, 5.5, 6.0])
    ]
    result = fit(points)

    assert result.r_squared == pytest.approx(1.0, abs=1e-12)
    assert result.beta == pytest.approx(2.0)
    assert result.eta == pytest.approx(math.exp(5.0))


def test_line_points_span_all_points_with_padding():
    result = estimate(normalize("50 S\n100\n200\n300\n800 S"))
    min_x, max_x = math.log(50), math.log(800)
    pad = 0.1 * (max_x - min_x)

    (x0, y0), (x1, y1) = result.line_points
    assert x0 == pytest.approx(min_x - pad)
    assert x1 == pytest.approx(max_x + pad)

    intercept = -result.beta * math.log(result.eta)
    assert y0 == pytest.approx(result.beta * x0 + intercept)
    assert y1 == pytest.approx(result.beta * x1 + intercept)


def test_result_is_frozen():
    result = analyze_text(NINE_FAILURES)
    with pytest.raises(AttributeError):
        result.beta = 1.0


# ---------------------------------------------------------------------------#
#  Degenerate input
# ---------------------------------------------------------------------------#
@pytest.mark.parametrize("text", [
    "",
    "abc\nxyz",
    "100",
    "100\n200 S\n300 S",
    "100 S\n200 S",
])
def test_fewer_than_two_failures_is_degenerate(text):
    result = analyze_text(text)
    _assert_degenerate(result)
    assert result.sample_size == len(normalize(text))


def test_identical_failure_times_are_degenerate():
    # No spread in x: the regression slope is undefined
    _assert_degenerate(analyze_text("100\n100\n100"))


def test_degenerate_result_keeps_points():
    result = analyze_text("100\n200 S")
    assert [p.time for p in result.points] == [100.0, 200.0]
