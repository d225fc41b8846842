"""
Weibull Estimator
Median-rank regression for the two-parameter Weibull distribution

Location: backend/weibull/weibull_estimator.py

Fits y = beta * x + intercept over the failure points, where
x = ln(t) and y = ln(-ln(1 - F)), then derives:
- beta (shape)        = slope
- eta (scale)         = exp(-intercept / slope)
- MTTF                = eta * Gamma(1 + 1/beta)
- R² (fit quality)    over the failure points only
"""

import logging
import math
from typing import Sequence, Tuple

import numpy as np

from .weibull_types import EstimationResult, LinePoint, Observation, RankedPoint, RankMethod
from .weibull_ranks import adjust_ranks
from .weibull_parsers import normalize

logger = logging.getLogger(__name__)

# Lanczos approximation, g = 7, n = 9
LANCZOS_G = 7
LANCZOS_COEFFICIENTS = (
    0.99999999999980993,
    676.5203681218851,
    -1259.1392167224028,
    771.32342877765313,
    -176.61502916214059,
    12.507343278686905,
    -0.13857109526572012,
    9.9843695780195716e-6,
    1.5056327351493116e-7,
)

LINE_PADDING_FRACTION = 0.1
MIN_LINE_PADDING = 0.1


def gamma(z: float) -> float:
    """
    Gamma function via the Lanczos approximation.

    Uses the reflection formula below 0.5. Poles and overflow come back as inf.
    """
    if z < 0.5:
        try:
            return math.pi / (math.sin(math.pi * z) * gamma(1 - z))
        except ZeroDivisionError:
            return math.inf

    z -= 1
    x = LANCZOS_COEFFICIENTS[0]
    for i in range(1, len(LANCZOS_COEFFICIENTS)):
        x += LANCZOS_COEFFICIENTS[i] / (z + i)

    t = z + LANCZOS_G + 0.5
    try:
        return math.sqrt(2 * math.pi) * math.pow(t, z + 0.5) * math.exp(-t) * x
    except OverflowError:
        return math.inf


def regression_line(x: np.ndarray, y: np.ndarray) -> Tuple[float, float]:
    """
    Ordinary least squares of y on x.

    Returns:
        (slope, intercept); both nan when x has no spread
    """
    n = len(x)
    if n < 2 or np.ptp(x) == 0:
        return math.nan, math.nan

    sum_x = float(np.sum(x))
    sum_y = float(np.sum(y))
    sum_xy = float(np.sum(x * y))
    sum_xx = float(np.sum(x * x))

    denominator = n * sum_xx - sum_x * sum_x
    if denominator == 0:
        return math.nan, math.nan

    slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = (sum_y - slope * sum_x) / n
    return slope, intercept


def r_squared(x: np.ndarray, y: np.ndarray, slope: float, intercept: float) -> float:
    """Coefficient of determination; 0 when y has no variance"""
    mean_y = float(np.mean(y))
    ss_tot = float(np.sum((y - mean_y) ** 2))
    ss_res = float(np.sum((y - (slope * x + intercept)) ** 2))
    if ss_tot == 0:
        return 0.0
    return 1 - ss_res / ss_tot


def line_endpoints(points: Sequence[RankedPoint], slope: float, intercept: float) -> Tuple[LinePoint, LinePoint]:
    """
    Fitted line across the span of all points (suspensions included),
    widened by 10% of the range on each side.
    """
    xs = [p.x for p in points]
    min_x, max_x = min(xs), max(xs)
    padding = (max_x - min_x) * LINE_PADDING_FRACTION or MIN_LINE_PADDING

    start_x = min_x - padding
    end_x = max_x + padding
    return (
        (start_x, slope * start_x + intercept),
        (end_x, slope * end_x + intercept),
    )


def fit(points: Sequence[RankedPoint]) -> EstimationResult:
    """
    Regress the failure points and build the result object.

    Suspensions stay in result.points (and widen the line span) but never
    enter the regression sums. Fewer than two failures, a vertical or flat
    regression, or a non-finite parameter yields the degenerate result.

    Args:
        points: Output of adjust_ranks()

    Returns:
        EstimationResult
    """
    points = list(points)
    failures = [p for p in points if p.is_failure]
    nf = len(failures)

    if nf < 2:
        logger.debug(f"Only {nf} failures, returning degenerate result")
        return EstimationResult.degenerate(points)

    x = np.array([p.x for p in failures], dtype=float)
    y = np.array([p.y for p in failures], dtype=float)

    slope, intercept = regression_line(x, y)

    if not math.isfinite(slope) or slope == 0:
        logger.warning(f"Degenerate regression (slope={slope}) over {nf} failures")
        return EstimationResult.degenerate(points)

    beta = slope
    with np.errstate(over="ignore"):
        eta = float(np.exp(-intercept / slope))

    if not math.isfinite(eta):
        logger.warning(f"Scale parameter overflowed (beta={beta:.4g}, intercept={intercept:.4g})")
        return EstimationResult.degenerate(points)

    mttf = eta * gamma(1 + 1 / beta)

    return EstimationResult(
        beta=beta,
        eta=eta,
        mttf=mttf,
        r_squared=r_squared(x, y, slope, intercept),
        points=tuple(points),
        line_points=line_endpoints(points, slope, intercept),
    )


def estimate(
    observations: Sequence[Observation],
    method: RankMethod = RankMethod.MEDIAN
) -> EstimationResult:
    """
    Run rank adjustment and regression on ordered observations.

    Never raises for valid numeric input; callers check is_degenerate
    (or beta / r_squared) rather than catching errors.
    """
    points = adjust_ranks(observations, method)
    result = fit(points)

    if not result.is_degenerate:
        logger.debug(
            f"Fitted {len(points)} points: beta={result.beta:.4f}, "
            f"eta={result.eta:.4f}, R²={result.r_squared:.4f}"
        )
    return result


def analyze_text(raw_text: str, method: RankMethod = RankMethod.MEDIAN) -> EstimationResult:
    """normalize() followed by estimate()"""
    return estimate(normalize(raw_text), method)
