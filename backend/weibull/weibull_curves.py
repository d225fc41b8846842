"""
Weibull Curves
Distribution curves and life metrics derived from fitted (beta, eta)

Location: backend/weibull/weibull_curves.py
"""

import logging
from typing import Dict, List

import numpy as np
from scipy.stats import weibull_min

from .weibull_types import EstimationResult

logger = logging.getLogger(__name__)

CURVE_KINDS = ("pdf", "reliability", "cdf", "hazard")
DEFAULT_CURVE_STEPS = 150
PDF_STEPS = 100
PLOT_HORIZON_FACTOR = 1.3


def weibull_metrics(t: float, beta: float, eta: float) -> Dict[str, float]:
    """
    Point evaluation of the fitted distribution.

    Returns:
        {"pdf", "reliability", "cdf", "hazard"} at time t
    """
    if t <= 0:
        return {"pdf": 0.0, "reliability": 1.0, "cdf": 0.0, "hazard": 0.0}

    reliability = float(weibull_min.sf(t, beta, scale=eta))
    return {
        "pdf": float(weibull_min.pdf(t, beta, scale=eta)),
        "reliability": reliability,
        "cdf": 1.0 - reliability,
        "hazard": (beta / eta) * (t / eta) ** (beta - 1),
    }


def curve_points(
    beta: float,
    eta: float,
    max_time: float,
    kind: str = "reliability",
    steps: int = DEFAULT_CURVE_STEPS
) -> List[Dict[str, float]]:
    """
    Sample one curve on [0, max_time].

    Args:
        beta: Shape parameter
        eta: Scale parameter
        max_time: Right edge of the time axis
        kind: "pdf", "reliability", "cdf" or "hazard"
        steps: Number of intervals (steps + 1 points are returned)

    Returns:
        [{"x": t, "y": value}, ...]; empty for a non-positive beta or eta
    """
    if kind not in CURVE_KINDS:
        raise ValueError(f"Unknown curve kind: {kind}")

    if beta <= 0 or eta <= 0 or max_time <= 0 or steps < 1:
        logger.debug(f"Skipping {kind} curve for beta={beta}, eta={eta}, max_time={max_time}")
        return []

    times = np.linspace(0.0, max_time, steps + 1)
    values = [weibull_metrics(float(t), beta, eta)[kind] for t in times]

    return [{"x": float(t), "y": float(v)} for t, v in zip(times, values)]


def pdf_points(beta: float, eta: float, max_time: float, steps: int = PDF_STEPS) -> List[Dict[str, float]]:
    return curve_points(beta, eta, max_time, kind="pdf", steps=steps)


def plot_horizon(*results: EstimationResult, factor: float = PLOT_HORIZON_FACTOR) -> float:
    """Largest observed time across results, stretched so the tail is visible"""
    times = [r.points[-1].time for r in results if r is not None and r.points]
    if not times:
        return 0.0
    return max(times) * factor


def b_life(beta: float, eta: float, fraction: float) -> float:
    """
    Time by which `fraction` of the population is expected to fail
    (B10 life is b_life(beta, eta, 0.10)).
    """
    if not 0 < fraction < 1:
        raise ValueError(f"fraction must be in (0, 1), got {fraction}")
    if beta <= 0 or eta <= 0:
        return 0.0
    return float(weibull_min.ppf(fraction, beta, scale=eta))


def failure_mode(beta: float) -> str:
    """Bathtub-curve region suggested by the shape parameter"""
    if beta < 0.9:
        return "Infant Mortality"
    if beta <= 1.1:
        return "Random Failures"
    return "Wear-out"
