"""
Weibull Module
Rank-regression Weibull analysis of life data with suspensions

Public exports:
- router: FastAPI router for Weibull endpoints
- normalize: Raw text -> ordered observations
- estimate: Ordered observations -> EstimationResult
- gamma: Lanczos Gamma function used for MTTF
"""

from .weibull_types import (
    EstimationResult,
    FailureStatus,
    Observation,
    RankedPoint,
    RankMethod,
)
from .weibull_parsers import normalize, toggle_status, format_observations
from .weibull_ranks import adjust_ranks
from .weibull_estimator import estimate, fit, gamma, analyze_text
from .weibull_router import router

__all__ = [
    "router",
    "normalize",
    "toggle_status",
    "format_observations",
    "adjust_ranks",
    "estimate",
    "fit",
    "gamma",
    "analyze_text",
    "EstimationResult",
    "FailureStatus",
    "Observation",
    "RankedPoint",
    "RankMethod",
]
