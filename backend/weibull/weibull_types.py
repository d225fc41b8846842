"""
Weibull Types
Value objects passed between the normalizer, rank engine and estimator

Location: backend/weibull/weibull_types.py
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple


class FailureStatus(str, Enum):
    FAILURE = "F"
    SUSPENSION = "S"


class RankMethod(str, Enum):
    """How the adjusted order number is turned into a plotting position"""
    MEDIAN = "MEDIAN"  # Benard's approximation
    MEAN = "MEAN"      # i / (N + 1)


@dataclass(frozen=True)
class Observation:
    time: float
    status: FailureStatus = FailureStatus.FAILURE

    @property
    def is_failure(self) -> bool:
        return self.status == FailureStatus.FAILURE


@dataclass(frozen=True)
class RankedPoint:
    """
    One observation after rank adjustment.

    order_number, median_rank and y only carry meaning for failures;
    suspensions keep the previous failure's order number and a rank/y of 0.
    """
    time: float
    status: FailureStatus
    sequence_index: int
    order_number: float
    median_rank: float
    x: float
    y: float

    @property
    def is_failure(self) -> bool:
        return self.status == FailureStatus.FAILURE


LinePoint = Tuple[float, float]


@dataclass(frozen=True)
class EstimationResult:
    """
    Output of one estimator run.

    A result fitted from fewer than two failures is degenerate: every scalar
    is 0 and line_points is empty.
    """
    beta: float
    eta: float
    mttf: float
    r_squared: float
    points: Tuple[RankedPoint, ...] = field(default_factory=tuple)
    line_points: Tuple[LinePoint, ...] = field(default_factory=tuple)

    @classmethod
    def degenerate(cls, points: List[RankedPoint]) -> "EstimationResult":
        return cls(beta=0.0, eta=0.0, mttf=0.0, r_squared=0.0, points=tuple(points))

    @property
    def failures(self) -> List[RankedPoint]:
        return [p for p in self.points if p.is_failure]

    @property
    def suspensions(self) -> List[RankedPoint]:
        return [p for p in self.points if not p.is_failure]

    @property
    def sample_size(self) -> int:
        return len(self.points)

    @property
    def is_degenerate(self) -> bool:
        return not self.line_points

    def metrics(self) -> dict:
        """The four scalar metrics handed to summary generators"""
        return {
            "beta": self.beta,
            "eta": self.eta,
            "mttf": self.mttf,
            "r_squared": self.r_squared,
        }
