"""
Weibull Ranks
Rank adjustment for right-censored life data

Location: backend/weibull/weibull_ranks.py

Suspended units do not get a plotting position of their own. Instead each
later failure's order number is pushed forward by

    increment = (N + 1 - previous_order) / (reverse_rank + 1)

where reverse_rank counts the units at or after the current one. With no
suspensions the increment is always 1 and the order numbers are 1..N.
"""

import logging
import math
from typing import List, Sequence

from .weibull_types import FailureStatus, Observation, RankedPoint, RankMethod

logger = logging.getLogger(__name__)

BENARD_OFFSET = 0.3
BENARD_DENOMINATOR_OFFSET = 0.4


def plotting_position(order_number: float, n: int, method: RankMethod = RankMethod.MEDIAN) -> float:
    """Cumulative failure probability estimate for an adjusted order number"""
    if method == RankMethod.MEAN:
        return order_number / (n + 1)
    return (order_number - BENARD_OFFSET) / (n + BENARD_DENOMINATOR_OFFSET)


def weibull_transform(rank: float) -> float:
    """ln(-ln(1 - F)); 0 outside the open interval (0, 1)"""
    if 0 < rank < 1:
        return math.log(-math.log(1 - rank))
    return 0.0


def adjust_ranks(
    observations: Sequence[Observation],
    method: RankMethod = RankMethod.MEDIAN
) -> List[RankedPoint]:
    """
    Assign adjusted order numbers and plotting positions.

    Args:
        observations: Ordered output of normalize()
        method: Plotting-position formula (Benard median rank by default)

    Returns:
        One RankedPoint per observation, in the same order
    """
    n = len(observations)
    previous_order = 0.0
    points = []

    for i, obs in enumerate(observations):
        reverse_rank = n - i
        order_number = previous_order
        rank = 0.0
        y = 0.0

        if obs.status == FailureStatus.FAILURE:
            increment = (n + 1 - previous_order) / (reverse_rank + 1)
            order_number = previous_order + increment
            previous_order = order_number

            rank = plotting_position(order_number, n, method)
            y = weibull_transform(rank)

        points.append(RankedPoint(
            time=obs.time,
            status=obs.status,
            sequence_index=i,
            order_number=order_number,
            median_rank=rank,
            x=math.log(obs.time),
            y=y,
        ))

    logger.debug(f"Ranked {n} observations, final order number {previous_order:.4f}")
    return points
