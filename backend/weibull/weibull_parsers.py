"""
Weibull Parsers
Turns free-text life data into ordered observations

Location: backend/weibull/weibull_parsers.py

Accepted line format (one unit per line):
    "100"      -> failure at t=100
    "120 S"    -> suspension at t=120
    "135 f"    -> failure (any token not starting with S is a failure)
"""

import logging
import math
import re
from typing import Iterable, List, Optional

from .weibull_types import FailureStatus, Observation

logger = logging.getLogger(__name__)

# Leading run of digits and dots, then an optional whitespace-separated letter token
LINE_PATTERN = re.compile(r"^([\d.]+)(?:\s+([a-zA-Z]+))?")

# Longest valid float at the start of the run ("1.2.3" -> "1.2")
LEADING_FLOAT = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def parse_line(line: str) -> Optional[Observation]:
    """
    Parse a single line of input.

    Returns:
        Observation, or None if the line is blank or has no positive time
    """
    trimmed = line.strip()
    if not trimmed:
        return None

    match = LINE_PATTERN.match(trimmed)
    if not match:
        return None

    number = LEADING_FLOAT.match(match.group(1))
    if not number:
        return None

    time = float(number.group(0))
    if not math.isfinite(time) or time <= 0:
        return None

    token = match.group(2)
    if token and token.upper().startswith("S"):
        status = FailureStatus.SUSPENSION
    else:
        status = FailureStatus.FAILURE

    return Observation(time=time, status=status)


def sort_observations(observations: Iterable[Observation]) -> List[Observation]:
    """Ascending by time; at equal times failures come before suspensions"""
    return sorted(
        observations,
        key=lambda o: (o.time, 0 if o.status == FailureStatus.FAILURE else 1),
    )


def normalize(raw_text: str) -> List[Observation]:
    """
    Parse a block of raw text into ordered observations.

    Lines that do not start with a positive number are dropped without
    raising, so half-typed input during editing is harmless.

    Args:
        raw_text: Multi-line text, one observation per line

    Returns:
        Observations sorted by time (possibly empty)
    """
    parsed = []
    dropped = 0

    for line in (raw_text or "").split("\n"):
        obs = parse_line(line)
        if obs is None:
            if line.strip():
                dropped += 1
            continue
        parsed.append(obs)

    if dropped:
        logger.debug(f"Dropped {dropped} unparseable lines")

    return sort_observations(parsed)


def format_observations(observations: Iterable[Observation]) -> str:
    """Serialise observations back into "<time> <F|S>" lines"""
    return "\n".join(f"{_format_time(o.time)} {o.status.value}" for o in observations)


def toggle_status(raw_text: str, index: int) -> str:
    """
    Flip failure/suspension for one observation and rewrite the text.

    The index refers to the position in the sorted sequence produced by
    normalize(). Every observation is written back with an explicit status
    token, so the returned text is the new source of truth and the caller
    re-runs the full pipeline on it.

    Raises:
        IndexError: if index is outside the parsed observations
    """
    observations = normalize(raw_text)
    if index < 0 or index >= len(observations):
        raise IndexError(f"No observation at index {index} ({len(observations)} parsed)")

    target = observations[index]
    flipped = (
        FailureStatus.SUSPENSION
        if target.status == FailureStatus.FAILURE
        else FailureStatus.FAILURE
    )
    observations[index] = Observation(time=target.time, status=flipped)

    logger.info(f"Toggled observation {index} (t={target.time}) to {flipped.value}")
    return format_observations(observations)


def _format_time(value: float) -> str:
    # 100.0 -> "100", 12.5 -> "12.5"
    if value.is_integer():
        return str(int(value))
    return repr(value)
