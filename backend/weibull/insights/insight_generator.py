"""
Insight Generator
Turns one or two estimation results into a free-text summary

Location: backend/weibull/insights/insight_generator.py
"""

import logging
from typing import Optional

from models import InsightConfig
from ..weibull_types import EstimationResult
from .base import InsightError
from .prompts import SYSTEM_INSTRUCTIONS, build_prompt
from .registry import get_provider

logger = logging.getLogger(__name__)


def generate_insight(
    result_a: Optional[EstimationResult],
    result_b: Optional[EstimationResult] = None,
    config: Optional[InsightConfig] = None
) -> str:
    """
    Ask the configured provider to interpret the fitted metrics.

    Args:
        result_a: Primary result
        result_b: Optional second result; switches to a comparative prompt
        config: Provider settings, including the API key

    Returns:
        Generated summary text

    Raises:
        InsightError: missing key, unusable results, unknown provider or
            any provider failure
    """
    if config is None or not config.api_key:
        raise InsightError("API key is required.")

    if result_a is None or result_a.is_degenerate:
        raise InsightError("No results to analyze.")

    if result_b is not None and result_b.is_degenerate:
        raise InsightError("Second result has too few failures to compare.")

    try:
        provider = get_provider(config.provider)
    except ValueError as e:
        raise InsightError(str(e)) from e

    prompt = build_prompt(
        result_a.metrics(),
        result_b.metrics() if result_b is not None else None,
        config.language,
    )

    logger.info(
        f"Requesting {'comparative' if result_b is not None else 'single'} insight "
        f"from {provider.provider_name}"
    )

    try:
        return provider.generate(prompt, SYSTEM_INSTRUCTIONS[config.language], config)
    except InsightError as e:
        raise InsightError(
            f"Failed to generate AI analysis ({config.provider}): {e}",
            upstream=e.upstream,
        ) from e
