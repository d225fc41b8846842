"""
Weibull Insights
Optional free-text interpretation of fitted metrics via external LLM APIs

Public exports:
- generate_insight: Build prompt, call provider, return text
- InsightConfig: Per-call provider settings (API key, model, language)
- InsightError: Raised for every failure path
"""

from models import InsightConfig
from .base import InsightError, InsightProvider
from .insight_generator import generate_insight
from .prompts import build_prompt
from .registry import get_provider, list_providers

__all__ = [
    "InsightConfig",
    "InsightError",
    "InsightProvider",
    "generate_insight",
    "build_prompt",
    "get_provider",
    "list_providers",
]
