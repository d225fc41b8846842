"""
Insight Provider Registry
Factory for obtaining insight providers by name

Location: backend/weibull/insights/registry.py
"""

import logging
from typing import Dict, Type

from .base import InsightProvider
from .gemini import GeminiProvider
from .openai_chat import OpenAIProvider

logger = logging.getLogger(__name__)

# Registry mapping provider names to classes
_PROVIDERS: Dict[str, Type[InsightProvider]] = {
    'gemini': GeminiProvider,
    'openai': OpenAIProvider,
}


def get_provider(name: str) -> InsightProvider:
    """
    Get an insight provider instance.

    Args:
        name: Provider identifier (case-insensitive)

    Returns:
        New provider instance
    """
    key = (name or "").lower()
    if key not in _PROVIDERS:
        raise ValueError(f"Unknown insight provider: {name}")

    return _PROVIDERS[key]()


def list_providers() -> list[str]:
    """List all registered insight providers"""
    return list(_PROVIDERS.keys())
