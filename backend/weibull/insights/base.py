"""
Abstract interface for insight providers
Any text-generation backend that summarises Weibull metrics implements this

Location: backend/weibull/insights/base.py
"""

from abc import ABC, abstractmethod

from models import InsightConfig


class InsightError(Exception):
    """Raised when a summary cannot be produced (missing key, HTTP failure, ...)"""

    def __init__(self, message: str, upstream: bool = False):
        super().__init__(message)
        # True when the provider itself failed (network, HTTP, response shape)
        self.upstream = upstream


class InsightProvider(ABC):
    """
    Abstract base class for insight providers.

    Providers receive a finished prompt and return free text. They never
    see observations or ranked points.
    """

    @abstractmethod
    def generate(self, prompt: str, system_instruction: str, config: InsightConfig) -> str:
        """
        Produce a summary for a prompt.

        Args:
            prompt: User prompt built from scalar metrics
            system_instruction: Persona / system message
            config: Provider settings including the API key

        Returns:
            Generated text

        Raises:
            InsightError: on any transport, HTTP or response-shape failure
        """
        pass

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Human-readable provider name"""
        pass

    @property
    @abstractmethod
    def default_model(self) -> str:
        pass
