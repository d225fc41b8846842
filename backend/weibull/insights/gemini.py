"""
Gemini insight provider
Calls the Generative Language REST API with requests

Location: backend/weibull/insights/gemini.py
"""

import logging

import requests

from config import GEMINI_ENDPOINT_TEMPLATE, GEMINI_MODEL
from models import InsightConfig
from .base import InsightError, InsightProvider

logger = logging.getLogger(__name__)


class GeminiProvider(InsightProvider):

    @property
    def provider_name(self) -> str:
        return "Google Gemini"

    @property
    def default_model(self) -> str:
        return GEMINI_MODEL

    def generate(self, prompt: str, system_instruction: str, config: InsightConfig) -> str:
        model = config.model or self.default_model
        url = GEMINI_ENDPOINT_TEMPLATE.format(model=model)
        payload = {
            "systemInstruction": {"parts": [{"text": system_instruction}]},
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {"maxOutputTokens": config.max_tokens},
        }

        try:
            resp = requests.post(
                url,
                params={"key": config.api_key},
                json=payload,
                timeout=config.timeout,
            )
        except requests.RequestException as e:
            logger.warning(f"Gemini request failed: {e}")
            raise InsightError(f"Gemini request failed: {e}", upstream=True) from e

        if not resp.ok:
            logger.error("Gemini request failed %s: %s", resp.status_code, resp.text)
            raise InsightError(
                f"Gemini returned HTTP {resp.status_code}",
                upstream=True,
            )

        try:
            data = resp.json()
            parts = data["candidates"][0]["content"]["parts"]
            return "".join(part.get("text", "") for part in parts)
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise InsightError(f"Unexpected Gemini response: {e}", upstream=True) from e
