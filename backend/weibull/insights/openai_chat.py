"""
OpenAI insight provider
Calls the Chat Completions REST API with requests

Location: backend/weibull/insights/openai_chat.py
"""

import logging

import requests

from config import OPENAI_ENDPOINT, OPENAI_MODEL
from models import InsightConfig
from .base import InsightError, InsightProvider

logger = logging.getLogger(__name__)


class OpenAIProvider(InsightProvider):

    @property
    def provider_name(self) -> str:
        return "OpenAI"

    @property
    def default_model(self) -> str:
        return OPENAI_MODEL

    def generate(self, prompt: str, system_instruction: str, config: InsightConfig) -> str:
        payload = {
            "model": config.model or self.default_model,
            "messages": [
                {"role": "system", "content": system_instruction},
                {"role": "user", "content": prompt},
            ],
            "max_tokens": config.max_tokens,
        }

        try:
            resp = requests.post(
                OPENAI_ENDPOINT,
                headers={"Authorization": f"Bearer {config.api_key}"},
                json=payload,
                timeout=config.timeout,
            )
        except requests.RequestException as e:
            logger.warning(f"OpenAI request failed: {e}")
            raise InsightError(f"OpenAI request failed: {e}", upstream=True) from e

        if not resp.ok:
            logger.error("OpenAI request failed %s: %s", resp.status_code, resp.text)
            raise InsightError(
                f"OpenAI returned HTTP {resp.status_code}",
                upstream=True,
            )

        try:
            content = resp.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise InsightError(f"Unexpected OpenAI response: {e}", upstream=True) from e

        return content or ""
