"""
Weibull Service Configuration

Module-level settings with environment overrides. Nothing in here is
read by the estimation core (weibull_parsers / weibull_ranks /
weibull_estimator); it only configures the HTTP layer and the optional
insight providers.
"""

import os


# ============================================================================
# HTTP SETTINGS
# ============================================================================

API_TITLE = "Weibull Analysis API"
API_VERSION = "1.0.0"

# Comma-separated list, e.g. "http://localhost:5173,http://127.0.0.1:5173"
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "WEIBULL_CORS_ORIGINS",
        "http://localhost:5173,http://127.0.0.1:5173,http://localhost:8080",
    ).split(",")
    if origin.strip()
]

LOG_LEVEL = os.getenv("WEIBULL_LOG_LEVEL", "INFO")


# ============================================================================
# CURVE SETTINGS
# ============================================================================

# Upper bound on samples per curve request
MAX_CURVE_STEPS = int(os.getenv("WEIBULL_MAX_CURVE_STEPS", "2000"))


# ============================================================================
# INSIGHT PROVIDER SETTINGS
# ============================================================================
# API keys are never read from the environment or stored. They arrive only
# inside the per-request InsightConfig.

DEFAULT_INSIGHT_PROVIDER = os.getenv("WEIBULL_INSIGHT_PROVIDER", "gemini")

GEMINI_MODEL = os.getenv("WEIBULL_GEMINI_MODEL", "gemini-1.5-flash")
OPENAI_MODEL = os.getenv("WEIBULL_OPENAI_MODEL", "gpt-4o-mini")

GEMINI_ENDPOINT_TEMPLATE = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"
OPENAI_ENDPOINT = "https://api.openai.com/v1/chat/completions"

INSIGHT_TIMEOUT = float(os.getenv("WEIBULL_INSIGHT_TIMEOUT", "30"))
INSIGHT_MAX_TOKENS = 500
