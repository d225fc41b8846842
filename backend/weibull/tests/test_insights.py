"""
Insight Test - prompt building and provider calls with requests mocked out
"""

import pytest
import requests

from models import InsightConfig
from weibull import analyze_text
from weibull.insights import InsightError, build_prompt, generate_insight, get_provider, list_providers
from weibull.insights.gemini import GeminiProvider
from weibull.insights.openai_chat import OpenAIProvider

TEXT_A = "100\n120\n135\n150\n210\n240\n300\n350\n400"
TEXT_B = "80\n95\n110 S\n130\n170"


class FakeResponse:
    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self.ok = status_code < 400
        self._payload = payload
        self.text = str(payload)

    def json(self):
        if self._payload is None:
            raise ValueError("no json")
        return self._payload


def _gemini_payload(text):
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


def _openai_payload(text):
    return {"choices": [{"message": {"content": text}}]}


def test_registry():
    assert list_providers() == ["gemini", "openai"]
    assert isinstance(get_provider("Gemini"), GeminiProvider)
    assert isinstance(get_provider("openai"), OpenAIProvider)
    with pytest.raises(ValueError):
        get_provider("claude")


def test_single_prompt_uses_scalar_metrics():
    metrics = {"beta": 2.15, "eta": 254.66, "mttf": 225.5, "r_squared": 0.97}
    prompt = build_prompt(metrics)
    assert "- Beta: 2.1500" in prompt
    assert "- R²: 0.9700" in prompt
    assert "Group B" not in prompt


def test_compare_prompt_in_chinese():
    a = {"beta": 1.0, "eta": 2.0, "mttf": 3.0, "r_squared": 0.5}
    prompt = build_prompt(a, a, language="zh")
    assert "A組結果" in prompt and "B組結果" in prompt
    assert prompt.count("Beta (形狀參數): 1.0000") == 2


def test_missing_api_key():
    with pytest.raises(InsightError) as exc:
        generate_insight(analyze_text(TEXT_A), config=InsightConfig())
    assert not exc.value.upstream


def test_degenerate_result_rejected():
    config = InsightConfig(api_key="k")
    with pytest.raises(InsightError):
        generate_insight(analyze_text("100"), config=config)
    with pytest.raises(InsightError):
        generate_insight(None, config=config)


def test_unknown_provider():
    with pytest.raises(InsightError) as exc:
        generate_insight(analyze_text(TEXT_A), config=InsightConfig(api_key="k", provider="nope"))
    assert not exc.value.upstream


def test_gemini_call(monkeypatch):
    calls = {}

    def fake_post(url, params=None, json=None, timeout=None, **kwargs):
        calls.update(url=url, params=params, json=json, timeout=timeout)
        return FakeResponse(200, _gemini_payload("Wear-out behaviour."))

    monkeypatch.setattr(requests, "post", fake_post)

    config = InsightConfig(api_key="secret", provider="gemini", timeout=5)
    text = generate_insight(analyze_text(TEXT_A), config=config)

    assert text == "Wear-out behaviour."
    assert calls["params"] == {"key": "secret"}
    assert calls["timeout"] == 5
    assert "gemini-1.5-flash:generateContent" in calls["url"]
    assert "Beta" in calls["json"]["contents"][0]["parts"][0]["text"]


def test_openai_comparative_call(monkeypatch):
    calls = {}

    def fake_post(url, headers=None, json=None, timeout=None, **kwargs):
        calls.update(headers=headers, json=json)
        return FakeResponse(200, _openai_payload("Group A lasts longer."))

    monkeypatch.setattr(requests, "post", fake_post)

    config = InsightConfig(api_key="sk-test", provider="openai", model="gpt-test")
    text = generate_insight(analyze_text(TEXT_A), analyze_text(TEXT_B), config)

    assert text == "Group A lasts longer."
    assert calls["headers"]["Authorization"] == "Bearer sk-test"
    assert calls["json"]["model"] == "gpt-test"
    assert calls["json"]["messages"][0]["role"] == "system"
    assert "Group B Results" in calls["json"]["messages"][1]["content"]


def test_http_error_is_upstream(monkeypatch):
    monkeypatch.setattr(requests, "post", lambda *a, **k: FakeResponse(503, {"error": "busy"}))

    with pytest.raises(InsightError) as exc:
        generate_insight(analyze_text(TEXT_A), config=InsightConfig(api_key="k"))
    assert exc.value.upstream
    assert "gemini" in str(exc.value)


def test_network_error_is_upstream(monkeypatch):
    def boom(*args, **kwargs):
        raise requests.ConnectionError("unreachable")

    monkeypatch.setattr(requests, "post", boom)

    with pytest.raises(InsightError) as exc:
        generate_insight(analyze_text(TEXT_A), config=InsightConfig(api_key="k", provider="openai"))
    assert exc.value.upstream


def test_malformed_response_is_upstream(monkeypatch):
    monkeypatch.setattr(requests, "post", lambda *a, **k: FakeResponse(200, {"candidates": []}))

    with pytest.raises(InsightError) as exc:
        generate_insight(analyze_text(TEXT_A), config=InsightConfig(api_key="k"))
    assert exc.value.upstream


def test_api_key_hidden_from_repr():
    assert "secret" not in repr(InsightConfig(api_key="secret"))
