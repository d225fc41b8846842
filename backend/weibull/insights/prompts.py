"""
Prompt templates for Weibull insight generation

Location: backend/weibull/insights/prompts.py

Only the four scalar metrics (beta, eta, mttf, r_squared) are rendered.
"""

from typing import Dict, Optional

SYSTEM_INSTRUCTIONS = {
    "en": "You are a senior Reliability Engineer expert in explaining Weibull analysis results.",
    "zh": "你是一位資深的可靠度工程專家，擅長使用繁體中文解釋韋伯分析結果。",
}

_METRIC_LABELS = {
    "en": {
        "beta": "Beta",
        "eta": "Eta",
        "mttf": "MTTF",
        "r_squared": "R²",
    },
    "zh": {
        "beta": "Beta (形狀參數)",
        "eta": "Eta (尺度參數)",
        "mttf": "MTTF (平均壽命)",
        "r_squared": "R² (適配度)",
    },
}

_SINGLE = {
    "en": """I have performed a Weibull Analysis on failure data.
Results:
{metrics}

Provide a technical analysis:
1. Interpret Beta (infant mortality, random, wear-out).
2. Explain Eta and MTTF.
3. Comment on fit quality (R²).
4. One actionable recommendation.

Keep it concise (under 150 words) and use Markdown.
Important: Do NOT use LaTeX math syntax. Use plain text (e.g. Beta) or Unicode (e.g. R²).""",
    "zh": """我對失效數據進行了韋伯分析。
結果:
{metrics}

請提供技術分析：
1. 解讀 Beta (早夭期、隨機失效、耗損期)。
2. 解釋 Eta 和 MTTF (壽命特徵)。
3. 評論適配品質 (R²)。
4. 提供一個可執行的建議。

請保持簡潔（150字以內），使用繁體中文和 Markdown 格式。
重要：請勿使用 LaTeX 數學符號，請直接使用文字 (如 Beta) 或 Unicode 符號 (如 R²)。""",
}

_COMPARE = {
    "en": """I have performed a comparative Weibull Analysis on two datasets (Group A vs Group B).

Group A Results:
{metrics_a}

Group B Results:
{metrics_b}

As a Senior Reliability Engineer, provide a comparative analysis:
1. Compare the failure modes (based on Beta). Which group is aging faster?
2. Compare the life characteristics (based on Eta and MTTF). Which group lasts longer?
3. Conclusion: Which group is more reliable?
4. Suggest a reason for the difference (e.g., material change, manufacturing defect).

Keep it concise (under 250 words) and use Markdown.
Important: Do NOT use LaTeX math syntax. Use plain text (e.g. Beta) or Unicode (e.g. R²).""",
    "zh": """我對兩組數據（A組 vs B組）進行了韋伯分析比較。

A組結果:
{metrics_a}

B組結果:
{metrics_b}

作為資深可靠度工程師，請提供比較分析：
1. 比較失效模式 (基於 Beta)。哪一組老化得更快？
2. 比較壽命特徵 (基於 Eta 和 MTTF)。哪一組壽命更長？
3. 綜合結論：哪一組更可靠？
4. 推測可能的原因（例如：材料變更、製造缺陷）。

請保持簡潔（250字以內），使用繁體中文和 Markdown 格式。
重要：請勿使用 LaTeX 數學符號，請直接使用文字 (如 Beta) 或 Unicode 符號 (如 R²)。""",
}


def format_metrics(metrics: Dict[str, float], language: str = "en") -> str:
    labels = _METRIC_LABELS[language]
    return "\n".join(
        f"- {labels[key]}: {metrics[key]:.4f}"
        for key in ("beta", "eta", "mttf", "r_squared")
    )


def build_prompt(
    metrics_a: Dict[str, float],
    metrics_b: Optional[Dict[str, float]] = None,
    language: str = "en"
) -> str:
    """
    Render the user prompt.

    Args:
        metrics_a: Scalar metrics of the primary result
        metrics_b: Scalar metrics of a second result for comparison
        language: "en" or "zh"
    """
    if language not in _SINGLE:
        raise ValueError(f"Unsupported language: {language}")

    if metrics_b is not None:
        return _COMPARE[language].format(
            metrics_a=format_metrics(metrics_a, language),
            metrics_b=format_metrics(metrics_b, language),
        )
    return _SINGLE[language].format(metrics=format_metrics(metrics_a, language))
