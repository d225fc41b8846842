"""
Weibull Reports
Plain-text report and tabular export of estimation results

Location: backend/weibull/weibull_reports.py

Read-only consumers of EstimationResult; nothing here feeds back into
the estimator.
"""

import datetime
import io
import logging
from typing import List, Optional, Sequence, Tuple

import pandas as pd

from .weibull_curves import failure_mode
from .weibull_types import EstimationResult

logger = logging.getLogger(__name__)

RULE = "=" * 80

# (group name, result or None, raw input text)
ReportGroup = Tuple[str, Optional[EstimationResult], str]


def points_frame(result: EstimationResult) -> pd.DataFrame:
    """One row per ranked point, suspensions included"""
    rows = [
        {
            "no": p.sequence_index + 1,
            "time": p.time,
            "status": p.status.value,
            "order_number": p.order_number,
            "median_rank": p.median_rank if p.is_failure else None,
            "ln_t": p.x,
            "weibull_y": p.y if p.is_failure else None,
        }
        for p in result.points
    ]
    columns = ["no", "time", "status", "order_number", "median_rank", "ln_t", "weibull_y"]
    return pd.DataFrame(rows, columns=columns)


def to_csv(result: EstimationResult) -> str:
    buffer = io.StringIO()
    points_frame(result).to_csv(buffer, index=False, float_format="%.6f")
    return buffer.getvalue()


def _group_section(name: str, result: Optional[EstimationResult], raw_input: str) -> str:
    lines = [RULE, f" {name.upper()} ", RULE]

    if result is None or not result.points:
        lines.append("No valid calculation results available.")
        lines.append("")
        lines.append("[RAW INPUT]")
        lines.append(raw_input)
        lines.append("")
        return "\n".join(lines) + "\n"

    lines.append("[SUMMARY STATISTICS]")
    lines.append(f"  Beta (Shape Parameter):       {result.beta:.4f} ({failure_mode(result.beta)})")
    lines.append(f"  Eta (Characteristic Life):    {result.eta:.4f}")
    lines.append(f"  MTTF (Mean Time To Failure):  {result.mttf:.4f}")
    lines.append(f"  R-Squared (Goodness of Fit):  {result.r_squared:.4f}")
    lines.append(f"  Sample Size (N):              {result.sample_size}")
    lines.append(f"  Failures (F):                 {len(result.failures)}")
    lines.append(f"  Suspensions (S):              {len(result.suspensions)}")
    lines.append("")

    lines.append("[CALCULATED DATA POINTS]")
    lines.append(
        f"  {'No.':<6} {'Time':<12} {'Status':<8} {'Median Rank':<15} "
        f"{'ln(t)':<12} {'ln(ln(1/(1-R)))':<16}"
    )
    lines.append("  " + "-" * 75)

    for p in result.points:
        rank_str = f"{p.median_rank * 100:.4f}%" if p.is_failure else "-"
        y_str = f"{p.y:.4f}" if p.is_failure else "-"
        lines.append(
            f"  {str(p.sequence_index + 1):<6} {p.time:<12.2f} {p.status.value:<8} "
            f"{rank_str:<15} {p.x:<12.4f} {y_str:<16}"
        )
    lines.append("")

    return "\n".join(lines) + "\n"


def build_report(
    groups: Sequence[ReportGroup],
    generated_at: Optional[datetime.datetime] = None
) -> str:
    """
    Render the downloadable analysis report.

    Args:
        groups: One (name, result, raw_text) entry per data set; two entries
            produce a comparative report
        generated_at: Timestamp printed in the header (defaults to now)

    Returns:
        Report text
    """
    generated_at = generated_at or datetime.datetime.now()
    mode = "Single Analysis" if len(groups) <= 1 else "Comparative Analysis"

    sections: List[str] = [
        "WEIBULL ANALYSIS REPORT",
        f"Generated: {generated_at:%Y-%m-%d %H:%M:%S}",
        f"Mode: {mode}",
        "",
    ]
    header = "\n".join(sections) + "\n"

    body = "".join(_group_section(name, result, raw) for name, result, raw in groups)

    logger.info(f"Built report for {len(groups)} group(s)")
    return header + body
