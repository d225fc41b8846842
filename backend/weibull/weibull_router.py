"""
Weibull Router
FastAPI endpoints for life-data parsing, fitting, curves and reports

Location: backend/weibull/weibull_router.py
"""

import logging
import math
from typing import Any, Dict

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse, PlainTextResponse

from models import (
    CompareRequest,
    CurveRequest,
    InsightRequest,
    InsightResponse,
    ObservationOut,
    ReportRequest,
    TextRequest,
    ToggleRequest,
    WeibullResultOut,
)
from .insights import InsightError, generate_insight
from .weibull_curves import b_life, curve_points, failure_mode
from .weibull_estimator import estimate
from .weibull_parsers import normalize, toggle_status
from .weibull_reports import build_report, to_csv
from .weibull_types import EstimationResult, RankMethod

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/weibull", tags=["weibull"])


def _json_safe(obj):
    """Replace NaN/Inf with None for JSON serialization"""
    if isinstance(obj, dict):
        return {k: _json_safe(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_json_safe(item) for item in obj]
    elif isinstance(obj, float):
        if math.isnan(obj) or math.isinf(obj):
            return None
        return obj
    return obj


def _result_payload(result: EstimationResult) -> Dict[str, Any]:
    """Flatten an EstimationResult into the response shape"""
    usable = not result.is_degenerate
    payload = WeibullResultOut(
        beta=result.beta,
        eta=result.eta,
        mttf=result.mttf,
        r_squared=result.r_squared,
        failure_mode=failure_mode(result.beta) if usable else None,
        b10_life=b_life(result.beta, result.eta, 0.10) if usable else None,
        sample_size=result.sample_size,
        failures=len(result.failures),
        suspensions=len(result.suspensions),
        data_points=[
            {
                "id": p.sequence_index,
                "time": p.time,
                "status": p.status.value,
                "order_number": p.order_number,
                "rank": p.median_rank,
                "x": p.x,
                "y": p.y,
            }
            for p in result.points
        ],
        line_points=[{"x": x, "y": y} for x, y in result.line_points],
    )
    return payload.model_dump()


def _analyze(text: str, method: str) -> EstimationResult:
    return estimate(normalize(text), RankMethod(method))


@router.post("/parse")
async def parse_observations(request: TextRequest):
    """
    Parse raw text into ordered observations.

    Unparseable lines are dropped; the response may be empty.
    """
    observations = normalize(request.text)
    logger.info(f"Parsed {len(observations)} observations")
    return JSONResponse(content={
        "observations": [
            ObservationOut(time=o.time, status=o.status.value).model_dump() for o in observations
        ]
    })


@router.post("/analyze")
async def analyze(request: TextRequest):
    """
    Fit a two-parameter Weibull distribution by median-rank regression.

    Fewer than two failures give a zeroed result (not an error).
    """
    try:
        result = _analyze(request.text, request.method)
        logger.info(
            f"Weibull analysis: n={result.sample_size}, failures={len(result.failures)}, "
            f"beta={result.beta:.4f}, eta={result.eta:.4f}"
        )
        return JSONResponse(content=_json_safe(_result_payload(result)))

    except Exception as e:
        logger.exception(f"Error in Weibull analysis: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/compare")
async def compare(request: CompareRequest):
    """Fit two independent data sets with the same rank method"""
    try:
        result_a = _analyze(request.text_a, request.method)
        result_b = _analyze(request.text_b, request.method)
        logger.info(f"Comparative analysis: beta_a={result_a.beta:.4f}, beta_b={result_b.beta:.4f}")

        return JSONResponse(content=_json_safe({
            "group_a": _result_payload(result_a),
            "group_b": _result_payload(result_b),
        }))

    except Exception as e:
        logger.exception(f"Error in comparative analysis: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/toggle")
async def toggle(request: ToggleRequest):
    """
    Flip one observation between failure and suspension.

    Returns the rewritten text and the result of re-running the pipeline
    on it.
    """
    try:
        new_text = toggle_status(request.text, request.index)
        result = _analyze(new_text, request.method)

        return JSONResponse(content=_json_safe({
            "text": new_text,
            "result": _result_payload(result),
        }))

    except IndexError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.exception(f"Error toggling status: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/curves")
async def curves(request: CurveRequest):
    """Sample a pdf / reliability / cdf / hazard curve for fitted parameters"""
    try:
        points = curve_points(
            request.beta,
            request.eta,
            request.max_time,
            kind=request.kind,
            steps=request.steps,
        )
        return JSONResponse(content=_json_safe({"kind": request.kind, "points": points}))

    except Exception as e:
        logger.exception(f"Error computing curve: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/report", response_class=PlainTextResponse)
async def report(request: ReportRequest):
    """Plain-text analysis report for one or two data sets"""
    try:
        groups = []
        for group in request.groups:
            observations = normalize(group.text)
            # Fewer than two units: no usable fit, the report prints the raw input
            result = estimate(observations, RankMethod(request.method)) if len(observations) >= 2 else None
            groups.append((group.name, result, group.text))

        return PlainTextResponse(build_report(groups))

    except Exception as e:
        logger.exception(f"Error building report: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/export/csv", response_class=PlainTextResponse)
async def export_csv(request: TextRequest):
    """Ranked points as CSV"""
    try:
        result = _analyze(request.text, request.method)
        return PlainTextResponse(to_csv(result), media_type="text/csv")

    except Exception as e:
        logger.exception(f"Error exporting CSV: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/insight")
def insight(request: InsightRequest):
    """
    Free-text interpretation from an external LLM provider.

    Provider or key problems never affect the fitted numbers; they only
    fail this endpoint. Declared sync so the blocking provider call runs in
    the threadpool instead of the event loop.
    """
    try:
        result_a = _analyze(request.text_a, request.method)
        result_b = _analyze(request.text_b, request.method) if request.text_b is not None else None

        text = generate_insight(result_a, result_b, request.config)
        return JSONResponse(content=InsightResponse(provider=request.config.provider, insight=text).model_dump())

    except InsightError as e:
        logger.warning(f"Insight generation failed: {e}")
        status = 502 if e.upstream else 400
        raise HTTPException(status_code=status, detail=str(e))
    except Exception as e:
        logger.exception(f"Error generating insight: {e}")
        raise HTTPException(status_code=500, detail=str(e))
