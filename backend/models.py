# backend/models.py  –– request / response models for the Weibull API
from __future__ import annotations

from typing import (
    List,
    Literal,
    Optional,
)

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

from config import DEFAULT_INSIGHT_PROVIDER, INSIGHT_MAX_TOKENS, INSIGHT_TIMEOUT, MAX_CURVE_STEPS

RankMethodName = Literal["MEDIAN", "MEAN"]
CurveKind = Literal["pdf", "reliability", "cdf", "hazard"]


# ---------------------------------------------------------------------------#
#  1.  REQUEST MODELS
# ---------------------------------------------------------------------------#
class TextRequest(BaseModel):
    text: str = Field("", description="One observation per line: '<time> [S|F]'")
    method: RankMethodName = Field("MEDIAN", description="Plotting-position formula")


class CompareRequest(BaseModel):
    text_a: str = Field("", description="Group A life data")
    text_b: str = Field("", description="Group B life data")
    method: RankMethodName = "MEDIAN"


class ToggleRequest(BaseModel):
    text: str
    index: int = Field(..., ge=0, description="Position in the time-sorted sequence")
    method: RankMethodName = "MEDIAN"


class CurveRequest(BaseModel):
    beta: float = Field(..., gt=0, description="Shape parameter")
    eta: float = Field(..., gt=0, description="Scale parameter")
    max_time: float = Field(..., gt=0, description="Right edge of the time axis")
    kind: CurveKind = "reliability"
    steps: int = Field(150, ge=1, le=MAX_CURVE_STEPS)


class ReportGroupRequest(BaseModel):
    name: str = Field(..., min_length=1)
    text: str = ""


class ReportRequest(BaseModel):
    groups: List[ReportGroupRequest] = Field(..., min_length=1, max_length=2)
    method: RankMethodName = "MEDIAN"


class InsightConfig(BaseModel):
    """
    Per-call insight provider settings.

    Passed explicitly to every provider call; nothing stores the key
    between requests.
    """
    model_config = ConfigDict(protected_namespaces=())

    provider: str = Field(DEFAULT_INSIGHT_PROVIDER, description="Registered provider name")
    api_key: str = Field("", description="Vendor API key", repr=False)
    model: Optional[str] = Field(None, description="Model override; provider default if omitted")
    language: Literal["en", "zh"] = Field("en", description="Output language")
    timeout: float = Field(INSIGHT_TIMEOUT, gt=0, description="HTTP timeout in seconds")
    max_tokens: int = Field(INSIGHT_MAX_TOKENS, gt=0, le=4096)

    @field_validator("provider", mode="after")
    def lower_provider(cls, v: str) -> str:
        return v.strip().lower()


class InsightRequest(BaseModel):
    text_a: str
    text_b: Optional[str] = Field(None, description="Second data set for a comparative summary")
    method: RankMethodName = "MEDIAN"
    config: InsightConfig = Field(default_factory=InsightConfig)


# ---------------------------------------------------------------------------#
#  2.  RESPONSE MODELS
# ---------------------------------------------------------------------------#
class ObservationOut(BaseModel):
    time: float
    status: Literal["F", "S"]


class DataPointOut(BaseModel):
    id: int
    time: float
    status: Literal["F", "S"]
    order_number: float
    rank: float
    x: float
    y: float


class LinePointOut(BaseModel):
    x: float
    y: float


class WeibullResultOut(BaseModel):
    beta: float
    eta: float
    mttf: Optional[float]
    r_squared: float
    failure_mode: Optional[str] = None
    b10_life: Optional[float] = None
    sample_size: int
    failures: int
    suspensions: int
    data_points: List[DataPointOut]
    line_points: List[LinePointOut]


class InsightResponse(BaseModel):
    provider: str
    insight: str
