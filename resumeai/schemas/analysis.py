from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

TransportFailureKind = Literal["timeout", "http", "unreachable"]

RawResponse = dict[str, Any]


class AnalysisKind(str, Enum):
    SEMANTIC_MATCH = "semantic"
    QUALITY_SCORE = "quality"
    IMPROVEMENT = "improve"
    ML_SCORE = "ml"

    @property
    def route(self) -> str:
        return ANALYSIS_ROUTES[self]

    @classmethod
    def parse(cls, value: Any) -> AnalysisKind | None:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


ANALYSIS_ROUTES: dict[AnalysisKind, str] = {
    AnalysisKind.SEMANTIC_MATCH: "/semantic/full-gap-analysis",
    AnalysisKind.QUALITY_SCORE: "/quality/score",
    AnalysisKind.IMPROVEMENT: "/improvement/suggestions",
    AnalysisKind.ML_SCORE: "/ml-score/predict",
}


class TransportFailure(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: TransportFailureKind
    status: int | None = None
    body: str | None = None


@dataclass(frozen=True)
class ResumeFile:
    filename: str
    content: bytes
    content_type: str = "application/pdf"

    @property
    def is_empty(self) -> bool:
        return not self.content
