from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from .analysis import AnalysisKind


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class ContributingFactor(_FrozenModel):
    name: str = ""
    impact: float | None = None
    description: str = ""


class SemanticMatchReport(_FrozenModel):
    kind: Literal[AnalysisKind.SEMANTIC_MATCH] = AnalysisKind.SEMANTIC_MATCH
    match_score: float = 0.0
    verdict: str = ""
    missing_skills: tuple[str, ...] = ()
    missing_experience: tuple[str, ...] = ()
    matched_skills: tuple[str, ...] = ()


class QualityScoreReport(_FrozenModel):
    kind: Literal[AnalysisKind.QUALITY_SCORE] = AnalysisKind.QUALITY_SCORE
    overall_score: float = 0.0
    breakdown: dict[str, float] = Field(default_factory=dict)
    issues: tuple[str, ...] = ()


class ImprovementReport(_FrozenModel):
    kind: Literal[AnalysisKind.IMPROVEMENT] = AnalysisKind.IMPROVEMENT
    suggestions: tuple[str, ...] = ()
    priority_actions: tuple[str, ...] = ()
    # Backend vocabulary for section names is open, so entries keep either shape.
    section_improvements: dict[str, Union[str, tuple[str, ...]]] = Field(default_factory=dict)


class MlScoreReport(_FrozenModel):
    kind: Literal[AnalysisKind.ML_SCORE] = AnalysisKind.ML_SCORE
    predicted_score: float = 0.0
    confidence: float = 0.0
    factors: tuple[Union[str, ContributingFactor], ...] = ()


class ErrorReport(_FrozenModel):
    message: str


Report = Union[SemanticMatchReport, QualityScoreReport, ImprovementReport, MlScoreReport]
