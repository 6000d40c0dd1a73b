from __future__ import annotations

import json
from typing import Any, Callable

from pydantic import BaseModel

from resumeai.display import FALLBACK_CARD
from resumeai.schemas.analysis import AnalysisKind
from resumeai.schemas.presentation import Alert, LoadingPlaceholder, PresentationTree, RawBlock, Section
from resumeai.schemas.reports import (
    ErrorReport,
    ImprovementReport,
    MlScoreReport,
    QualityScoreReport,
    SemanticMatchReport,
)

from .layouts import (
    improvement_sections,
    ml_score_sections,
    quality_score_sections,
    semantic_match_sections,
)
from .primitives import card_meta

_LAYOUTS: dict[AnalysisKind, tuple[type[BaseModel], Callable[[Any], list[Section]]]] = {
    AnalysisKind.SEMANTIC_MATCH: (SemanticMatchReport, semantic_match_sections),
    AnalysisKind.QUALITY_SCORE: (QualityScoreReport, quality_score_sections),
    AnalysisKind.IMPROVEMENT: (ImprovementReport, improvement_sections),
    AnalysisKind.ML_SCORE: (MlScoreReport, ml_score_sections),
}


def _raw_dump(report: Any) -> str:
    if isinstance(report, BaseModel):
        payload: Any = report.model_dump(mode="json")
    else:
        payload = report
    try:
        return json.dumps(payload, indent=2, ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        return repr(report)


def _raw_tree(report: Any) -> PresentationTree:
    title, icon = card_meta(FALLBACK_CARD)
    return PresentationTree(
        title=title,
        icon=icon,
        sections=(Section(title=title, primitives=(RawBlock(text=_raw_dump(report)),)),),
    )


def render_report(kind: AnalysisKind | str, report: Any, is_loading: bool = False) -> PresentationTree | LoadingPlaceholder:
    """Build the presentation tree for one analysis card.

    Loading wins over everything; a missing report renders as an empty tree.
    Kinds without a layout, and reports whose shape does not match the kind,
    fall back to a raw dump so rendering never fails.
    """
    if is_loading:
        return LoadingPlaceholder()
    if report is None:
        return PresentationTree()

    resolved = AnalysisKind.parse(kind)
    title, icon = card_meta(resolved.value if resolved else FALLBACK_CARD)

    if isinstance(report, ErrorReport):
        return PresentationTree(
            title=title,
            icon=icon,
            sections=(Section(title=title, icon=icon, primitives=(Alert(message=report.message),)),),
        )

    if resolved is None:
        return _raw_tree(report)

    model, layout = _LAYOUTS[resolved]
    if not isinstance(report, model):
        return _raw_tree(report)
    return PresentationTree(title=title, icon=icon, sections=tuple(layout(report)))
