from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Union

from resumeai.display import get_display_config
from resumeai.schemas.analysis import AnalysisKind, TransportFailure
from resumeai.schemas.reports import (
    ContributingFactor,
    ErrorReport,
    ImprovementReport,
    MlScoreReport,
    QualityScoreReport,
    Report,
    SemanticMatchReport,
)

from .utils import (
    coerce_mapping,
    coerce_number,
    coerce_text,
    coerce_text_list,
    first_present,
    is_numeric,
)

logger = logging.getLogger(__name__)

FIELD_CANDIDATES: dict[AnalysisKind, dict[str, tuple[str, ...]]] = {
    AnalysisKind.SEMANTIC_MATCH: {
        "match_score": ("match_score", "semantic_score", "score"),
        "verdict": ("verdict", "recommendation"),
        "missing_skills": ("missing_skills", "gaps.skills"),
        "missing_experience": ("missing_experience", "gaps.experience"),
        "matched_skills": ("matched_skills", "matches.skills"),
    },
    AnalysisKind.QUALITY_SCORE: {
        "overall_score": ("overall_score", "quality_score", "score"),
        "breakdown": ("breakdown", "categories"),
        "issues": ("issues", "problems"),
    },
    AnalysisKind.IMPROVEMENT: {
        "suggestions": ("suggestions", "improvements"),
        "priority_actions": ("priority_actions", "quick_wins"),
        "section_improvements": ("section_improvements",),
    },
    AnalysisKind.ML_SCORE: {
        "predicted_score": ("predicted_score", "ml_score", "score"),
        "confidence": ("confidence", "accuracy"),
        "factors": ("contributing_factors", "features"),
    },
}

_TRANSPORT_MESSAGES = {
    "timeout": "The analysis took too long to respond. Please try again.",
    "unreachable": "Unable to reach the analysis service. Check your connection and try again.",
}
_HTTP_DETAIL_MAX_CHARS = 200
_GENERIC_ERROR_MESSAGE = "The analysis could not be completed."


def _resolve(raw: Mapping[str, Any], kind: AnalysisKind, field: str) -> Any:
    return first_present(raw, FIELD_CANDIDATES[kind][field])


def _score(raw: Mapping[str, Any], kind: AnalysisKind, field: str) -> float:
    value = coerce_number(_resolve(raw, kind, field))
    if not get_display_config().score_range.contains(value):
        logger.warning("score_out_of_range kind=%s field=%s value=%s", kind.value, field, value)
    return value


def _http_detail(body: str | None) -> str:
    if not body:
        return ""
    try:
        payload = json.loads(body)
    except ValueError:
        return ""
    if not isinstance(payload, dict):
        return ""
    for key in ("detail", "error", "message"):
        value = payload.get(key)
        if isinstance(value, str) and value.strip() and len(value) <= _HTTP_DETAIL_MAX_CHARS:
            return value.strip()
    return ""


def describe_transport_failure(failure: TransportFailure) -> str:
    if failure.kind == "http":
        message = "The analysis service returned an error"
        if failure.status is not None:
            message += f" (HTTP {failure.status})"
        detail = _http_detail(failure.body)
        return f"{message}: {detail}" if detail else f"{message}."
    return _TRANSPORT_MESSAGES[failure.kind]


def _error_message(raw: Mapping[str, Any]) -> str | None:
    error = raw.get("error")
    if not error:
        return None
    if isinstance(error, str):
        return error
    if isinstance(error, Mapping):
        nested = error.get("message")
        if isinstance(nested, str) and nested:
            return nested
    if isinstance(error, (Mapping, list)):
        return _GENERIC_ERROR_MESSAGE
    return str(error)


def _normalize_semantic(raw: Mapping[str, Any]) -> SemanticMatchReport:
    kind = AnalysisKind.SEMANTIC_MATCH
    return SemanticMatchReport(
        match_score=_score(raw, kind, "match_score"),
        verdict=coerce_text(_resolve(raw, kind, "verdict")),
        missing_skills=coerce_text_list(_resolve(raw, kind, "missing_skills")),
        missing_experience=coerce_text_list(_resolve(raw, kind, "missing_experience")),
        matched_skills=coerce_text_list(_resolve(raw, kind, "matched_skills")),
    )


def _normalize_quality(raw: Mapping[str, Any]) -> QualityScoreReport:
    kind = AnalysisKind.QUALITY_SCORE
    breakdown = {
        key: coerce_number(value)
        for key, value in coerce_mapping(_resolve(raw, kind, "breakdown")).items()
    }
    return QualityScoreReport(
        overall_score=_score(raw, kind, "overall_score"),
        breakdown=breakdown,
        issues=coerce_text_list(_resolve(raw, kind, "issues")),
    )


def _section_body(value: Any) -> Union[str, tuple[str, ...], None]:
    if isinstance(value, list):
        return coerce_text_list(value)
    if value is None or isinstance(value, Mapping):
        return None
    return coerce_text(value)


def _normalize_improvement(raw: Mapping[str, Any]) -> ImprovementReport:
    kind = AnalysisKind.IMPROVEMENT
    sections: dict[str, Union[str, tuple[str, ...]]] = {}
    for key, value in coerce_mapping(_resolve(raw, kind, "section_improvements")).items():
        body = _section_body(value)
        if body is not None:
            sections[key] = body
    return ImprovementReport(
        suggestions=coerce_text_list(_resolve(raw, kind, "suggestions")),
        priority_actions=coerce_text_list(_resolve(raw, kind, "priority_actions")),
        section_improvements=sections,
    )


def _factor(item: Any) -> Union[str, ContributingFactor, None]:
    if isinstance(item, Mapping):
        impact = item.get("impact")
        return ContributingFactor(
            name=coerce_text(item.get("name")),
            impact=float(impact) if is_numeric(impact) else None,
            description=coerce_text(item.get("description")),
        )
    if item is None or isinstance(item, list):
        return None
    return coerce_text(item)


def _normalize_ml(raw: Mapping[str, Any]) -> MlScoreReport:
    kind = AnalysisKind.ML_SCORE
    raw_factors = _resolve(raw, kind, "factors")
    factors = []
    if isinstance(raw_factors, list):
        for item in raw_factors:
            factor = _factor(item)
            if factor is not None:
                factors.append(factor)
    return MlScoreReport(
        predicted_score=_score(raw, kind, "predicted_score"),
        confidence=_score(raw, kind, "confidence"),
        factors=tuple(factors),
    )


_NORMALIZERS = {
    AnalysisKind.SEMANTIC_MATCH: _normalize_semantic,
    AnalysisKind.QUALITY_SCORE: _normalize_quality,
    AnalysisKind.IMPROVEMENT: _normalize_improvement,
    AnalysisKind.ML_SCORE: _normalize_ml,
}


def normalize_report(kind: AnalysisKind, response: Any) -> Report | ErrorReport:
    """Turn a gateway outcome into a typed report.

    Transport failures and payloads carrying a truthy ``error`` become an
    ``ErrorReport``. Any other payload is resolved field by field against
    ``FIELD_CANDIDATES``; a payload that is not a JSON object yields the
    all-default report for ``kind``.
    """
    if isinstance(response, TransportFailure):
        return ErrorReport(message=describe_transport_failure(response))

    raw: Mapping[str, Any] = response if isinstance(response, Mapping) else {}
    if response is not None and not isinstance(response, Mapping):
        logger.warning("analysis_payload_not_object kind=%s type=%s", kind.value, type(response).__name__)

    message = _error_message(raw)
    if message is not None:
        return ErrorReport(message=message)

    return _NORMALIZERS[kind](raw)
