from __future__ import annotations

from resumeai.schemas.presentation import FactorEntry, FactorList, Section, VerdictPanel
from resumeai.schemas.reports import (
    ContributingFactor,
    ImprovementReport,
    MlScoreReport,
    QualityScoreReport,
    SemanticMatchReport,
)

from .primitives import (
    annotated_list,
    badge_list,
    humanize_key,
    key_value_grid,
    label,
    numbered_list,
    score_indicator,
    signed_percent_badge,
)

SCORE_OVERVIEW = "Score Overview"


def semantic_match_sections(report: SemanticMatchReport) -> list[Section]:
    sections = [
        Section(
            title=SCORE_OVERVIEW,
            primitives=(
                score_indicator(report.match_score, label("match_score", "Match Score")),
                VerdictPanel(
                    label=label("verdict", "Analysis Verdict"),
                    text=report.verdict or label("verdict_default", "Resume analysis complete"),
                ),
            ),
        )
    ]
    if report.matched_skills:
        sections.append(
            Section(
                title="Matched Skills",
                icon="check-circle",
                primitives=(badge_list(report.matched_skills, "success"),),
            )
        )
    if report.missing_skills:
        sections.append(
            Section(
                title="Missing Skills",
                icon="target",
                primitives=(badge_list(report.missing_skills, "error"),),
            )
        )
    if report.missing_experience:
        sections.append(
            Section(
                title="Experience Gaps",
                icon="alert-triangle",
                primitives=(annotated_list(report.missing_experience, "x-circle", "warning"),),
            )
        )
    return sections


def quality_score_sections(report: QualityScoreReport) -> list[Section]:
    sections = [
        Section(
            title=SCORE_OVERVIEW,
            primitives=(score_indicator(report.overall_score, label("quality_score", "ATS Quality Score")),),
        )
    ]
    if report.breakdown:
        sections.append(
            Section(title="Quality Breakdown", icon="award", primitives=(key_value_grid(report.breakdown),))
        )
    if report.issues:
        sections.append(
            Section(
                title="Issues Found",
                icon="alert-triangle",
                primitives=(annotated_list(report.issues, "x-circle", "error"),),
            )
        )
    return sections


def improvement_sections(report: ImprovementReport) -> list[Section]:
    sections: list[Section] = []
    if report.priority_actions:
        sections.append(
            Section(
                title="Priority Actions",
                icon="trending-up",
                primitives=(numbered_list(report.priority_actions),),
            )
        )
    if report.suggestions:
        sections.append(
            Section(
                title="Improvement Suggestions",
                icon="lightbulb",
                primitives=(annotated_list(report.suggestions, "check-circle", "success"),),
            )
        )
    for key, tips in report.section_improvements.items():
        texts = (tips,) if isinstance(tips, str) else tips
        texts = tuple(text for text in texts if text)
        if not texts:
            continue
        sections.append(
            Section(title=humanize_key(key), primitives=(annotated_list(texts, "lightbulb"),))
        )
    return sections


def _factor_entry(factor: str | ContributingFactor) -> FactorEntry:
    if isinstance(factor, str):
        return FactorEntry(name=factor)
    return FactorEntry(
        name=factor.name,
        badge=signed_percent_badge(factor.impact) if factor.impact is not None else None,
        description=factor.description or None,
    )


def ml_score_sections(report: MlScoreReport) -> list[Section]:
    sections = [
        Section(
            title=SCORE_OVERVIEW,
            primitives=(
                score_indicator(report.predicted_score, label("predicted_score", "ML Predicted Score")),
                score_indicator(report.confidence, label("confidence", "Confidence Level")),
            ),
        )
    ]
    if report.factors:
        sections.append(
            Section(
                title="Contributing Factors",
                icon="brain",
                primitives=(FactorList(factors=tuple(_factor_entry(factor) for factor in report.factors)),),
            )
        )
    return sections
