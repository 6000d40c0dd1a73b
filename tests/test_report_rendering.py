import json
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resumeai.normalize import normalize_report  # noqa: E402
from resumeai.render import render_report  # noqa: E402
from resumeai.schemas import (  # noqa: E402
    Alert,
    AnalysisKind,
    ErrorReport,
    LoadingPlaceholder,
    PresentationTree,
    QualityScoreReport,
    RawBlock,
    SemanticMatchReport,
)


def _render(kind, payload):
    return render_report(kind, normalize_report(kind, payload), False)


class RenderEntryTests(unittest.TestCase):
    def test_loading_ignores_report(self):
        for kind in AnalysisKind:
            view = render_report(kind, ErrorReport(message="boom"), True)
            self.assertEqual(view, LoadingPlaceholder())

    def test_missing_report_is_an_empty_tree(self):
        tree = render_report(AnalysisKind.QUALITY_SCORE, None, False)
        self.assertIsInstance(tree, PresentationTree)
        self.assertTrue(tree.is_empty)

    def test_error_report_renders_single_alert_section(self):
        tree = _render(AnalysisKind.ML_SCORE, {"error": "Unable to parse resume", "ml_score": 90})
        self.assertEqual(len(tree.sections), 1)
        section = tree.sections[0]
        self.assertEqual(section.title, "ML Score Prediction")
        self.assertEqual(section.primitives, (Alert(message="Unable to parse resume"),))

    def test_rendering_is_deterministic(self):
        payload = {
            "score": 77,
            "matched_skills": ["Python", "FastAPI"],
            "missing_experience": ["Team lead"],
        }
        first = _render(AnalysisKind.SEMANTIC_MATCH, payload)
        second = _render(AnalysisKind.SEMANTIC_MATCH, payload)
        self.assertEqual(first, second)
        self.assertEqual(first.model_dump(mode="json"), second.model_dump(mode="json"))

    def test_unknown_kind_dumps_the_report(self):
        tree = render_report("ats-scan", {"keywords": ["python"], "score": 3}, False)
        self.assertEqual(tree.title, "Analysis Result")
        raw = tree.sections[0].primitives[0]
        self.assertIsInstance(raw, RawBlock)
        self.assertEqual(json.loads(raw.text), {"keywords": ["python"], "score": 3})

    def test_kind_text_is_matched_loosely_for_title_and_layout(self):
        report = normalize_report(AnalysisKind.SEMANTIC_MATCH, {"match_score": 85})
        tree = render_report(" Semantic ", report, False)
        self.assertEqual(tree.title, "Semantic Match Analysis")
        self.assertEqual(tree.icon, "target")
        self.assertEqual(tree.section_titles(), ["Score Overview"])

    def test_mismatched_report_falls_back_to_raw_dump(self):
        tree = render_report(AnalysisKind.SEMANTIC_MATCH, QualityScoreReport(overall_score=50), False)
        raw = tree.sections[0].primitives[0]
        self.assertIsInstance(raw, RawBlock)
        self.assertEqual(json.loads(raw.text)["overall_score"], 50)


class SemanticLayoutTests(unittest.TestCase):
    def test_scenario_tree(self):
        tree = _render(
            AnalysisKind.SEMANTIC_MATCH,
            {"match_score": 72, "matched_skills": ["Python"], "missing_skills": ["Go"], "gaps": {"experience": []}},
        )
        self.assertEqual(tree.title, "Semantic Match Analysis")
        self.assertEqual(tree.section_titles(), ["Score Overview", "Matched Skills", "Missing Skills"])

        indicator, verdict = tree.sections[0].primitives
        self.assertEqual(indicator.display, "72%")
        self.assertEqual(indicator.tone, "warning")
        self.assertEqual(verdict.text, "Resume analysis complete")

        matched = tree.find_section("Matched Skills").primitives[0]
        self.assertEqual([(badge.text, badge.tone) for badge in matched.badges], [("Python", "success")])
        missing = tree.find_section("Missing Skills").primitives[0]
        self.assertEqual([(badge.text, badge.tone) for badge in missing.badges], [("Go", "error")])
        self.assertIsNone(tree.find_section("Experience Gaps"))

    def test_experience_gaps_use_warning_items(self):
        tree = render_report(
            AnalysisKind.SEMANTIC_MATCH,
            SemanticMatchReport(match_score=91, verdict="Apply", missing_experience=("Kubernetes",)),
        )
        gaps = tree.find_section("Experience Gaps").primitives[0]
        self.assertEqual([(item.text, item.tone) for item in gaps.items], [("Kubernetes", "warning")])
        self.assertEqual(tree.sections[0].primitives[0].tone, "success")
        self.assertEqual(tree.sections[0].primitives[1].text, "Apply")


class QualityLayoutTests(unittest.TestCase):
    def test_empty_issues_produce_no_section(self):
        tree = _render(AnalysisKind.QUALITY_SCORE, {"overall_score": 55, "issues": []})
        self.assertEqual(tree.section_titles().count("Issues Found"), 0)
        self.assertEqual(tree.sections[0].primitives[0].tone, "error")

    def test_single_issue_produces_one_section_with_one_item(self):
        tree = _render(AnalysisKind.QUALITY_SCORE, {"overall_score": 55, "issues": ["Typo in summary"]})
        self.assertEqual(tree.section_titles().count("Issues Found"), 1)
        issues = tree.find_section("Issues Found").primitives[0]
        self.assertEqual([item.text for item in issues.items], ["Typo in summary"])

    def test_breakdown_grid_labels(self):
        tree = _render(
            AnalysisKind.QUALITY_SCORE,
            {"quality_score": 88, "breakdown": {"keyword_match": 85, "section_structure": 72.5}},
        )
        grid = tree.find_section("Quality Breakdown").primitives[0]
        self.assertEqual(
            [(cell.label, cell.display) for cell in grid.cells],
            [("keyword match", "85%"), ("section structure", "72.5%")],
        )


class ImprovementLayoutTests(unittest.TestCase):
    def test_priority_actions_are_numbered_in_order(self):
        tree = _render(AnalysisKind.IMPROVEMENT, {"priority_actions": ["Add metrics", "Shorten summary"]})
        self.assertEqual(tree.section_titles(), ["Priority Actions"])
        items = tree.sections[0].primitives[0].items
        self.assertEqual([item.label for item in items], ["1. Add metrics", "2. Shorten summary"])

    def test_section_improvements_each_get_a_section(self):
        tree = _render(
            AnalysisKind.IMPROVEMENT,
            {
                "improvements": ["Use a single column layout"],
                "section_improvements": {
                    "work_experience": ["Quantify impact", "Lead with verbs"],
                    "summary": "Trim to three lines",
                    "education": [],
                },
            },
        )
        self.assertEqual(tree.section_titles(), ["Improvement Suggestions", "work experience", "summary"])
        experience = tree.find_section("work experience").primitives[0]
        self.assertEqual([item.text for item in experience.items], ["Quantify impact", "Lead with verbs"])
        summary = tree.find_section("summary").primitives[0]
        self.assertEqual([item.text for item in summary.items], ["Trim to three lines"])

    def test_empty_report_has_no_sections(self):
        tree = _render(AnalysisKind.IMPROVEMENT, {})
        self.assertTrue(tree.is_empty)
        self.assertEqual(tree.title, "Improvement Suggestions")


class MlLayoutTests(unittest.TestCase):
    def test_two_indicators_and_factor_badges(self):
        tree = _render(
            AnalysisKind.ML_SCORE,
            {
                "predicted_score": 84.5,
                "confidence": 61,
                "contributing_factors": [
                    {"name": "Keyword coverage", "impact": 12, "description": "Most required skills present"},
                    {"name": "Resume length", "impact": -4.5},
                    {"name": "Neutral signal", "impact": 0},
                    {"name": "Formatting"},
                    "Education level",
                ],
            },
        )
        predicted, confidence = tree.sections[0].primitives
        self.assertEqual((predicted.label, predicted.display, predicted.tone), ("ML Predicted Score", "85%", "success"))
        self.assertEqual((confidence.label, confidence.display, confidence.tone), ("Confidence Level", "61%", "warning"))

        factors = tree.find_section("Contributing Factors").primitives[0].factors
        self.assertEqual([factor.name for factor in factors], [
            "Keyword coverage",
            "Resume length",
            "Neutral signal",
            "Formatting",
            "Education level",
        ])
        self.assertEqual((factors[0].badge.text, factors[0].badge.tone), ("+12%", "success"))
        self.assertEqual(factors[0].description, "Most required skills present")
        self.assertEqual((factors[1].badge.text, factors[1].badge.tone), ("-4.5%", "error"))
        self.assertEqual((factors[2].badge.text, factors[2].badge.tone), ("0%", "error"))
        self.assertIsNone(factors[3].badge)
        self.assertIsNone(factors[4].badge)
        self.assertIsNone(factors[4].description)

    def test_out_of_range_scores_are_flagged_not_clamped(self):
        tree = _render(AnalysisKind.ML_SCORE, {"ml_score": 130})
        indicator = tree.sections[0].primitives[0]
        self.assertEqual(indicator.display, "130%")
        self.assertTrue(indicator.out_of_range)


if __name__ == "__main__":
    unittest.main()
