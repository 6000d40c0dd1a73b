from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field

from resumeai.gateway.client import AnalysisGateway
from resumeai.normalize import normalize_report
from resumeai.render import render_report
from resumeai.schemas.analysis import AnalysisKind, ResumeFile
from resumeai.schemas.presentation import LoadingPlaceholder, PresentationTree
from resumeai.schemas.reports import ErrorReport, Report

logger = logging.getLogger(__name__)

MISSING_RESUME_MESSAGE = "Please upload a resume file before running an analysis."


@dataclass
class KindState:
    in_flight: int = 0
    report: Report | ErrorReport | None = None
    resolved_count: int = 0

    @property
    def is_loading(self) -> bool:
        return self.in_flight > 0


@dataclass
class Dashboard:
    """Per-kind analysis state for the signed-in user.

    Kinds never share state. Within one kind, the report shown is the one
    from the call that resolved last; earlier calls are not cancelled.
    """

    gateway: AnalysisGateway
    states: dict[AnalysisKind, KindState] = field(
        default_factory=lambda: {kind: KindState() for kind in AnalysisKind}
    )

    async def analyze(
        self, kind: AnalysisKind, resume: ResumeFile | None, job_description: str
    ) -> Report | ErrorReport:
        state = self.states[kind]
        if resume is None or resume.is_empty:
            report: Report | ErrorReport = ErrorReport(message=MISSING_RESUME_MESSAGE)
            state.report = report
            return report

        state.in_flight += 1
        try:
            response = await self.gateway.submit(kind, resume, job_description)
        finally:
            state.in_flight -= 1

        report = normalize_report(kind, response)
        state.report = report
        state.resolved_count += 1
        if isinstance(report, ErrorReport):
            logger.info("analysis_failed kind=%s", kind.value)
        return report

    async def analyze_all(
        self, resume: ResumeFile | None, job_description: str
    ) -> dict[AnalysisKind, Report | ErrorReport]:
        kinds = list(AnalysisKind)
        results = await asyncio.gather(*(self.analyze(kind, resume, job_description) for kind in kinds))
        return dict(zip(kinds, results))

    def view(self, kind: AnalysisKind) -> PresentationTree | LoadingPlaceholder:
        state = self.states[kind]
        return render_report(kind, state.report, state.is_loading)

    def reset(self) -> None:
        for kind in AnalysisKind:
            self.states[kind] = KindState()
