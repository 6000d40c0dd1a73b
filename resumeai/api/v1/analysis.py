import logging

from fastapi import APIRouter, File, Form, HTTPException, Request, UploadFile, status

from resumeai.core.rate_limit import rate_limit
from resumeai.render import render_report
from resumeai.schemas.analysis import AnalysisKind, ResumeFile
from resumeai.services.dashboard import Dashboard

router = APIRouter()
logger = logging.getLogger(__name__)

MAX_UPLOAD_BYTES = 10 * 1024 * 1024  # 10 MB


def _require_kind(kind: str) -> AnalysisKind:
    resolved = AnalysisKind.parse(kind)
    if resolved is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown analysis '{kind}'.")
    return resolved


def _require_user(request: Request) -> None:
    if not request.app.state.shell.is_authenticated:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Please sign in to run an analysis.")


def _dashboard(request: Request) -> Dashboard:
    return request.app.state.dashboard


@router.post("/analysis/{kind}")
@rate_limit()
async def run_analysis(
    request: Request,
    kind: str,
    resume: UploadFile = File(...),
    job_description: str = Form(default=""),
):
    _require_user(request)
    analysis_kind = _require_kind(kind)

    content = await resume.read()
    if not content:
        logger.info("analysis_upload_rejected kind=%s reason=empty", analysis_kind.value)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Uploaded resume is empty.")
    if len(content) > MAX_UPLOAD_BYTES:
        logger.info("analysis_upload_rejected kind=%s reason=too_large bytes=%s", analysis_kind.value, len(content))
        raise HTTPException(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail="Resume exceeds 10 MB.")

    resume_file = ResumeFile(
        filename=resume.filename or "resume",
        content=content,
        content_type=resume.content_type or "application/octet-stream",
    )
    report = await _dashboard(request).analyze(analysis_kind, resume_file, job_description)
    return render_report(analysis_kind, report).model_dump(mode="json")


@router.get("/analysis/{kind}")
def get_analysis_view(request: Request, kind: str):
    _require_user(request)
    analysis_kind = _require_kind(kind)
    return _dashboard(request).view(analysis_kind).model_dump(mode="json")
