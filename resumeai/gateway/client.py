from __future__ import annotations

import logging
import time

import httpx

from resumeai.core.config import settings
from resumeai.schemas.analysis import AnalysisKind, RawResponse, ResumeFile, TransportFailure

logger = logging.getLogger(__name__)

UNREADABLE_RESPONSE: RawResponse = {"error": "The analysis service returned an unreadable response."}
_BODY_MAX_CHARS = 2000


class AnalysisGateway:
    """Posts a resume and job description to one of the analysis routes.

    Every outcome comes back as a value: the decoded JSON payload on 2xx, or a
    ``TransportFailure`` for timeouts, non-2xx statuses and network errors.
    No retries are attempted.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout_s: float | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        self._base_url = (base_url or settings.api_base_url).rstrip("/")
        self._timeout_s = float(timeout_s if timeout_s is not None else settings.api_timeout_s)
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(base_url=self._base_url, timeout=self._timeout_s)

    @property
    def timeout_s(self) -> float:
        return self._timeout_s

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def submit(
        self, kind: AnalysisKind, resume: ResumeFile, job_description: str
    ) -> RawResponse | TransportFailure:
        if resume.is_empty:
            raise ValueError("resume must be a non-empty file")

        files = {"resume": (resume.filename or "resume", resume.content, resume.content_type)}
        data = {"job_description": job_description or ""}
        started = time.perf_counter()

        try:
            response = await self._client.post(
                f"{self._base_url}{kind.route}",
                files=files,
                data=data,
                timeout=self._timeout_s,
            )
        except httpx.TimeoutException as exc:
            logger.warning("analysis_request_timeout kind=%s timeout_s=%s: %s", kind.value, self._timeout_s, exc)
            return TransportFailure(kind="timeout")
        except httpx.RequestError as exc:
            logger.warning("analysis_request_unreachable kind=%s: %s", kind.value, exc)
            return TransportFailure(kind="unreachable")

        elapsed_ms = int((time.perf_counter() - started) * 1000)
        logger.info(
            "analysis_request kind=%s status=%s elapsed_ms=%s",
            kind.value,
            response.status_code,
            elapsed_ms,
        )

        if not response.is_success:
            return TransportFailure(kind="http", status=response.status_code, body=response.text[:_BODY_MAX_CHARS])

        try:
            return response.json()
        except ValueError:
            logger.warning("analysis_response_not_json kind=%s bytes=%s", kind.value, len(response.content))
            return dict(UNREADABLE_RESPONSE)
