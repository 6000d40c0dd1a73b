import asyncio
import sys
import unittest
from pathlib import Path

import httpx

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resumeai.gateway import UNREADABLE_RESPONSE, AnalysisGateway  # noqa: E402
from resumeai.schemas import AnalysisKind, ResumeFile, TransportFailure  # noqa: E402

RESUME = ResumeFile(filename="resume.pdf", content=b"%PDF-1.4 sample resume")


def _submit(handler, kind=AnalysisKind.SEMANTIC_MATCH, resume=RESUME, job_description="Backend engineer"):
    async def main():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            gateway = AnalysisGateway(base_url="http://analysis.test", client=client)
            return await gateway.submit(kind, resume, job_description)

    return asyncio.run(main())


class AnalysisGatewayTests(unittest.TestCase):
    def test_posts_multipart_to_kind_route(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["path"] = request.url.path
            seen["content_type"] = request.headers.get("content-type", "")
            seen["body"] = request.content
            return httpx.Response(200, json={"match_score": 72})

        expected = {
            AnalysisKind.SEMANTIC_MATCH: "/semantic/full-gap-analysis",
            AnalysisKind.QUALITY_SCORE: "/quality/score",
            AnalysisKind.IMPROVEMENT: "/improvement/suggestions",
            AnalysisKind.ML_SCORE: "/ml-score/predict",
        }
        for kind, path in expected.items():
            result = _submit(handler, kind=kind)
            self.assertEqual(result, {"match_score": 72})
            self.assertEqual(seen["method"], "POST")
            self.assertEqual(seen["path"], path)
            self.assertTrue(seen["content_type"].startswith("multipart/form-data"))
            self.assertIn(b'name="resume"; filename="resume.pdf"', seen["body"])
            self.assertIn(b'name="job_description"', seen["body"])
            self.assertIn(b"Backend engineer", seen["body"])

    def test_empty_job_description_is_sent(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["body"] = request.content
            return httpx.Response(200, json={})

        self.assertEqual(_submit(handler, job_description=""), {})
        self.assertIn(b'name="job_description"', seen["body"])

    def test_empty_resume_is_rejected_before_io(self):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(200, json={})

        with self.assertRaises(ValueError):
            _submit(handler, resume=ResumeFile(filename="empty.pdf", content=b""))
        self.assertEqual(calls, [])

    def test_non_success_status_is_http_failure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, text="internal error")

        result = _submit(handler)
        self.assertEqual(result, TransportFailure(kind="http", status=500, body="internal error"))

    def test_timeout_failure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        self.assertEqual(_submit(handler), TransportFailure(kind="timeout"))

    def test_unreachable_failure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        self.assertEqual(_submit(handler), TransportFailure(kind="unreachable"))

    def test_corrupt_content_encoding_is_unreachable(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, headers={"content-encoding": "gzip"}, stream=httpx.ByteStream(b"garbage"))

        self.assertEqual(_submit(handler), TransportFailure(kind="unreachable"))

    def test_redirect_loop_is_unreachable(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(302, headers={"location": str(request.url)})

        async def main():
            transport = httpx.MockTransport(handler)
            async with httpx.AsyncClient(transport=transport, follow_redirects=True, max_redirects=2) as client:
                gateway = AnalysisGateway(base_url="http://analysis.test", client=client)
                return await gateway.submit(AnalysisKind.QUALITY_SCORE, RESUME, "")

        self.assertEqual(asyncio.run(main()), TransportFailure(kind="unreachable"))

    def test_unreadable_body_becomes_error_payload(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>not json</html>")

        self.assertEqual(_submit(handler), UNREADABLE_RESPONSE)

    def test_default_timeout_is_sixty_seconds(self):
        async def main():
            async with httpx.AsyncClient() as client:
                return AnalysisGateway(client=client).timeout_s

        self.assertEqual(asyncio.run(main()), 60.0)


if __name__ == "__main__":
    unittest.main()
