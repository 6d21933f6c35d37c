import unittest
from dataclasses import replace
from unittest.mock import AsyncMock, patch

from fastapi.testclient import TestClient

from resume_align.api.v1.analyze import get_pipeline
from resume_align.core.config import settings
from resume_align.core.rate_limit import limiter
from resume_align.main import app
from resume_align.schemas import AnalyzeResponse, BucketCoverage, Coverage
from resume_align.services.analysis_service import AnalysisPipeline


def _live_response():
    bucket = BucketCoverage(covered=1, total=1, items_uncovered=[])
    return AnalyzeResponse(
        fitScore=77,
        uncoveredRequirements=[],
        keyGaps=[],
        alignedResume="Built APIs",
        rationale="ok",
        coverage=Coverage(must_have=bucket, responsibilities=bucket, nice_to_have=bucket, exact_match_ratio=1.0),
        criticsCount=1,
        note="Live pipeline with JD skill map -> adaptive routing. Fast path (critic_a only). Coverage=100%",
    )


class AnalyzeApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def setUp(self):
        limiter.reset()
        app.dependency_overrides.clear()

    def tearDown(self):
        app.dependency_overrides.clear()

    def test_liveness_check(self):
        response = self.client.get("/analyze")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"ok": True, "route": "/analyze"})

    def test_health(self):
        response = self.client.get("/v1/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "healthy")
        self.assertEqual(response.json()["mode"], "mock")

    def test_missing_credentials_uses_mock_without_model_calls(self):
        app.dependency_overrides[get_pipeline] = lambda: None
        with patch.object(AnalysisPipeline, "analyze", new_callable=AsyncMock) as analyze:
            response = self.client.post("/analyze", json={"resume": "Java developer", "jd": "Java required"})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["fitScore"], 100)
        self.assertEqual(body["matchedCount"], 1)
        self.assertEqual(body["totalJDWords"], 1)
        self.assertEqual(body["sampleMatches"], ["java"])
        self.assertIn("MOCK", body["note"])
        analyze.assert_not_called()

    def test_body_fields_default_to_empty(self):
        app.dependency_overrides[get_pipeline] = lambda: None
        response = self.client.post("/analyze", json={})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["fitScore"], 0)
        self.assertEqual(response.json()["totalJDWords"], 0)

    def test_live_pipeline_response_shape(self):
        pipeline = AsyncMock()
        pipeline.analyze.return_value = _live_response()
        app.dependency_overrides[get_pipeline] = lambda: pipeline
        response = self.client.post("/v1/analyze", json={"resume": "Built APIs", "jd": "Must build APIs"})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        for key in ("fitScore", "uncoveredRequirements", "keyGaps", "alignedResume", "rationale", "coverage", "criticsCount", "note"):
            self.assertIn(key, body)
        self.assertEqual(body["coverage"]["exact_match_ratio"], 1.0)
        pipeline.analyze.assert_awaited_once_with("Built APIs", "Must build APIs")

    def test_api_key_is_enforced_when_configured(self):
        app.dependency_overrides[get_pipeline] = lambda: None
        with patch("resume_align.core.security.settings", replace(settings, api_key="secret")):
            denied = self.client.post("/analyze", json={"resume": "r", "jd": "j"})
            allowed = self.client.post("/analyze", json={"resume": "r", "jd": "j"}, headers={"X-API-Key": "secret"})
        self.assertEqual(denied.status_code, 401)
        self.assertEqual(allowed.status_code, 200)

    def test_unexpected_error_returns_500(self):
        pipeline = AsyncMock()
        pipeline.analyze.side_effect = ValueError("boom")
        app.dependency_overrides[get_pipeline] = lambda: pipeline
        response = self.client.post("/analyze", json={"resume": "r", "jd": "j"})
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"error": "analysis_failed", "details": "boom"})


if __name__ == "__main__":
    unittest.main()
