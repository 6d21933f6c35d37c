import unittest

from llm_fakes import FakeModelClient, editor_json, facts_json

from resume_align.services.analysis_service import AnalysisPipeline
from resume_align.services.editor import RewriteEditor
from resume_align.services.fact_extraction import FactExtractor
from resume_align.services.orchestrator import AdaptiveOrchestrator

RESUME = "Built a recommendation engine using Python, increased CTR by 18%."
JD = "Must have: Python, machine learning. Responsibilities: build recommendation systems."
TWO_FACTS = facts_json(("skill", "Python"), ("achievement", "increased CTR by 18%"))


def _pipeline(critics, editor_client):
    extractors = {
        name: FactExtractor(name, client, timeout_ms=200)
        for name, client in zip(("critic_a", "critic_b", "critic_c"), critics)
    }
    return AnalysisPipeline(AdaptiveOrchestrator(extractors), RewriteEditor(editor_client, timeout_ms=200))


class AnalysisPipelineTests(unittest.IsolatedAsyncioTestCase):
    async def test_end_to_end_keeps_only_cited_bullets(self):
        critics = [FakeModelClient(TWO_FACTS) for _ in range(3)]
        editor = FakeModelClient(
            editor_json(
                fit_score=62,
                bullets=[
                    ("Built a recommendation engine in Python", ["f1"]),
                    ("Increased CTR by 18%", ["f2"]),
                    ("Deployed deep learning at scale", ["f1", "f3"]),
                ],
                gaps=["machine learning"],
            )
        )
        response = await _pipeline(critics, editor).analyze(RESUME, JD)

        self.assertEqual([client.calls for client in critics], [1, 1, 1])
        self.assertEqual(response.coverage.must_have.covered, 1)
        self.assertEqual(response.coverage.must_have.total, 2)
        self.assertEqual(response.coverage.must_have.items_uncovered, ["machine learning"])
        self.assertEqual(
            response.alignedResume,
            "Built a recommendation engine in Python\nIncreased CTR by 18%",
        )
        self.assertEqual(response.fitScore, 62)
        self.assertEqual(response.keyGaps, ["machine learning"])
        self.assertIn("machine learning", response.uncoveredRequirements)
        self.assertNotIn("python", response.uncoveredRequirements)
        self.assertEqual(response.criticsCount, 3)
        self.assertIn('supported_keywords:\n["python"]', editor.user_prompts[0])
        self.assertTrue(response.note.startswith("Live pipeline"))

    async def test_editor_failure_degrades_to_coverage_only(self):
        critics = [FakeModelClient(TWO_FACTS) for _ in range(3)]
        editor = FakeModelClient("{}")
        response = await _pipeline(critics, editor).analyze(RESUME, JD)

        self.assertEqual(response.alignedResume, "")
        self.assertEqual(response.fitScore, round(response.coverage.exact_match_ratio * 100))
        self.assertIn("Coverage-only", response.rationale)
        self.assertIn("coverage-only (schema_violation)", response.note)

    async def test_all_critics_failing_still_answers(self):
        critics = [FakeModelClient(error=RuntimeError("down")) for _ in range(3)]
        editor = FakeModelClient(editor_json(fit_score=30, bullets=[("Python", ["f5"])]))
        response = await _pipeline(critics, editor).analyze(RESUME, JD)

        self.assertEqual(response.criticsCount, 0)
        self.assertIn("Token fallback facts", response.note)
        self.assertEqual(response.coverage.must_have.covered, 1)
        self.assertEqual(response.alignedResume, "Python")


if __name__ == "__main__":
    unittest.main()
