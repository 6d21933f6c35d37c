import json
from typing import Iterable

from resume_align.schemas.facts import FactBag


FACT_SYSTEM = (
    "Extract atomic FACTS from the RESUME only. DO NOT invent.\n"
    "Return STRICT JSON only matching this shape:\n"
    '{"facts":[\n'
    '  {"id":"f1","type":"role|company|date|skill|tool|metric|achievement|summary","text":"...",'
    '"sourceSpan":{"startLine":1,"endLine":2},"tags":["optional","tags"]},\n'
    '  {"id":"f2","type":"skill","text":"TypeScript"}\n'
    "]}\n"
    "Rules:\n"
    "- Facts MUST come from the resume content only.\n"
    '- Preserve metrics exactly as written (e.g., "increased CTR by 18%").\n'
    "- Use short, faithful text. Avoid generic claims.\n"
    "- No new companies, roles, tools, certifications, or dates that aren't present.\n"
    "- Generate stable ids: f1, f2, f3...\n"
    "- JSON only. No markdown, no commentary."
)

EDITOR_SYSTEM = (
    "You are the single editor. You may ONLY use information from facts_json and "
    "supported_keywords to rewrite the resume.\n"
    "- Rephrase/reorder only; no new companies, roles, tools, or metrics.\n"
    "- Every bullet MUST include source_ids from facts_json.\n"
    "- Place unsupported items into key_gaps/missing_keywords; do NOT insert into aligned_resume.\n"
    "Return STRICT JSON:\n"
    '{"fitScore":0-100,"missing_keywords":["..."],"key_gaps":["..."],\n'
    ' "aligned_resume":[{"bullet":"...", "source_ids":["f1","f3"]}],\n'
    ' "rationale":"..."}'
)


def build_fact_prompt(resume: str) -> str:
    return f"RESUME:\n{resume}"


def build_editor_prompt(resume: str, facts: FactBag, supported: Iterable[str]) -> str:
    facts_json = json.dumps(facts.model_dump(exclude_none=True), indent=2)
    return (
        f"facts_json:\n{facts_json}\n\n"
        f"supported_keywords:\n{json.dumps(list(supported))}\n\n"
        f"resume (original, for style only):\n{resume}\n"
    )


def extract_json(text: str) -> object:
    """Parse the first {...} block; models sometimes wrap JSON in prose or code fences."""
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or end <= start:
        raise ValueError("No JSON object found in model output")
    return json.loads(text[start : end + 1])
