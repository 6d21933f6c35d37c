from __future__ import annotations


class PipelineError(RuntimeError):
    code = "pipeline_error"

    def __init__(self, message: str, *, source: str = "unknown"):
        super().__init__(message)
        self.source = source


class CriticTimeout(PipelineError):
    code = "timeout"


class SchemaViolation(PipelineError):
    code = "schema_violation"


class TransportFailure(PipelineError):
    code = "transport_failure"


class NoFactsAvailable(PipelineError):
    code = "no_facts_available"
