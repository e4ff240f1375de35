"""Pydantic schemas for the coverage analysis output.

Defines SubtopicResult and CoverageReport. Field names are snake_case in Python
and camelCase on the wire.
"""

from typing import List
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

EVIDENCE_FOUND = "Evidence found in transcript."
EVIDENCE_MISSING = "No evidence found."
EVIDENCE_FAILED = "Failed to analyze coverage."

COVERED_THRESHOLD = 50


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SubtopicResult(CamelModel):
    subtopic: str
    coverage_score: int = 0
    covered: bool = False
    evidence: str = EVIDENCE_MISSING

    @classmethod
    def scored(cls, subtopic: str, score: int) -> "SubtopicResult":
        return cls(
            subtopic=subtopic,
            coverage_score=score,
            covered=score >= COVERED_THRESHOLD,
            evidence=EVIDENCE_FOUND,
        )


class CoverageReport(CamelModel):
    """
    Aggregate result of one analysis.
    subtopic_analysis always mirrors the requested subtopics one-to-one, in order.
    """
    overall_score: int
    subtopic_analysis: List[SubtopicResult]
    summary: str
