"""Subtopic coverage analysis.

Builds the prompt, asks the LLM, parses per-subtopic scores and aggregates
them into a CoverageReport. Never raises: failures degrade to a zero report.
"""

import math
from typing import List, Optional
from ..llm.client import CompletionClient
from ..llm.prompts import build_coverage_messages
from ..log import get_logger
from ..schemas.coverage import CoverageReport, SubtopicResult, EVIDENCE_FAILED
from .parse import parse_subtopic_scores

logger = get_logger("coverage")

ANALYSIS_MAX_TOKENS = 2000
FAILED_SUMMARY = "Failed to generate coverage analysis."


def overall_score(results: List[SubtopicResult]) -> int:
    """Mean of the coverage scores, rounded half-up. 0 for no results."""
    if not results:
        return 0
    mean = sum(r.coverage_score for r in results) / len(results)
    return math.floor(mean + 0.5)


def failed_report(subtopics: List[str]) -> CoverageReport:
    return CoverageReport(
        overall_score=0,
        subtopic_analysis=[
            SubtopicResult(subtopic=s, coverage_score=0, covered=False, evidence=EVIDENCE_FAILED)
            for s in subtopics
        ],
        summary=FAILED_SUMMARY,
    )


async def analyze_coverage(
    transcript: str,
    subtopics: List[str],
    client: CompletionClient,
    topic: Optional[str] = None,
) -> CoverageReport:
    """
    Scores how well the transcript covers each subtopic.

    Args:
        transcript: Full transcript (or description fallback); truncated before prompting.
        subtopics: Ordered subtopic labels; the report mirrors this order.
        client: Completion client used for the single LLM call.
        topic: Main topic of the request. Logged only, not part of the prompt.

    Returns:
        CoverageReport. On any error, a report with every score at 0.
    """
    try:
        logger.info(f"Analyzing coverage of {len(subtopics)} subtopics (topic={topic!r})")
        messages = build_coverage_messages(transcript, subtopics)
        reply_text = await client.complete(messages, max_tokens=ANALYSIS_MAX_TOKENS)

        results = parse_subtopic_scores(reply_text, subtopics)
        return CoverageReport(
            overall_score=overall_score(results),
            subtopic_analysis=results,
            summary=f"Overall coverage based on {len(subtopics)} subtopics.",
        )
    except Exception as e:
        logger.error(f"Coverage analysis error: {e}")
        return failed_report(subtopics)
