"""Free-text reply parsing for coverage scores.

The model is asked for `Subtopic / Score / Evidence` blocks but nothing enforces
that shape, so scores are pulled out with a forgiving regex scan.
"""

import re
from typing import List
from ..schemas.coverage import SubtopicResult


def _score_pattern(subtopic: str) -> re.Pattern:
    return re.compile(re.escape(subtopic) + r"[\s\S]*?Score:\s*(\d+)", re.IGNORECASE)


def parse_subtopic_scores(reply_text: str, subtopics: List[str]) -> List[SubtopicResult]:
    """
    Returns one SubtopicResult per subtopic, in input order.

    Each label is searched independently: first occurrence of the label, then the
    nearest following `Score: <digits>`. A label that is a substring of another
    label, or whose block has no score, can pick up a later subtopic's score.
    Scores are not clamped. The model's evidence text is not surfaced.
    """
    results = []
    for subtopic in subtopics:
        match = _score_pattern(subtopic).search(reply_text)
        if match:
            results.append(SubtopicResult.scored(subtopic, int(match.group(1))))
        else:
            results.append(SubtopicResult(subtopic=subtopic))
    return results
