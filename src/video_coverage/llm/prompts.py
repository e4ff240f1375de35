import yaml
from functools import lru_cache
from pathlib import Path
from typing import Dict, List

PROMPTS_DIR = Path(__file__).parent / "templates"

MAX_TRANSCRIPT_CHARS = 4000
TRUNCATION_MARKER = "... [truncated]"

@lru_cache()
def load_prompt(name: str) -> Dict[str, str]:
    path = PROMPTS_DIR / f"{name}.yaml"
    if not path.exists():
        raise FileNotFoundError(f"Prompt {name} not found in {PROMPTS_DIR}")
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)

def truncate_transcript(transcript: str, limit: int = MAX_TRANSCRIPT_CHARS) -> str:
    if len(transcript) > limit:
        return transcript[:limit] + TRUNCATION_MARKER
    return transcript

def build_coverage_messages(transcript: str, subtopics: List[str]) -> List[Dict[str, str]]:
    """
    Builds the system + user messages for one coverage request.
    The transcript is truncated before being embedded.
    """
    prompt = load_prompt("coverage")
    user_content = prompt["content"].format(
        transcript=truncate_transcript(transcript),
        subtopics=", ".join(subtopics),
    )
    return [
        {"role": "system", "content": prompt["system"]},
        {"role": "user", "content": user_content},
    ]
