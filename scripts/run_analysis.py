"""Run one coverage analysis against the live services and print the JSON result.

Usage:
    python scripts/run_analysis.py <youtube_url> <topic> <subtopic> [<subtopic> ...]
"""
import asyncio
import sys
from dotenv import load_dotenv
from video_coverage.config import get_settings
from video_coverage.log import setup_logging
from video_coverage.pipeline.run import Pipeline

async def run(youtube_url: str, topic: str, subtopics: list):
    settings = get_settings()
    pipeline = Pipeline.from_settings(settings)
    print(f"Analyzing {youtube_url} ({len(subtopics)} subtopics)...")
    result = await pipeline.run(youtube_url, topic, subtopics)
    print(result.model_dump_json(by_alias=True, indent=2))

if __name__ == "__main__":
    if len(sys.argv) < 4:
        print(__doc__)
        sys.exit(1)
    load_dotenv()
    setup_logging()
    asyncio.run(run(sys.argv[1], sys.argv[2], sys.argv[3:]))
