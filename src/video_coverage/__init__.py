"""Video Coverage Analyzer - scores how well a YouTube video covers a list of subtopics.

Given a video URL, a topic and caller-defined subtopics, the service fetches the
video's metadata and transcript, asks an LLM to score each subtopic and returns
a per-subtopic coverage report.

Components:
- main_api: FastAPI app (POST /api/analyze, GET /api/health)
- pipeline: request orchestration
- youtube: URL parsing, metadata and transcript lookup
- llm: Groq chat-completion client and prompt templates
- analysis: reply parsing and score aggregation
"""
