"""HTTP entry point.

Usage:
    video-coverage-api
    uvicorn video_coverage.main_api:app --port 5000
"""

from contextlib import asynccontextmanager
from typing import Optional
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from .config import Settings, get_settings
from .errors import InvalidRequestError
from .log import setup_logging, get_logger
from .pipeline.run import Pipeline
from .schemas.api import AnalyzeRequest, AnalyzeResponse, ErrorResponse, HealthResponse

logger = get_logger("api")

MISSING_FIELDS_MESSAGE = "YouTube URL, topic, and at least one subtopic are required."
UPSTREAM_HINT = "Please check API keys and try again."

def validate_analyze_request(req: AnalyzeRequest):
    if not req.youtube_url or not req.topic or not req.custom_subtopics:
        raise InvalidRequestError(MISSING_FIELDS_MESSAGE)

def _error(status_code: int, message: str, details: Optional[str] = None) -> JSONResponse:
    body = ErrorResponse(error=message, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))

def create_app(settings: Optional[Settings] = None, pipeline: Optional[Pipeline] = None) -> FastAPI:
    settings = settings or get_settings()
    pipeline = pipeline or Pipeline.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Server running on port {settings.PORT}")
        logger.info(f"Groq key configured: {settings.has_groq_key}")
        logger.info(f"YouTube API key configured: {settings.has_youtube_key}")
        yield

    app = FastAPI(title="Video Coverage Analyzer", lifespan=lifespan)
    app.state.settings = settings
    app.state.pipeline = pipeline

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(InvalidRequestError)
    async def invalid_request_handler(request: Request, exc: InvalidRequestError):
        return _error(400, str(exc))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.info(f"Rejected malformed request body: {exc.errors()}")
        return _error(400, MISSING_FIELDS_MESSAGE)

    @app.post("/api/analyze", response_model=AnalyzeResponse)
    async def analyze(req: AnalyzeRequest, request: Request):
        # 1. Required fields
        validate_analyze_request(req)

        # 2. Run the pipeline; upstream failures become a generic 500
        try:
            return await request.app.state.pipeline.run(req.youtube_url, req.topic, req.custom_subtopics)
        except InvalidRequestError:
            raise
        except Exception as e:
            logger.exception(f"Analysis error: {e}")
            return _error(500, str(e), details=UPSTREAM_HINT)

    @app.get("/api/health", response_model=HealthResponse)
    async def health(request: Request):
        s: Settings = request.app.state.settings
        return HealthResponse(has_groq_key=s.has_groq_key, has_youtube_key=s.has_youtube_key)

    return app

setup_logging()
app = create_app()

def main():
    settings = get_settings()
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)

if __name__ == "__main__":
    main()
