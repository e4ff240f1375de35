from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import AliasChoices, Field
from functools import lru_cache
from typing import Optional

class Settings(BaseSettings):
    # Older deployments export the key as GORQ_API_KEY; both names are accepted.
    GROQ_API_KEY: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("GROQ_API_KEY", "GORQ_API_KEY"),
        description="Groq API key (OpenAI-compatible endpoint)",
    )
    YOUTUBE_API_KEY: Optional[str] = Field(None, description="YouTube Data API v3 key")
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    LOG_LEVEL: str = "INFO"

    GROQ_BASE_URL: str = Field("https://api.groq.com/openai/v1", description="OpenAI-compatible base URL")
    GROQ_MODEL: str = "meta-llama/llama-4-scout-17b-16e-instruct"

    YOUTUBE_API_URL: str = "https://www.googleapis.com/youtube/v3/videos"
    TRANSCRIPT_SERVICE_URL: str = "https://youtube-transcriptor.vercel.app/transcript"
    # None means no timeout on outbound HTTP calls
    HTTP_TIMEOUT_SECONDS: Optional[float] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
        frozen=True,
    )

    @property
    def has_groq_key(self) -> bool:
        return bool(self.GROQ_API_KEY)

    @property
    def has_youtube_key(self) -> bool:
        return bool(self.YOUTUBE_API_KEY)

@lru_cache()
def get_settings() -> Settings:
    return Settings()
