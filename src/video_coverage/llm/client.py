"""Chat-completion client for Groq's OpenAI-compatible API.

Wraps openai.AsyncOpenAI pointed at the configured base URL.
"""

from typing import Dict, List, Optional
from openai import AsyncOpenAI
from ..config import Settings
from ..log import get_logger

logger = get_logger("llm_client")

DEFAULT_MAX_TOKENS = 1000

class CompletionClient:
    def __init__(self, settings: Settings):
        self.api_key = settings.GROQ_API_KEY
        self.base_url = settings.GROQ_BASE_URL
        self.model = settings.GROQ_MODEL
        self.timeout = settings.HTTP_TIMEOUT_SECONDS
        self._client: Optional[AsyncOpenAI] = None

    @property
    def client(self) -> AsyncOpenAI:
        # Built on first use so a missing key fails the call, not app startup.
        # No SDK retries: each completion request is sent exactly once.
        if self._client is None:
            self._client = AsyncOpenAI(
                api_key=self.api_key,
                base_url=self.base_url,
                timeout=self.timeout,
                max_retries=0,
            )
        return self._client

    async def complete(self, messages: List[Dict[str, str]], max_tokens: int = DEFAULT_MAX_TOKENS) -> str:
        """
        Sends role-tagged messages and returns the stripped text of the first choice.
        """
        logger.debug(f"Requesting completion from {self.model} ({len(messages)} messages, max_tokens={max_tokens})")
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=messages,
            max_tokens=max_tokens,
        )
        return response.choices[0].message.content.strip()
