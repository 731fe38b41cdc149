import logging
from abc import ABC, abstractmethod

from google import genai
from google.genai import errors, types

from resume_extraction.core.config import Settings
from resume_extraction.core.exceptions import CompletionFailedError, RateLimitedError

logger = logging.getLogger(__name__)


class CompletionClient(ABC):
    @abstractmethod
    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        *,
        temperature: float,
        json_mode: bool = True,
    ) -> str:
        """Send the prompt pair and return the raw completion text."""
        ...


class GeminiCompletionClient(CompletionClient):
    def __init__(self, client: genai.Client, model: str) -> None:
        self.client = client
        self.model = model

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeminiCompletionClient":
        return cls(genai.Client(api_key=settings.google_ai_api_key), settings.gemini_model)

    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        *,
        temperature: float,
        json_mode: bool = True,
    ) -> str:
        config = types.GenerateContentConfig(
            system_instruction=system_prompt,
            temperature=temperature,
            response_mime_type="application/json" if json_mode else None,
        )
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=user_prompt,
                config=config,
            )
        except errors.APIError as e:
            if e.code == 429 or e.status == "RESOURCE_EXHAUSTED":
                raise RateLimitedError(f"Gemini rate limit reached: {e.message}") from e
            raise CompletionFailedError(f"Gemini API error: {e.code} - {e.message}") from e
        except Exception as e:
            raise CompletionFailedError(f"Gemini request failed: {e}") from e

        text = response.text or ""
        logger.debug("Gemini returned %d characters from %s", len(text), self.model)
        return text
