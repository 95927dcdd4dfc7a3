from __future__ import annotations

import asyncio
from typing import Callable, Optional, Protocol

from loguru import logger

from app.core.config import settings
from app.core.errors import (
    ConfigurationError,
    CredentialError,
    JournalAPIError,
    RateLimitError,
    UpstreamError,
    ValidationError,
)
from app.services.journal.prompt import DEFAULT_SYSTEM_PROMPT, build_prompt
from app.services.journal.retry import Sleep, generate_with_retry, is_rate_limit
from app.services.journal.sections import extract_sections
from app.services.journal.types import GenerationRequest, GenerationResult, GenerationSettings
from app.services.llm.gemini_chat import GeminiChatLLM


class TextLLM(Protocol):
    async def generate(self, prompt: str) -> str: ...


LLMFactory = Callable[[str, str], TextLLM]


def classify_failure(exc: BaseException) -> JournalAPIError:
    """Map a provider failure onto the API error taxonomy."""
    if isinstance(exc, JournalAPIError):
        return exc
    message = str(exc)
    if "API key" in message:
        return CredentialError()
    if is_rate_limit(exc):
        return RateLimitError()
    return UpstreamError(message or None)


class JournalGenerator:
    def __init__(
        self,
        llm_factory: LLMFactory = GeminiChatLLM,
        system_prompt: str = DEFAULT_SYSTEM_PROMPT,
        default_model: Optional[str] = None,
        max_attempts: Optional[int] = None,
        base_delay_ms: Optional[int] = None,
        timeout_seconds: Optional[float] = None,
        sleep: Sleep = asyncio.sleep,
    ):
        self.llm_factory = llm_factory
        self.system_prompt = system_prompt
        self.default_model = default_model or settings.GEMINI_DEFAULT_MODEL
        self.max_attempts = max_attempts if max_attempts is not None else settings.GENERATION_MAX_ATTEMPTS
        self.base_delay_ms = base_delay_ms if base_delay_ms is not None else settings.GENERATION_BACKOFF_BASE_MS
        self.timeout_seconds = timeout_seconds if timeout_seconds is not None else settings.GENERATION_TIMEOUT_SECONDS
        self.sleep = sleep

    def _check_preconditions(self, request: GenerationRequest, user_settings: Optional[GenerationSettings]) -> GenerationSettings:
        if user_settings is None or not user_settings.api_key:
            raise ConfigurationError()
        if not request.repository_name or not request.command_type or not request.user_message:
            raise ValidationError()
        return user_settings

    async def _call_model(self, llm: TextLLM, prompt: str) -> str:
        retried = generate_with_retry(
            lambda: llm.generate(prompt),
            max_attempts=self.max_attempts,
            base_delay_ms=self.base_delay_ms,
            sleep=self.sleep,
        )
        if not self.timeout_seconds:
            return await retried
        try:
            return await asyncio.wait_for(retried, timeout=self.timeout_seconds)
        except asyncio.TimeoutError:
            raise UpstreamError(f"Generation timed out after {self.timeout_seconds}s")

    async def generate(self, request: GenerationRequest, user_settings: Optional[GenerationSettings]) -> GenerationResult:
        user_settings = self._check_preconditions(request, user_settings)

        model_name = user_settings.model_name or self.default_model
        prompt = build_prompt(request, self.system_prompt, user_settings.custom_prompt)

        logger.info(
            "Generating journal entry repo={} type={} model={} commits={}",
            request.repository_name, request.command_type, model_name, len(request.commits),
        )

        try:
            llm = self.llm_factory(user_settings.api_key, model_name)
            text = await self._call_model(llm, prompt)
        except Exception as e:
            err = classify_failure(e)
            logger.error("Gemini generation error kind={}: {!r}", err.kind.value, e)
            if err is e:
                raise
            raise err from e

        if not text.strip():
            raise UpstreamError("Gemini returned an empty response")

        sections = extract_sections(text)
        return GenerationResult(
            summary=sections.summary,
            technical_details=sections.technical_details,
            full_response_text=text,
            model_used=model_name,
        )
