import asyncio
from types import SimpleNamespace

import pytest
from google.genai.errors import ClientError

from app.services.journal.retry import is_rate_limit
from app.services.llm.gemini_chat import GeminiChatLLM


def make_stub_llm(outcome, model="gemini-pro"):
    """GeminiChatLLM whose client.aio.models.generate_content replays `outcome`."""
    calls = []

    async def generate_content(**kwargs):
        calls.append(kwargs)
        if isinstance(outcome, BaseException):
            raise outcome
        return SimpleNamespace(text=outcome)

    llm = GeminiChatLLM.__new__(GeminiChatLLM)
    llm.model = model
    llm.client = SimpleNamespace(aio=SimpleNamespace(models=SimpleNamespace(generate_content=generate_content)))
    return llm, calls


def test_passes_model_and_prompt_and_returns_raw_text():
    llm, calls = make_stub_llm("  ## Summary\nDone.\n")
    assert asyncio.run(llm.generate("the prompt")) == "  ## Summary\nDone.\n"
    assert calls == [{"model": "gemini-pro", "contents": "the prompt"}]


def test_missing_text_becomes_empty_string():
    llm, _ = make_stub_llm(None)
    assert asyncio.run(llm.generate("p")) == ""


def test_rate_limit_error_propagates_unchanged():
    err = ClientError(429, {"error": {"code": 429, "message": "Resource exhausted", "status": "RESOURCE_EXHAUSTED"}})
    llm, _ = make_stub_llm(err)
    with pytest.raises(ClientError) as exc_info:
        asyncio.run(llm.generate("p"))
    assert exc_info.value is err
    assert is_rate_limit(exc_info.value)
