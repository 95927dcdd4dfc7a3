from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Optional

from loguru import logger

Sleep = Callable[[float], Awaitable[None]]


class RetriesExhaustedError(Exception):
    pass


def error_status(exc: BaseException) -> Optional[int]:
    # google-genai APIError carries `code`; httpx-style errors carry `status_code`
    for attr in ("code", "status_code"):
        value = getattr(exc, attr, None)
        if isinstance(value, int):
            return value
    return None


def is_rate_limit(exc: BaseException) -> bool:
    message = str(exc)
    return error_status(exc) == 429 or "429" in message or "rate limit" in message


async def generate_with_retry(
    call: Callable[[], Awaitable[str]],
    max_attempts: int = 3,
    base_delay_ms: int = 1000,
    sleep: Sleep = asyncio.sleep,
) -> str:
    """
    Run `call` up to `max_attempts` times. Only rate-limit failures are
    retried, after waiting 2^attempt * base_delay_ms. Any other failure, or
    the last attempt's failure, propagates unchanged.
    """
    for attempt in range(max_attempts):
        try:
            return await call()
        except Exception as e:
            if is_rate_limit(e) and attempt < max_attempts - 1:
                wait_ms = (2 ** attempt) * base_delay_ms
                logger.warning(
                    "Rate limited (attempt {}/{}). Retrying in {}ms...",
                    attempt + 1, max_attempts, wait_ms,
                )
                await sleep(wait_ms / 1000)
                continue
            raise

    raise RetriesExhaustedError("Max retries exceeded")
