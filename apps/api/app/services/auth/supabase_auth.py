from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional
import httpx
from loguru import logger

from app.core.config import settings


@dataclass
class AuthUser:
    id: str
    email: Optional[str] = None


class SupabaseAuthClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        anon_key: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base = (base_url or settings.SUPABASE_URL).rstrip("/")
        self.anon_key = anon_key or settings.SUPABASE_ANON_KEY
        self.transport = transport

    def _headers(self, access_token: str) -> Dict[str, str]:
        headers = {"Authorization": f"Bearer {access_token}"}
        if self.anon_key:
            headers["apikey"] = self.anon_key
        return headers

    async def get_user(self, access_token: str) -> Optional[AuthUser]:
        """Resolve an access token to its user, or None when it is not valid."""
        url = f"{self.base}/auth/v1/user"
        try:
            async with httpx.AsyncClient(timeout=settings.AUTH_TIMEOUT_SECONDS, transport=self.transport) as client:
                resp = await client.get(url, headers=self._headers(access_token))
        except httpx.HTTPError as e:
            logger.error("Auth provider unreachable: {!r}", e)
            return None

        if resp.status_code in (401, 403):
            return None

        if resp.status_code >= 400:
            logger.error("Auth provider error status={} body={}", resp.status_code, resp.text[:200])
            return None

        try:
            data = resp.json()
        except ValueError:
            logger.error("Auth provider returned a non-JSON body: {}", resp.text[:200])
            return None
        if not isinstance(data, dict):
            logger.error("Auth provider returned an unexpected payload type={}", type(data).__name__)
            return None

        user_id = data.get("id")
        if not user_id:
            return None
        return AuthUser(id=str(user_id), email=data.get("email"))
