from typing import Optional

from fastapi import Header

from app.core.errors import AuthError
from app.db.user_settings import MongoUserSettingsStore
from app.services.auth.supabase_auth import AuthUser, SupabaseAuthClient
from app.services.journal.generator import JournalGenerator

def _bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()

async def get_current_user(authorization: Optional[str] = Header(default=None)) -> AuthUser:
    token = _bearer_token(authorization)
    if not token:
        raise AuthError()
    user = await SupabaseAuthClient().get_user(token)
    if not user:
        raise AuthError()
    return user

def get_settings_store() -> MongoUserSettingsStore:
    return MongoUserSettingsStore()

def get_journal_generator() -> JournalGenerator:
    return JournalGenerator()
