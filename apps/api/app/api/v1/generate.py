from fastapi import APIRouter, Depends

from app.api.deps import get_current_user, get_journal_generator, get_settings_store
from app.db.user_settings import MongoUserSettingsStore
from app.schemas.generate import ErrorResponse, GenerateRequest, GenerateResponse
from app.services.auth.supabase_auth import AuthUser
from app.services.journal.generator import JournalGenerator

router = APIRouter(tags=["generate"])

@router.post(
    "/gemini/generate",
    response_model=GenerateResponse,
    responses={code: {"model": ErrorResponse} for code in (400, 401, 429, 500)},
)
async def generate_entry(
    payload: GenerateRequest,
    user: AuthUser = Depends(get_current_user),
    store: MongoUserSettingsStore = Depends(get_settings_store),
    generator: JournalGenerator = Depends(get_journal_generator),
):
    # fetched per request, never cached
    user_settings = await store.get(user.id)
    result = await generator.generate(payload.to_domain(), user_settings)
    return GenerateResponse.from_result(result)
