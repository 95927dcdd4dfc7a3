from typing import Optional

from loguru import logger
from pymongo.errors import PyMongoError

from app.db.mongo import get_db
from app.services.journal.types import GenerationSettings

USER_SETTINGS = "user_settings"

class MongoUserSettingsStore:
    """Read-only view of the per-user generation settings."""

    def __init__(self, db=None):
        self.db = db

    async def get(self, user_id: str) -> Optional[GenerationSettings]:
        try:
            db = self.db if self.db is not None else get_db()
            doc = await db[USER_SETTINGS].find_one(
                {"user_id": user_id},
                projection={"gemini_api_key": 1, "gemini_model_preference": 1, "custom_system_prompt": 1, "_id": 0},
            )
        except PyMongoError as e:
            # treated like a missing record -> "API key not configured"
            logger.error("user_settings lookup failed for user={}: {!r}", user_id, e)
            return None

        if not doc:
            return None

        return GenerationSettings(
            api_key=doc.get("gemini_api_key"),
            model_name=doc.get("gemini_model_preference"),
            custom_prompt=doc.get("custom_system_prompt"),
        )
