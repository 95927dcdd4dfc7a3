from fastapi import APIRouter
from loguru import logger
from app.db.mongo import get_db

async def mongo_ok() -> bool:
    try:
        db = get_db()
        await db.command("ping")
        return True
    except Exception as e:
        logger.warning("mongo ping failed: {!r}", e)
        return False

router = APIRouter(tags=["health"])

@router.get("/health")
async def health():
    return {
        "status": "ok",
        "mongo": await mongo_ok(),
    }

@router.get("/health/db")
async def health_db():
    db = get_db()
    await db.command("ping")
    return {"status": "ok", "db": "mongo"}
