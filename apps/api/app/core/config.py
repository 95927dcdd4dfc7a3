from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "devjournal-api"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    MONGODB_URI: str = "mongodb://localhost:27017"
    MONGODB_DB: str = "devjournal"
    MONGODB_TIMEOUT_MS: int = 2000

    # hosted auth (Supabase-compatible /auth/v1/user)
    SUPABASE_URL: str = "http://127.0.0.1:54321"
    SUPABASE_ANON_KEY: str | None = None
    AUTH_TIMEOUT_SECONDS: float = 10.0

    GEMINI_DEFAULT_MODEL: str = "gemini-2.0-flash-exp"
    GENERATION_MAX_ATTEMPTS: int = 3
    GENERATION_BACKOFF_BASE_MS: int = 1000
    GENERATION_TIMEOUT_SECONDS: float | None = None  # unset = no overall deadline

settings = Settings()
