import os
from enum import Enum

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic.
    """

    # --- Application Meta ---
    APP_NAME: str = "nlg-realiser"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False

    # --- Logging & Observability ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"
    OTEL_SERVICE_NAME: str = "nlg-realiser"

    # --- Realisation ---
    DEFAULT_LANGUAGE: str = "en"
    SENTENCE_TERMINATOR: str = "."
    QUESTION_TERMINATOR: str = "?"

    # --- Lexicon ---
    # Relative paths are resolved against the project root.
    LEXICON_DIR: str = os.path.join("data", "lexicon")
    # When True, a malformed lexicon shard aborts the load instead of
    # being skipped with a warning.
    LEXICON_STRICT_SCHEMA: bool = False

    @property
    def PROJECT_ROOT(self) -> str:
        """Repository root (the parent of the package directory)."""
        return os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

    @property
    def LEXICON_PATH(self) -> str:
        """Absolute path of the directory holding the per-language lexicon folders."""
        if os.path.isabs(self.LEXICON_DIR):
            return self.LEXICON_DIR
        return os.path.join(self.PROJECT_ROOT, self.LEXICON_DIR)

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
