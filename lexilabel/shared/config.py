# lexilabel\shared\config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from enum import Enum

class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"

class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic. Every field can be set from
    the environment with the LEXILABEL_ prefix (e.g. LEXILABEL_LABELS_DIR).
    """

    # --- Application Meta ---
    APP_NAME: str = "lexilabel"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"
    # Log every label served from a fallback language (en_US text for a de request)
    LOG_FALLBACK_STRINGS: bool = False

    # --- Label Sources ---
    # Root of the JSON label tree: {LABELS_DIR}/{set_id}/{locale}.json
    LABELS_DIR: str = "labels"
    LABEL_SET_NAME: str = "base"
    DEFAULT_LOCALE: str = "en_US"

    # --- Rendering ---
    # Prefix of the text returned instead of a missing label in lenient mode
    MISSING_LABEL_PREFIX: str = "__MISSING LABEL__ "
    FAIL_ON_DANGLING_ALIAS: bool = False
    # Raise on a label template that does not compile instead of dropping the label
    FAIL_ON_INVALID_TEMPLATE: bool = False

    model_config = SettingsConfigDict(env_prefix="LEXILABEL_", env_file=".env", extra="ignore")

settings = Settings()
