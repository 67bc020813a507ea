import logging
import secrets

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

_INSECURE_DEFAULT_KEY = "change-me-in-production"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="FLASHQ_", extra="ignore")

    log_level: str = "INFO"
    log_json: bool = False

    flash_session_key: str = "flash"
    flash_unsafe: bool = False  # True: always re-attach the queue, replacing any existing one
    flash_log_level: str = ""  # empty: follow log_level

    secret_key: str = _INSECURE_DEFAULT_KEY

    def get_secret_key(self) -> str:
        if self.secret_key == _INSECURE_DEFAULT_KEY:
            logger.warning(
                "FLASHQ_SECRET_KEY is not set, using a random key. "
                "Sessions will not survive restarts. "
                "Set FLASHQ_SECRET_KEY in your environment or .env file."
            )
            self.secret_key = secrets.token_urlsafe(32)
        return self.secret_key


settings = Settings()
