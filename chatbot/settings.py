# chatbot/settings.py
import os
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # core
    APP_NAME: str = Field(default="Chatbot Gateway")
    ENV: str = Field(default=os.getenv("APP_ENV", "dev"))
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=3001)
    LOG_LEVEL: str = Field(default="INFO")
    CORS_ORIGINS: List[str] = Field(default_factory=lambda: ["*"])

    # providers (model/base url fall back to gateway/config.yaml)
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_MODEL: Optional[str] = None
    OPENAI_BASE_URL: Optional[str] = None
    GEMINI_API_KEY: Optional[str] = None
    GEMINI_MODEL: Optional[str] = None
    GEMINI_BASE_URL: Optional[str] = None
    HTTP_TIMEOUT: float = Field(default=60.0)

    # request bodies above this size are rejected with 413
    MAX_BODY_BYTES: int = Field(default=1024 * 1024)

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @property
    def app_name(self) -> str:
        return self.APP_NAME

    def has_key(self, provider: str) -> bool:
        """Presence check only; never exposes the credential."""
        return bool(getattr(self, f"{provider.upper()}_API_KEY", None))


settings = Settings()
