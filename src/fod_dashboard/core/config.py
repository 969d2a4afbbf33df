from __future__ import annotations

from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # DB
    database_url: str = Field(
        default="sqlite+pysqlite:///./fod_dashboard.db",
        validation_alias="DATABASE_URL",
    )
    db_echo: bool = False

    # site-settings bridge
    bridge_secret: str | None = Field(default=None, repr=False)
    bridge_previous_secrets: Annotated[list[str], NoDecode] = Field(
        default_factory=list, repr=False
    )
    bridge_base_url: str = "https://frontofficedynastysports.com/wp-json"

    # dashboard views
    api_base_url: str = "http://localhost:8080"
    http_timeout_s: float = 30.0
    http_connect_timeout_s: float = 10.0

    cors_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"]
    )
    log_level: str = "INFO"

    @field_validator("bridge_previous_secrets", "cors_origins", mode="before")
    @classmethod
    def _split_comma_list(cls, value: Any) -> Any:
        # env values arrive as "a,b"; blanks are dropped
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value

    # -----------------------------
    # Required-key helpers
    # -----------------------------

    def require_bridge_secret(self) -> str:
        if not self.bridge_secret:
            raise RuntimeError("BRIDGE_SECRET is not set. Set it in the environment or .env file.")
        return self.bridge_secret


settings = Settings()
