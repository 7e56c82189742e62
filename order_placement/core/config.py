from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="OPS_", extra="ignore")

    app_name: str = "Order Placement System"
    service_name: str = "order-placement-system"
    app_version: str = "v1.0.5"
    env: str = "dev"
    api_host: str = "0.0.0.0"
    api_port: int = 8080
    shutdown_timeout_seconds: int = 5

    log_level: str = "INFO"

    cors_allowed_origins: list[str] = Field(default_factory=lambda: ["*"])

    repair_table_path: Path | None = Field(
        default=None,
        description="JSON file replacing the built-in model repair table",
    )
    extra_film_types: list[str] = Field(
        default_factory=list,
        description="Film type ids accepted without the FG prefix rule",
    )

    def model_post_init(self, __context) -> None:
        if self.env.lower() == "dev":
            return
        if "*" in self.cors_allowed_origins:
            raise ValueError(
                "wildcard CORS origin is not allowed outside dev mode; set env var: OPS_CORS_ALLOWED_ORIGINS"
            )

    @property
    def cors_allows_all(self) -> bool:
        return "*" in self.cors_allowed_origins


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
