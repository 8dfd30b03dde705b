# backend/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import Optional, List
import json


def _split_list(raw: Optional[str]) -> List[str]:
    # accepts either a JSON list or a comma-separated string
    s = (raw or "").strip()
    if not s:
        return []
    if s.startswith("["):
        try:
            arr = json.loads(s)
            if isinstance(arr, list):
                return [str(x).strip() for x in arr if str(x).strip()]
        except ValueError:
            pass
        s = s.strip("[]")
    return [x.strip() for x in s.split(",") if x.strip()]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # ignore unknown keys instead of crashing
    )

    # ---- Auth / JWT (tokens are minted by the identity provider with this shared secret)
    secret_key: str = Field("dev-secret-change-me", alias="JWT_SECRET")
    jwt_algorithm: str = Field("HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(15, alias="ACCESS_TOKEN_EXPIRE_MINUTES")

    # ---- DB (accept either)
    database_url: Optional[str] = Field(default=None, alias="DATABASE_URL")
    db_url_compat: Optional[str] = Field(default=None, alias="DB_URL")

    # ---- CORS raw (we'll parse)
    cors_origins_raw: str = Field(
        "http://localhost:3000,http://127.0.0.1:3000",
        alias="CORS_ORIGINS",
    )

    # ---- Interviews
    # empty means any status string is accepted
    status_allowlist_raw: str = Field("", alias="INTERVIEW_STATUS_ALLOWLIST")

    log_level: str = Field("INFO", alias="LOG_LEVEL")

    # ---- Helpers / parsed properties
    @property
    def cors_origins(self) -> List[str]:
        return _split_list(self.cors_origins_raw) or [
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ]

    @property
    def interview_status_allowlist(self) -> List[str]:
        return _split_list(self.status_allowlist_raw)

    @property
    def DATABASE_URL(self) -> str:
        return self.database_url or self.db_url_compat or "sqlite:///./interviews.sqlite"

    @property
    def SECRET_KEY(self) -> str:
        return self.secret_key

    @property
    def JWT_ALGORITHM(self) -> str:
        return self.jwt_algorithm

    @property
    def ACCESS_TOKEN_EXPIRE_MINUTES(self) -> int:
        return int(self.access_token_expire_minutes)


settings = Settings()
