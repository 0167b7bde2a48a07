"""Application settings loaded from environment variables."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

DEFAULT_PORT = 6969

LogLevel = Literal["critical", "error", "warning", "info", "debug", "trace"]


class Settings(BaseSettings):
    # Listener
    host: str = "0.0.0.0"
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)

    # Logging (shared by the app logger and uvicorn)
    log_level: LogLevel = "info"
    service_name: str = "demo-app"

    # Root page link
    repo_url: str = "https://github.com/KashifWajid/docker-k8s-helm-local-demo"
    link_text: str = "App 1 : docker-k8s-helm-local-demo"

    @field_validator("log_level", mode="before")
    @classmethod
    def _lowercase_log_level(cls, value):
        return value.lower() if isinstance(value, str) else value

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
