"""
Server configuration settings.

Host/port for uvicorn, CORS, and the slow request threshold used by the
logging middleware.
"""

from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class ServerConfig(BaseSettings):
    HOST: str = Field(
        default="0.0.0.0",
        description="Server host address",
    )
    PORT: int = Field(
        default=5000,
        description="Server port",
    )
    WORKERS: int = Field(
        default=1,
        description="Number of worker processes",
    )
    RELOAD: bool = Field(
        default=False,
        description="Enable auto-reload on code changes",
    )
    CORS_ENABLED: bool = Field(
        default=True,
        description="Enable CORS middleware",
    )
    CORS_ORIGINS: Annotated[list[str], NoDecode] = Field(
        default=["*"],
        description="Allowed CORS origins",
    )
    CORS_ALLOW_METHODS: Annotated[list[str], NoDecode] = Field(
        default=["GET", "POST", "DELETE"],
        description="Allowed HTTP methods for CORS",
    )
    SLOW_REQUEST_THRESHOLD_MS: float = Field(
        default=5000.0,
        description="Requests slower than this are logged as warnings",
    )

    model_config = SettingsConfigDict(case_sensitive=False, extra="forbid")

    @field_validator("PORT")
    @classmethod
    def validate_port(cls, v: int) -> int:
        """Validate port number is in valid range."""
        if not 1 <= v <= 65535:
            raise ValueError("Port must be between 1 and 65535")
        return v

    @field_validator("WORKERS")
    @classmethod
    def validate_workers(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Workers must be at least 1")
        return v

    @field_validator("CORS_ORIGINS", "CORS_ALLOW_METHODS", mode="before")
    @classmethod
    def parse_comma_separated(cls, v):
        """Accept either a list or a comma separated string."""
        if isinstance(v, str):
            return [item.strip() for item in v.split(",")]
        return v
