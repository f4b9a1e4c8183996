from typing import Optional

from pydantic import BaseModel, Field


class SentryConfig(BaseModel):
    DSN: Optional[str] = Field(
        default=None,
        description="Sentry DSN; error reporting is disabled when empty",
    )
    TRACES_SAMPLE_RATE: float = Field(
        default=1.0,
        description="Fraction of transactions captured for tracing",
    )
    SEND_DEFAULT_PII: bool = Field(
        default=False,
        description="Attach request headers and IP addresses to events",
    )
