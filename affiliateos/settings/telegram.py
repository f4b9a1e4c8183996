"""
Telegram bot configuration settings.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field


class TelegramConfig(BaseModel):
    BOT_TOKEN: str = Field(
        default="",
        description="Bot token issued by BotFather",
    )
    API_BASE_URL: str = Field(
        default="https://api.telegram.org",
        description="Base URL of the Telegram Bot API",
    )
    TIMEOUT_SECONDS: float = Field(
        default=30.0,
        description="Timeout for outbound Bot API calls",
    )
    PARSE_MODE: Literal["Markdown", "MarkdownV2", "HTML"] = Field(
        default="Markdown",
        description="Parse mode used when sending replies",
    )
    WEBHOOK_SECRET: Optional[str] = Field(
        default=None,
        description="Expected X-Telegram-Bot-Api-Secret-Token header value; unchecked when empty",
    )
