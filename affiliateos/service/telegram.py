"""
Telegram Bot API client.

Thin async wrapper over the Bot API HTTP methods the chat workflow needs.
Callers decide what a failed call means; this client only performs the
request and returns the raw response.
"""

from typing import Any, Optional

import httpx
import structlog

from affiliateos.settings.telegram import TelegramConfig

logger = structlog.get_logger(__name__)


class TelegramClient:
    def __init__(
        self,
        bot_token: str,
        api_base_url: str = "https://api.telegram.org",
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.bot_token = bot_token
        self.api_base_url = api_base_url.rstrip("/")
        self.client = client or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_config(cls, config: TelegramConfig) -> "TelegramClient":
        if not config.BOT_TOKEN:
            logger.warning("Telegram bot token is not configured; replies will fail")
        return cls(
            bot_token=config.BOT_TOKEN,
            api_base_url=config.API_BASE_URL,
            timeout=config.TIMEOUT_SECONDS,
        )

    def method_url(self, method: str) -> str:
        return f"{self.api_base_url}/bot{self.bot_token}/{method}"

    async def call(self, method: str, payload: dict[str, Any]) -> httpx.Response:
        return await self.client.post(self.method_url(method), json=payload)

    async def send_message(
        self,
        chat_id: str | int,
        text: str,
        reply_to_message_id: Optional[int] = None,
        parse_mode: Optional[str] = "Markdown",
    ) -> httpx.Response:
        payload: dict[str, Any] = {"chat_id": chat_id, "text": text}
        if reply_to_message_id is not None:
            payload["reply_to_message_id"] = reply_to_message_id
        if parse_mode:
            payload["parse_mode"] = parse_mode
        return await self.call("sendMessage", payload)

    async def send_chat_action(self, chat_id: str | int, action: str = "typing") -> httpx.Response:
        return await self.call("sendChatAction", {"chat_id": chat_id, "action": action})

    async def close(self) -> None:
        """Close the HTTP client."""
        await self.client.aclose()
