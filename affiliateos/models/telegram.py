"""
Subset of the Telegram Bot API update schema consumed by the webhook.

Only the fields the chat workflow reads are declared; everything else in
an update is ignored.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TelegramChat(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int = Field(..., description="Chat identifier")
    type: Optional[str] = Field(None, description="private, group, supergroup or channel")


class TelegramUser(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    is_bot: bool = False
    first_name: Optional[str] = None
    username: Optional[str] = None


class TelegramMessage(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    message_id: int = Field(..., description="Message identifier within the chat")
    chat: TelegramChat
    from_user: Optional[TelegramUser] = Field(None, alias="from")
    date: Optional[int] = None
    text: Optional[str] = None


class TelegramUpdate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    update_id: int
    message: Optional[TelegramMessage] = None


class WebhookAck(BaseModel):
    ok: bool = True
    skipped: bool = Field(False, description="True when the update carried no text message")
    sent: Optional[bool] = Field(None, description="Whether the reply reached the chat")
