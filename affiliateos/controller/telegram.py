"""
Telegram webhook controller.

Receives Bot API updates and runs the chat workflow for each text message.
"""

import secrets
from typing import Annotated, Optional

import structlog
from fastapi import APIRouter, Header

from affiliateos.dependencies import SettingsDep, TelegramClientDep, WorkflowDep
from affiliateos.exceptions.telegram import WebhookUnauthorizedException
from affiliateos.models.telegram import TelegramUpdate, WebhookAck
from affiliateos.models.workflow import ChatWorkflowInput

logger = structlog.get_logger(__name__)

router = APIRouter(
    prefix="/webhooks",
    tags=["Telegram"],
    responses={
        403: {"description": "Secret token mismatch"},
        500: {"description": "Internal Server Error"},
    },
)


@router.post("/telegram", response_model=WebhookAck, response_model_exclude_none=True)
async def telegram_webhook(
    update: TelegramUpdate,
    settings: SettingsDep,
    telegram: TelegramClientDep,
    workflow: WorkflowDep,
    secret_token: Annotated[Optional[str], Header(alias="X-Telegram-Bot-Api-Secret-Token")] = None,
):
    expected = settings.TELEGRAM.WEBHOOK_SECRET
    if expected and not secrets.compare_digest(secret_token or "", expected):
        raise WebhookUnauthorizedException()

    message = update.message
    if message is None or not message.text:
        logger.debug("Skipping update without text", update_id=update.update_id)
        return WebhookAck(skipped=True)

    chat_id = message.chat.id
    logger.info("Telegram message received", update_id=update.update_id, chat_id=chat_id)

    try:
        await telegram.send_chat_action(chat_id, "typing")
    except Exception as e:
        logger.error("Error setting typing action", chat_id=chat_id, error=str(e))

    result = await workflow.run(
        ChatWorkflowInput(
            message=message.text,
            thread_id=f"telegram/{chat_id}",
            chat_id=str(chat_id),
            message_id=str(message.message_id),
        )
    )
    return WebhookAck(sent=result.sent)
