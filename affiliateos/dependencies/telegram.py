from typing import Annotated

from fastapi import Depends, Request

from affiliateos.service.telegram import TelegramClient
from affiliateos.service.workflow import ChatWorkflow


async def get_telegram_client(request: Request) -> TelegramClient:
    return request.app.state.telegram


async def get_workflow(request: Request) -> ChatWorkflow:
    return request.app.state.workflow


TelegramClientDep = Annotated[TelegramClient, Depends(get_telegram_client)]
WorkflowDep = Annotated[ChatWorkflow, Depends(get_workflow)]
