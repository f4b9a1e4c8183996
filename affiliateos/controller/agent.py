"""
Agent controller/router for FastAPI endpoints.

Exposes the AffiliateOS agent for direct generation and its chat memory
for inspection and cleanup.
"""

import time
from typing import Annotated, Any

import structlog
from fastapi import APIRouter, Path, Query, status
from fastapi.responses import JSONResponse, Response

from affiliateos.dependencies import AgentDep, MemoryDep, SettingsDep
from affiliateos.models.agent import ChatHistory, GenerateRequest, GenerateResponse, ThreadList
from affiliateos.models.errors import GenerateError

logger = structlog.get_logger(__name__)

router = APIRouter(
    prefix="/api/agents/affiliateOSAgent",
    tags=["Agents"],
    responses={
        422: {"description": "Request body or query failed validation"},
        500: {"description": "Internal Server Error"},
    },
)

# Keys in `options` that override the top level generate arguments.
OPTION_OVERRIDES = {
    "resourceId": "resource_id",
    "threadId": "thread_id",
    "maxSteps": "max_steps",
}


def resolve_generate_options(payload: GenerateRequest, default_resource_id: str, default_max_steps: int) -> dict[str, Any]:
    """Apply defaults, then let `options` override them."""
    resolved: dict[str, Any] = {
        "resource_id": payload.resource_id or default_resource_id,
        "thread_id": payload.thread_id or f"telegram/default-{int(time.time() * 1000)}",
        "max_steps": payload.max_steps or default_max_steps,
    }
    for key, name in OPTION_OVERRIDES.items():
        if key in payload.options:
            resolved[name] = payload.options[key]
    return resolved


@router.post(
    "/generate",
    response_model=GenerateResponse,
    responses={500: {"model": GenerateError, "description": "Generation failed"}},
    summary="Generate an agent reply",
)
async def generate(payload: GenerateRequest, agent: AgentDep, settings: SettingsDep):
    """
    Run the agent over `messages` and return its reply.

    **Defaults:**
    - **resourceId**: "bot"
    - **threadId**: `telegram/default-<epoch ms>`
    - **maxSteps**: 5

    Keys in **options** override the values above. Any failure during
    generation is reported as `500 {"error": "Failed to generate response"}`.
    """
    logger.info(
        "Generate request received",
        messages_count=len(payload.messages),
        has_resource_id=payload.resource_id is not None,
        has_thread_id=payload.thread_id is not None,
    )
    try:
        options = resolve_generate_options(payload, settings.AGENT.DEFAULT_RESOURCE_ID, settings.AGENT.MAX_STEPS)
        result = await agent.generate(payload.messages, **options)
    except Exception as e:
        logger.error("Generate failed", error=str(e), error_type=type(e).__name__, exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=GenerateError(error="Failed to generate response").model_dump(),
        )

    logger.info("Generate response completed", text_length=len(result.text), steps=result.steps)
    return GenerateResponse(text=result.text)


@router.get("/history", response_model=ChatHistory, summary="Get thread history")
async def get_history(
    memory: MemoryDep,
    thread_id: Annotated[str, Query(alias="threadId", min_length=1, description="Conversation thread")],
    limit: Annotated[int | None, Query(ge=1, le=200, description="Most recent messages to return")] = None,
):
    messages = await memory.get_history(thread_id, limit)
    return ChatHistory(
        thread_id=thread_id,
        items=[
            ChatHistory.ChatHistoryItem(role=msg.role, message=msg.content, timestamp=msg.timestamp)
            for msg in messages
        ],
    )


@router.delete("/history", status_code=status.HTTP_204_NO_CONTENT, summary="Clear thread history")
async def clear_history(
    memory: MemoryDep,
    thread_id: Annotated[str, Query(alias="threadId", min_length=1, description="Conversation thread")],
):
    await memory.clear(thread_id)
    logger.info("Thread history cleared", thread_id=thread_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/resources/{resource_id}/threads", response_model=ThreadList, summary="List resource threads")
async def list_threads(
    memory: MemoryDep,
    resource_id: Annotated[str, Path(description="Owner of the memory threads")],
):
    threads = await memory.get_resource_threads(resource_id)
    return ThreadList(resource_id=resource_id, threads=threads)
