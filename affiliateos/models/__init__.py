"""
Models module for Pydantic data models.

This module contains all Pydantic models used for request/response validation,
data serialization, and type safety throughout the application.
"""

from affiliateos.models.agent import (
    AgentMessage,
    ChatHistory,
    GenerateRequest,
    GenerateResponse,
    ThreadList,
)
from affiliateos.models.base import ListResponseModel, ResponseModel
from affiliateos.models.errors import GenerateError, HTTPDetail, HTTPException
from affiliateos.models.telegram import TelegramMessage, TelegramUpdate, WebhookAck
from affiliateos.models.workflow import ChatWorkflowInput, UseAgentOutput, WorkflowResult

__all__ = [
    # Base
    "ListResponseModel",
    "ResponseModel",
    # Errors
    "GenerateError",
    "HTTPDetail",
    "HTTPException",
    # Agent
    "AgentMessage",
    "ChatHistory",
    "GenerateRequest",
    "GenerateResponse",
    "ThreadList",
    # Telegram
    "TelegramMessage",
    "TelegramUpdate",
    "WebhookAck",
    # Workflow
    "ChatWorkflowInput",
    "UseAgentOutput",
    "WorkflowResult",
]
