from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ChatWorkflowInput(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str = Field(..., description="User message from Telegram")
    thread_id: str = Field(..., description="Thread ID for conversation continuity")
    chat_id: str = Field(..., description="Telegram chat ID")
    message_id: Optional[str] = Field(None, description="Original message ID for replies")


class UseAgentOutput(BaseModel):
    response: str = Field(..., description="Agent response text")


class WorkflowResult(BaseModel):
    sent: bool = Field(..., description="Whether the reply was delivered")
