from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AgentMessage(BaseModel):
    role: Literal["user", "assistant", "system"] = Field(..., description="Author of the turn")
    content: str = Field(..., description="Text of the turn")


class GenerateRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    messages: list[AgentMessage] = Field(default_factory=list, description="Ordered conversation turns")
    resource_id: Optional[str] = Field(None, description="Owner of the memory thread")
    thread_id: Optional[str] = Field(None, description="Conversation thread identifier")
    max_steps: Optional[int] = Field(None, ge=1, description="Upper bound on model calls, tool rounds included")
    options: dict[str, Any] = Field(
        default_factory=dict,
        description="Overrides for resourceId, threadId and maxSteps",
    )


class GenerateResponse(BaseModel):
    text: str = Field(..., description="The agent's reply")


class ChatHistory(BaseModel):
    class ChatHistoryItem(BaseModel):
        role: str = Field(..., description="Role of the message sender (user/assistant)")
        message: str = Field(..., description="The content of the message")
        timestamp: float = Field(..., description="Unix time the message was stored")

    thread_id: str = Field(..., description="Conversation thread identifier")
    items: list[ChatHistoryItem] = Field(..., description="List of chat history items")


class ThreadList(BaseModel):
    resource_id: str = Field(..., description="Owner of the listed threads")
    threads: list[str] = Field(..., description="Thread identifiers for the resource")
