import asyncio
import random
from datetime import datetime, timezone

import pytest
from langchain_core.messages import AIMessage

from affiliateos.agent.memory import ChatMemory, InMemoryBackend
from affiliateos.agent.tools import ALL_TOOLS, ToolContext, ToolExecutor
from affiliateos.settings.agent import AgentConfig

FIXED_NOW = datetime(2025, 11, 15, 12, 0, 0, tzinfo=timezone.utc)
FIXED_EPOCH_MS = int(FIXED_NOW.timestamp() * 1000)


class StubChatModel:
    """
    Stands in for ChatOpenAI: records bound tools and every prompt, and
    replies with scripted AIMessages. The last reply repeats once the
    script runs out.
    """

    def __init__(self, responses: list[AIMessage], delay: float = 0.0):
        self.responses = list(responses)
        self.delay = delay
        self.bound_tools: list[dict] = []
        self.prompts: list[list] = []

    def bind_tools(self, tools):
        self.bound_tools = list(tools)
        return self

    async def ainvoke(self, messages):
        if self.delay:
            await asyncio.sleep(self.delay)
        self.prompts.append(list(messages))
        if len(self.responses) > 1:
            return self.responses.pop(0)
        return self.responses[0]


def tool_call(name: str, args: dict, call_id: str = "call_1") -> AIMessage:
    return AIMessage(content="", tool_calls=[{"name": name, "args": args, "id": call_id}])


@pytest.fixture
def tool_context() -> ToolContext:
    return ToolContext(now=lambda: FIXED_NOW, rng=random.Random(42))


@pytest.fixture
def executor(tool_context) -> ToolExecutor:
    return ToolExecutor(ALL_TOOLS, context=tool_context)


@pytest.fixture
def memory() -> ChatMemory:
    return ChatMemory(InMemoryBackend(), last_messages=15)


@pytest.fixture
def agent_config() -> AgentConfig:
    return AgentConfig(MODEL="test-model", TIMEOUT_SECONDS=5.0)
