"""
AffiliateOS Agent.

Coordinates:
1. Loading recent thread history from chat memory
2. Calling the chat model with the affiliate tools bound
3. Running requested tools and feeding results back, up to `max_steps` model calls
4. Persisting the new turns
"""

import asyncio
import json
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional, Union

import structlog
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage, ToolMessage
from langchain_openai import ChatOpenAI

from affiliateos.agent.memory import ChatMemory
from affiliateos.agent.prompts import SYSTEM_PROMPT
from affiliateos.agent.tools import ALL_TOOLS, ToolExecutor
from affiliateos.exceptions.agent import AgentGenerationException, AgentTimeoutException
from affiliateos.exceptions.app import AppException
from affiliateos.models.agent import AgentMessage
from affiliateos.settings.agent import AgentConfig

logger = structlog.get_logger(__name__)

InputMessage = Union[AgentMessage, Mapping[str, Any]]


@dataclass
class AgentResult:
    """Response from the agent."""
    text: str
    tools_used: list[str] = field(default_factory=list)
    steps: int = 0


def build_chat_model(config: AgentConfig) -> ChatOpenAI:
    return ChatOpenAI(
        model=config.MODEL,
        base_url=config.BASE_URL,
        api_key=config.OPENAI_API_KEY,
        temperature=config.TEMPERATURE,
        max_tokens=config.MAX_TOKENS,
    )


def message_text(message: BaseMessage) -> str:
    """Flatten string or content-block message content into plain text."""
    content = message.content
    if isinstance(content, str):
        return content
    parts = []
    for block in content:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)


class AffiliateAgent:
    """
    Conversational agent for affiliate marketing creators.

    The chat model and tool executor are injectable; by default the model is
    an OpenAI-compatible endpoint and the executor runs ALL_TOOLS in-process.
    """

    def __init__(
        self,
        config: AgentConfig,
        memory: ChatMemory,
        executor: Optional[ToolExecutor] = None,
        llm: Optional[BaseChatModel] = None,
    ):
        self.config = config
        self.memory = memory
        self.executor = executor or ToolExecutor(ALL_TOOLS)
        self.llm = llm or build_chat_model(config)
        self.llm_with_tools = self.llm.bind_tools(
            [tool.to_openai_tool() for tool in self.executor.list_tools()]
        )

    async def generate(
        self,
        messages: Iterable[InputMessage],
        resource_id: Optional[str] = None,
        thread_id: Optional[str] = None,
        max_steps: Optional[int] = None,
    ) -> AgentResult:
        """
        Produce a reply to `messages` in the context of `thread_id`.

        Args:
            messages: Ordered {role, content} turns to answer
            resource_id: Owner of the memory thread (defaults to the configured resource)
            thread_id: Memory thread; history is neither loaded nor saved when empty
            max_steps: Upper bound on model calls, tool rounds included

        Raises:
            AgentTimeoutException: If the generation exceeds AGENT.TIMEOUT_SECONDS
            AgentGenerationException: If the model endpoint fails
        """
        resource_id = resource_id or self.config.DEFAULT_RESOURCE_ID
        max_steps = max_steps or self.config.MAX_STEPS
        turns = [self._coerce(message) for message in messages]

        try:
            return await asyncio.wait_for(
                self._generate(turns, resource_id, thread_id, max_steps),
                timeout=self.config.TIMEOUT_SECONDS,
            )
        except asyncio.TimeoutError as e:
            logger.error("Agent generation timed out", thread_id=thread_id, timeout=self.config.TIMEOUT_SECONDS)
            raise AgentTimeoutException(self.config.TIMEOUT_SECONDS, thread_id=thread_id) from e

    async def _generate(
        self,
        turns: list[AgentMessage],
        resource_id: str,
        thread_id: Optional[str],
        max_steps: int,
    ) -> AgentResult:
        history = await self.memory.get_history(thread_id) if thread_id else []
        prompt: list[BaseMessage] = [SystemMessage(content=SYSTEM_PROMPT)]
        prompt.extend(self.memory.format_for_langchain(history))
        prompt.extend(self._to_langchain(turns))

        logger.info(
            "Generating agent response",
            thread_id=thread_id,
            resource_id=resource_id,
            history=len(history),
            max_steps=max_steps,
        )

        tools_used: list[str] = []
        response = await self._invoke(prompt, thread_id)
        steps = 1
        while response.tool_calls and steps < max_steps:
            prompt.append(response)
            for tool_call in response.tool_calls:
                tools_used.append(tool_call["name"])
                result = await self._execute_tool(tool_call["name"], tool_call.get("args") or {})
                prompt.append(ToolMessage(content=json.dumps(result), tool_call_id=tool_call["id"]))
            response = await self._invoke(prompt, thread_id)
            steps += 1

        text = message_text(response)
        if response.tool_calls:
            logger.warning("Step budget exhausted with pending tool calls", thread_id=thread_id, steps=steps)

        if thread_id:
            for turn in turns:
                if turn.role in ("user", "assistant"):
                    await self.memory.save(thread_id, resource_id, turn.role, turn.content)
            await self.memory.save(
                thread_id,
                resource_id,
                "assistant",
                text,
                tool_calls=tools_used,
                metadata={"model_used": self.config.MODEL, "steps": steps},
            )

        logger.info("Agent response generated", thread_id=thread_id, steps=steps, tools_used=tools_used, length=len(text))
        return AgentResult(text=text, tools_used=tools_used, steps=steps)

    async def _invoke(self, prompt: list[BaseMessage], thread_id: Optional[str]) -> AIMessage:
        try:
            return await self.llm_with_tools.ainvoke(prompt)
        except Exception as e:
            logger.error("Model call failed", thread_id=thread_id, error=str(e))
            raise AgentGenerationException(thread_id=thread_id, message=f"Model call failed: {e}") from e

    async def _execute_tool(self, tool_name: str, tool_input: dict) -> dict:
        """Run a tool; failures are reported back to the model instead of raised."""
        try:
            return await self.executor.execute(tool_name, tool_input)
        except AppException as e:
            logger.warning("Tool call rejected", tool=tool_name, error=e.message)
            return {"error": e.message}
        except Exception as e:
            logger.error("Tool call failed", tool=tool_name, error=str(e), exc_info=True)
            return {"error": f"Tool '{tool_name}' failed: {e}"}

    @staticmethod
    def _coerce(message: InputMessage) -> AgentMessage:
        if isinstance(message, AgentMessage):
            return message
        return AgentMessage.model_validate(message)

    @staticmethod
    def _to_langchain(turns: list[AgentMessage]) -> list[BaseMessage]:
        converted: list[BaseMessage] = []
        for turn in turns:
            if turn.role == "user":
                converted.append(HumanMessage(content=turn.content))
            elif turn.role == "assistant":
                converted.append(AIMessage(content=turn.content))
            else:
                converted.append(SystemMessage(content=turn.content))
        return converted
