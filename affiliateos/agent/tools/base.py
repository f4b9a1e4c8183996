"""
Base tool definitions and utilities.

Provides the ToolDefinition class that binds a pydantic input schema to a
local handler, and the ToolExecutor that validates arguments and runs it.
"""

import random
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Awaitable, Callable, Optional

import structlog
from pydantic import BaseModel, ValidationError

from affiliateos.exceptions.tool import ToolInputValidationException, ToolNotFoundException

logger = structlog.get_logger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ToolContext:
    """
    Read-only environment handed to every tool handler.

    Handlers take time and randomness from here, never from the modules
    directly, so both can be pinned in tests.
    """
    now: Callable[[], datetime] = utc_now
    rng: random.Random = field(default_factory=random.Random)

    def epoch_ms(self) -> int:
        return int(self.now().timestamp() * 1000)

    def date_in(self, days: int = 0) -> str:
        """ISO date (UTC) `days` from now."""
        return (self.now() + timedelta(days=days)).date().isoformat()


ToolHandler = Callable[[Any, ToolContext], Awaitable[BaseModel]]


@dataclass
class ToolDefinition:
    """
    Definition of a tool that the agent can use.

    The input model doubles as the JSON schema shown to the model.
    """
    name: str
    description: str
    input_model: type[BaseModel]
    output_model: type[BaseModel]
    handler: ToolHandler

    def input_schema(self) -> dict:
        schema = self.input_model.model_json_schema(by_alias=True)
        schema.pop("title", None)
        return schema

    def to_openapi_schema(self) -> dict:
        """Convert to OpenAPI-compatible tool schema."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema(),
        }

    def to_mcp_tool(self) -> dict:
        """Convert to MCP tool format."""
        return self.to_openapi_schema()

    def to_openai_tool(self) -> dict:
        """Convert to the function-calling format accepted by `bind_tools`."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.input_schema(),
            },
        }


class ToolExecutor:
    """
    Executes registered tools in-process.
    """

    def __init__(self, tools: list[ToolDefinition], context: Optional[ToolContext] = None):
        self.tools = {tool.name: tool for tool in tools}
        self.context = context or ToolContext()

    def get(self, tool_name: str) -> ToolDefinition:
        tool = self.tools.get(tool_name)
        if tool is None:
            raise ToolNotFoundException(tool_name)
        return tool

    def list_tools(self) -> list[ToolDefinition]:
        return list(self.tools.values())

    async def execute(self, tool_name: str, arguments: Optional[dict] = None) -> dict:
        """
        Validate `arguments` against the tool's input schema and run it.

        Raises:
            ToolNotFoundException: If no tool is registered under `tool_name`
            ToolInputValidationException: If the arguments fail validation
        """
        tool = self.get(tool_name)
        try:
            request = tool.input_model.model_validate(arguments or {})
        except ValidationError as e:
            logger.warning("Tool input rejected", tool=tool_name, errors=e.error_count())
            raise ToolInputValidationException(tool_name, e.errors(include_url=False)) from e

        result = await tool.handler(request, self.context)
        return result.model_dump(mode="json", exclude_none=True)
