"""
Direct tool invocation endpoints.

Lists the registered tools with their argument schemas and runs a single
tool outside of the agent loop.
"""

from typing import Annotated, Any, Optional

import structlog
from fastapi import APIRouter, Body, Path, status

from affiliateos.dependencies import ToolExecutorDep
from affiliateos.models import ListResponseModel
from affiliateos.models.tools import ToolInfo

logger = structlog.get_logger(__name__)

router = APIRouter(
    prefix="/api/tools",
    tags=["Tools"],
    responses={
        404: {"description": "Tool not found"},
        422: {"description": "Tool arguments failed validation"},
        500: {"description": "Internal Server Error"},
    },
)


@router.get("", response_model=ListResponseModel[ToolInfo], summary="List tools")
async def list_tools(executor: ToolExecutorDep):
    tools = [ToolInfo.model_validate(tool.to_openapi_schema()) for tool in executor.list_tools()]
    return ListResponseModel(status_code=status.HTTP_200_OK, data=tools, total_count=len(tools))


@router.post("/{tool_name}/execute", response_model=dict[str, Any], summary="Execute a tool")
async def execute_tool(
    executor: ToolExecutorDep,
    tool_name: Annotated[str, Path(description="Registered tool name, e.g. alerts-tool")],
    arguments: Annotated[Optional[dict[str, Any]], Body(description="Tool arguments, camelCase keys")] = None,
):
    """
    Validate `arguments` against the tool's schema and run it.

    Unknown tools return 404; arguments that fail validation return 422.
    """
    logger.info("Direct tool execution", tool=tool_name)
    return await executor.execute(tool_name, arguments or {})
