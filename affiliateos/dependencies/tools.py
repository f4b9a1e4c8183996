from typing import Annotated

from fastapi import Depends, Request

from affiliateos.agent.tools import ToolExecutor


async def get_tool_executor(request: Request) -> ToolExecutor:
    """Dependency returning the shared tool executor."""
    return request.app.state.tool_executor


ToolExecutorDep = Annotated[ToolExecutor, Depends(get_tool_executor)]
