from typing import Annotated

from fastapi import Depends, Request

from affiliateos.agent import AffiliateAgent
from affiliateos.agent.memory import ChatMemory


async def get_agent(request: Request) -> AffiliateAgent:
    """Dependency returning the agent built at startup."""
    return request.app.state.agent


async def get_memory(request: Request) -> ChatMemory:
    """Dependency returning the agent's chat memory."""
    return request.app.state.memory


AgentDep = Annotated[AffiliateAgent, Depends(get_agent)]
MemoryDep = Annotated[ChatMemory, Depends(get_memory)]
