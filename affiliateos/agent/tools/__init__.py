"""
Tool definitions for the AffiliateOS agent.

Each tool binds a pydantic input schema to an in-process handler that
synthesizes affiliate marketing data.
"""

from affiliateos.agent.tools.alerts import alerts_tool
from affiliateos.agent.tools.analytics import analytics_simulation_tool
from affiliateos.agent.tools.base import ToolContext, ToolDefinition, ToolExecutor
from affiliateos.agent.tools.content_generation import content_generation_tool
from affiliateos.agent.tools.link_management import link_management_tool
from affiliateos.agent.tools.product_discovery import product_discovery_tool

# All available tools
ALL_TOOLS = [
    product_discovery_tool,
    content_generation_tool,
    link_management_tool,
    analytics_simulation_tool,
    alerts_tool,
]

__all__ = [
    "ALL_TOOLS",
    "ToolContext",
    "ToolDefinition",
    "ToolExecutor",
]
