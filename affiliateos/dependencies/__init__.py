"""
Dependencies module for FastAPI dependency injection.

This module contains reusable dependencies for settings and the services
built during application startup.
"""

from affiliateos.dependencies.agent import AgentDep, MemoryDep
from affiliateos.dependencies.common import SettingsDep
from affiliateos.dependencies.telegram import TelegramClientDep, WorkflowDep
from affiliateos.dependencies.tools import ToolExecutorDep

__all__ = [
    "AgentDep",
    "MemoryDep",
    "SettingsDep",
    "TelegramClientDep",
    "ToolExecutorDep",
    "WorkflowDep",
]
