"""System prompts and templates for the agent."""

from affiliateos.agent.prompts.system import SYSTEM_PROMPT

__all__ = [
    "SYSTEM_PROMPT",
]
