"""
Exceptions module for custom application exceptions.

This module contains all custom exception classes that extend from AppException
and are used throughout the application for error handling.
"""

from affiliateos.exceptions.app import AppException, ErrorTypes
from affiliateos.exceptions.agent import AgentGenerationException, AgentTimeoutException
from affiliateos.exceptions.telegram import WebhookUnauthorizedException
from affiliateos.exceptions.tool import ToolInputValidationException, ToolNotFoundException

__all__ = [
    # Base exceptions
    "AppException",
    "ErrorTypes",
    # Agent
    "AgentGenerationException",
    "AgentTimeoutException",
    # Tools
    "ToolInputValidationException",
    "ToolNotFoundException",
    # Telegram
    "WebhookUnauthorizedException",
]
