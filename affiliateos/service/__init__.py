"""
Service module for the outbound side of the bot.

This module contains the Telegram Bot API client and the chat workflow
that connects the agent to it.
"""
from .telegram import TelegramClient
from .workflow import ChatWorkflow

__all__ = [
    "ChatWorkflow",
    "TelegramClient",
]
