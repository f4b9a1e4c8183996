"""
FastAPI lifespan context manager for application startup and shutdown.

This module provides a lifespan context manager that handles:
- Sentry and logging configuration
- Building the agent, Telegram client and chat workflow onto app.state
- Closing the outbound HTTP client on shutdown
"""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from affiliateos.agent import AffiliateAgent
from affiliateos.agent.memory import ChatMemory
from affiliateos.agent.tools import ALL_TOOLS, ToolExecutor
from affiliateos.logging import setup_logging
from affiliateos.sentry import setup_sentry
from affiliateos.service.telegram import TelegramClient
from affiliateos.service.workflow import ChatWorkflow
from affiliateos.settings import Settings

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager.

    Startup builds one agent, one Telegram client and one workflow and stores
    them on `app.state`; request dependencies read them from there.

    Args:
        app: FastAPI application instance

    Yields:
        None
    """
    logger.debug("Application startup initiated")
    try:
        settings: Settings = app.state.settings
        setup_logging(settings)
        setup_sentry(settings.SENTRY, environment=settings.ENVIRONMENT, release=settings.APP_VERSION)

        executor = ToolExecutor(ALL_TOOLS)
        memory = ChatMemory.from_config(settings.AGENT, settings.AWS)
        agent = AffiliateAgent(settings.AGENT, memory, executor=executor)
        telegram = TelegramClient.from_config(settings.TELEGRAM)

        app.state.tool_executor = executor
        app.state.memory = memory
        app.state.agent = agent
        app.state.telegram = telegram
        app.state.workflow = ChatWorkflow(
            agent,
            telegram,
            resource_id=settings.AGENT.DEFAULT_RESOURCE_ID,
            max_steps=settings.AGENT.MAX_STEPS,
            parse_mode=settings.TELEGRAM.PARSE_MODE,
        )

        logger.info(
            "Application startup completed successfully",
            agent=settings.AGENT.NAME,
            model=settings.AGENT.MODEL,
            memory_backend=settings.AGENT.MEMORY_BACKEND,
            tools=[tool.name for tool in executor.list_tools()],
        )

    except Exception as e:
        logger.error(
            "Failed to initialize application",
            error=str(e),
            exc_info=True,
        )
        raise

    yield

    logger.debug("Application shutdown initiated")
    try:
        await app.state.telegram.close()
        logger.debug("Application shutdown completed successfully")
    except Exception as e:
        logger.error(
            "Error during application shutdown",
            error=str(e),
            exc_info=True,
        )
        raise
