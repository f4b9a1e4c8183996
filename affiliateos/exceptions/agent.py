"""
Custom exceptions for the conversational agent.
"""

from typing import Optional

from affiliateos.exceptions.app import AppException, ErrorTypes


class AgentGenerationException(AppException):
    """Raised when the model endpoint fails while generating a reply."""

    def __init__(
        self,
        thread_id: Optional[str] = None,
        message: Optional[str] = None,
        **kwargs,
    ) -> None:
        super().__init__(
            type=ErrorTypes.ExternalServiceError,
            message=message or "Agent failed to generate a response",
            resource="agent",
            field="thread_id" if thread_id else None,
            value=thread_id,
            **kwargs,
        )


class AgentTimeoutException(AppException):
    """Raised when a generation does not finish within the configured timeout."""

    def __init__(self, timeout: float, thread_id: Optional[str] = None, **kwargs) -> None:
        self.timeout = timeout
        super().__init__(
            type=ErrorTypes.ExternalServiceTimeout,
            message=f"Agent did not respond within {timeout:g} seconds",
            resource="agent",
            field="thread_id" if thread_id else None,
            value=thread_id,
            **kwargs,
        )
