"""
Custom exceptions for tool lookup and execution.
"""

from typing import Any, Optional

from affiliateos.exceptions.app import AppException, ErrorTypes


class ToolNotFoundException(AppException):
    """Raised when a tool name is not registered."""

    def __init__(self, tool_name: str, message: Optional[str] = None, **kwargs) -> None:
        super().__init__(
            type=ErrorTypes.ResourceNotFound,
            message=message or f"Tool '{tool_name}' not found",
            resource="tool",
            field="name",
            value=tool_name,
            **kwargs,
        )


class ToolInputValidationException(AppException):
    """
    Raised when tool arguments do not match the tool's input schema.

    Never retriable: the same arguments will fail the same way.
    """

    def __init__(
        self,
        tool_name: str,
        errors: list[dict[str, Any]],
        message: Optional[str] = None,
        **kwargs,
    ) -> None:
        self.errors = errors
        first = errors[0] if errors else {}
        field = ".".join(str(loc) for loc in first.get("loc", ())) or None
        super().__init__(
            type=ErrorTypes.InputValidationError,
            message=message or f"Invalid arguments for tool '{tool_name}': {first.get('msg', 'validation failed')}",
            resource="tool",
            field=field,
            value=first.get("input"),
            **kwargs,
        )
