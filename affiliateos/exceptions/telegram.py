"""
Custom exceptions for the Telegram webhook.
"""

from affiliateos.exceptions.app import AppException, ErrorTypes


class WebhookUnauthorizedException(AppException):
    """Raised when a webhook call carries a missing or wrong secret token."""

    def __init__(self, message: str = "Invalid webhook secret token", **kwargs) -> None:
        super().__init__(
            type=ErrorTypes.UnauthorizedOperation,
            message=message,
            resource="telegram_webhook",
            field="X-Telegram-Bot-Api-Secret-Token",
            **kwargs,
        )
