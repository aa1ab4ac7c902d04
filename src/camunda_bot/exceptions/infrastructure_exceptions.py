"""
Infrastructure-specific exceptions for camunda_bot.
"""

from camunda_bot.exceptions.base_exceptions import (
    BaseCamundaBotException,
    ExceptionCode,
)


class InfrastructureException(BaseCamundaBotException):
    """Raised when the browser infrastructure cannot be reached or started."""

    def __init__(
        self,
        message: str = "Infrastructure failure - browser unavailable",
        error_type: str = None,
        details: dict = None,
        original_exception: Exception = None,
    ):
        exception_details = details or {}
        exception_details["error_type"] = error_type
        super().__init__(
            message=message,
            code=ExceptionCode.BROWSER_STARTUP_FAILED,
            details=exception_details,
            original_exception=original_exception,
        )


class BrowserSessionException(BaseCamundaBotException):
    """Raised when the WebDriver refuses to create a session."""

    def __init__(
        self,
        message: str = "Browser session creation failed",
        session_details: dict = None,
        original_exception: Exception = None,
    ):
        super().__init__(
            message=message,
            code=ExceptionCode.SESSION_NOT_CREATED,
            details=session_details or {},
            original_exception=original_exception,
        )
