"""
Base exception classes for camunda_bot.
"""

from enum import Enum
from typing import Optional


class ExceptionCode(Enum):
    """Enumeration of all possible exception codes."""

    # Infrastructure errors (INFRA_XXXX)
    SESSION_NOT_CREATED = "INFRA_1001"
    BROWSER_STARTUP_FAILED = "INFRA_1006"

    # Workflow errors (WF_XXXX)
    STEP_EXECUTION_FAILED = "WF_3002"
    LOGIN_FAILED = "WF_3101"
    NAVIGATION_FAILED = "WF_3102"
    PROCESS_CREATION_FAILED = "WF_3103"
    PROCESS_INSTANCE_RUN_FAILED = "WF_3104"
    COMPLETION_VERIFICATION_FAILED = "WF_3105"


class BaseCamundaBotException(Exception):
    """Base exception for camunda_bot."""

    def __init__(
        self,
        message: str,
        code: ExceptionCode,
        details: Optional[dict] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code.value
        self.details = details or {}
        self.original_exception = original_exception

    def __str__(self):
        return self.message

    def to_dict(self):
        """Convert exception to dictionary for serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
            "original_exception_type": (
                type(self.original_exception).__name__
                if self.original_exception
                else None
            ),
        }


class WorkflowException(BaseCamundaBotException):
    """Base exception for workflow-related errors."""

    pass
