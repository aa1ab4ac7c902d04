"""
Exception module for camunda_bot.
Contains custom exceptions for different error types.
"""

from camunda_bot.exceptions.base_exceptions import (
    BaseCamundaBotException,
    ExceptionCode,
    WorkflowException,
)
from camunda_bot.exceptions.infrastructure_exceptions import (
    BrowserSessionException,
    InfrastructureException,
)
from camunda_bot.exceptions.stage_exceptions import (
    CompletionVerificationFailed,
    LoginFailed,
    NavigationFailed,
    ProcessCreationFailed,
    ProcessInstanceRunFailed,
    StageException,
    describe_error,
)

__all__ = [
    "BaseCamundaBotException",
    "ExceptionCode",
    "WorkflowException",
    "InfrastructureException",
    "BrowserSessionException",
    "StageException",
    "LoginFailed",
    "NavigationFailed",
    "ProcessCreationFailed",
    "ProcessInstanceRunFailed",
    "CompletionVerificationFailed",
    "describe_error",
]
