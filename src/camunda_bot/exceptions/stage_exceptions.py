"""
Stage-level exceptions raised by the Web Modeler workflow.

Each stage wraps whatever its browser calls raised into exactly one of these,
keeping the stage identity in ``stage`` and the cause in
``original_exception``. The human-readable message is always
``"<prefix>: <cause message>"``.
"""

from camunda_bot.exceptions.base_exceptions import ExceptionCode, WorkflowException


def describe_error(error: Exception) -> str:
    """Return the bare message of an exception.

    Selenium exceptions render as ``"Message: ...\\n"`` when converted to a
    string; their raw text lives in ``msg``.
    """
    msg = getattr(error, "msg", None)
    if isinstance(msg, str):
        return msg
    return str(error)


class StageException(WorkflowException):
    """A workflow stage failed."""

    stage: str = ""
    prefix: str = "Stage failed"
    error_code: ExceptionCode = ExceptionCode.STEP_EXECUTION_FAILED

    def __init__(self, cause: Exception):
        cause_message = describe_error(cause)
        super().__init__(
            message=f"{self.prefix}: {cause_message}",
            code=self.error_code,
            details={"stage": self.stage, "cause": cause_message},
            original_exception=cause,
        )


class LoginFailed(StageException):
    stage = "login"
    prefix = "Login failed"
    error_code = ExceptionCode.LOGIN_FAILED


class NavigationFailed(StageException):
    stage = "navigate"
    prefix = "Navigation to Web Modeler failed"
    error_code = ExceptionCode.NAVIGATION_FAILED


class ProcessCreationFailed(StageException):
    stage = "create_process"
    prefix = "Process creation failed"
    error_code = ExceptionCode.PROCESS_CREATION_FAILED


class ProcessInstanceRunFailed(StageException):
    stage = "run_process_instance"
    prefix = "Running process instance failed"
    error_code = ExceptionCode.PROCESS_INSTANCE_RUN_FAILED


class CompletionVerificationFailed(StageException):
    stage = "verify_completion"
    prefix = "Verification of process completion failed"
    error_code = ExceptionCode.COMPLETION_VERIFICATION_FAILED
