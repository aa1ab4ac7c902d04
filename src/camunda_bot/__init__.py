"""
camunda_bot: drives Camunda Web Modeler and Operate through a browser to
create a process, start an instance and verify that it completed.
"""

import camunda_bot.logging  # noqa: F401  Ensures logging is configured
from camunda_bot.config import AppConfig, load_config
from camunda_bot.orchestrator import WorkflowOrchestrator, run
from camunda_bot.workflows import ProcessLifecycleWorkflow, WorkflowResult

__all__ = [
    "AppConfig",
    "load_config",
    "ProcessLifecycleWorkflow",
    "WorkflowOrchestrator",
    "WorkflowResult",
    "run",
]
