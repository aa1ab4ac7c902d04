"""
Workflows package for camunda_bot.
Contains workflow definitions and step data structures.
"""

from camunda_bot.workflows.base import (
    BaseWorkflow,
    StepStatus,
    WorkflowResult,
    WorkflowStatus,
    WorkflowStep,
)
from camunda_bot.workflows.process_workflow import ProcessLifecycleWorkflow

__all__ = [
    "BaseWorkflow",
    "ProcessLifecycleWorkflow",
    "StepStatus",
    "WorkflowResult",
    "WorkflowStatus",
    "WorkflowStep",
]
