"""
Observability module for camunda_bot.
Provides metrics capabilities.
"""

from camunda_bot.observability.metrics import (
    end_workflow_timer,
    get_metrics_text,
    metrics_registry,
    record_browser_operation,
    record_completion_check,
    record_workflow_step,
    start_workflow_timer,
)

__all__ = [
    "metrics_registry",
    "record_browser_operation",
    "record_completion_check",
    "record_workflow_step",
    "start_workflow_timer",
    "end_workflow_timer",
    "get_metrics_text",
]
