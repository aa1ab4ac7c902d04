"""
Prometheus metrics for camunda_bot runs.
"""

import time
from typing import Dict

from prometheus_client import CollectorRegistry, Counter, Histogram, generate_latest

# Create a custom registry for our metrics
metrics_registry = CollectorRegistry()

workflow_steps_total = Counter(
    "workflow_steps_total",
    "Workflow step executions by result",
    ["step", "status"],  # success, failed
    registry=metrics_registry,
)

browser_operations_total = Counter(
    "browser_operations_total",
    "Total browser operations",
    ["operation", "status"],  # success, failed
    registry=metrics_registry,
)

process_completion_checks_total = Counter(
    "process_completion_checks_total",
    "Completion status checks by outcome",
    ["result"],  # completed, not_completed
    registry=metrics_registry,
)

workflow_duration_seconds = Histogram(
    "workflow_duration_seconds",
    "Duration of a full workflow run",
    ["workflow"],
    buckets=[5, 15, 30, 60, 120, 300, 600],
    registry=metrics_registry,
)

_workflow_timers: Dict[str, float] = {}


def record_workflow_step(step: str, status: str):
    workflow_steps_total.labels(step=step, status=status).inc()


def record_browser_operation(operation: str, status: str):
    browser_operations_total.labels(operation=operation, status=status).inc()


def record_completion_check(completed: bool):
    result = "completed" if completed else "not_completed"
    process_completion_checks_total.labels(result=result).inc()


def start_workflow_timer(run_id: str):
    _workflow_timers[run_id] = time.time()


def end_workflow_timer(run_id: str, workflow: str):
    """Observe the elapsed time for a run started with start_workflow_timer."""
    started = _workflow_timers.pop(run_id, None)
    if started is not None:
        workflow_duration_seconds.labels(workflow=workflow).observe(
            time.time() - started
        )


def get_metrics_text() -> str:
    """Render the registry in the Prometheus text format."""
    return generate_latest(metrics_registry).decode("utf-8")
