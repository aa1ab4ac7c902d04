"""
Workflow orchestrator: runs workflow steps in order and owns cleanup.
"""

import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional

from loguru import logger

from camunda_bot.config import AppConfig, load_config
from camunda_bot.exceptions import describe_error
from camunda_bot.logging import get_run_id, set_run_id
from camunda_bot.observability import (
    end_workflow_timer,
    record_workflow_step,
    start_workflow_timer,
)
from camunda_bot.workflows.base import (
    BaseWorkflow,
    StepStatus,
    WorkflowResult,
    WorkflowStatus,
)
from camunda_bot.workflows.process_workflow import ProcessLifecycleWorkflow


class WorkflowOrchestrator:
    """Executes workflows step by step; a failed step ends the run."""

    def __init__(self):
        self.execution_history: List[WorkflowResult] = []

    def execute_workflow(
        self, workflow: BaseWorkflow, run_id: Optional[str] = None
    ) -> WorkflowResult:
        """
        Execute every step of ``workflow`` in dependency order.

        The first failing step stops the run: later steps are not attempted.
        Errors are logged, never re-raised, and ``workflow.cleanup()`` runs on
        every exit path.
        """
        workflow.reset()
        workflow.status = WorkflowStatus.RUNNING
        run_id_str = run_id or str(uuid.uuid4())
        previous_run_id = get_run_id()
        set_run_id(run_id_str)

        result = WorkflowResult(
            workflow_id=workflow.workflow_id,
            status=WorkflowStatus.RUNNING,
            steps_completed=0,
            steps_failed=0,
            total_steps=len(workflow.steps),
            started_at=datetime.now(),
        )

        logger.debug(f"Starting workflow: {workflow.name}")
        start_workflow_timer(run_id_str)

        try:
            for step_name in workflow.get_step_execution_order():
                step = workflow.steps[step_name]
                self._execute_step(step, result)

                if step.status == StepStatus.FAILED:
                    result.errors[step_name] = step.error
                    break

            if result.steps_failed > 0:
                result.status = WorkflowStatus.FAILED
            else:
                result.status = WorkflowStatus.COMPLETED

            if "process_completed" in workflow.shared_resources:
                result.results["process_completed"] = workflow.shared_resources[
                    "process_completed"
                ]

        except Exception as e:
            result.status = WorkflowStatus.FAILED
            result.errors["orchestrator"] = describe_error(e)

        finally:
            try:
                workflow.cleanup()
            except Exception as e:
                logger.debug(f"Workflow cleanup failed: {e}")
            workflow.status = result.status
            result.completed_at = datetime.now()
            result.duration = (result.completed_at - result.started_at).total_seconds()
            end_workflow_timer(run_id_str, workflow.workflow_id)
            set_run_id(previous_run_id)

        if result.status == WorkflowStatus.FAILED:
            error = next(iter(result.errors.values()), "unknown error")
            logger.error(f"An error occurred: {error}")
        logger.debug(
            f"Workflow finished: {workflow.name} - Status: {result.status.value}"
        )

        self.execution_history.append(result)
        return result

    def _execute_step(self, step, result: WorkflowResult):
        """Execute a single workflow step, recording its outcome on the step."""
        step.status = StepStatus.RUNNING
        step.started_at = datetime.now()
        logger.debug(f"Executing step: {step.name} - {step.description}")

        try:
            step_result = step.handler()
            if step_result:
                step.status = StepStatus.COMPLETED
                step.result = step_result
                result.steps_completed += 1
                record_workflow_step(step.name, "success")
            else:
                step.status = StepStatus.FAILED
                step.error = f"Step {step.name} handler returned False"
                result.steps_failed += 1
                record_workflow_step(step.name, "failed")
        except Exception as e:
            step.status = StepStatus.FAILED
            step.error = describe_error(e)
            step.original_exception = e
            result.steps_failed += 1
            record_workflow_step(step.name, "failed")
            logger.debug(f"Step failed with error: {step.name} - {step.error}")

        step.completed_at = datetime.now()

    def get_execution_history(self, limit: int = 50) -> List[Dict[str, Any]]:
        """Get the execution history."""
        history_slice = (
            self.execution_history[-limit:] if limit else self.execution_history
        )

        return [
            {
                "workflow_id": result.workflow_id,
                "status": result.status.value,
                "steps_completed": result.steps_completed,
                "steps_failed": result.steps_failed,
                "total_steps": result.total_steps,
                "duration": result.duration,
                "errors": dict(result.errors),
            }
            for result in history_slice
        ]


def run(
    config: Optional[AppConfig] = None,
    orchestrator: Optional[WorkflowOrchestrator] = None,
):
    """Run the process lifecycle workflow once against the configured Camunda."""
    workflow = ProcessLifecycleWorkflow(config or load_config())
    (orchestrator or WorkflowOrchestrator()).execute_workflow(workflow)
