"""
Base workflow classes and data structures.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, List, Optional


class WorkflowStatus(Enum):
    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


class StepStatus(Enum):
    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class WorkflowStep:
    """Represents a single step in a workflow."""

    name: str
    description: str
    handler: Callable
    depends_on: List[str] = field(default_factory=list)
    status: StepStatus = StepStatus.PENDING
    result: Any = None
    error: Optional[str] = None
    original_exception: Optional[Exception] = None
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None


@dataclass
class WorkflowResult:
    """Results of workflow execution."""

    workflow_id: str
    status: WorkflowStatus
    steps_completed: int
    steps_failed: int
    total_steps: int
    results: Dict[str, Any] = field(default_factory=dict)
    errors: Dict[str, str] = field(default_factory=dict)
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    duration: Optional[float] = None


class BaseWorkflow(ABC):
    """Base class for all workflows."""

    def __init__(self, workflow_id: str, name: str, description: str):
        self.workflow_id = workflow_id
        self.name = name
        self.description = description
        self.steps: Dict[str, WorkflowStep] = {}
        self.status = WorkflowStatus.PENDING
        self.shared_resources: Dict[str, Any] = {}

    @abstractmethod
    def define_steps(self):
        """Define the workflow steps. Must be implemented by subclasses."""
        pass

    @abstractmethod
    def cleanup(self):
        """Release every resource acquired by the steps."""
        pass

    def add_step(self, step: WorkflowStep):
        self.steps[step.name] = step

    def get_step_execution_order(self) -> List[str]:
        """Get the execution order of steps based on dependencies."""
        executed = set()
        execution_order = []

        while len(executed) < len(self.steps):
            progress_made = False

            for step_name, step in self.steps.items():
                if step_name in executed:
                    continue

                # Check if all dependencies are satisfied
                deps_satisfied = all(dep in executed for dep in step.depends_on)

                if deps_satisfied:
                    execution_order.append(step_name)
                    executed.add(step_name)
                    progress_made = True

            if not progress_made:
                raise ValueError("Circular dependency detected in workflow steps")

        return execution_order

    def reset(self):
        """Reset workflow to initial state."""
        self.status = WorkflowStatus.PENDING
        self.shared_resources.clear()

        for step in self.steps.values():
            step.status = StepStatus.PENDING
            step.result = None
            step.error = None
            step.original_exception = None
            step.started_at = None
            step.completed_at = None

    def __str__(self) -> str:
        return f"Workflow({self.workflow_id}: {self.name})"

    def __repr__(self) -> str:
        return self.__str__()
