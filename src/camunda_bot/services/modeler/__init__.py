from camunda_bot.services.modeler.modeler_service import (
    COMPLETED_STATUS,
    ModelerService,
    completion_status_selector,
    is_completed,
)

__all__ = [
    "COMPLETED_STATUS",
    "ModelerService",
    "completion_status_selector",
    "is_completed",
]
