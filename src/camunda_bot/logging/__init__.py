"""
Logging helpers for the camunda_bot package.
"""

from camunda_bot.logging.setup import (
    configure_logging,
    get_run_id,
    set_run_id,
)

configure_logging()

__all__ = [
    "configure_logging",
    "set_run_id",
    "get_run_id",
]
