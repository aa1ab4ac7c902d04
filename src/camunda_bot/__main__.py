"""
Command line entry point: ``python -m camunda_bot`` or ``camunda-bot``.
"""

from camunda_bot.config import load_config
from camunda_bot.logging import configure_logging
from camunda_bot.orchestrator import run


def main() -> int:
    config = load_config()
    configure_logging(config.log_level)
    run(config)
    # Failures are reported in the log only; the exit status stays 0.
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
