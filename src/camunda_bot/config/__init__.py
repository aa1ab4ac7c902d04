from camunda_bot.config.config import (
    AppConfig,
    BrowserConfig,
    CamundaConfig,
    load_config,
)

__all__ = [
    "AppConfig",
    "BrowserConfig",
    "CamundaConfig",
    "load_config",
]
