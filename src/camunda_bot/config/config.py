import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict


def _env(name: str, default: str) -> str:
    """Read an environment variable, treating unset and empty the same way."""
    return os.getenv(name) or default


class CamundaConfig(BaseModel):
    base_url: str = ""
    username: str = ""
    password: str = ""
    process_name: str = "Test Process"
    rest_url: str = "https://api.example.com/data"

    model_config = ConfigDict(frozen=True)

    @property
    def login_url(self) -> str:
        return f"{self.base_url}/login"

    @property
    def run_url(self) -> str:
        return f"{self.base_url}/run"


class BrowserConfig(BaseModel):
    # Visible browser by default so the run can be watched
    headless: bool = False
    selenium_url: Optional[str] = None

    page_load_timeout: int = 30
    default_wait_timeout: int = 30
    connector_wait_timeout: int = 5

    model_config = ConfigDict(frozen=True)


class AppConfig(BaseModel):
    camunda: CamundaConfig = CamundaConfig()
    browser: BrowserConfig = BrowserConfig()
    log_level: str = "INFO"

    model_config = ConfigDict(frozen=True)


def load_config(
    load_env_file: bool = True, env_file: Optional[str] = None
) -> AppConfig:
    """Resolve the run configuration once from the process environment.

    A ``.env`` file fills in variables missing from the environment; it never
    overrides variables that are already set.
    """
    if load_env_file:
        load_dotenv(env_file)

    camunda = CamundaConfig(
        base_url=_env("CAMUNDA_URL", ""),
        username=_env("USERNAME", ""),
        password=_env("PASSWORD", ""),
        process_name=_env("PROCESS_NAME", "Test Process"),
        rest_url=_env("REST_URL", "https://api.example.com/data"),
    )
    browser = BrowserConfig(
        headless=_env("BROWSER_HEADLESS", "false").lower() == "true",
        selenium_url=os.getenv("SELENIUM_URL") or None,
    )
    return AppConfig(
        camunda=camunda,
        browser=browser,
        log_level=_env("LOG_LEVEL", "INFO").upper(),
    )
