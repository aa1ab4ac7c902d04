"""
Shared fixtures for the camunda_bot test suite.
"""

from unittest.mock import Mock

import pytest
from loguru import logger

from camunda_bot.config import AppConfig, BrowserConfig, CamundaConfig
from camunda_bot.services.browser.browser import BrowserManager

BASE_URL = "http://camunda.local"


@pytest.fixture
def app_config():
    return AppConfig(
        camunda=CamundaConfig(
            base_url=BASE_URL,
            username="demo",
            password="demo",
            process_name="Test Process",
            rest_url="https://api.example.com/data",
        ),
        browser=BrowserConfig(headless=True),
    )


@pytest.fixture
def browser_mock():
    """A started BrowserManager whose page primitives all succeed."""
    browser = Mock(spec=BrowserManager)
    browser.get_current_url.return_value = f"{BASE_URL}/login"
    browser.get_text.return_value = "Completed"
    return browser


@pytest.fixture
def log_messages():
    """Collect INFO-and-above log messages emitted during a test."""
    messages = []
    handler_id = logger.add(
        lambda message: messages.append(message.record["message"]),
        level="INFO",
        format="{message}",
    )
    yield messages
    logger.remove(handler_id)
