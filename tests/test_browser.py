"""
Tests for BrowserManager against a mocked WebDriver.
"""

import time
from unittest.mock import Mock, patch

import pytest
from selenium.common.exceptions import (
    NoSuchElementException,
    SessionNotCreatedException,
    TimeoutException,
    WebDriverException,
)
from selenium.webdriver.common.by import By
from selenium.webdriver.common.keys import Keys

from camunda_bot.config import BrowserConfig, CamundaConfig
from camunda_bot.exceptions import (
    BrowserSessionException,
    InfrastructureException,
    NavigationFailed,
    ProcessCreationFailed,
)
from camunda_bot.services.browser.browser import BrowserManager, button_with_text
from camunda_bot.services.modeler import ModelerService


@pytest.fixture
def driver():
    driver = Mock()
    driver.current_url = "http://camunda.local/login"
    element = driver.find_element.return_value
    element.is_displayed.return_value = True
    element.is_enabled.return_value = True
    return driver


@pytest.fixture
def manager(driver):
    manager = BrowserManager(BrowserConfig(headless=True))
    manager.driver = driver
    return manager


class TestBrowserLifecycle:
    def test_starts_local_chrome_by_default(self):
        with patch("camunda_bot.services.browser.browser.webdriver") as webdriver_mock:
            manager = BrowserManager(BrowserConfig(headless=True))
            driver = manager.start_browser()

        assert driver is webdriver_mock.Chrome.return_value
        webdriver_mock.Remote.assert_not_called()
        driver.set_page_load_timeout.assert_called_once_with(30)

    def test_uses_selenium_grid_when_configured(self):
        config = BrowserConfig(selenium_url="http://grid:4444/wd/hub")

        with patch("camunda_bot.services.browser.browser.webdriver") as webdriver_mock:
            BrowserManager(config).start_browser()

        webdriver_mock.Chrome.assert_not_called()
        _, kwargs = webdriver_mock.Remote.call_args
        assert kwargs["command_executor"] == "http://grid:4444/wd/hub"

    def test_headless_flag_follows_config(self):
        with patch("camunda_bot.services.browser.browser.webdriver") as webdriver_mock:
            BrowserManager(BrowserConfig(headless=False)).start_browser()

        options = webdriver_mock.Chrome.call_args.kwargs["options"]
        assert "--headless" not in options.arguments

    def test_session_not_created_is_translated(self):
        with patch("camunda_bot.services.browser.browser.webdriver") as webdriver_mock:
            webdriver_mock.Chrome.side_effect = SessionNotCreatedException(
                "session not created"
            )
            with pytest.raises(BrowserSessionException) as exc_info:
                BrowserManager().start_browser()

        assert str(exc_info.value).startswith("Browser session creation failed")

    def test_driver_failure_is_translated(self):
        with patch("camunda_bot.services.browser.browser.webdriver") as webdriver_mock:
            webdriver_mock.Chrome.side_effect = WebDriverException("chrome not found")
            with pytest.raises(InfrastructureException) as exc_info:
                BrowserManager().start_browser()

        assert exc_info.value.details["error_type"] == "web_driver_issue"

    def test_close_browser_quits_once(self, manager, driver):
        manager.close_browser()
        manager.close_browser()

        driver.quit.assert_called_once()
        assert manager.driver is None

    def test_close_without_session_is_noop(self):
        BrowserManager().close_browser()

    def test_primitives_require_started_browser(self):
        with pytest.raises(RuntimeError):
            BrowserManager().navigate_to("http://camunda.local")


class TestPagePrimitives:
    def test_navigate_to(self, manager, driver):
        manager.navigate_to("http://camunda.local/run")

        driver.get.assert_called_once_with("http://camunda.local/run")

    def test_wait_for_uses_default_timeout(self, manager, driver):
        with patch("camunda_bot.services.browser.browser.WebDriverWait") as wait_mock:
            manager.wait_for(By.CSS_SELECTOR, "a#operate-link")

        wait_mock.assert_called_once_with(driver, 30)

    def test_wait_for_uses_explicit_timeout(self, manager, driver):
        with patch("camunda_bot.services.browser.browser.WebDriverWait") as wait_mock:
            manager.wait_for(By.CSS_SELECTOR, "input#rest-url", timeout=5)

        wait_mock.assert_called_once_with(driver, 5)

    def test_wait_for_ignores_hidden_element(self, manager, driver):
        driver.find_element.return_value.is_displayed.return_value = False

        with pytest.raises(TimeoutException) as exc_info:
            manager.wait_for(By.CSS_SELECTOR, "td#completion-status", timeout=1)

        assert exc_info.value.msg == (
            "Timed out after 1s waiting for td#completion-status"
        )

    def test_fill_clears_then_types(self, manager, driver):
        element = driver.find_element.return_value

        manager.fill(By.CSS_SELECTOR, "input#process-name", "Test Process")

        element.clear.assert_called_once()
        element.send_keys.assert_called_once_with("Test Process")

    def test_press_enter(self, manager, driver):
        manager.press_enter(By.CSS_SELECTOR, 'input[name="username"]')

        driver.find_element.return_value.send_keys.assert_called_once_with(Keys.ENTER)

    def test_click_waits_for_clickable_element(self, manager, driver):
        manager.click(By.XPATH, button_with_text("Save"))

        driver.find_element.assert_called_with(
            By.XPATH, '//button[normalize-space()="Save"]'
        )
        driver.find_element.return_value.click.assert_called_once()

    def test_wait_for_navigation_returns_once_url_changes(self, manager, driver):
        driver.current_url = "http://camunda.local/"

        manager.wait_for_navigation("http://camunda.local/login")

    def test_get_text_reads_text_content(self, manager, driver):
        element = driver.find_element.return_value
        element.get_attribute.return_value = "Completed"

        text = manager.get_text(By.CSS_SELECTOR, "td#completion-status")

        assert text == "Completed"
        element.get_attribute.assert_called_once_with("textContent")

    def test_select_option_falls_back_to_value(self, manager):
        with patch("camunda_bot.services.browser.browser.Select") as select_mock:
            select = select_mock.return_value
            select.select_by_visible_text.side_effect = NoSuchElementException("no label")

            manager.select_option(By.CSS_SELECTOR, "select#process-name", "proc-1")

        select.select_by_value.assert_called_once_with("proc-1")


class TestHiddenWorkspace:
    def test_hidden_create_button_fails_navigation(self, driver, log_messages):
        driver.find_element.return_value.is_displayed.return_value = False
        manager = BrowserManager(BrowserConfig(headless=True, default_wait_timeout=1))
        manager.driver = driver
        service = ModelerService(manager, CamundaConfig(base_url="http://camunda.local"))

        with pytest.raises(NavigationFailed) as exc_info:
            service.navigate_to_modeler()

        assert str(exc_info.value).startswith(
            "Navigation to Web Modeler failed: Timed out after 1s waiting for"
        )
        assert log_messages == []


class TestBoundedConnectorWait:
    def test_missing_connector_input_fails_after_timeout(self, driver):
        element = Mock()
        element.is_displayed.return_value = True
        element.is_enabled.return_value = True

        def find_element(by, value):
            if value == "input#rest-url":
                raise NoSuchElementException("no such element")
            return element

        driver.find_element.side_effect = find_element
        manager = BrowserManager(BrowserConfig(headless=True))
        manager.driver = driver
        service = ModelerService(
            manager,
            CamundaConfig(base_url="http://camunda.local"),
            connector_wait_timeout=1,
        )

        started = time.monotonic()
        with pytest.raises(ProcessCreationFailed) as exc_info:
            service.create_process("Test Process", "https://api.example.com/data")
        elapsed = time.monotonic() - started

        assert str(exc_info.value) == (
            "Process creation failed: Timed out after 1s waiting for input#rest-url"
        )
        assert isinstance(exc_info.value.original_exception, TimeoutException)
        assert elapsed < 10
