from contextlib import contextmanager
from typing import Optional

from loguru import logger
from selenium import webdriver
from selenium.common.exceptions import (
    NoSuchDriverException,
    NoSuchElementException,
    SessionNotCreatedException,
    TimeoutException,
    WebDriverException,
)
from selenium.webdriver.chrome.options import Options
from selenium.webdriver.common.by import By
from selenium.webdriver.common.keys import Keys
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import Select, WebDriverWait

from camunda_bot.config import BrowserConfig
from camunda_bot.exceptions.infrastructure_exceptions import (
    BrowserSessionException,
    InfrastructureException,
)
from camunda_bot.observability import record_browser_operation


def button_with_text(label: str) -> str:
    """XPath for a button whose visible label is exactly ``label``."""
    return f'//button[normalize-space()="{label}"]'


class BrowserManager:
    def __init__(self, browser_config: Optional[BrowserConfig] = None):
        self.config = browser_config or BrowserConfig()
        self.driver: Optional[webdriver.Remote] = None

    def start_browser(self) -> webdriver.Remote:
        """Start Chrome locally, or through Selenium Grid when selenium_url is set."""
        try:
            chrome_options = Options()

            if self.config.headless:
                chrome_options.add_argument("--headless")

            chrome_options.add_argument("--no-sandbox")
            chrome_options.add_argument("--disable-dev-shm-usage")
            chrome_options.add_argument("--disable-gpu")
            chrome_options.add_argument("--window-size=1920,1080")
            chrome_options.add_argument("--disable-extensions")
            chrome_options.add_argument("--no-first-run")
            chrome_options.add_argument("--no-default-browser-check")

            if self.config.selenium_url:
                logger.debug(
                    f"Connecting to Selenium Grid at: {self.config.selenium_url}"
                )
                self.driver = webdriver.Remote(
                    command_executor=self.config.selenium_url, options=chrome_options
                )
            else:
                self.driver = webdriver.Chrome(options=chrome_options)

            self.driver.set_page_load_timeout(self.config.page_load_timeout)

            logger.debug("Browser started successfully")
            return self.driver

        except Exception as e:
            logger.debug(f"Failed to start browser: {e}")

            if isinstance(e, TimeoutException):
                raise InfrastructureException(
                    message=f"Browser startup timeout: {e.msg}",
                    error_type="timeout",
                    details={"original_error": str(e)},
                    original_exception=e,
                )
            elif isinstance(e, (ConnectionRefusedError, ConnectionResetError)):
                raise InfrastructureException(
                    message=f"Connection failed to Selenium Grid: {e}",
                    error_type="connection_refused",
                    details={"original_error": str(e)},
                    original_exception=e,
                )
            elif isinstance(e, SessionNotCreatedException):
                raise BrowserSessionException(
                    message=f"Browser session creation failed: {e.msg}",
                    session_details={
                        "original_error": str(e),
                        "error_type": "session_not_created",
                    },
                    original_exception=e,
                )
            elif isinstance(e, (WebDriverException, NoSuchDriverException)):
                raise InfrastructureException(
                    message=f"Browser startup failed due to web driver issue: {e.msg}",
                    error_type="web_driver_issue",
                    details={"original_error": str(e)},
                    original_exception=e,
                )
            else:
                raise InfrastructureException(
                    message=f"Browser startup failed: {e}",
                    error_type="general_infrastructure",
                    details={"original_error": str(e)},
                    original_exception=e,
                )

    def close_browser(self):
        """Close the browser and clean up resources."""
        if self.driver:
            try:
                self.driver.quit()
                logger.debug("Browser closed successfully")
            except Exception as e:
                logger.debug(f"Error closing browser: {e}")
            finally:
                self.driver = None

    def _require_driver(self):
        if not self.driver:
            raise RuntimeError("Browser not started. Call start_browser() first.")
        return self.driver

    @contextmanager
    def _operation(self, operation: str, target: str):
        try:
            yield
            record_browser_operation(operation, "success")
        except Exception as e:
            record_browser_operation(operation, "failed")
            logger.debug(f"Browser operation {operation} failed on {target}: {e}")
            raise

    def navigate_to(self, url: str):
        """Navigate to a specific URL."""
        driver = self._require_driver()
        with self._operation("navigation", url):
            logger.debug(f"Navigating to: {url}")
            driver.get(url)

    def wait_for(self, by: By, value: str, timeout: Optional[int] = None) -> WebElement:
        """Wait until an element is visible; raises TimeoutException otherwise.

        When ``timeout`` is None the browser-wide default wait applies.
        """
        driver = self._require_driver()
        wait_time = timeout if timeout is not None else self.config.default_wait_timeout
        with self._operation("wait_for_element", value):
            return WebDriverWait(driver, wait_time).until(
                EC.visibility_of_element_located((by, value)),
                message=f"Timed out after {wait_time}s waiting for {value}",
            )

    def click(self, by: By, value: str, timeout: Optional[int] = None):
        driver = self._require_driver()
        wait_time = timeout if timeout is not None else self.config.default_wait_timeout
        with self._operation("element_click", value):
            element = WebDriverWait(driver, wait_time).until(
                EC.element_to_be_clickable((by, value)),
                message=f"Timed out after {wait_time}s waiting to click {value}",
            )
            element.click()
            logger.debug(f"Clicked element: {by}={value}")

    def fill(self, by: By, value: str, text: str, timeout: Optional[int] = None):
        """Replace the content of an input with ``text``."""
        element = self.wait_for(by, value, timeout)
        with self._operation("input_text", value):
            element.clear()
            element.send_keys(text)

    def press_enter(self, by: By, value: str):
        element = self.wait_for(by, value)
        with self._operation("key_press", value):
            element.send_keys(Keys.ENTER)

    def wait_for_navigation(self, previous_url: str, timeout: Optional[int] = None):
        """Block until the page URL differs from ``previous_url``."""
        driver = self._require_driver()
        wait_time = timeout if timeout is not None else self.config.default_wait_timeout
        with self._operation("wait_for_navigation", previous_url):
            WebDriverWait(driver, wait_time).until(
                EC.url_changes(previous_url),
                message=f"Timed out after {wait_time}s waiting to leave {previous_url}",
            )

    def select_option(self, by: By, value: str, option: str):
        """Select an option of a <select> by its label, or by its value."""
        element = self.wait_for(by, value)
        with self._operation("select_option", value):
            select = Select(element)
            try:
                select.select_by_visible_text(option)
            except NoSuchElementException:
                select.select_by_value(option)

    def get_text(self, by: By, value: str) -> str:
        """Return the raw textContent of an element."""
        element = self.wait_for(by, value)
        with self._operation("read_text", value):
            return element.get_attribute("textContent") or ""

    def get_current_url(self) -> str:
        return self._require_driver().current_url
