from loguru import logger
from selenium.webdriver.common.by import By

from camunda_bot.config import CamundaConfig
from camunda_bot.exceptions import (
    CompletionVerificationFailed,
    LoginFailed,
    NavigationFailed,
    ProcessCreationFailed,
    ProcessInstanceRunFailed,
)
from camunda_bot.observability import record_completion_check
from camunda_bot.services.browser.browser import BrowserManager, button_with_text

COMPLETED_STATUS = "Completed"

USERNAME_INPUT = 'input[name="username"]'
PASSWORD_INPUT = 'input[name="password"]'
PROCESS_NAME_INPUT = "input#process-name"
REST_URL_INPUT = "input#rest-url"
OPERATE_SIDEBAR_TOGGLE = "button#operate-sidebar-toggle"
OPERATE_LINK = "a#operate-link"
PROCESS_SELECT = "select#process-name"
PROCESS_SEARCH_INPUT = "input#process-search"


def completion_status_selector(process_name: str) -> str:
    """CSS selector of the completion-status cell in the process's result row."""
    row_selector = f'tr[id="process-row-{process_name}"]'
    return f'{row_selector} td[id="completion-status"]'


def is_completed(status: str) -> bool:
    """Only the exact, case-sensitive text "Completed" counts as completion."""
    return status == COMPLETED_STATUS


class ModelerService:
    """Drives Web Modeler and Operate through a started BrowserManager."""

    def __init__(
        self,
        browser: BrowserManager,
        camunda_config: CamundaConfig,
        connector_wait_timeout: int = 5,
    ):
        self.browser = browser
        self.config = camunda_config
        self.connector_wait_timeout = connector_wait_timeout

    def login(self, username: str, password: str):
        """
        Log in to Camunda.

        Username and password are submitted one after the other, each with
        Enter, as the login form is a two-step form. Empty values are sent as-is.

        Raises:
            LoginFailed: if any browser action fails
        """
        try:
            self.browser.navigate_to(self.config.login_url)
            self.browser.fill(By.CSS_SELECTOR, USERNAME_INPUT, username)
            self.browser.press_enter(By.CSS_SELECTOR, USERNAME_INPUT)
            self.browser.fill(By.CSS_SELECTOR, PASSWORD_INPUT, password)
            login_page_url = self.browser.get_current_url()
            self.browser.press_enter(By.CSS_SELECTOR, PASSWORD_INPUT)
            self.browser.wait_for_navigation(login_page_url)
            logger.info("Logged in successfully")
        except Exception as e:
            raise LoginFailed(e) from e

    def navigate_to_modeler(self):
        """Open Web Modeler and wait for the "Create process" button."""
        try:
            self.browser.navigate_to(self.config.base_url)
            self.browser.wait_for(By.XPATH, button_with_text("Create process"))
            logger.info("Navigated to Web Modeler")
        except Exception as e:
            raise NavigationFailed(e) from e

    def create_process(self, process_name: str, rest_url: str):
        """
        Create a process and attach a REST connector to it.

        The connector URL input is the only element awaited with a bounded
        timeout; if the connector panel never renders the stage fails after
        ``connector_wait_timeout`` seconds.

        Raises:
            ProcessCreationFailed: if any browser action fails
        """
        try:
            self.browser.click(By.XPATH, button_with_text("Create process"))
            self.browser.fill(By.CSS_SELECTOR, PROCESS_NAME_INPUT, process_name)
            self.browser.click(By.XPATH, button_with_text("Create"))

            self.browser.click(By.XPATH, button_with_text("Add Connector"))
            self.browser.wait_for(
                By.CSS_SELECTOR, REST_URL_INPUT, timeout=self.connector_wait_timeout
            )
            self.browser.fill(By.CSS_SELECTOR, REST_URL_INPUT, rest_url)
            self.browser.click(By.XPATH, button_with_text("Save Connector"))

            self.browser.click(By.XPATH, button_with_text("Save"))
            logger.info(f'Process "{process_name}" created successfully')
        except Exception as e:
            raise ProcessCreationFailed(e) from e

    def run_process_instance(self, process_name: str):
        """Start an instance of the process from Operate."""
        try:
            self.browser.navigate_to(self.config.run_url)
            self.browser.click(By.XPATH, button_with_text("Run instance"))
            self._open_operate()
            self.browser.select_option(By.CSS_SELECTOR, PROCESS_SELECT, process_name)
            self.browser.click(By.XPATH, button_with_text("Start instance"))
            logger.info(f'Process instance of "{process_name}" started successfully')
        except Exception as e:
            raise ProcessInstanceRunFailed(e) from e

    def verify_completion(self, process_name: str) -> bool:
        """
        Search Operate for the process and check its completion status.

        Returns:
            bool: True if the status cell reads exactly "Completed". Any other
            value is reported as not completed; it is not an error.

        Raises:
            CompletionVerificationFailed: if any browser action fails
        """
        try:
            self._open_operate()
            self.browser.fill(By.CSS_SELECTOR, PROCESS_SEARCH_INPUT, process_name)
            self.browser.click(By.XPATH, button_with_text("Search"))

            status_selector = completion_status_selector(process_name)
            self.browser.wait_for(By.CSS_SELECTOR, status_selector)
            status = self.browser.get_text(By.CSS_SELECTOR, status_selector)
        except Exception as e:
            raise CompletionVerificationFailed(e) from e

        completed = is_completed(status)
        record_completion_check(completed)
        if completed:
            logger.info(f'Process instance of "{process_name}" completed successfully')
        else:
            logger.info(f'Process instance of "{process_name}" did not complete')
        return completed

    def _open_operate(self):
        """Open the Operate sidebar and follow its link."""
        self.browser.click(By.CSS_SELECTOR, OPERATE_SIDEBAR_TOGGLE)
        self.browser.wait_for(By.CSS_SELECTOR, OPERATE_LINK)
        self.browser.click(By.CSS_SELECTOR, OPERATE_LINK)
