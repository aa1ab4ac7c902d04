"""
Process lifecycle workflow: log in, create a process with a REST connector,
start an instance and check that it completed.
"""

from typing import Callable, Optional

from loguru import logger

from camunda_bot.config import AppConfig, BrowserConfig
from camunda_bot.services.browser.browser import BrowserManager
from camunda_bot.services.modeler.modeler_service import ModelerService
from camunda_bot.workflows.base import BaseWorkflow, WorkflowStep


class ProcessLifecycleWorkflow(BaseWorkflow):
    """Workflow covering a process from creation to verified completion."""

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        browser_factory: Callable[[BrowserConfig], BrowserManager] = BrowserManager,
    ):
        super().__init__(
            "process_lifecycle",
            "Process Lifecycle",
            "Create a process with a REST connector, run it and verify completion",
        )
        self.config = config or AppConfig()
        self.browser_factory = browser_factory
        self.define_steps()

    def define_steps(self):
        """Define the steps for the process lifecycle workflow."""
        self.add_step(
            WorkflowStep(
                name="initialize_browser",
                description="Initialize browser session",
                handler=self._initialize_browser,
            )
        )

        self.add_step(
            WorkflowStep(
                name="login",
                description="Login to Camunda",
                handler=self._login,
                depends_on=["initialize_browser"],
            )
        )

        self.add_step(
            WorkflowStep(
                name="navigate_to_modeler",
                description="Open Web Modeler",
                handler=self._navigate_to_modeler,
                depends_on=["login"],
            )
        )

        self.add_step(
            WorkflowStep(
                name="create_process",
                description="Create process with a REST connector",
                handler=self._create_process,
                depends_on=["navigate_to_modeler"],
            )
        )

        self.add_step(
            WorkflowStep(
                name="run_process_instance",
                description="Start a process instance from Operate",
                handler=self._run_process_instance,
                depends_on=["create_process"],
            )
        )

        self.add_step(
            WorkflowStep(
                name="verify_completion",
                description="Verify process instance completion in Operate",
                handler=self._verify_completion,
                depends_on=["run_process_instance"],
            )
        )

    @property
    def modeler(self) -> ModelerService:
        return self.shared_resources["modeler_service"]

    def _initialize_browser(self) -> bool:
        browser = self.browser_factory(self.config.browser)
        # Registered before starting so cleanup() also covers a failed start
        self.shared_resources["browser"] = browser
        browser.start_browser()
        self.shared_resources["modeler_service"] = ModelerService(
            browser,
            self.config.camunda,
            connector_wait_timeout=self.config.browser.connector_wait_timeout,
        )
        logger.debug("Browser initialized successfully")
        return True

    def _login(self) -> bool:
        self.modeler.login(self.config.camunda.username, self.config.camunda.password)
        return True

    def _navigate_to_modeler(self) -> bool:
        self.modeler.navigate_to_modeler()
        return True

    def _create_process(self) -> bool:
        self.modeler.create_process(
            self.config.camunda.process_name, self.config.camunda.rest_url
        )
        return True

    def _run_process_instance(self) -> bool:
        self.modeler.run_process_instance(self.config.camunda.process_name)
        return True

    def _verify_completion(self) -> bool:
        completed = self.modeler.verify_completion(self.config.camunda.process_name)
        self.shared_resources["process_completed"] = completed
        return True

    def cleanup(self):
        """Close the browser session, if one was created."""
        browser = self.shared_resources.pop("browser", None)
        self.shared_resources.pop("modeler_service", None)
        if browser is not None:
            browser.close_browser()
            logger.debug(f"Workflow {self.workflow_id} resources cleaned up")
