"""
Dependency injection container for managing heyps dependencies.
"""

import logging

from heyps.adapters.application.local_application_resolver import (
    LocalApplicationResolver,
)
from heyps.adapters.application.spotlight_bundle_index import SpotlightBundleIndex
from heyps.adapters.script.macos_script_dispatcher import MacOSScriptDispatcher
from heyps.adapters.system.subprocess_runner import SubprocessCommandRunner
from heyps.config.settings import Settings
from heyps.ports.application.application_resolver_port import ApplicationResolverPort
from heyps.ports.application.bundle_index_port import BundleIndexPort
from heyps.ports.script.script_dispatcher_port import ScriptDispatcherPort
from heyps.ports.system.command_runner_port import CommandRunnerPort
from heyps.use_cases.application.list_installations import ListInstallationsUseCase
from heyps.use_cases.script.run_script import RunScriptUseCase


class DependencyContainer:
    """
    Container for managing dependencies using dependency injection.
    """

    def __init__(self):
        self._instances = {}
        self._logger = logging.getLogger("heyps")

    def get_settings(self) -> Settings:
        """
        Get the process-wide settings, read from the environment on first use.

        Returns:
            Settings instance
        """
        if "settings" not in self._instances:
            self._instances["settings"] = Settings()
        return self._instances["settings"]

    def get_command_runner(self) -> CommandRunnerPort:
        """
        Get command runner instance.

        Returns:
            CommandRunnerPort implementation
        """
        if "command_runner" not in self._instances:
            self._instances["command_runner"] = SubprocessCommandRunner(self._logger)
        return self._instances["command_runner"]

    def get_bundle_index(self) -> BundleIndexPort:
        """
        Get bundle index instance.

        Returns:
            BundleIndexPort implementation
        """
        if "bundle_index" not in self._instances:
            self._instances["bundle_index"] = SpotlightBundleIndex(
                self.get_command_runner(), self._logger
            )
        return self._instances["bundle_index"]

    def get_application_resolver(self) -> ApplicationResolverPort:
        """
        Get application resolver instance.

        Returns:
            ApplicationResolverPort implementation
        """
        if "application_resolver" not in self._instances:
            self._instances["application_resolver"] = LocalApplicationResolver(
                self.get_bundle_index(), self._logger
            )
        return self._instances["application_resolver"]

    def get_script_dispatcher(self) -> ScriptDispatcherPort:
        """
        Get script dispatcher instance.

        Returns:
            ScriptDispatcherPort implementation
        """
        if "script_dispatcher" not in self._instances:
            self._instances["script_dispatcher"] = MacOSScriptDispatcher(
                self.get_command_runner(), self._logger
            )
        return self._instances["script_dispatcher"]

    def get_run_script_use_case(self) -> RunScriptUseCase:
        """
        Get run script use case with injected dependencies.

        Returns:
            Configured RunScriptUseCase
        """
        if "run_script_use_case" not in self._instances:
            self._instances["run_script_use_case"] = RunScriptUseCase(
                self.get_application_resolver(),
                self.get_script_dispatcher(),
                self._logger,
            )
        return self._instances["run_script_use_case"]

    def get_list_installations_use_case(self) -> ListInstallationsUseCase:
        """
        Get list installations use case with injected dependencies.

        Returns:
            Configured ListInstallationsUseCase
        """
        if "list_installations_use_case" not in self._instances:
            self._instances["list_installations_use_case"] = ListInstallationsUseCase(
                self.get_application_resolver(), self._logger
            )
        return self._instances["list_installations_use_case"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
