import logging
from typing import Optional

from heyps.entities.application import AppAbbr, ResolvedApplication, VersionSelector
from heyps.entities.script import ScriptFile
from heyps.exceptions import BaseAppError
from heyps.ports.application.application_resolver_port import ApplicationResolverPort
from heyps.ports.script.script_dispatcher_port import ScriptDispatcherPort


class RunScriptUseCase:
    """Resolve the target application, then dispatch a script to it."""

    def __init__(
        self,
        resolver: ApplicationResolverPort,
        dispatcher: ScriptDispatcherPort,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._resolver = resolver
        self._dispatcher = dispatcher
        self._logger = logger or logging.getLogger(__name__)

    def execute(
        self,
        abbr: AppAbbr,
        selector: VersionSelector,
        script: ScriptFile,
        verbose: bool = False,
    ) -> ResolvedApplication:
        """
        Run a script in one installed version of an application.

        Args:
            abbr: Target application
            selector: Which installed version to use
            script: Script to run
            verbose: Echo the dispatch command output

        Returns:
            The application the script was dispatched to

        Raises:
            BaseAppError: If resolution or dispatch fails
        """
        try:
            # Fail on an impossible combination before querying Spotlight
            self._dispatcher.check_compatibility(abbr, script.kind)
            self._logger.info(f"Resolving {abbr.value} ({selector})")
            app = self._resolver.resolve(abbr, selector)
            self._dispatcher.dispatch(app, script, verbose=verbose)
            self._logger.info(f"Ran {script.name} in {app.name}")
            return app
        except BaseAppError:
            raise
        except Exception as e:
            self._logger.error(f"Error running script: {e}")
            raise BaseAppError(f"Failed to run {script.name}: {e}")
