from abc import ABC, abstractmethod

from heyps.entities.application import AppAbbr, ResolvedApplication
from heyps.entities.script import ScriptFile, ScriptKind


class ScriptDispatcherPort(ABC):
    @abstractmethod
    def check_compatibility(self, abbr: AppAbbr, kind: ScriptKind) -> None:
        """
        Ensure a script kind can run in an application.

        Raises:
            CompatibilityError: If the combination is not supported
        """
        pass

    @abstractmethod
    def dispatch(
        self, app: ResolvedApplication, script: ScriptFile, verbose: bool = False
    ) -> None:
        """
        Run a script inside the resolved application.

        Raises:
            CompatibilityError: If the script kind cannot run in the application
            DispatchError: If the dispatch command fails
        """
        pass
