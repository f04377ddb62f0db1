import logging
from dataclasses import dataclass
from typing import Optional

from heyps.entities.application import AppAbbr, VersionSelector, select_installation
from heyps.exceptions import ApplicationError
from heyps.ports.application.application_resolver_port import ApplicationResolverPort


@dataclass(frozen=True)
class Installations:
    paths: list[str]
    selected: Optional[str]


class ListInstallationsUseCase:
    """List the installations of an application and the one a selector picks."""

    def __init__(
        self,
        resolver: ApplicationResolverPort,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._resolver = resolver
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, abbr: AppAbbr, selector: VersionSelector) -> Installations:
        try:
            paths = self._resolver.candidates(abbr)
        except ApplicationError:
            raise
        except Exception as e:
            self._logger.error(f"Error listing installations: {e}")
            raise ApplicationError(
                f"Failed to list installations of Adobe {abbr.base_name}: {e}"
            )
        self._logger.info(f"Found {len(paths)} installation(s) of Adobe {abbr.base_name}")
        return Installations(paths=paths, selected=select_installation(paths, selector))
