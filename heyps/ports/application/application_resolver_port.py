from abc import ABC, abstractmethod

from heyps.entities.application import AppAbbr, ResolvedApplication, VersionSelector


class ApplicationResolverPort(ABC):
    @abstractmethod
    def candidates(self, abbr: AppAbbr) -> list[str]:
        """Return the sorted installation paths found for an application."""
        raise NotImplementedError

    @abstractmethod
    def resolve(self, abbr: AppAbbr, selector: VersionSelector) -> ResolvedApplication:
        """Pick exactly one installed application for an abbreviation and a version selector."""
        raise NotImplementedError
