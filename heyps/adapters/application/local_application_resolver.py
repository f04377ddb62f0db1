import logging
from typing import Optional

from typing_extensions import override

from heyps.entities.application import (
    BUNDLE_SUFFIX,
    AppAbbr,
    ResolvedApplication,
    SelectorKind,
    VersionSelector,
    bundle_name,
    display_name,
    select_installation,
)
from heyps.exceptions import ResolutionError
from heyps.ports.application.application_resolver_port import ApplicationResolverPort
from heyps.ports.application.bundle_index_port import BundleIndexPort


class LocalApplicationResolver(ApplicationResolverPort):
    def __init__(
        self, index: BundleIndexPort, logger: Optional[logging.Logger] = None
    ) -> None:
        self._index = index
        self._logger = logger or logging.getLogger(__name__)

    @override
    def candidates(self, abbr: AppAbbr) -> list[str]:
        paths = self._index.find_bundles(abbr.bundle_id)
        apps = [p for p in paths if bundle_name(p).endswith(BUNDLE_SUFFIX)]
        if len(apps) != len(paths):
            self._logger.debug(
                f"Ignored {len(paths) - len(apps)} non-application result(s) for {abbr.bundle_id}"
            )
        # Spotlight does not guarantee any order
        return sorted(apps)

    @override
    def resolve(self, abbr: AppAbbr, selector: VersionSelector) -> ResolvedApplication:
        apps = self.candidates(abbr)
        if not apps:
            raise ResolutionError(
                f"Adobe {abbr.base_name} not found (bundle id {abbr.bundle_id})"
            )

        path = select_installation(apps, selector)
        if path is None:
            if selector.kind is SelectorKind.BETA:
                raise ResolutionError(f"Adobe {abbr.base_name} beta not found")
            raise ResolutionError(
                f"Adobe {abbr.base_name} {selector} not found among {len(apps)} installation(s)"
            )

        app = ResolvedApplication(
            abbr=abbr,
            bundle_id=abbr.bundle_id,
            name=display_name(path),
            path=path,
            selector=selector,
        )
        self._logger.info(f"Resolved {abbr.value} {selector} to {app}")
        return app
