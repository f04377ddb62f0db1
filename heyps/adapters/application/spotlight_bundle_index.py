"""
Spotlight (mdfind) implementation of the bundle index port.
"""

import logging
from typing import Optional

from typing_extensions import override

from heyps.exceptions import CommandExecutionError, DiscoveryError
from heyps.ports.application.bundle_index_port import BundleIndexPort
from heyps.ports.system.command_runner_port import CommandRunnerPort


def bundle_id_query(bundle_id: str) -> str:
    """Spotlight predicate matching bundles with exactly this identifier."""
    return f'kMDItemCFBundleIdentifier == "{bundle_id}"'


class SpotlightBundleIndex(BundleIndexPort):
    """Looks up installed bundles through the Spotlight metadata index."""

    def __init__(
        self,
        runner: CommandRunnerPort,
        logger: Optional[logging.Logger] = None,
        mdfind: str = "mdfind",
    ) -> None:
        self._runner = runner
        self._logger = logger or logging.getLogger(__name__)
        self._mdfind = mdfind

    @override
    def find_bundles(self, bundle_id: str) -> list[str]:
        query = bundle_id_query(bundle_id)
        self._logger.info(f"Querying Spotlight: {query}")
        try:
            result = self._runner.run([self._mdfind, query])
        except CommandExecutionError as e:
            raise DiscoveryError(f"Failed to query Spotlight for {bundle_id}: {e}")

        if not result.ok:
            stderr = result.stderr.strip()
            self._logger.error(f"mdfind exited with code {result.returncode}: {stderr}")
            raise DiscoveryError(
                f"Failed to query Spotlight for {bundle_id} "
                f"(exit code {result.returncode}): {stderr}"
            )

        paths = [line.strip() for line in result.stdout.splitlines() if line.strip()]
        self._logger.info(f"Spotlight returned {len(paths)} result(s) for {bundle_id}")
        return paths
