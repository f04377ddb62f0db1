from abc import ABC, abstractmethod


class BundleIndexPort(ABC):
    @abstractmethod
    def find_bundles(self, bundle_id: str) -> list[str]:
        """
        Return the paths of every installed bundle whose identifier equals bundle_id.

        The order of the returned paths is not meaningful.

        Raises:
            DiscoveryError: If the index could not be queried
        """
        pass
