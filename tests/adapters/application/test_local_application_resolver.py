"""
Tests for the LocalApplicationResolver.
"""

from unittest.mock import MagicMock

import pytest

from heyps.adapters.application.local_application_resolver import (
    LocalApplicationResolver,
)
from heyps.entities.application import AppAbbr, VersionSelector
from heyps.exceptions import DiscoveryError, ResolutionError
from heyps.ports.application.bundle_index_port import BundleIndexPort

PS_2022 = "/Applications/Adobe Photoshop 2022/Adobe Photoshop 2022.app"
PS_2023 = "/Applications/Adobe Photoshop 2023/Adobe Photoshop 2023.app"
PS_BETA = "/Applications/Adobe Photoshop (Beta)/Adobe Photoshop (Beta).app"


def _resolver(paths, logger):
    index = MagicMock(spec=BundleIndexPort)
    index.find_bundles.return_value = list(paths)
    return LocalApplicationResolver(index, logger), index


class TestLocalApplicationResolver:
    """Test cases for the LocalApplicationResolver."""

    def test_resolve_latest(self, mock_logger):
        resolver, index = _resolver([PS_BETA, PS_2023, PS_2022], mock_logger)

        app = resolver.resolve(AppAbbr.PS, VersionSelector.parse("latest"))

        index.find_bundles.assert_called_once_with("com.adobe.Photoshop")
        assert app.path == PS_2023
        assert app.name == "Adobe Photoshop 2023"
        assert app.abbr is AppAbbr.PS
        assert app.bundle_id == "com.adobe.Photoshop"
        assert str(app.selector) == "latest"

    def test_resolve_latest_falls_back_to_beta(self, mock_logger):
        resolver, _ = _resolver([PS_BETA], mock_logger)

        app = resolver.resolve(AppAbbr.PS, VersionSelector.parse("latest"))

        assert app.path == PS_BETA
        assert app.name == "Adobe Photoshop (Beta)"

    def test_resolve_is_independent_of_index_order(self, mock_logger):
        orders = [
            [PS_2022, PS_2023, PS_BETA],
            [PS_BETA, PS_2022, PS_2023],
            [PS_2023, PS_BETA, PS_2022],
        ]
        winners = set()
        for order in orders:
            resolver, _ = _resolver(order, mock_logger)
            for _ in range(2):
                winners.add(
                    resolver.resolve(AppAbbr.PS, VersionSelector.parse("latest")).path
                )
        assert winners == {PS_2023}

    def test_resolve_beta(self, mock_logger):
        resolver, _ = _resolver([PS_2023, PS_BETA], mock_logger)

        app = resolver.resolve(AppAbbr.PS, VersionSelector.parse("beta"))

        assert app.path == PS_BETA

    def test_resolve_beta_not_found(self, mock_logger):
        resolver, _ = _resolver([PS_2022, PS_2023], mock_logger)

        with pytest.raises(ResolutionError, match="beta not found"):
            resolver.resolve(AppAbbr.PS, VersionSelector.parse("beta"))

    def test_resolve_year(self, mock_logger):
        paths = [
            "/Applications/Adobe Photoshop 2021.app",
            "/Applications/Adobe Photoshop 2023.app",
            "/Applications/Adobe Photoshop 2022.app",
        ]
        resolver, _ = _resolver(paths, mock_logger)

        app = resolver.resolve(AppAbbr.PS, VersionSelector.parse("2022"))

        assert app.path == "/Applications/Adobe Photoshop 2022.app"

    def test_resolve_year_not_found(self, mock_logger):
        resolver, _ = _resolver([PS_2022, PS_2023], mock_logger)

        with pytest.raises(ResolutionError, match="2019 not found"):
            resolver.resolve(AppAbbr.PS, VersionSelector.parse("2019"))

    def test_resolve_nothing_installed(self, mock_logger):
        resolver, _ = _resolver([], mock_logger)

        with pytest.raises(
            ResolutionError, match=r"After Effects not found \(bundle id com.adobe.AfterEffects\)"
        ):
            resolver.resolve(AppAbbr.AE, VersionSelector.parse("latest"))

    def test_non_application_results_are_ignored(self, mock_logger):
        resolver, _ = _resolver(
            [
                "/Users/me/Library/Caches/com.adobe.Photoshop",
                "/Applications/Adobe Photoshop 2024/Adobe Photoshop 2024.app",
            ],
            mock_logger,
        )

        assert resolver.candidates(AppAbbr.PS) == [
            "/Applications/Adobe Photoshop 2024/Adobe Photoshop 2024.app"
        ]

    def test_only_non_application_results_is_not_found(self, mock_logger):
        resolver, _ = _resolver(["/tmp/com.adobe.illustrator.plist"], mock_logger)

        with pytest.raises(ResolutionError, match="Illustrator not found"):
            resolver.resolve(AppAbbr.AI, VersionSelector.parse("latest"))

    def test_discovery_error_propagates(self, mock_logger):
        index = MagicMock(spec=BundleIndexPort)
        index.find_bundles.side_effect = DiscoveryError("Spotlight is disabled")
        resolver = LocalApplicationResolver(index, mock_logger)

        with pytest.raises(DiscoveryError, match="Spotlight is disabled"):
            resolver.resolve(AppAbbr.PS, VersionSelector.parse("latest"))
