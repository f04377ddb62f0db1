"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
from unittest.mock import MagicMock

import pytest

from heyps.container import DependencyContainer
from heyps.entities.application import (
    AppAbbr,
    ResolvedApplication,
    VersionSelector,
)
from heyps.ports.system.command_runner_port import CommandResult, CommandRunnerPort


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory holding one script of each supported kind.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        for name in ("hello.psjs", "hello.jsx", "hello.js", "notes.txt"):
            with open(os.path.join(temp_dir, name), "w") as f:
                f.write("alert('hello');")

        os.makedirs(os.path.join(temp_dir, "folder.jsx"))

        yield temp_dir


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def mock_runner():
    """
    Create a command runner stub whose commands all succeed silently.

    Returns:
        Mock CommandRunnerPort
    """
    runner = MagicMock(spec=CommandRunnerPort)
    runner.run.side_effect = lambda cmd: CommandResult(args=list(cmd), returncode=0)
    return runner


@pytest.fixture
def make_app():
    """
    Build ResolvedApplication instances for a given abbreviation.

    Returns:
        Factory taking (abbr, name)
    """

    def _make(abbr: AppAbbr = AppAbbr.PS, name: str = "Adobe Photoshop 2024"):
        return ResolvedApplication(
            abbr=abbr,
            bundle_id=abbr.bundle_id,
            name=name,
            path=f"/Applications/{name}/{name}.app",
            selector=VersionSelector.parse("latest"),
        )

    return _make


@pytest.fixture
def dependency_container(mock_logger):
    """
    Create a dependency container with mocked dependencies for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer()
    # Replace the logger with our mock
    container._logger = mock_logger
    return container
