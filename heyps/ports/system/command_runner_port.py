"""
Command runner port interface defining the contract for running external programs.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one finished external command."""

    args: list[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class CommandRunnerPort(ABC):
    """Port interface for running a single blocking external command."""

    @abstractmethod
    def run(self, cmd: list[str]) -> CommandResult:
        """
        Run a command to completion and capture its output.

        Args:
            cmd: Program and arguments, e.g. ['mdfind', 'query']

        Returns:
            The captured CommandResult, whatever the exit status

        Raises:
            CommandExecutionError: If the program could not be started
        """
        pass
