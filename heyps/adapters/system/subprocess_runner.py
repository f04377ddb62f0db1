"""
Subprocess based implementation of the command runner port.
"""

import logging
import subprocess
from typing import Optional

from typing_extensions import override

from heyps.exceptions import CommandExecutionError
from heyps.ports.system.command_runner_port import CommandResult, CommandRunnerPort


class SubprocessCommandRunner(CommandRunnerPort):
    """Runs commands with subprocess.run, blocking until they exit."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    @override
    def run(self, cmd: list[str]) -> CommandResult:
        args = [str(a) for a in cmd]
        if not args:
            raise CommandExecutionError("Command must not be empty")
        self._logger.debug(f"Running command: {args}")
        try:
            completed = subprocess.run(args, capture_output=True, text=True)
        except OSError as e:
            self._logger.error(f"Failed to start {args[0]}: {e}")
            raise CommandExecutionError(f"Failed to start {args[0]}: {e}")
        self._logger.debug(f"{args[0]} exited with code {completed.returncode}")
        return CommandResult(
            args=args,
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
