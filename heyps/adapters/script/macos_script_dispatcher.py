"""
macOS implementation of the script dispatcher port (open / osascript).
"""

import logging
from typing import Optional

from typing_extensions import override

from heyps.entities.application import AppAbbr, ResolvedApplication
from heyps.entities.script import ScriptFile, ScriptKind
from heyps.exceptions import CommandExecutionError, CompatibilityError, DispatchError
from heyps.ports.script.script_dispatcher_port import ScriptDispatcherPort
from heyps.ports.system.command_runner_port import CommandResult, CommandRunnerPort


def escape_applescript_string(value: str) -> str:
    """Escape a value for use inside an AppleScript double-quoted string literal."""
    return value.replace("\\", "\\\\").replace('"', '\\"')


def unescape_applescript_string(value: str) -> str:
    """Reverse escape_applescript_string."""
    out: list[str] = []
    chars = iter(value)
    for ch in chars:
        if ch == "\\":
            out.append(next(chars, "\\"))
        else:
            out.append(ch)
    return "".join(out)


def applescript_command(app: ResolvedApplication, script: ScriptFile) -> str:
    """Build the AppleScript line asking an application to run a script file."""
    name = escape_applescript_string(app.name)
    path = escape_applescript_string(script.path)
    if app.abbr is AppAbbr.AE:
        return f'tell application "{name}" to DoScriptFile "{path}"'
    if app.abbr is AppAbbr.PS or app.abbr is AppAbbr.AI:
        return f'tell application "{name}" to do javascript of file "{path}"'
    raise AssertionError(f"Unhandled application: {app.abbr!r}")


class MacOSScriptDispatcher(ScriptDispatcherPort):
    def __init__(
        self,
        runner: CommandRunnerPort,
        logger: Optional[logging.Logger] = None,
        open_cmd: str = "open",
        osascript_cmd: str = "osascript",
    ) -> None:
        self._runner = runner
        self._logger = logger or logging.getLogger(__name__)
        self._open = open_cmd
        self._osascript = osascript_cmd

    @override
    def check_compatibility(self, abbr: AppAbbr, kind: ScriptKind) -> None:
        if kind is ScriptKind.PSJS:
            if abbr is not AppAbbr.PS:
                raise CompatibilityError(
                    f"{kind.value} scripts can only run in Adobe Photoshop, not Adobe {abbr.base_name}"
                )
            return
        if kind is ScriptKind.JS:
            if abbr is AppAbbr.AE:
                raise CompatibilityError(
                    f"Adobe {abbr.base_name} cannot run {kind.value} scripts, "
                    f"use a {ScriptKind.JSX.value} file instead"
                )
            return
        if kind is ScriptKind.JSX:
            return
        raise AssertionError(f"Unhandled script kind: {kind!r}")

    def build_command(self, app: ResolvedApplication, script: ScriptFile) -> list[str]:
        """Return the single command that makes the application run the script."""
        if script.kind is ScriptKind.PSJS:
            # The bundle path tells apart installed versions sharing a display name
            return [self._open, "-a", app.path, script.path]
        if script.kind is ScriptKind.JSX or script.kind is ScriptKind.JS:
            return [self._osascript, "-e", applescript_command(app, script)]
        raise AssertionError(f"Unhandled script kind: {script.kind!r}")

    @override
    def dispatch(
        self, app: ResolvedApplication, script: ScriptFile, verbose: bool = False
    ) -> None:
        self.check_compatibility(app.abbr, script.kind)
        cmd = self.build_command(app, script)

        self._logger.info(f"Dispatching {script.name} to {app.name}")
        try:
            result = self._runner.run(cmd)
        except CommandExecutionError as e:
            raise DispatchError(f"Failed to execute command: {e}")

        if verbose:
            self._echo(result)

        if not result.ok:
            stderr = result.stderr.strip()
            code = result.returncode if result.returncode is not None else -1
            self._logger.error(f"{cmd[0]} exited with code {code}: {stderr}")
            raise DispatchError(
                f"Failed to execute command (exit code {code}): {stderr}",
                returncode=code,
                stderr=stderr,
            )
        self._logger.info(f"{script.name} dispatched to {app.name}")

    def _echo(self, result: CommandResult) -> None:
        for line in result.stdout.splitlines():
            self._logger.info(f"stdout: {line}")
        for line in result.stderr.splitlines():
            self._logger.info(f"stderr: {line}")
