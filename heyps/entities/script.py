"""
Script file domain entity.
"""

import os
from enum import Enum
from typing import Optional

from heyps.exceptions import InputError


class ScriptKind(Enum):
    """Script flavours, named after their file suffix."""

    PSJS = ".psjs"
    JSX = ".jsx"
    JS = ".js"

    @classmethod
    def from_path(cls, path: str) -> "ScriptKind":
        """
        Derive the script kind from a file name suffix (case-insensitive).

        Raises:
            InputError: If the suffix is not a supported script type
        """
        _, ext = os.path.splitext(path)
        ext = ext.lower()
        for member in cls:
            if member.value == ext:
                return member
        supported = ", ".join(m.value for m in cls)
        raise InputError(
            f"Unsupported script type '{ext or os.path.basename(path)}' "
            f"(expected one of: {supported})"
        )


class ScriptFile:
    """
    Script file entity: an existing regular file with a supported suffix.
    """

    def __init__(self, path: str):
        """
        Initialize the ScriptFile entity.

        Args:
            path: Path to the script file

        Raises:
            InputError: If the path is empty, missing, not a file or has an unsupported suffix
        """
        if not path or not isinstance(path, str):
            raise InputError("Script path must be a non-empty string")

        # Reject the suffix first so no filesystem state is needed to report it
        self.kind = ScriptKind.from_path(path)

        expanded = os.path.expanduser(path)
        if not os.path.exists(expanded):
            raise InputError(f"Script does not exist: {path}")
        if not os.path.isfile(expanded):
            raise InputError(f"Script path is not a file: {path}")

        self.path = os.path.abspath(expanded)
        self.name = os.path.basename(self.path)

    @classmethod
    def locate(cls, path: str, scripts_dir: Optional[str] = None) -> "ScriptFile":
        """
        Build a ScriptFile, falling back to the scripts directory for relative names.

        Args:
            path: Path as given by the user
            scripts_dir: Directory holding the user's saved scripts

        Returns:
            The ScriptFile for the first location that exists
        """
        expanded = os.path.expanduser(path or "")
        if (
            scripts_dir
            and expanded
            and not os.path.isabs(expanded)
            and not os.path.exists(expanded)
        ):
            candidate = os.path.join(scripts_dir, expanded)
            if os.path.exists(candidate):
                return cls(candidate)
        return cls(path)

    def exists(self) -> bool:
        return os.path.isfile(self.path)

    def __str__(self) -> str:
        return f"ScriptFile(name='{self.name}', kind='{self.kind.value}')"

    def __repr__(self) -> str:
        return f"ScriptFile(path='{self.path}')"
