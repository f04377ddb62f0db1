"""
Application domain entities.
"""

import os
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from heyps.exceptions import InputError

PRERELEASE_MARKER = "(Beta)"
BUNDLE_SUFFIX = ".app"

_YEAR_RE = re.compile(r"20[0-9]{2}")


class AppAbbr(Enum):
    """Supported Adobe applications, keyed by their command line abbreviation."""

    PS = "ps"
    AI = "ai"
    AE = "ae"

    @classmethod
    def parse(cls, value: str) -> "AppAbbr":
        """
        Build an AppAbbr from its exact abbreviation.

        Args:
            value: One of 'ps', 'ai' or 'ae'

        Returns:
            The matching AppAbbr

        Raises:
            InputError: If the abbreviation is not supported
        """
        for member in cls:
            if member.value == value:
                return member
        supported = ", ".join(m.value for m in cls)
        raise InputError(f"Unsupported application '{value}' (expected one of: {supported})")

    @property
    def base_name(self) -> str:
        """Human readable product name."""
        if self is AppAbbr.PS:
            return "Photoshop"
        if self is AppAbbr.AI:
            return "Illustrator"
        if self is AppAbbr.AE:
            return "After Effects"
        raise AssertionError(f"Unhandled application: {self!r}")

    @property
    def bundle_id(self) -> str:
        """macOS bundle identifier used to find installations with Spotlight."""
        if self is AppAbbr.PS:
            return "com.adobe.Photoshop"
        if self is AppAbbr.AI:
            return "com.adobe.illustrator"
        if self is AppAbbr.AE:
            return "com.adobe.AfterEffects"
        raise AssertionError(f"Unhandled application: {self!r}")


class SelectorKind(Enum):
    LATEST = "latest"
    BETA = "beta"
    YEAR = "year"


@dataclass(frozen=True)
class VersionSelector:
    """Which installed version of an application to target."""

    kind: SelectorKind
    year: Optional[str] = None

    @classmethod
    def parse(cls, value: str) -> "VersionSelector":
        """
        Parse a target string.

        Args:
            value: 'latest', 'beta' or a release year such as '2024'

        Returns:
            The matching VersionSelector

        Raises:
            InputError: If the value is none of the accepted forms
        """
        if value == "latest":
            return cls(SelectorKind.LATEST)
        if value == "beta":
            return cls(SelectorKind.BETA)
        if _YEAR_RE.fullmatch(value or ""):
            return cls(SelectorKind.YEAR, year=value)
        raise InputError(
            f"Unsupported target '{value}': expected 'latest', 'beta' "
            "or a four-digit release year starting with 20 (e.g. 2024)"
        )

    def __str__(self) -> str:
        if self.kind is SelectorKind.YEAR:
            return str(self.year)
        return self.kind.value


def bundle_name(path: str) -> str:
    """Return the bundle file name of an installation path ('Adobe Photoshop 2024.app')."""
    return os.path.basename(path.rstrip("/"))


def display_name(path: str) -> str:
    """Return the name AppleScript addresses the application by ('Adobe Photoshop 2024')."""
    name = bundle_name(path)
    if name.endswith(BUNDLE_SUFFIX):
        return name[: -len(BUNDLE_SUFFIX)]
    return name


def is_prerelease(path: str) -> bool:
    return PRERELEASE_MARKER in bundle_name(path)


def select_installation(paths: list[str], selector: VersionSelector) -> Optional[str]:
    """
    Apply a selector's tie-break rule to installation paths sorted ascending.

    Args:
        paths: Sorted installation paths
        selector: Version selector to apply

    Returns:
        The chosen path, or None when the selector matches nothing
    """
    if not paths:
        return None
    if selector.kind is SelectorKind.LATEST:
        stable = [p for p in paths if not is_prerelease(p)]
        # Latest always resolves when anything is installed, even to a beta
        return stable[-1] if stable else paths[-1]
    if selector.kind is SelectorKind.BETA:
        betas = [p for p in paths if is_prerelease(p)]
        return betas[-1] if betas else None
    if selector.kind is SelectorKind.YEAR:
        for path in reversed(paths):
            if str(selector.year) in bundle_name(path):
                return path
        return None
    raise AssertionError(f"Unhandled selector: {selector.kind!r}")


@dataclass(frozen=True)
class ResolvedApplication:
    """
    A concrete installed application chosen for one invocation.

    The installation existed when Spotlight reported it; nothing guarantees
    it still does when the script is dispatched.
    """

    abbr: AppAbbr
    bundle_id: str
    name: str
    path: str
    selector: VersionSelector

    def __str__(self) -> str:
        return f"{self.name} ({self.path})"
