"""
Platform Detection
==================

Classifies the host operating system and maps it onto the PhantomJS
executable shipped for that platform.
"""

import platform
from enum import Enum
from typing import Optional

from phantompdf.core.exceptions import UnsupportedPlatformError


class OSPlatform(str, Enum):
    """Operating systems with a bundled PhantomJS build."""
    LINUX = "linux"
    WINDOWS = "windows"
    MACOS = "macos"

    @property
    def executable_name(self) -> str:
        """File name of the PhantomJS executable for this platform."""
        return _EXECUTABLES[self]


_EXECUTABLES = {
    OSPlatform.LINUX: "linux64_phantomjs.exe",
    OSPlatform.WINDOWS: "windows_phantomjs.exe",
    OSPlatform.MACOS: "osx_phantomjs.exe",
}

# platform.system() values
_SYSTEMS = {
    "linux": OSPlatform.LINUX,
    "windows": OSPlatform.WINDOWS,
    "darwin": OSPlatform.MACOS,
}


def detect_platform(system: Optional[str] = None) -> OSPlatform:
    """
    Classify the host operating system.

    Args:
        system: System name to classify, defaults to ``platform.system()``

    Returns:
        Detected platform

    Raises:
        UnsupportedPlatformError: If the system is not Linux, Windows or macOS
    """
    name = platform.system() if system is None else system
    try:
        return _SYSTEMS[name.strip().lower()]
    except KeyError:
        raise UnsupportedPlatformError(
            f"Operating system could not be classified, halting: {name or '<unknown>'}"
        ) from None
