"""Operating system naming and platform-specific build flavor detection."""

import logging
import ntpath
import os
import sys
from dataclasses import dataclass

from build_identity.config import (
    MAC_SANDBOXED_SUFFIXES,
    MAC_SYSEXT_EXECUTABLE,
    MOBILE_PLATFORMS,
    OS_DISPLAY_NAMES,
    WINDOWS_GUI_EXECUTABLES,
)
from build_identity.utils import executable_path, is_macos, is_windows, once

logger = logging.getLogger(__name__)


def is_mobile_build() -> bool:
    """Report whether this is a mobile (Android or iOS) client build."""
    return sys.platform in MOBILE_PLATFORMS


def os_display_name() -> str:
    """Return sys.platform, except 'iOS' or 'macOS' for the Apple platforms.

    Those two names, with that exact capitalization, are stored verbatim by
    the servers that receive them.
    """
    return OS_DISPLAY_NAMES.get(sys.platform, sys.platform)


# ---------------------------------------------------------------------------
# macOS
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class MacFlavor:
    is_system_extension: bool = False
    is_sandboxed: bool = False


def mac_flavor_for_path(exe: str) -> MacFlavor:
    """Classify a macOS executable path.

    Pure function: the System Extension binary is recognized by its file
    name and is always sandboxed. The App Store app and its network extension
    are recognized by their location inside the app bundle.
    """
    if not exe:
        return MacFlavor()
    sys_ext = os.path.basename(exe) == MAC_SYSEXT_EXECUTABLE
    sandboxed = sys_ext or exe.endswith(MAC_SANDBOXED_SUFFIXES)
    return MacFlavor(is_system_extension=sys_ext, is_sandboxed=sandboxed)


@once
def _mac_flavor() -> MacFlavor:
    exe = executable_path()
    if not exe:
        logger.debug("Cannot resolve executable; assuming plain macOS daemon")
        return MacFlavor()
    result = mac_flavor_for_path(exe)
    logger.debug("macOS flavor for %s: %s", exe, result)
    return result


def is_sandboxed_macos() -> bool:
    """Report whether this process is a sandboxed macOS process.

    True for the Mac App Store app and its extension, and for the System
    Extension ("macsys") build. False for the standalone daemon on macOS and
    on every other platform.
    """
    if not is_macos():
        return False
    return _mac_flavor().is_sandboxed


def is_mac_sys_ext() -> bool:
    """Report whether this binary is the standalone System Extension build for macOS."""
    if not is_macos():
        return False
    return _mac_flavor().is_system_extension


# ---------------------------------------------------------------------------
# Windows
# ---------------------------------------------------------------------------


def is_windows_gui_name(exe: str) -> bool:
    """Check whether an executable path names the Windows GUI binary.

    Pure function: only the file name counts, compared case-insensitively.
    Windows path rules apply regardless of the host OS.
    """
    name = ntpath.basename(exe).casefold()
    return name in WINDOWS_GUI_EXECUTABLES


def is_windows_gui() -> bool:
    """Report whether the current process is the Windows GUI.

    Not cached: the executable path is looked up on every call.
    """
    if not is_windows():
        return False
    return is_windows_gui_name(executable_path())
