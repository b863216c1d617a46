"""Read-only facts about the running build: OS, packaging flavor, version."""

from build_identity.flavor import (
    is_mac_sys_ext,
    is_mobile_build,
    is_sandboxed_macos,
    is_windows_gui,
    os_display_name,
)
from build_identity.meta import Meta, get_meta
from build_identity.release import is_unstable_build
from build_identity.version import get_version

__all__ = [
    "Meta",
    "get_meta",
    "get_version",
    "is_mac_sys_ext",
    "is_mobile_build",
    "is_sandboxed_macos",
    "is_unstable_build",
    "is_windows_gui",
    "os_display_name",
]
