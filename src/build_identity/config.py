"""Configuration constants for build identity detection.

Executable names and bundle locations encode how each flavor of the client is
packaged. They are matched against the running executable's path at runtime.
"""

# ---------------------------------------------------------------------------
# Platform identifiers (as reported by sys.platform)
# ---------------------------------------------------------------------------

PLATFORM_MACOS = "darwin"
PLATFORM_IOS = "ios"
PLATFORM_ANDROID = "android"
PLATFORM_WINDOWS = "win32"

MOBILE_PLATFORMS = {PLATFORM_ANDROID, PLATFORM_IOS}

# Display names already stored verbatim by downstream systems. Keep the
# capitalization exactly as is.
OS_DISPLAY_NAMES = {
    PLATFORM_IOS: "iOS",
    PLATFORM_MACOS: "macOS",
}


# ---------------------------------------------------------------------------
# macOS flavors
# ---------------------------------------------------------------------------

# File name of the standalone System Extension ("macsys") binary.
MAC_SYSEXT_EXECUTABLE = "io.tailscale.ipn.macsys.network-extension"

# Executable locations inside the sandboxed app and extension bundles.
MAC_SANDBOXED_SUFFIXES = (
    "/Contents/MacOS/Tailscale",
    "/Contents/MacOS/IPNExtension",
)


# ---------------------------------------------------------------------------
# Windows flavors
# ---------------------------------------------------------------------------

# Compared case-insensitively against the executable's file name.
WINDOWS_GUI_EXECUTABLES = {"tailscale-ipn.exe", "tailscale-ipn"}


# ---------------------------------------------------------------------------
# Version stamping
# ---------------------------------------------------------------------------

DEV_MARKER = "-dev"

STAMP_ENV_PREFIX = "BUILD_IDENTITY_"
STAMP_SHORT = STAMP_ENV_PREFIX + "SHORT"
STAMP_LONG = STAMP_ENV_PREFIX + "LONG"
STAMP_GIT_COMMIT = STAMP_ENV_PREFIX + "GIT_COMMIT"
STAMP_GIT_DIRTY = STAMP_ENV_PREFIX + "GIT_DIRTY"
STAMP_EXTRA_GIT_COMMIT = STAMP_ENV_PREFIX + "EXTRA_GIT_COMMIT"

# Number of hash characters kept in the long version string.
LONG_HASH_LENGTH = 9
