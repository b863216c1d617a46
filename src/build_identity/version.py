"""Version information with git commit tracking.

Packaged builds are stamped through BUILD_IDENTITY_* environment variables by
the release pipeline. When a value isn't stamped it falls back to the git
metadata of this file's checkout, so editable installs still report exactly
what code is running. Everything is resolved once, at import.
"""

import os
import subprocess

from build_identity.config import (
    DEV_MARKER,
    LONG_HASH_LENGTH,
    STAMP_EXTRA_GIT_COMMIT,
    STAMP_GIT_COMMIT,
    STAMP_GIT_DIRTY,
    STAMP_LONG,
    STAMP_SHORT,
)

PACKAGE_VERSION = "1.2.0"

_REPO_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def _run_git(*args: str) -> str | None:
    """Run a git command in the source repo directory. Return stdout or None on failure."""
    try:
        result = subprocess.run(
            ["git", "-C", _REPO_DIR, *args],
            capture_output=True,
            text=True,
            timeout=5,
        )
        if result.returncode == 0:
            return result.stdout.strip()
    except (FileNotFoundError, subprocess.TimeoutExpired):
        pass
    return None


def _is_own_checkout() -> bool:
    """Check that _REPO_DIR is this package's source checkout.

    An installed copy sits in site-packages, often inside some other
    project's repository. Git metadata found from there belongs to that
    project, not to this build.
    """
    if not os.path.isfile(os.path.join(_REPO_DIR, "pyproject.toml")):
        return False
    toplevel = _run_git("rev-parse", "--show-toplevel")
    if not toplevel:
        return False
    return os.path.normcase(os.path.realpath(toplevel)) == os.path.normcase(os.path.realpath(_REPO_DIR))


_IN_OWN_CHECKOUT = _is_own_checkout()


def _checkout_git(*args: str) -> str | None:
    """Like _run_git, but None unless running from this package's own checkout."""
    if not _IN_OWN_CHECKOUT:
        return None
    return _run_git(*args)


def _stamped(name: str) -> str:
    return os.environ.get(name, "").strip()


def _stamped_bool(name: str) -> bool | None:
    """Parse a stamped boolean. Returns None when the variable is unset."""
    value = _stamped(name)
    if not value:
        return None
    return value.lower() in ("1", "true", "yes")


def dev_short_version(base: str, commit_date: str | None) -> str:
    """Return the short version of an unstamped build, e.g. '1.2.0-dev20260213'."""
    return f"{base}{DEV_MARKER}{commit_date or ''}"


def major_minor_patch(short: str) -> str:
    """Strip any hyphenated suffix: '1.2.0-dev20260213' -> '1.2.0'."""
    return short.partition("-")[0]


def long_version(short: str, git_commit: str, extra_git_commit: str = "") -> str:
    """Append commit hash suffixes to the short version.

    Pure function: '1.2.0' with commit 'abcdef0123456' becomes
    '1.2.0-tabcdef012'. An extra commit adds a '-g' suffix the same way.
    Without a commit the short version is returned unchanged.
    """
    if not git_commit:
        return short
    result = f"{short}-t{git_commit[:LONG_HASH_LENGTH]}"
    if extra_git_commit:
        result += f"-g{extra_git_commit[:LONG_HASH_LENGTH]}"
    return result


def _resolve_git_commit() -> str:
    return _stamped(STAMP_GIT_COMMIT) or _checkout_git("rev-parse", "HEAD") or ""


def _resolve_git_dirty(git_commit: str) -> bool:
    stamped = _stamped_bool(STAMP_GIT_DIRTY)
    if stamped is not None:
        return stamped
    # A stamped commit describes the build machine's tree, not ours.
    if not git_commit or _stamped(STAMP_GIT_COMMIT):
        return False
    return (_checkout_git("status", "--porcelain") or "") != ""


def _resolve_short() -> str:
    stamped = _stamped(STAMP_SHORT)
    if stamped:
        return stamped
    commit_date = _checkout_git("log", "-1", "--format=%cd", "--date=format:%Y%m%d")
    return dev_short_version(PACKAGE_VERSION, commit_date)


GIT_COMMIT = _resolve_git_commit()
GIT_DIRTY = _resolve_git_dirty(GIT_COMMIT)
EXTRA_GIT_COMMIT = _stamped(STAMP_EXTRA_GIT_COMMIT)
SHORT = _resolve_short()
MAJOR_MINOR_PATCH = major_minor_patch(SHORT)
LONG = _stamped(STAMP_LONG) or long_version(SHORT, GIT_COMMIT, EXTRA_GIT_COMMIT)


def get_version() -> str:
    """Return version string like '1.2.0-dev20260213-t3a7f2c1d0 (dirty)'."""
    dirty = " (dirty)" if GIT_DIRTY else ""
    return f"{LONG}{dirty}"
