"""Release train detection from the short version string.

Odd minor versions (1.3.x, 1.5.x) are unstable development releases; even
minor versions are stable.
"""

import logging
import re

from build_identity import version
from build_identity.config import DEV_MARKER
from build_identity.utils import once

logger = logging.getLogger(__name__)

_MINOR_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def is_dev_version(short: str) -> bool:
    """Check whether a short version string marks a development build."""
    return DEV_MARKER in short


def is_unstable_version(short: str) -> bool:
    """Check whether the minor version number of *short* is odd.

    Pure function: 'major.minor.rest' is required. The minor field is a
    signed 64-bit decimal integer; anything without two dots, or whose minor
    field is not such an integer, is reported as stable. Negative minors are
    never unstable.
    """
    _, sep, rest = short.partition(".")
    if not sep:
        return False
    minor_str, sep, _ = rest.partition(".")
    if not sep:
        return False
    if not _MINOR_RE.fullmatch(minor_str):
        return False
    minor = int(minor_str)
    if not _INT64_MIN <= minor <= _INT64_MAX:
        return False
    return minor > 0 and minor % 2 == 1


@once
def _unstable_build() -> bool:
    unstable = is_unstable_version(version.SHORT)
    logger.debug("Version %s unstable: %s", version.SHORT, unstable)
    return unstable


def is_unstable_build() -> bool:
    """Report whether this build is from an unstable (odd minor) branch."""
    return _unstable_build()
