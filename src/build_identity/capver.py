"""Capability version advertised by this build.

Owned by the protocol definitions; incremented whenever a new capability is
added. Treated as an opaque integer everywhere else.
"""

CURRENT_CAPABILITY_VERSION = 131
