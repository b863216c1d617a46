"""JSON-serializable snapshot of the current build's version metadata."""

import json
from dataclasses import dataclass

from build_identity import capver, version
from build_identity.release import is_dev_version, is_unstable_build

# Dataclass field -> JSON key, in output order.
_JSON_KEYS = {
    "major_minor_patch": "majorMinorPatch",
    "is_dev": "isDev",
    "short": "short",
    "long": "long",
    "unstable_branch": "unstableBranch",
    "git_commit": "gitCommit",
    "git_dirty": "gitDirty",
    "extra_git_commit": "extraGitCommit",
    "daemon_long": "daemonLong",
    "cap": "cap",
}

# Fields left out of the JSON form when empty or false.
_OMIT_IF_EMPTY = {
    "is_dev",
    "unstable_branch",
    "git_commit",
    "git_dirty",
    "extra_git_commit",
    "daemon_long",
}

_BOOL_FIELDS = {"is_dev", "unstable_branch", "git_dirty"}


def _as_bool(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes")
    return bool(value)


@dataclass(frozen=True)
class Meta:
    """All the version information about a build.

    major_minor_patch: "major.minor.patch", without any hyphenated suffix.
    is_dev: whether short contains the "-dev" marker, i.e. the build wasn't
        stamped by the release pipeline.
    short: major_minor_patch, plus "-dev" or "-devYYYYMMDD" for dev builds.
    long: the full version string, with git commit hash(es) as the suffix.
    unstable_branch: whether the minor version is odd.
    git_commit: commit of the main repository the build came from, if known.
    git_dirty: whether the working tree had uncommitted changes.
    extra_git_commit: commit of a supplemental repository the main one was
        built from, if any. Together with git_commit it describes exactly
        which sources were used.
    daemon_long: long version of the background daemon, when a caller asked
        the daemon for it.
    cap: capability version, incremented whenever a capability is added.
    """

    major_minor_patch: str = ""
    is_dev: bool = False
    short: str = ""
    long: str = ""
    unstable_branch: bool = False
    git_commit: str = ""
    git_dirty: bool = False
    extra_git_commit: str = ""
    daemon_long: str = ""
    cap: int = 0

    def to_dict(self) -> dict:
        """Return the JSON form, omitting empty optional fields."""
        data = {}
        for field_name, key in _JSON_KEYS.items():
            value = getattr(self, field_name)
            if field_name in _OMIT_IF_EMPTY and not value:
                continue
            data[key] = value
        return data

    def to_json(self, indent: int | None = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: dict) -> "Meta":
        """Build a Meta from its JSON form, as sent by a peer.

        Missing or unknown keys are ignored. Nulls become empty values, and
        boolean fields also accept "true"/"false" strings. A cap that isn't
        an integer or numeric string raises ValueError.
        """
        kwargs = {}
        for field_name, key in _JSON_KEYS.items():
            if key not in data:
                continue
            value = data[key]
            if field_name == "cap":
                kwargs[field_name] = int(value) if value is not None else 0
            elif field_name in _BOOL_FIELDS:
                kwargs[field_name] = _as_bool(value)
            else:
                kwargs[field_name] = str(value) if value is not None else ""
        return cls(**kwargs)


def get_meta() -> Meta:
    """Return version metadata about the current build."""
    return Meta(
        major_minor_patch=version.MAJOR_MINOR_PATCH,
        short=version.SHORT,
        long=version.LONG,
        git_commit=version.GIT_COMMIT,
        git_dirty=version.GIT_DIRTY,
        extra_git_commit=version.EXTRA_GIT_COMMIT,
        is_dev=is_dev_version(version.SHORT),
        unstable_branch=is_unstable_build(),
        cap=int(capver.CURRENT_CAPABILITY_VERSION),
    )
