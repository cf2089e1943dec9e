"""Version tokens shared by the configuration store adapters.

Tokens are stringified counters; a record is created at ``INITIAL_VERSION``
and every update moves it to ``next_version``.
"""

from authzman.domain.exceptions import ConcurrentModification

INITIAL_VERSION = "1"


def next_version(version: str | None) -> str:
    """Return the version token following the given one."""
    try:
        return str(int(version) + 1) if version else INITIAL_VERSION
    except ValueError:
        return INITIAL_VERSION


def check_version(kind: str, record_id: str, given: str | None, stored: str | None) -> None:
    """Raise ConcurrentModification when a non-empty given version is stale."""
    if given and given != stored:
        raise ConcurrentModification(
            f"{kind} {record_id} version {given} does not match stored version {stored}"
        )
