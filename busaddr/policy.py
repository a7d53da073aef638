from __future__ import annotations

"""Lookup and insert policies shared by the registry and address properties.

A lookup that finds nothing and an insert that collides with an existing
entry are both decision points. The policy passed by the caller picks the
outcome; under the failing policies the caller may also pass a handler that
recovers instead of letting the error propagate.
"""

from enum import Enum
import logging
from typing import Any, Callable

from busaddr.errors import EntryReplacementAttempt, InexistentEntry

logger = logging.getLogger("busaddr.policy")

MissingHandler = Callable[[InexistentEntry], Any]
ConflictHandler = Callable[[EntryReplacementAttempt], bool]


class LookupPolicy(Enum):
    FAIL = "fail"
    ABSENT = "absent"


class ReplacePolicy(Enum):
    FAIL_UNLESS_CONFIRMED = "fail-unless-confirmed"
    WARN_AND_REPLACE = "warn-and-replace"
    KEEP_EXISTING = "keep-existing"
    REPLACE = "replace"


def resolve_lookup(
    designator: Any,
    policy: LookupPolicy,
    on_missing: MissingHandler | None = None,
) -> Any:
    """Decide the result of a lookup for which no entry exists.

    Under ``ABSENT`` this returns None. Under ``FAIL`` an
    :class:`InexistentEntry` is raised unless ``on_missing`` is given, in
    which case its return value is the substitute result.
    """
    if policy is LookupPolicy.ABSENT:
        return None
    if policy is LookupPolicy.FAIL:
        err = InexistentEntry(designator)
        if on_missing is None:
            raise err
        return on_missing(err)
    raise ValueError(f"unsupported lookup policy: {policy!r}")


def resolve_insert(
    old: Any,
    new: Any,
    policy: ReplacePolicy,
    on_conflict: ConflictHandler | None = None,
) -> bool:
    """Decide whether ``new`` replaces an existing ``old`` entry.

    Returns True to replace, False to keep ``old``. Under
    ``FAIL_UNLESS_CONFIRMED`` an :class:`EntryReplacementAttempt` is raised
    unless ``on_conflict`` is given; the handler returns True to confirm the
    replacement or False to abort it.
    """
    if policy is ReplacePolicy.REPLACE:
        return True
    if policy is ReplacePolicy.KEEP_EXISTING:
        return False
    if policy is ReplacePolicy.WARN_AND_REPLACE:
        logger.warning("replacing %r with %r", old, new)
        return True
    if policy is ReplacePolicy.FAIL_UNLESS_CONFIRMED:
        err = EntryReplacementAttempt(old, new)
        if on_conflict is None:
            raise err
        return bool(on_conflict(err))
    raise ValueError(f"unsupported replace policy: {policy!r}")
