from __future__ import annotations

"""Exceptions raised while parsing and resolving server addresses."""

from typing import Any


class AddressError(Exception):
    """Base class for every error raised by busaddr."""


class InexistentEntry(AddressError, LookupError):
    """Raised when a lookup under ``LookupPolicy.FAIL`` finds nothing.

    Callers can recover by passing an ``on_missing`` handler, whose return
    value is used in place of the missing entry.
    """

    def __init__(self, designator: Any):
        super().__init__(f"no entry for {designator!r}")
        self.designator = designator


class EntryReplacementAttempt(AddressError):
    """Raised when an insert under ``ReplacePolicy.FAIL_UNLESS_CONFIRMED`` collides.

    An ``on_conflict`` handler decides the outcome: True confirms the
    replacement, False aborts it and keeps ``old``.
    """

    def __init__(self, old: Any, new: Any):
        super().__init__(f"refusing to replace {old!r} with {new!r}")
        self.old = old
        self.new = new


class MalformedEscape(AddressError, ValueError):
    """Raised on a bad ``%XY`` sequence or on bytes that are not UTF-8."""

    def __init__(self, message: str, offset: int | None = None):
        super().__init__(message)
        self.offset = offset


class MalformedAddress(AddressError, ValueError):
    """Raised when the address text does not follow the address grammar."""

    def __init__(self, message: str, offset: int | None = None):
        super().__init__(message)
        self.offset = offset
