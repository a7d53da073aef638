from __future__ import annotations

"""Transport name to address-constructor table."""

import logging
from threading import RLock
from typing import TYPE_CHECKING, Callable, Mapping

from busaddr.policy import (
    ConflictHandler,
    LookupPolicy,
    MissingHandler,
    ReplacePolicy,
    resolve_insert,
    resolve_lookup,
)

if TYPE_CHECKING:
    from busaddr.address import ServerAddress

logger = logging.getLogger("busaddr.registry")

AddressFactory = Callable[[str, Mapping[str, str]], "ServerAddress"]


class TransportRegistry:
    """Maps transport names to the constructor for their address type.

    Names are case-sensitive. Entries are never removed. One lock guards
    every read and write, so a lookup racing a registration sees the table
    either before or after it.
    """

    def __init__(self) -> None:
        self._factories: dict[str, AddressFactory] = {}
        # re-entrant: conflict handlers run under the lock and may call lookup()
        self._lock = RLock()

    def register(
        self,
        name: str,
        factory: AddressFactory,
        policy: ReplacePolicy = ReplacePolicy.FAIL_UNLESS_CONFIRMED,
        on_conflict: ConflictHandler | None = None,
    ) -> bool:
        """Register ``factory`` for transport ``name``.

        Returns True when the table now maps ``name`` to ``factory``.
        """
        with self._lock:
            old = self._factories.get(name)
            if old is None:
                self._factories[name] = factory
                logger.debug("registered transport %r", name)
                return True
            if not resolve_insert(old, factory, policy, on_conflict):
                logger.debug("kept existing factory for transport %r", name)
                return old is factory
            self._factories[name] = factory
            logger.debug("replaced factory for transport %r", name)
            return True

    def lookup(
        self,
        name: str,
        policy: LookupPolicy = LookupPolicy.ABSENT,
        on_missing: MissingHandler | None = None,
    ) -> AddressFactory | None:
        with self._lock:
            factory = self._factories.get(name)
        if factory is not None:
            return factory
        return resolve_lookup(name, policy, on_missing)

    def names(self) -> list[str]:
        with self._lock:
            return sorted(self._factories)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._factories

    def __len__(self) -> int:
        with self._lock:
            return len(self._factories)


# Process-wide table, empty until transports register themselves.
REGISTRY = TransportRegistry()
