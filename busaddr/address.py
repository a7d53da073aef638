from __future__ import annotations

"""Server address values and their assembly from tokenized entries."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Sequence

from busaddr.policy import LookupPolicy, MissingHandler, resolve_lookup
from busaddr.registry import TransportRegistry


@dataclass(frozen=True)
class ServerAddress:
    """One entry of an address list: a transport plus its raw properties.

    ``properties`` is exposed as a read-only mapping. Subclasses add
    transport-specific accessors on top of :meth:`get_property`.
    """

    transport_name: str
    properties: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    def get_property(
        self,
        name: str,
        policy: LookupPolicy = LookupPolicy.ABSENT,
        on_missing: MissingHandler | None = None,
    ) -> Any:
        if name in self.properties:
            return self.properties[name]
        return resolve_lookup(name, policy, on_missing)

    def __hash__(self) -> int:
        return hash((type(self), self.transport_name, frozenset(self.properties.items())))


class GenericAddress(ServerAddress):
    """Address of a transport that has no registered representation."""


def build_properties(flat: Sequence[str]) -> dict[str, str]:
    """Pair up ``[k1, v1, k2, v2, ...]``; a repeated key keeps its last value."""
    if len(flat) % 2:
        raise ValueError(f"property list has an odd number of items: {list(flat)!r}")
    props: dict[str, str] = {}
    for i in range(0, len(flat), 2):
        props[flat[i]] = flat[i + 1]
    return props


def assemble(
    transport: str,
    flat: Sequence[str],
    registry: TransportRegistry,
) -> ServerAddress:
    """Turn one tokenized entry into the registered or generic address type."""
    props = build_properties(flat)
    factory = registry.lookup(transport, LookupPolicy.ABSENT)
    if factory is None:
        return GenericAddress(transport, props)
    return factory(transport, props)
