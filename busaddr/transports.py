from __future__ import annotations

"""Address types for the well-known bus transports.

Supported transports:
    unix:path=...|abstract=...|tmpdir=...|dir=...|runtime=yes
    tcp:host=...,port=...,family=ipv4|ipv6
    nonce-tcp:host=...,port=...,noncefile=...
    unixexec:path=...,argv0=...,argv1=...
    launchd:env=...
    autolaunch:scope=...

The accessors return the raw property strings (None when unset); checking
that a port is numeric or that exactly one of path/abstract is set belongs
to whoever opens the connection.
"""

from busaddr.address import ServerAddress
from busaddr.policy import ReplacePolicy
from busaddr.registry import REGISTRY, AddressFactory, TransportRegistry


class UnixAddress(ServerAddress):
    """``unix:`` Unix domain socket, filesystem or abstract namespace."""

    @property
    def path(self) -> str | None:
        return self.get_property("path")

    @property
    def abstract(self) -> str | None:
        return self.get_property("abstract")

    @property
    def tmpdir(self) -> str | None:
        return self.get_property("tmpdir")

    @property
    def dir(self) -> str | None:
        return self.get_property("dir")

    @property
    def runtime(self) -> str | None:
        return self.get_property("runtime")

    @property
    def guid(self) -> str | None:
        return self.get_property("guid")


class TcpAddress(ServerAddress):
    """``tcp:`` TCP socket."""

    @property
    def host(self) -> str | None:
        return self.get_property("host")

    @property
    def bind(self) -> str | None:
        return self.get_property("bind")

    @property
    def port(self) -> str | None:
        return self.get_property("port")

    @property
    def family(self) -> str | None:
        return self.get_property("family")

    @property
    def guid(self) -> str | None:
        return self.get_property("guid")


class NonceTcpAddress(TcpAddress):
    """``nonce-tcp:`` TCP socket guarded by a nonce file."""

    @property
    def noncefile(self) -> str | None:
        return self.get_property("noncefile")


class UnixExecAddress(ServerAddress):
    """``unixexec:`` bus reached through a spawned process's stdio."""

    @property
    def path(self) -> str | None:
        return self.get_property("path")

    def argv(self, index: int) -> str | None:
        """Return ``argvN``; ``argv0`` defaults to the path."""
        value = self.get_property(f"argv{index}")
        if value is None and index == 0:
            return self.path
        return value


class LaunchdAddress(ServerAddress):
    """``launchd:`` socket path published in a launchd environment variable."""

    @property
    def env(self) -> str | None:
        return self.get_property("env")


class AutolaunchAddress(ServerAddress):
    """``autolaunch:`` bus started on demand."""

    @property
    def scope(self) -> str | None:
        return self.get_property("scope")


BUILTIN_TRANSPORTS: dict[str, AddressFactory] = {
    "unix": UnixAddress,
    "tcp": TcpAddress,
    "nonce-tcp": NonceTcpAddress,
    "unixexec": UnixExecAddress,
    "launchd": LaunchdAddress,
    "autolaunch": AutolaunchAddress,
}


def register_builtin_transports(
    registry: TransportRegistry | None = None,
    policy: ReplacePolicy = ReplacePolicy.KEEP_EXISTING,
) -> list[str]:
    """Register the well-known transports and return the names now mapped to them."""
    reg = REGISTRY if registry is None else registry
    return [name for name, factory in BUILTIN_TRANSPORTS.items() if reg.register(name, factory, policy)]
