from __future__ import annotations

"""Address-list parsing.

An address list looks like::

    unix:path=/tmp/dbus-x;tcp:host=localhost,port=1234

Entries are separated by ``;``, the transport name ends at the first ``:``,
properties are ``key=value`` pairs separated by ``,``. The whole string is
percent-unescaped before it is split.
"""

from enum import Enum
import logging

from busaddr.address import ServerAddress, assemble
from busaddr.errors import MalformedAddress
from busaddr.escape import unescape
from busaddr.registry import REGISTRY, TransportRegistry

logger = logging.getLogger("busaddr.parser")

RawAddress = tuple[str, list[str]]


class _State(Enum):
    TRANSPORT = "transport"
    KEY = "key"
    VALUE = "value"


def tokenize(text: str) -> list[RawAddress]:
    """Split unescaped address text into ``(transport, [k1, v1, ...])`` tuples.

    Empty entries (``;;`` or a trailing ``;``) and empty keys before a
    separator are skipped. Empty values are kept.
    """
    entries: list[RawAddress] = []
    state = _State.TRANSPORT
    buf: list[str] = []
    transport = ""
    props: list[str] = []
    key = ""

    def flush() -> str:
        token = "".join(buf)
        buf.clear()
        return token

    def finish() -> None:
        entries.append((transport, props))

    for offset, ch in enumerate(text):
        if state is _State.TRANSPORT:
            if ch == ":":
                transport = flush()
                if not transport:
                    raise MalformedAddress(f"empty transport name at offset {offset}", offset)
                props = []
                state = _State.KEY
            elif ch == ";":
                _reject_dangling_transport(flush(), offset)
            else:
                buf.append(ch)

        elif state is _State.KEY:
            if ch == "=":
                key = flush()
                state = _State.VALUE
            elif ch == ",":
                _reject_dangling_key(flush(), transport, offset)
            elif ch == ";":
                _reject_dangling_key(flush(), transport, offset)
                finish()
                state = _State.TRANSPORT
            else:
                buf.append(ch)

        else:
            if ch == ",":
                props.extend((key, flush()))
                state = _State.KEY
            elif ch == ";":
                props.extend((key, flush()))
                finish()
                state = _State.TRANSPORT
            else:
                buf.append(ch)

    end = len(text)
    if state is _State.TRANSPORT:
        _reject_dangling_transport(flush(), end)
    elif state is _State.KEY:
        _reject_dangling_key(flush(), transport, end)
        finish()
    else:
        props.extend((key, flush()))
        finish()

    return entries


def _reject_dangling_transport(token: str, offset: int) -> None:
    if token:
        raise MalformedAddress(f"address {token!r} has no ':' (offset {offset})", offset)


def _reject_dangling_key(token: str, transport: str, offset: int) -> None:
    if token:
        raise MalformedAddress(
            f"property {token!r} of {transport!r} address has no value (offset {offset})",
            offset,
        )


def parse_addresses(
    text: str | bytes,
    registry: TransportRegistry | None = None,
) -> list[ServerAddress]:
    """Parse an escaped address list into :class:`ServerAddress` values.

    Transports registered in ``registry`` (the process-wide one by default)
    get their own address type, all others a GenericAddress. The result keeps
    the order of the source text.
    """
    reg = REGISTRY if registry is None else registry
    entries = tokenize(unescape(text))
    addresses = [assemble(transport, props, reg) for transport, props in entries]
    logger.debug("parsed %d address(es): %s", len(addresses), [a.transport_name for a in addresses])
    return addresses
