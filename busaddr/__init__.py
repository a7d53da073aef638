"""busaddr — message-bus server address parsing for Python."""

from . import errors
from . import policy
from . import registry
from . import escape
from . import address
from . import parser
from . import transports
from . import environment

from .address import GenericAddress, ServerAddress
from .errors import (
    AddressError,
    EntryReplacementAttempt,
    InexistentEntry,
    MalformedAddress,
    MalformedEscape,
)
from .parser import parse_addresses
from .policy import LookupPolicy, ReplacePolicy
from .registry import REGISTRY, TransportRegistry

__all__ = [
    "errors",
    "policy",
    "registry",
    "escape",
    "address",
    "parser",
    "transports",
    "environment",
    "AddressError",
    "EntryReplacementAttempt",
    "GenericAddress",
    "InexistentEntry",
    "LookupPolicy",
    "MalformedAddress",
    "MalformedEscape",
    "REGISTRY",
    "ReplacePolicy",
    "ServerAddress",
    "TransportRegistry",
    "parse_addresses",
]
