from __future__ import annotations

"""Seed address list from the environment."""

import logging
import os
from typing import Mapping

from busaddr.address import ServerAddress
from busaddr.parser import parse_addresses
from busaddr.registry import TransportRegistry

logger = logging.getLogger("busaddr.environment")

SESSION_BUS_ADDRESS_ENV = "DBUS_SESSION_BUS_ADDRESS"


def addresses_from_env(
    name: str = SESSION_BUS_ADDRESS_ENV,
    registry: TransportRegistry | None = None,
    environ: Mapping[str, str] | None = None,
) -> list[ServerAddress]:
    """Parse the address list held in environment variable ``name``.

    An unset or empty variable gives an empty list.
    """
    env = os.environ if environ is None else environ
    value = env.get(name)
    if not value:
        logger.debug("%s is not set", name)
        return []
    return parse_addresses(value, registry)
