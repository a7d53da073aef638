from __future__ import annotations

"""Command-line inspection of bus address lists.

Usage:
    python -m busaddr [ADDRESS] [--env NAME] [--format json|yaml] [--builtin] [--verbose]
"""

import json
import logging
import sys
from typing import Any, Sequence

import yaml

from busaddr.address import GenericAddress, ServerAddress
from busaddr.environment import SESSION_BUS_ADDRESS_ENV, addresses_from_env
from busaddr.parser import parse_addresses
from busaddr.registry import TransportRegistry
from busaddr.transports import register_builtin_transports

DEFAULT_FORMAT = "json"
FORMATS = ("json", "yaml")


def parse_args(argv: Sequence[str]) -> dict[str, Any]:
    args = list(argv)

    out: dict[str, Any] = {
        "address": None,
        "env": SESSION_BUS_ADDRESS_ENV,
        "format": DEFAULT_FORMAT,
        "builtin": False,
        "verbose": False,
    }

    i = 0
    while i < len(args):
        token = args[i]

        if token == "--env" and i + 1 < len(args):
            out["env"] = args[i + 1]
            i += 2
            continue

        if token == "--format" and i + 1 < len(args):
            fmt = args[i + 1]
            if fmt not in FORMATS:
                raise ValueError(f"unsupported format {fmt!r} (expected json or yaml)")
            out["format"] = fmt
            i += 2
            continue

        if token == "--builtin":
            out["builtin"] = True
        elif token in {"-v", "--verbose"}:
            out["verbose"] = True
        elif not token.startswith("-") and out["address"] is None:
            out["address"] = token

        i += 1

    return out


def describe(address: ServerAddress) -> dict[str, Any]:
    kind = "generic" if isinstance(address, GenericAddress) else type(address).__name__
    return {
        "transport": address.transport_name,
        "kind": kind,
        "properties": dict(address.properties),
    }


def render(addresses: Sequence[ServerAddress], fmt: str = DEFAULT_FORMAT) -> str:
    records = [describe(a) for a in addresses]
    if fmt == "yaml":
        return yaml.safe_dump(records, sort_keys=False, allow_unicode=True)
    return json.dumps(records, indent=2, ensure_ascii=False) + "\n"


def run(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv if argv is not None else sys.argv[1:])

    if args["verbose"]:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    registry = TransportRegistry()
    if args["builtin"]:
        register_builtin_transports(registry)

    if args["address"] is not None:
        addresses = parse_addresses(args["address"], registry)
    else:
        addresses = addresses_from_env(args["env"], registry)

    sys.stdout.write(render(addresses, args["format"]))


def main() -> None:
    try:
        run()
    except Exception as exc:  # pragma: no cover - CLI guard
        print(str(exc), file=sys.stderr)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
