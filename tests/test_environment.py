"""Tests for busaddr.environment — address list from the environment."""

from busaddr.environment import SESSION_BUS_ADDRESS_ENV, addresses_from_env
from busaddr.registry import TransportRegistry
from busaddr.transports import UnixAddress, register_builtin_transports


def test_default_variable():
    assert SESSION_BUS_ADDRESS_ENV == "DBUS_SESSION_BUS_ADDRESS"


def test_unset_gives_empty_list(monkeypatch):
    monkeypatch.delenv(SESSION_BUS_ADDRESS_ENV, raising=False)
    assert addresses_from_env(registry=TransportRegistry()) == []


def test_empty_gives_empty_list():
    assert addresses_from_env(environ={SESSION_BUS_ADDRESS_ENV: ""}) == []


def test_reads_session_variable(monkeypatch):
    monkeypatch.setenv(SESSION_BUS_ADDRESS_ENV, "unix:path=/run/user/1000/bus;tcp:host=h,port=1")
    reg = TransportRegistry()
    register_builtin_transports(reg)

    addrs = addresses_from_env(registry=reg)
    assert [a.transport_name for a in addrs] == ["unix", "tcp"]
    assert isinstance(addrs[0], UnixAddress)
    assert addrs[0].path == "/run/user/1000/bus"


def test_custom_variable_and_environ():
    env = {"MY_BUS": "unix:path=/tmp/x%20y"}
    addrs = addresses_from_env("MY_BUS", TransportRegistry(), environ=env)
    assert addrs[0].properties == {"path": "/tmp/x y"}
