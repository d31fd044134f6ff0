"""Tests for the interface directory."""

import pytest

from mac_address_utils.config import Config
from mac_address_utils.interfaces import (
    InterfaceDirectory,
    InterfaceNotFoundError,
    InterfaceRecord,
    SysfsInterfaceDirectory,
    get_active_interface,
    get_interface_names,
    get_interfaces,
    get_mac_address,
)
from mac_address_utils.mac_utils import is_mac_address

ROUTE_HEADER = "Iface\tDestination\tGateway\tFlags\tRefCnt\tUse\tMetric\tMask\tMTU\tWindow\tIRTT\n"


def add_interface(root, name, mac=None, wireless=False):
    iface = root / name
    iface.mkdir()
    if mac is not None:
        (iface / "address").write_text(mac + "\n")
    if wireless:
        (iface / "wireless").mkdir()


@pytest.fixture
def sysfs(tmp_path):
    root = tmp_path / "net"
    root.mkdir()
    add_interface(root, "lo", "00:00:00:00:00:00")
    add_interface(root, "eth0", "52:54:00:12:34:56")
    add_interface(root, "wlan0", "a4:5e:60:aa:bb:cc", wireless=True)
    add_interface(root, "tun0", "")
    add_interface(root, "dummy0")
    return root


@pytest.fixture
def route_file(tmp_path):
    path = tmp_path / "route"
    path.write_text(
        ROUTE_HEADER
        + "wlan0\t00000000\t0101A8C0\t0003\t0\t0\t600\t00000000\t0\t0\t0\n"
        + "wlan0\t0001A8C0\t00000000\t0001\t0\t0\t600\t00FFFFFF\t0\t0\t0\n"
    )
    return path


@pytest.fixture
def directory(sysfs, route_file):
    return SysfsInterfaceDirectory(sysfs_path=str(sysfs), route_path=str(route_file))


class FakeDirectory(InterfaceDirectory):
    def __init__(self, interfaces):
        self.interfaces = interfaces

    def list_interfaces(self):
        return list(self.interfaces)

    def active_interface(self):
        return self.interfaces[-1]


class TestSysfsInterfaceDirectory:
    def test_list_interfaces(self, directory):
        interfaces = directory.list_interfaces()
        assert [i.name for i in interfaces] == ["eth0", "wlan0"]
        assert all(is_mac_address(i.mac_address) for i in interfaces)

    def test_interface_details(self, directory):
        eth0, wlan0 = directory.list_interfaces()
        assert eth0.mac_address == "52:54:00:12:34:56"
        assert eth0.type == "Wired"
        assert eth0.gateway_ip is None
        assert wlan0.type == "Wireless"
        assert wlan0.gateway_ip == "192.168.1.1"

    def test_active_interface_has_default_route(self, directory):
        assert directory.active_interface().name == "wlan0"

    def test_active_interface_without_routes(self, sysfs, tmp_path):
        directory = SysfsInterfaceDirectory(str(sysfs), str(tmp_path / "missing"))
        assert directory.active_interface().name == "eth0"

    def test_missing_sysfs(self, tmp_path):
        directory = SysfsInterfaceDirectory(str(tmp_path / "missing"), str(tmp_path / "route"))
        assert directory.list_interfaces() == []
        with pytest.raises(InterfaceNotFoundError):
            directory.active_interface()

    def test_from_config(self, sysfs, route_file):
        config = Config(sysfs_net_path=str(sysfs), proc_route_path=str(route_file))
        directory = SysfsInterfaceDirectory.from_config(config)
        assert directory.active_interface().mac_address == "a4:5e:60:aa:bb:cc"


class TestInterfaceDirectory:
    def test_base_methods_unimplemented(self):
        directory = InterfaceDirectory()
        with pytest.raises(NotImplementedError):
            directory.list_interfaces()
        with pytest.raises(NotImplementedError):
            directory.active_interface()


class TestHelpers:
    def test_get_interfaces(self, directory):
        assert len(get_interfaces(directory)) == 2

    def test_get_interface_names(self, directory):
        assert get_interface_names(directory) == ["eth0", "wlan0"]

    def test_get_active_interface(self, directory):
        assert get_active_interface(directory).name == "wlan0"

    def test_get_mac_address_active(self, directory):
        assert get_mac_address(directory=directory) == "a4:5e:60:aa:bb:cc"

    def test_get_mac_address_given_interface(self):
        interface = InterfaceRecord(name="testInterface", mac_address="00:00:00:00:00:00")
        assert get_mac_address(interface) == "00:00:00:00:00:00"

    def test_custom_directory(self):
        directory = FakeDirectory([
            InterfaceRecord(name="en0", mac_address="AA:BB:CC:DD:EE:FF"),
            InterfaceRecord(name="en1", mac_address="11:22:33:44:55:66"),
        ])
        assert get_interface_names(directory) == ["en0", "en1"]
        assert get_mac_address(directory=directory) == "11:22:33:44:55:66"
