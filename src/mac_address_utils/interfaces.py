"""Host network interface directory."""

import logging
import socket
import struct
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .config import Config
from .mac_utils import is_mac_address

logger = logging.getLogger(__name__)

NULL_MAC = "00:00:00:00:00:00"


class InterfaceNotFoundError(LookupError):
    """No usable network interface was found."""


@dataclass
class InterfaceRecord:
    """Network interface with its hardware address."""

    name: str
    mac_address: str
    gateway_ip: Optional[str] = None
    type: Optional[str] = None  # "Wired" or "Wireless"


class InterfaceDirectory:
    """Source of interface records."""

    def list_interfaces(self) -> list[InterfaceRecord]:
        """List interfaces; implemented by subclasses."""
        raise NotImplementedError

    def active_interface(self) -> InterfaceRecord:
        """Return the active interface; implemented by subclasses."""
        raise NotImplementedError


class SysfsInterfaceDirectory(InterfaceDirectory):
    """Linux interface directory backed by /sys/class/net and /proc/net/route."""

    def __init__(
        self,
        sysfs_path: str = "/sys/class/net",
        route_path: str = "/proc/net/route",
    ):
        self.sysfs_path = Path(sysfs_path)
        self.route_path = Path(route_path)

    @classmethod
    def from_config(cls, config: Config) -> "SysfsInterfaceDirectory":
        return cls(sysfs_path=config.sysfs_net_path, route_path=config.proc_route_path)

    def _read_mac(self, name: str) -> Optional[str]:
        try:
            mac = (self.sysfs_path / name / "address").read_text(encoding="utf-8").strip()
        except OSError as e:
            logger.debug(f"Cannot read address of {name}: {e}", extra={"interface": name})
            return None

        if not is_mac_address(mac) or mac == NULL_MAC:
            return None
        return mac

    def _default_routes(self) -> dict[str, str]:
        """Map interface name to default gateway IP."""
        try:
            lines = self.route_path.read_text(encoding="utf-8").splitlines()
        except OSError as e:
            logger.debug(f"Cannot read routing table: {e}")
            return {}

        routes = {}
        for line in lines[1:]:
            fields = line.split()
            if len(fields) < 3 or fields[1] != "00000000":
                continue
            try:
                gateway = socket.inet_ntoa(struct.pack("<L", int(fields[2], 16)))
            except (ValueError, struct.error):
                continue
            routes.setdefault(fields[0], gateway)
        return routes

    def list_interfaces(self) -> list[InterfaceRecord]:
        """
        List interfaces with a usable MAC address.

        Loopback and interfaces reporting no or an all-zero address are skipped.
        """
        if not self.sysfs_path.is_dir():
            logger.warning(f"Interface directory {self.sysfs_path} not found")
            return []

        routes = self._default_routes()
        result = []
        for entry in sorted(self.sysfs_path.iterdir()):
            if entry.name == "lo":
                continue
            mac = self._read_mac(entry.name)
            if mac is None:
                continue
            result.append(
                InterfaceRecord(
                    name=entry.name,
                    mac_address=mac,
                    gateway_ip=routes.get(entry.name),
                    type="Wireless" if (entry / "wireless").exists() else "Wired",
                )
            )

        logger.debug(f"Found {len(result)} network interfaces")
        return result

    def active_interface(self) -> InterfaceRecord:
        """
        Return the interface carrying the default route.

        Falls back to the first listed interface when there is no default route.
        """
        interfaces = self.list_interfaces()
        if not interfaces:
            raise InterfaceNotFoundError("No active network interface found")

        for interface in interfaces:
            if interface.gateway_ip:
                return interface
        return interfaces[0]


def _directory(directory: Optional[InterfaceDirectory]) -> InterfaceDirectory:
    return directory if directory is not None else SysfsInterfaceDirectory()


def get_interfaces(directory: Optional[InterfaceDirectory] = None) -> list[InterfaceRecord]:
    return _directory(directory).list_interfaces()


def get_interface_names(directory: Optional[InterfaceDirectory] = None) -> list[str]:
    return [interface.name for interface in get_interfaces(directory)]


def get_active_interface(directory: Optional[InterfaceDirectory] = None) -> InterfaceRecord:
    return _directory(directory).active_interface()


def get_mac_address(
    interface: Optional[InterfaceRecord] = None,
    directory: Optional[InterfaceDirectory] = None,
) -> str:
    """MAC address of the interface, or of the active interface if none is given."""
    selected = interface if interface is not None else get_active_interface(directory)
    return selected.mac_address
