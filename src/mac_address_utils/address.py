"""MAC address value type."""

import re
from dataclasses import dataclass
from typing import Sequence

from .mac_utils import (
    DEFAULT_SEPARATOR,
    MAC_LENGTH,
    Buffer,
    InvalidFormatError,
    is_mac_address,
    to_array,
    to_buffer,
    to_string,
)

_GROUP_RE = re.compile(r"^[0-9A-Fa-f]{2}$")


@dataclass(frozen=True)
class MacAddress:
    """Immutable 6-octet MAC address."""

    octets: tuple[int, ...]

    def __post_init__(self):
        octets = tuple(self.octets)
        if len(octets) != MAC_LENGTH or not all(
            isinstance(o, int) and 0 <= o <= 0xFF for o in octets
        ):
            raise InvalidFormatError(self.octets)
        object.__setattr__(self, "octets", octets)

    @classmethod
    def from_string(cls, mac: str) -> "MacAddress":
        """Parse a ':' or '-' separated MAC address."""
        if not is_mac_address(mac):
            raise InvalidFormatError(mac)
        return cls(tuple(to_buffer(mac)))

    @classmethod
    def from_bytes(cls, buf: Buffer, offset: int = 0) -> "MacAddress":
        """Read 6 octets from buf starting at offset."""
        return cls.from_string(to_string(buf, offset))

    @classmethod
    def from_array(cls, groups: Sequence[str]) -> "MacAddress":
        """Build from six 2-digit hex groups."""
        groups = list(groups)
        if len(groups) != MAC_LENGTH or not all(
            isinstance(g, str) and _GROUP_RE.match(g) for g in groups
        ):
            raise InvalidFormatError(groups)
        return cls(tuple(int(g, 16) for g in groups))

    def to_string(self, separator: str = DEFAULT_SEPARATOR) -> str:
        return to_string(self.octets, separator=separator)

    def to_array(self) -> list[str]:
        return to_array(self.to_string())

    def to_bytes(self) -> bytes:
        return bytes(self.octets)

    def reversed(self) -> "MacAddress":
        return MacAddress(self.octets[::-1])

    def __str__(self) -> str:
        return self.to_string()
