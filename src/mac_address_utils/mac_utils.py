"""MAC address utilities.

String, array and byte-buffer forms of a 6-octet MAC address, plus the
validator, reversal and equality helpers built on them.
"""

import logging
import re
from typing import Optional, Sequence, Union

logger = logging.getLogger(__name__)

MAC_LENGTH = 6
DEFAULT_SEPARATOR = ":"
SEPARATORS = (":", "-")

# Same separator must be used between all six groups.
_MAC_RE = re.compile(r"^[0-9A-Fa-f]{2}([:-])(?:[0-9A-Fa-f]{2}\1){4}[0-9A-Fa-f]{2}\Z")
_SPLIT_RE = re.compile(r"[:-]")

Buffer = Union[bytes, bytearray, memoryview, Sequence[int]]


class MacAddressError(ValueError):
    """Base error for MAC address handling."""


class InvalidFormatError(MacAddressError):
    """String is not a valid MAC address."""

    def __init__(self, value, index: Optional[int] = None):
        self.value = value
        self.index = index
        if index is None:
            message = f"Invalid MAC address: {value!r}"
        else:
            message = f"Invalid MAC address: {value!r} at index {index}"
        super().__init__(message)


class BufferTooSmallError(MacAddressError):
    """Buffer cannot hold a MAC address at the given offset."""

    def __init__(self, offset: int, length: int, required: int = MAC_LENGTH):
        self.required = required
        self.offset = offset
        self.length = length
        super().__init__(
            f"Buffer is not large enough to store a {required}-byte MAC address "
            f"starting at offset [{offset}]. Total length is [{length}]"
        )


def is_mac_address(candidate) -> bool:
    """
    Check if the given value is a MAC address.

    Accepts six 2-digit hex groups joined by one consistent separator
    (':' or '-'), in any case:
    - AA:BB:CC:DD:EE:FF
    - aa-bb-cc-dd-ee-ff
    """
    if not isinstance(candidate, str):
        return False
    return _MAC_RE.match(candidate) is not None


def _check_buffer_length(buf: Buffer, offset: int) -> None:
    if offset < 0 or len(buf) < offset + MAC_LENGTH:
        logger.debug(
            "Buffer too small for MAC address",
            extra={"offset": offset},
        )
        raise BufferTooSmallError(offset=offset, length=len(buf))


def _require_mac(mac: str, index: Optional[int] = None) -> None:
    if not is_mac_address(mac):
        logger.debug("Rejected MAC address", extra={"mac": mac})
        raise InvalidFormatError(mac, index)


def construct_mac_address(groups: Sequence[str], separator: str = DEFAULT_SEPARATOR) -> str:
    """Join octet groups with the separator and uppercase the result."""
    return separator.join(groups).upper()


def to_array(candidate: str) -> list[str]:
    """
    Split a MAC address string into its uppercase octet groups.

    Splits on every ':' or '-' without validating the groups, so mixed
    separators are accepted here even though is_mac_address rejects them.

    Example: aa:bb:cc:dd:ee:ff -> ["AA", "BB", "CC", "DD", "EE", "FF"]
    """
    return _SPLIT_RE.split(candidate.upper())


def to_buffer(mac: str, buf: Optional[Union[bytearray, memoryview]] = None, offset: int = 0):
    """
    Convert a MAC address string to its 6 raw bytes.

    Args:
        mac: MAC address in string form
        buf: Writable buffer to write into; a new 6-byte bytearray if omitted
        offset: Position in buf of the first octet

    Returns:
        buf, or the new bytearray, holding the address at offset

    Raises:
        InvalidFormatError: mac is not a valid MAC address
        BufferTooSmallError: buf has fewer than 6 bytes from offset
        TypeError: buf is not a writable bytearray or memoryview
    """
    _require_mac(mac)

    raw = bytes.fromhex(_SPLIT_RE.sub("", mac))
    target = buf if buf is not None else bytearray(MAC_LENGTH)
    if not isinstance(target, (bytearray, memoryview)) or (
        isinstance(target, memoryview) and target.readonly
    ):
        raise TypeError(f"Buffer must be a writable bytearray or memoryview, got {type(target).__name__}")

    _check_buffer_length(target, offset)

    target[offset : offset + MAC_LENGTH] = raw
    return target


def to_string(buf: Buffer, offset: int = 0, separator: str = DEFAULT_SEPARATOR) -> str:
    """
    Convert 6 bytes of a buffer to a MAC address string.

    Raises InvalidFormatError if any of the 6 values is outside 0-255.

    Example: b"\\xaa\\xbb\\xcc\\xdd\\xee\\xff" -> AA:BB:CC:DD:EE:FF
    """
    _check_buffer_length(buf, offset)

    octets = [buf[offset + i] for i in range(MAC_LENGTH)]
    if not all(isinstance(o, int) and 0 <= o <= 0xFF for o in octets):
        logger.debug("Rejected octets", extra={"offset": offset})
        raise InvalidFormatError(octets)

    groups = [f"{o:02x}" for o in octets]
    return construct_mac_address(groups, separator)


def reverse_mac_address(mac: str) -> str:
    """
    Reverse the octet order of a MAC address.

    Example: AA:BB:CC:DD:EE:FF -> FF:EE:DD:CC:BB:AA
    """
    _require_mac(mac)
    return construct_mac_address(list(reversed(to_array(mac))))


def are_equal(*macs: str) -> bool:
    """
    Check whether all given MAC addresses are equal.

    Addresses are compared as sets of octet groups against the first one,
    so order and repeated octets are ignored.
    """
    groups = []
    for index, mac in enumerate(macs):
        _require_mac(mac, index)
        groups.append(set(to_array(mac)))

    return all(other == groups[0] for other in groups[1:])
