"""MAC to EUI-64 and IPv6 link-local conversion."""

import re
from typing import List, Optional

from macfe80.common import logger

# Six octets joined by one delimiter; the backreference rejects mixed ':' and '-'.
MAC_PATTERN = re.compile(r"[0-9A-Fa-f]{2}([:-])(?:[0-9A-Fa-f]{2}\1){4}[0-9A-Fa-f]{2}")
LINK_LOCAL_PREFIX = "fe80::"


def is_valid_mac(mac: str) -> bool:
    """Verifies if mac is a canonical 6-group hex MAC address.

    Surrounding whitespace is ignored. Groups must be two hex digits each, separated
    by either ':' or '-', using the same delimiter throughout.

    Arguments:
        mac: The MAC address to verify.

    Returns:
        True if the MAC address is valid, False otherwise.
    """
    return MAC_PATTERN.fullmatch(mac.strip()) is not None


def split_mac(mac: str) -> Optional[List[str]]:
    """Splits a MAC address into its 6 octets, keeping their case.

    eg:
        AA-bb-CC-dd-EE-ff -> ['AA', 'bb', 'CC', 'dd', 'EE', 'ff']

    Arguments:
        mac: The MAC address to split.

    Returns:
        A list of 6 two character hex strings, or None if mac is not valid.
    """
    if not is_valid_mac(mac):
        logger.debug("Rejecting malformed MAC address %r", mac)
        return None
    octets = re.findall(r".{1,2}", re.sub(r"[\W_]+", "", mac))
    if len(octets) != 6:
        return None
    return octets


def convert_mac_to_eui64(mac: str, ipv6: bool = False) -> Optional[str]:
    """Converts a MAC address to an EUI-64 identifier.

    eg:
        aa:bb:cc:dd:ee:ff -> aa:bb:cc:ff:fe:dd:ee:ff
        aa:bb:cc:dd:ee:ff, ipv6=True -> a8:bb:cc:ff:fe:dd:ee:ff

    Arguments:
        mac: The MAC address to convert.
        ipv6: Flip the universal/local bit to build a modified EUI-64 (RFC 4291).

    Returns:
        The lowercase, colon separated EUI-64 address or None if mac is not valid.
    """
    octets = split_mac(mac)
    if octets is None:
        return None
    mac_bytes = [int(octet, 16) for octet in octets]
    # http://tools.ietf.org/html/rfc4291#section-2.5.1
    if ipv6:
        mac_bytes[0] ^= 0x02
    eui64 = mac_bytes[:3] + [0xFF, 0xFE] + mac_bytes[3:]
    return ":".join(f"{byte:02x}" for byte in eui64)


def eui64_to_ipv6_format(eui64: str) -> str:
    """Regroups an EUI-64 address into IPv6 style 16 bit groups.

    eg:
        aa:bb:cc:ff:fe:dd:ee:ff -> aabb:ccff:fedd:eeff

    The input is not validated, it has to be a well formed EUI-64 address.
    """
    return ":".join(re.findall(r".{1,4}", eui64.replace(":", "")))


def eui64_ipv6_link_local(eui64: str) -> str:
    """Builds the IPv6 link-local address for an EUI-64 address."""
    return LINK_LOCAL_PREFIX + eui64_to_ipv6_format(eui64)
