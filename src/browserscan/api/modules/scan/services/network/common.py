import re
from ipaddress import IPv4Address, IPv6Address, ip_address, ip_network

PRIVATE_IPV4_NETWORKS = (
    ip_network("10.0.0.0/8"),
    ip_network("172.16.0.0/12"),
    ip_network("192.168.0.0/16"),
    ip_network("127.0.0.0/8"),
)
IPV4_LINK_LOCAL = ip_network("169.254.0.0/16")
IPV6_LINK_LOCAL = ip_network("fe80::/10")

_ASN_PATTERN = re.compile(r"^\s*(AS\d+)\b", re.IGNORECASE)


def parse_ip(value: object) -> IPv4Address | IPv6Address | None:
    if not isinstance(value, str):
        return None

    candidate = value.split(",", 1)[0].strip()
    # Zone ids ("fe80::1%eth0") are not part of the address itself.
    candidate = candidate.split("%", 1)[0]
    try:
        return ip_address(candidate)
    except ValueError:
        return None


def normalize_ip(value: object) -> str | None:
    parsed = parse_ip(value)
    if parsed is None:
        return None
    return str(parsed)


def is_private_ip(value: object) -> bool:
    parsed = parse_ip(value)
    if not isinstance(parsed, IPv4Address):
        return False
    return any(parsed in network for network in PRIVATE_IPV4_NETWORKS)


def is_link_local_ip(value: object) -> bool:
    parsed = parse_ip(value)
    if isinstance(parsed, IPv4Address):
        return parsed in IPV4_LINK_LOCAL
    if isinstance(parsed, IPv6Address):
        return parsed in IPV6_LINK_LOCAL
    return False


def is_mdns_candidate(value: object) -> bool:
    # Browsers replace host candidates with "<uuid>.local" names.
    return isinstance(value, str) and value.strip().lower().endswith(".local")


def is_global_ip(value: object) -> bool:
    parsed = parse_ip(value)
    return parsed is not None and parsed.is_global


def network_prefix(value: object) -> str | None:
    """First octet (IPv4) or first hextet (IPv6) of an address."""
    parsed = parse_ip(value)
    if isinstance(parsed, IPv4Address):
        return str(parsed).split(".", 1)[0]
    if isinstance(parsed, IPv6Address):
        return parsed.exploded.split(":", 1)[0]
    return None


def parse_asn(value: object) -> str | None:
    if not isinstance(value, str):
        return None
    match = _ASN_PATTERN.match(value)
    if not match:
        return None
    return match.group(1).upper()


__all__ = (
    "is_global_ip",
    "is_link_local_ip",
    "is_mdns_candidate",
    "is_private_ip",
    "network_prefix",
    "normalize_ip",
    "parse_asn",
    "parse_ip",
)
