from ipaddress import IPv6Address

from browserscan.api.modules.scan.schema import IPv6LeakResult
from browserscan.api.modules.scan.services.core import clean_text
from browserscan.api.modules.scan.services.network import is_link_local_ip, parse_ip


def classify_ipv6(address: object, *, vpn_active: bool = False) -> IPv6LeakResult:
    """Classify the IPv6 address a client exposed, if any.

    A routable IPv6 address only counts as leaked when the session is
    otherwise tunnelled (``vpn_active``); scoring never deducts for it.
    """
    raw = clean_text(address)
    if not raw:
        return IPv6LeakResult(
            status="SAFE",
            explanation="No IPv6 address detected - no IPv6 leak possible",
        )

    parsed = parse_ip(raw)
    if not isinstance(parsed, IPv6Address):
        return IPv6LeakResult(
            status="UNKNOWN",
            ipv6_address=raw,
            explanation="Reported IPv6 address could not be parsed",
        )

    if is_link_local_ip(raw):
        return IPv6LeakResult(
            status="SAFE",
            ipv6_address=raw,
            explanation="Only link-local IPv6 detected - not a privacy concern",
        )

    if not parsed.is_global:
        return IPv6LeakResult(
            status="SAFE",
            ipv6_address=raw,
            explanation="IPv6 address is not globally routable",
        )

    if vpn_active:
        return IPv6LeakResult(
            status="LEAK",
            ipv6_address=raw,
            ipv6_leaked=True,
            risk_level="high",
            explanation=(
                "IPv6 address exposed while VPN is active - your real location may be revealed"
            ),
        )

    return IPv6LeakResult(
        status="SAFE",
        ipv6_address=raw,
        explanation="IPv6 address detected but no VPN bypass detected",
    )


__all__ = ("classify_ipv6",)
