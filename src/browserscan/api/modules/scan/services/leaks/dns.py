from collections.abc import Iterable

from browserscan.api.modules.scan.schema import DNSLeakResult
from browserscan.api.modules.scan.services.core import clean_text
from browserscan.api.modules.scan.services.network import (
    is_global_ip,
    normalize_ip,
    parse_ip,
)

SECURE_DNS_SERVERS = frozenset(
    {
        # Cloudflare
        "1.1.1.1",
        "1.0.0.1",
        "2606:4700:4700::1111",
        "2606:4700:4700::1001",
        # Google
        "8.8.8.8",
        "8.8.4.4",
        "2001:4860:4860::8888",
        "2001:4860:4860::8844",
        # Quad9
        "9.9.9.9",
        "149.112.112.112",
        "2620:fe::fe",
        "2620:fe::9",
        # OpenDNS
        "208.67.222.222",
        "208.67.220.220",
        # NextDNS
        "45.90.28.0",
        "45.90.30.0",
        # AdGuard
        "94.140.14.14",
        "94.140.15.15",
    }
)


def is_secure_dns_server(server: str) -> bool:
    return normalize_ip(server) in SECURE_DNS_SERVERS


def is_isp_assigned_server(server: str) -> bool:
    """Private, CGNAT, loopback or otherwise non-routable resolver address."""
    return parse_ip(server) is not None and not is_global_ip(server)


def classify_dns(server_ips: object) -> DNSLeakResult:
    if isinstance(server_ips, str) or not isinstance(server_ips, Iterable):
        servers: list[str] = []
    else:
        servers = [item for item in (clean_text(ip) for ip in server_ips) if item]

    if not servers:
        return DNSLeakResult(
            status="UNKNOWN",
            explanation="DNS server detection not available",
        )

    secure_count = sum(1 for server in servers if is_secure_dns_server(server))
    is_secure_dns = secure_count > 0
    is_isp_dns = any(is_isp_assigned_server(server) for server in servers)

    if secure_count == len(servers):
        return DNSLeakResult(
            status="SAFE",
            detected_servers=servers,
            is_secure_dns=True,
            explanation="Using encrypted DNS service - your DNS queries are protected",
        )

    if is_isp_dns and is_secure_dns:
        return DNSLeakResult(
            status="WARN",
            detected_servers=servers,
            is_secure_dns=True,
            is_isp_dns=True,
            risk_level="low",
            explanation=(
                "Using a mix of secure and ISP-assigned DNS servers - some queries may leak"
            ),
        )

    if is_isp_dns:
        return DNSLeakResult(
            status="WARN",
            detected_servers=servers,
            is_isp_dns=True,
            risk_level="medium",
            explanation=(
                "Using ISP-assigned DNS servers - your DNS queries may reveal your"
                " location and browsing activity"
            ),
        )

    return DNSLeakResult(
        status="SAFE",
        detected_servers=servers,
        is_secure_dns=is_secure_dns,
        risk_level="none",
        explanation="Using public DNS resolvers - no ISP resolver detected",
    )


__all__ = (
    "SECURE_DNS_SERVERS",
    "classify_dns",
    "is_isp_assigned_server",
    "is_secure_dns_server",
)
