from collections.abc import Iterable

from browserscan.api.modules.scan.schema import WebRTCLeakResult
from browserscan.api.modules.scan.services.core import clean_text
from browserscan.api.modules.scan.services.network import (
    is_link_local_ip,
    is_mdns_candidate,
    is_private_ip,
    network_prefix,
    normalize_ip,
)


def is_local_candidate(candidate: str) -> bool:
    # mDNS names (".local") stand in for a hidden host candidate and carry
    # no routable address, so they never count as public.
    return (
        is_private_ip(candidate)
        or is_link_local_ip(candidate)
        or is_mdns_candidate(candidate)
    )


def _same_address(candidate: str, known_ip: str) -> bool:
    normalized = normalize_ip(candidate)
    known = normalize_ip(known_ip)
    if normalized is not None and known is not None:
        return normalized == known
    return candidate == known_ip


def _candidates(candidate_ips: object) -> list[str]:
    """Stripped candidate strings; blank and non-string entries are not candidates."""
    if isinstance(candidate_ips, str) or not isinstance(candidate_ips, Iterable):
        return []
    return [item for item in (clean_text(ip) for ip in candidate_ips) if item]


def classify_webrtc(candidate_ips: object, known_public_ip: object) -> WebRTCLeakResult:
    """Split ICE candidate IPs into local and public ones and find leaks.

    Any public candidate other than the session's own public IP is a leak,
    whether or not a VPN is in use.
    """
    public_ip = clean_text(known_public_ip) or None
    candidates = _candidates(candidate_ips)

    if not candidates:
        return WebRTCLeakResult(
            status="UNKNOWN",
            public_ip=public_ip,
            explanation="WebRTC detection not available or blocked",
        )

    local_ips: list[str] = []
    public_ips: list[str] = []
    for candidate in candidates:
        if is_local_candidate(candidate):
            local_ips.append(candidate)
        else:
            public_ips.append(candidate)

    leaked_ips = [
        candidate
        for candidate in public_ips
        if public_ip is None or not _same_address(candidate, public_ip)
    ]

    if not public_ips:
        return WebRTCLeakResult(
            status="SAFE",
            public_ip=public_ip,
            local_ips=local_ips,
            risk_level="none",
            explanation="No public IP addresses exposed via WebRTC",
        )

    if not leaked_ips:
        return WebRTCLeakResult(
            status="SAFE",
            public_ip=public_ip,
            local_ips=local_ips,
            public_ips=public_ips,
            risk_level="low",
            explanation="WebRTC shows your public IP, but no additional IPs leaked",
        )

    known_prefix = network_prefix(public_ip)
    if any(network_prefix(ip) != known_prefix for ip in leaked_ips):
        risk_level = "high"
        explanation = "WebRTC is leaking your real IP address, bypassing VPN protection"
    else:
        risk_level = "medium"
        explanation = f"WebRTC is leaking {len(leaked_ips)} additional IP address(es)"

    return WebRTCLeakResult(
        status="LEAK",
        public_ip=public_ip,
        local_ips=local_ips,
        public_ips=public_ips,
        leaked_ips=leaked_ips,
        risk_level=risk_level,
        explanation=explanation,
    )


__all__ = ("classify_webrtc", "is_local_candidate")
