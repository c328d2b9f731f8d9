from browserscan.api.modules.scan.schema import LeakStatus, LeakTestResult, RiskLevel
from browserscan.api.modules.scan.services.leaks.dns import classify_dns
from browserscan.api.modules.scan.services.leaks.ipv6 import classify_ipv6
from browserscan.api.modules.scan.services.leaks.webrtc import classify_webrtc

# Most severe first.
STATUS_PRECEDENCE: tuple[LeakStatus, ...] = ("LEAK", "WARN", "UNKNOWN", "SAFE")
RISK_PRECEDENCE: tuple[RiskLevel, ...] = ("high", "medium", "low", "none")

ALL_CLEAR_RECOMMENDATION = (
    "Your privacy protection is working well. Continue using secure practices."
)


def _most_severe(values: list[str], precedence: tuple[str, ...]) -> str:
    for value in precedence:
        if value in values:
            return value
    return precedence[-1]


def run_leak_test(
    public_ip: str | None,
    webrtc_ips: list[str] | None,
    dns_servers: list[str] | None,
    ipv6_address: str | None,
    *,
    vpn_active: bool = False,
) -> LeakTestResult:
    webrtc = classify_webrtc(webrtc_ips, public_ip)
    dns = classify_dns(dns_servers)
    ipv6 = classify_ipv6(ipv6_address, vpn_active=vpn_active)

    recommendations: list[str] = []
    if webrtc.status == "LEAK":
        recommendations.append(
            "Disable WebRTC in your browser or use an extension that blocks WebRTC leaks"
        )
        recommendations.append(
            "Consider using Firefox with media.peerconnection.enabled set to false"
        )
    if dns.is_isp_dns:
        recommendations.append(
            "Switch to a secure DNS provider like Cloudflare (1.1.1.1) or Google (8.8.8.8)"
        )
        recommendations.append("Enable DNS-over-HTTPS (DoH) in your browser settings")
    if ipv6.ipv6_leaked:
        recommendations.append(
            "Disable IPv6 in your network settings or ensure your VPN supports IPv6"
        )
        recommendations.append("Check if your VPN has IPv6 leak protection enabled")
    if not recommendations:
        recommendations.append(ALL_CLEAR_RECOMMENDATION)

    return LeakTestResult(
        webrtc=webrtc,
        dns=dns,
        ipv6=ipv6,
        overall_status=_most_severe(
            [webrtc.status, dns.status, ipv6.status],
            STATUS_PRECEDENCE,
        ),
        overall_risk=_most_severe(
            [webrtc.risk_level, dns.risk_level, ipv6.risk_level],
            RISK_PRECEDENCE,
        ),
        recommendations=recommendations,
    )


__all__ = ("run_leak_test",)
