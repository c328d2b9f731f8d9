from browserscan.api.modules.scan.schema import (
    DNSTelemetry,
    LeakTelemetry,
    LeakTestResult,
    NetworkRisk,
    NetworkSection,
    ProtocolFingerprints,
    WebRTCTelemetry,
)
from browserscan.api.modules.scan.services.network import IpClassification


def network_risk_from(classification: IpClassification) -> NetworkRisk:
    return NetworkRisk(
        is_proxy=classification.is_proxy,
        is_vpn=classification.is_vpn,
        is_tor=classification.is_tor,
        fraud_score=classification.fraud_score,
    )


def leak_telemetry_from(leaks: LeakTestResult) -> LeakTelemetry:
    webrtc = leaks.webrtc
    if webrtc.leaked_ips:
        # Region needs a second IP lookup, which happens outside the core.
        telemetry = WebRTCTelemetry(
            status=webrtc.status,
            ip=webrtc.leaked_ips[0],
            region="Unknown",
        )
    elif webrtc.public_ips:
        telemetry = WebRTCTelemetry(status=webrtc.status, ip=webrtc.public_ip or "")
    else:
        telemetry = WebRTCTelemetry(status=webrtc.status)

    return LeakTelemetry(
        webrtc=telemetry,
        dns=DNSTelemetry(
            status=leaks.dns.status,
            servers=list(leaks.dns.detected_servers),
        ),
    )


def build_network_section(
    classification: IpClassification,
    protocols: ProtocolFingerprints,
    leaks: LeakTestResult,
) -> NetworkSection:
    return NetworkSection(
        risk=network_risk_from(classification),
        protocols=protocols,
        leaks=leak_telemetry_from(leaks),
    )


__all__ = (
    "build_network_section",
    "leak_telemetry_from",
    "network_risk_from",
)
