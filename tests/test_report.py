from __future__ import annotations

from browserscan.api.modules.scan.schema import (
    ClientFingerprint,
    IpIntelPayload,
    ScanRequest,
    ServerSignals,
)
from browserscan.api.modules.scan.service import ScanFacadeService
from browserscan.settings import Config, ScanConfig
from tests.helpers_scan import (
    APPLE_M4_RENDERER,
    CHROME_WINDOWS_UA,
    GOOGLE_IPV6,
    HEADLESS_CHROME_UA,
    NVIDIA_RENDERER,
)


def _codes(report) -> list[str]:
    return [item.code for item in report.score.deductions]


def test_clean_scan_report(config: Config, clean_scan: ScanRequest) -> None:
    report = ScanFacadeService(config).build_report(clean_scan)

    assert report.score.total == 100
    assert report.score.grade == "A+"
    assert report.score.verdict == "Low Risk"
    assert report.score.deductions == []

    assert report.meta.scan_id == "scan-clean"
    assert report.meta.version == "1.0.0"
    assert report.meta.timestamp > 0

    assert report.identity.ip == "203.0.113.1"
    assert report.identity.asn == "AS7922 Comcast Cable Communications, LLC"
    assert report.identity.location == "Philadelphia, US"
    assert report.identity.browser == "Chrome 120"
    assert report.identity.os == "Windows 10/11"
    assert report.identity.device == "Desktop"

    assert report.consistency.timezone_check.status == "PASS"
    assert report.consistency.language_check.status == "PASS"
    assert report.consistency.os_check.status == "PASS"
    assert report.network.risk.fraud_score == 0
    assert report.network.leaks.webrtc.status == "SAFE"
    assert report.network.leaks.dns.status == "SAFE"
    assert report.network.leaks.dns.servers == ["1.1.1.1"]
    assert report.network.protocols.tcp_os_guess == "Windows"
    assert report.leaks.overall_status == "SAFE"


def test_generated_scan_id_when_missing(config: Config, clean_scan: ScanRequest) -> None:
    payload = clean_scan.model_copy(update={"scan_id": None})
    first = ScanFacadeService(config).build_report(payload)
    second = ScanFacadeService(config).build_report(payload)
    assert first.meta.scan_id
    assert first.meta.scan_id != second.meta.scan_id


def test_server_signals_feed_protocols(config: Config, clean_scan: ScanRequest) -> None:
    payload = clean_scan.model_copy(
        update={
            "server": ServerSignals(
                tls_version="TLSv1.3",
                tls_cipher="TLS_AES_128_GCM_SHA256",
                http_protocol="HTTP/2",
                tcp_os_guess="Linux",
            )
        }
    )
    protocols = ScanFacadeService(config).build_report(payload).network.protocols
    assert protocols.tls_version == "TLSv1.3"
    assert protocols.http_version == "HTTP/2"
    assert protocols.tcp_os_guess == "Linux"


def test_webdriver_applies_bot_penalty(config: Config, clean_scan: ScanRequest) -> None:
    client = clean_scan.client.model_copy(update={"is_webdriver": True})
    report = ScanFacadeService(config).build_report(
        clean_scan.model_copy(update={"client": client})
    )
    assert _codes(report) == ["BOT_DETECTED"]
    assert report.score.deductions[0].desc == "WebDriver detected"
    assert report.score.total == 70
    assert report.score.grade == "B-"


def test_headless_user_agent_applies_bot_penalty(
    config: Config,
    clean_scan: ScanRequest,
) -> None:
    client = clean_scan.client.model_copy(
        update={"user_agent": HEADLESS_CHROME_UA, "webgl_renderer": None}
    )
    report = ScanFacadeService(config).build_report(
        clean_scan.model_copy(update={"client": client})
    )
    assert _codes(report) == ["BOT_DETECTED"]
    assert report.score.deductions[0].desc == (
        "Automation marker in User-Agent (headlesschrome)"
    )


def test_bot_penalty_can_be_disabled(clean_scan: ScanRequest) -> None:
    config = Config(env="prod", scan=ScanConfig(bot_penalty_enabled=False))
    client = clean_scan.client.model_copy(update={"is_webdriver": True})
    report = ScanFacadeService(config).build_report(
        clean_scan.model_copy(update={"client": client})
    )
    assert report.score.total == 100


def test_datacenter_proxy_with_spoofed_fingerprint(config: Config) -> None:
    payload = ScanRequest(
        ip_intel=IpIntelPayload(
            ip="52.28.10.11",
            asn="AS16509 Amazon.com, Inc.",
            country_code="DE",
            city="Frankfurt am Main",
            timezone="Europe/Berlin",
            privacy={"proxy": True, "vpn": False, "tor": False, "hosting": True},
        ),
        client=ClientFingerprint(
            user_agent=CHROME_WINDOWS_UA,
            timezone="America/New_York",
            languages=["ja-JP"],
            webgl_renderer=APPLE_M4_RENDERER,
            webrtc_ips=["10.0.0.2"],
        ),
    )
    report = ScanFacadeService(config).build_report(payload)

    assert _codes(report) == ["IP_RISK", "TZ_MISMATCH", "OS_MISMATCH", "LANG_MISMATCH"]
    assert report.score.deductions[0].desc == "Proxy/datacenter IP detected"
    assert "Apple Silicon" in report.score.deductions[2].desc
    assert report.score.total == 45
    assert report.score.grade == "F"
    assert report.score.verdict == "High Risk"

    assert report.identity.asn == "AS16509"
    assert report.network.risk.is_proxy is True
    assert report.network.risk.fraud_score == 70
    assert report.leaks.dns.status == "UNKNOWN"


def test_vpn_user_leaking_through_webrtc(config: Config) -> None:
    payload = ScanRequest(
        ip_intel=IpIntelPayload(
            ip="203.0.113.50",
            asn="AS212238",
            org="Datacamp Limited",
            country_code="NL",
            city="Amsterdam",
            timezone="Europe/Amsterdam",
            privacy={"vpn": True},
        ),
        client=ClientFingerprint(
            user_agent=CHROME_WINDOWS_UA,
            timezone="Europe/Amsterdam",
            languages=["nl-NL", "en"],
            webgl_renderer=NVIDIA_RENDERER,
            webrtc_ips=["192.168.1.5", "198.51.100.9"],
            dns_servers=["1.1.1.1"],
            ipv6_address=GOOGLE_IPV6,
        ),
    )
    report = ScanFacadeService(config).build_report(payload)

    assert _codes(report) == ["VPN_DETECTED", "WEBRTC_LEAK"]
    assert report.score.deductions[1].desc == "Real IP leaked via WebRTC (198.51.100.9)"
    assert report.score.total == 65
    assert report.score.grade == "C+"
    assert report.score.verdict == "Elevated Risk"

    assert report.network.leaks.webrtc.status == "LEAK"
    assert report.network.leaks.webrtc.ip == "198.51.100.9"
    assert report.leaks.webrtc.risk_level == "high"
    assert report.leaks.ipv6.ipv6_leaked is True
    assert report.leaks.overall_status == "LEAK"
