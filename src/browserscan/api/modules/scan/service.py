import logging
import uuid
from dataclasses import asdict
from datetime import UTC, datetime

from browserscan.api.modules.scan.schema import (
    IpClassifyRequest,
    IpClassifyResponse,
    LeakTestRequest,
    LeakTestResult,
    ScanIdentity,
    ScanMeta,
    ScanReport,
    ScanRequest,
    ScoreCard,
    ScoreRequest,
)
from browserscan.api.modules.scan.services import (
    apply_bot_penalty,
    build_protocol_fingerprints,
    classify_ip,
    compute_score,
    detect_automation,
    parse_user_agent,
    run_leak_test,
)
from browserscan.api.modules.scan.services.collectors import (
    build_consistency_section,
    build_network_section,
)
from browserscan.api.modules.scan.services.network import (
    IpClassification,
    UserAgentInfo,
)
from browserscan.settings import Config

logger = logging.getLogger(__name__)


def _join(*parts: str | None, sep: str = " ") -> str:
    return sep.join(part for part in parts if part)


class ScanFacadeService:
    """Wires request evidence through the classifiers and the scoring engine."""

    def __init__(self, config: Config):
        self._config = config

    def build_report(self, payload: ScanRequest) -> ScanReport:
        ip_intel = payload.ip_intel
        client = payload.client
        server = payload.server
        ua = parse_user_agent(client.user_agent)

        classification = classify_ip(ip_intel.asn, ip_intel.privacy, ip_intel.is_bogon)
        consistency = build_consistency_section(
            ip_timezone=ip_intel.timezone,
            client_timezone=client.timezone,
            ip_country_code=ip_intel.country_code,
            languages=client.languages,
            ua_os=ua.os if ua.os != "Unknown" else None,
            webgl_renderer=client.webgl_renderer,
        )
        leaks = run_leak_test(
            public_ip=ip_intel.ip,
            webrtc_ips=client.webrtc_ips,
            dns_servers=client.dns_servers,
            ipv6_address=client.ipv6_address,
            vpn_active=classification.is_vpn or classification.is_proxy,
        )
        protocols = build_protocol_fingerprints(
            tls_version=server.tls_version if server else None,
            tls_cipher=server.tls_cipher if server else None,
            http_version=server.http_protocol if server else None,
            tcp_os_guess=(server.tcp_os_guess if server else None) or ua.os,
        )
        network = build_network_section(classification, protocols, leaks)

        score = compute_score(network, consistency, payload.open_ports)
        if self._config.scan.bot_penalty_enabled:
            evidence = detect_automation(
                client.user_agent,
                is_webdriver=client.is_webdriver,
                is_headless=client.is_headless,
            )
            if evidence:
                score = apply_bot_penalty(score, evidence)

        scan_id = payload.scan_id or str(uuid.uuid4())
        logger.info(
            "Scan report assembled",
            extra={"scan_id": scan_id, "total": score.total, "grade": score.grade},
        )

        return ScanReport(
            meta=ScanMeta(
                scan_id=scan_id,
                timestamp=int(datetime.now(UTC).timestamp()),
                version=self._config.scan.report_version,
            ),
            score=score,
            identity=self._build_identity(payload, classification, ua),
            network=network,
            consistency=consistency,
            leaks=leaks,
        )

    def _build_identity(
        self,
        payload: ScanRequest,
        classification: IpClassification,
        ua: UserAgentInfo,
    ) -> ScanIdentity:
        ip_intel = payload.ip_intel
        return ScanIdentity(
            ip=ip_intel.ip,
            asn=_join(classification.asn, ip_intel.org),
            location=_join(ip_intel.city, ip_intel.country_code, sep=", ") or "Unknown",
            browser=_join(ua.browser, ua.browser_version),
            os=_join(ua.os, ua.os_version),
            device=ua.device,
        )

    def score(self, payload: ScoreRequest) -> ScoreCard:
        return compute_score(payload.network, payload.consistency, payload.open_ports)

    def leak_test(self, payload: LeakTestRequest) -> LeakTestResult:
        return run_leak_test(
            public_ip=payload.public_ip,
            webrtc_ips=payload.webrtc_ips,
            dns_servers=payload.dns_servers,
            ipv6_address=payload.ipv6_address,
            vpn_active=payload.vpn_active,
        )

    def classify_ip(self, payload: IpClassifyRequest) -> IpClassifyResponse:
        classification = classify_ip(payload.asn, payload.privacy, payload.is_bogon)
        return IpClassifyResponse(**asdict(classification))


__all__ = ("ScanFacadeService",)
