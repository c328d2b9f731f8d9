from collections.abc import Callable
from dataclasses import dataclass

from browserscan.api.modules.scan.schema import (
    CheckStatus,
    ConsistencyCheck,
    ConsistencySection,
    NetworkRisk,
    NetworkSection,
    ScoreDeduction,
)
from browserscan.api.modules.scan.services.core import create_deduction

HIGH_FRAUD_SCORE = 75
CRITICAL_PORTS = (22, 3389, 5900)  # SSH, RDP, VNC


@dataclass(slots=True, frozen=True)
class ScoringContext:
    network: NetworkSection | None = None
    consistency: ConsistencySection | None = None
    open_ports: tuple[int, ...] = ()

    @property
    def risk(self) -> NetworkRisk | None:
        return self.network.risk if self.network else None

    def leak_status(self, channel: str) -> str | None:
        leaks = self.network.leaks if self.network else None
        telemetry = getattr(leaks, channel, None) if leaks else None
        return telemetry.status if telemetry else None

    def check(self, name: str) -> ConsistencyCheck | None:
        if self.consistency is None:
            return None
        return getattr(self.consistency, name)

    def check_status(self, name: str) -> CheckStatus | None:
        check = self.check(name)
        return check.status if check else None

    def critical_ports(self) -> list[int]:
        matched: list[int] = []
        for port in self.open_ports:
            if port in CRITICAL_PORTS and port not in matched:
                matched.append(port)
        return matched


@dataclass(slots=True, frozen=True)
class ScoringRule:
    code: str
    points: int
    applies: Callable[[ScoringContext], bool]
    describe: Callable[[ScoringContext], str]

    def evaluate(self, ctx: ScoringContext) -> ScoreDeduction | None:
        if not self.applies(ctx):
            return None
        return create_deduction(self.code, self.points, self.describe(ctx))


def _is_high_ip_risk(ctx: ScoringContext) -> bool:
    risk = ctx.risk
    if risk is None:
        return False
    return risk.fraud_score > HIGH_FRAUD_SCORE or risk.is_proxy or risk.is_tor


def _describe_ip_risk(ctx: ScoringContext) -> str:
    risk = ctx.risk
    if risk is not None and risk.is_tor:
        return "Tor exit node detected"
    if risk is not None and risk.is_proxy:
        return "Proxy/datacenter IP detected"
    score = risk.fraud_score if risk is not None else 0
    return f"High fraud score ({score})"


def _is_vpn_only(ctx: ScoringContext) -> bool:
    risk = ctx.risk
    return risk is not None and risk.is_vpn and not _is_high_ip_risk(ctx)


def _describe_webrtc_leak(ctx: ScoringContext) -> str:
    leaks = ctx.network.leaks if ctx.network else None
    leaked_ip = leaks.webrtc.ip if leaks and leaks.webrtc else ""
    if leaked_ip:
        return f"Real IP leaked via WebRTC ({leaked_ip})"
    return "Real IP leaked via WebRTC"


def _check_is(name: str, status: CheckStatus) -> Callable[[ScoringContext], bool]:
    return lambda ctx: ctx.check_status(name) == status


def _evidence_or(name: str, fallback: str) -> Callable[[ScoringContext], str]:
    def describe(ctx: ScoringContext) -> str:
        check = ctx.check(name)
        return (check.evidence if check else "") or fallback

    return describe


def _describe_open_ports(ctx: ScoringContext) -> str:
    ports = ", ".join(str(port) for port in ctx.critical_ports())
    return f"Critical ports open: {ports}"


# Evaluation order is the order deductions appear on the score card.
SCORING_RULES: tuple[ScoringRule, ...] = (
    ScoringRule(
        code="IP_RISK",
        points=20,
        applies=_is_high_ip_risk,
        describe=_describe_ip_risk,
    ),
    ScoringRule(
        code="VPN_DETECTED",
        points=10,
        applies=_is_vpn_only,
        describe=lambda ctx: "VPN connection detected",
    ),
    ScoringRule(
        code="WEBRTC_LEAK",
        points=25,
        applies=lambda ctx: ctx.leak_status("webrtc") == "LEAK",
        describe=_describe_webrtc_leak,
    ),
    ScoringRule(
        code="DNS_LEAK",
        points=10,
        applies=lambda ctx: ctx.leak_status("dns") == "LEAK",
        describe=lambda ctx: "DNS requests not using secure resolver",
    ),
    ScoringRule(
        code="TZ_MISMATCH",
        points=15,
        applies=_check_is("timezone_check", "FAIL"),
        describe=_evidence_or(
            "timezone_check", "System timezone differs from IP location"
        ),
    ),
    ScoringRule(
        code="OS_MISMATCH",
        points=15,
        applies=_check_is("os_check", "FAIL"),
        describe=_evidence_or("os_check", "OS fingerprints inconsistent across sources"),
    ),
    ScoringRule(
        code="LANG_MISMATCH",
        points=5,
        applies=_check_is("language_check", "FAIL"),
        describe=_evidence_or(
            "language_check", "Browser language inconsistent with IP country"
        ),
    ),
    ScoringRule(
        code="LANG_WARN",
        points=2,
        applies=_check_is("language_check", "WARN"),
        describe=_evidence_or(
            "language_check", "Language settings may indicate spoofing"
        ),
    ),
    ScoringRule(
        code="OPEN_PORTS",
        points=10,
        applies=lambda ctx: bool(ctx.critical_ports()),
        describe=_describe_open_ports,
    ),
)


__all__ = (
    "CRITICAL_PORTS",
    "HIGH_FRAUD_SCORE",
    "SCORING_RULES",
    "ScoringContext",
    "ScoringRule",
)
