import logging
from collections.abc import Iterable, Mapping
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from browserscan.api.modules.scan.schema import (
    ConsistencyCheck,
    ConsistencySection,
    DNSTelemetry,
    LeakTelemetry,
    NetworkRisk,
    NetworkSection,
    ProtocolFingerprints,
    ScoreCard,
    ScoreDeduction,
    WebRTCTelemetry,
)
from browserscan.api.modules.scan.services.core import clamp_score, create_deduction
from browserscan.api.modules.scan.services.scoring.rules import (
    SCORING_RULES,
    ScoringContext,
    ScoringRule,
)

logger = logging.getLogger(__name__)

BASE_SCORE = 100
BOT_PENALTY = 30

# Inclusive lower bounds, highest first.
GRADE_THRESHOLDS: tuple[tuple[int, str], ...] = (
    (95, "A+"),
    (90, "A"),
    (85, "A-"),
    (80, "B+"),
    (75, "B"),
    (70, "B-"),
    (65, "C+"),
    (60, "C"),
    (55, "C-"),
    (50, "D"),
)
LOWEST_GRADE = "F"
GRADE_ORDER: tuple[str, ...] = (LOWEST_GRADE,) + tuple(
    grade for _, grade in reversed(GRADE_THRESHOLDS)
)

VERDICT_THRESHOLDS: tuple[tuple[int, str], ...] = (
    (85, "Low Risk"),
    (70, "Moderate Risk"),
    (50, "Elevated Risk"),
)
LOWEST_VERDICT = "High Risk"

CONSISTENCY_CHECKS = ("timezone_check", "language_check", "os_check")

ModelT = TypeVar("ModelT", bound=BaseModel)


def grade_for_score(total: int) -> str:
    for threshold, grade in GRADE_THRESHOLDS:
        if total >= threshold:
            return grade
    return LOWEST_GRADE


def verdict_for_score(total: int) -> str:
    for threshold, verdict in VERDICT_THRESHOLDS:
        if total >= threshold:
            return verdict
    return LOWEST_VERDICT


def _coerce_model(
    value: object,
    model: type[ModelT],
    name: str,
) -> ModelT | None:
    """Validate one evidence model, dropping only the fields that fail.

    Dropped fields fall back to their defaults. When a required field is
    missing or invalid the whole model is treated as absent.
    """
    if value is None or isinstance(value, model):
        return value
    if not isinstance(value, Mapping):
        logger.warning("Ignoring %s of type %s", name, type(value).__name__)
        return None

    data = dict(value)
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        invalid = {error["loc"][0] for error in exc.errors() if error["loc"]}
        logger.debug("%s validation failed: %s", name, exc)

    logger.warning(
        "Ignoring invalid %s fields: %s",
        name,
        ", ".join(sorted(str(field) for field in invalid)),
    )
    kept = {key: item for key, item in data.items() if key not in invalid}
    try:
        return model.model_validate(kept)
    except ValidationError:
        logger.warning("Ignoring invalid %s", name)
        return None


def _coerce_network(value: object) -> NetworkSection | None:
    if value is None or isinstance(value, NetworkSection):
        return value
    if not isinstance(value, Mapping):
        logger.warning("Ignoring network section of type %s", type(value).__name__)
        return None

    leaks = value.get("leaks")
    if isinstance(leaks, Mapping):
        leaks = LeakTelemetry(
            webrtc=_coerce_model(
                leaks.get("webrtc"),
                WebRTCTelemetry,
                "network.leaks.webrtc",
            ),
            dns=_coerce_model(leaks.get("dns"), DNSTelemetry, "network.leaks.dns"),
        )
    else:
        leaks = _coerce_model(leaks, LeakTelemetry, "network.leaks")

    return NetworkSection(
        risk=_coerce_model(value.get("risk"), NetworkRisk, "network.risk"),
        protocols=_coerce_model(
            value.get("protocols"),
            ProtocolFingerprints,
            "network.protocols",
        ),
        leaks=leaks,
    )


def _coerce_consistency(value: object) -> ConsistencySection | None:
    if value is None or isinstance(value, ConsistencySection):
        return value
    if not isinstance(value, Mapping):
        logger.warning("Ignoring consistency section of type %s", type(value).__name__)
        return None

    return ConsistencySection(
        **{
            name: _coerce_model(value.get(name), ConsistencyCheck, f"consistency.{name}")
            for name in CONSISTENCY_CHECKS
        }
    )


def _coerce_ports(open_ports: object) -> tuple[int, ...]:
    if isinstance(open_ports, str | bytes) or not isinstance(open_ports, Iterable):
        return ()
    return tuple(
        port
        for port in open_ports
        if isinstance(port, int) and not isinstance(port, bool)
    )


def build_score_card(deductions: list[ScoreDeduction]) -> ScoreCard:
    total = clamp_score(BASE_SCORE + sum(item.score for item in deductions))
    return ScoreCard(
        total=total,
        grade=grade_for_score(total),
        verdict=verdict_for_score(total),
        deductions=deductions,
    )


def compute_score(
    network: NetworkSection | Mapping | None = None,
    consistency: ConsistencySection | Mapping | None = None,
    open_ports: Iterable[int] | None = None,
    rules: tuple[ScoringRule, ...] = SCORING_RULES,
) -> ScoreCard:
    """Fold network and consistency evidence into a 0-100 trust score.

    Sections may be partial or missing; a missing section contributes no
    deductions. Mapping input is validated per evidence model, so an invalid
    field only disables the rules that read it. Deductions keep rule
    evaluation order.
    """
    ctx = ScoringContext(
        network=_coerce_network(network),
        consistency=_coerce_consistency(consistency),
        open_ports=_coerce_ports(open_ports),
    )

    deductions: list[ScoreDeduction] = []
    for rule in rules:
        deduction = rule.evaluate(ctx)
        if deduction is None:
            continue
        logger.debug("Deduction %s (%d): %s", deduction.code, deduction.score, deduction.desc)
        deductions.append(deduction)

    return build_score_card(deductions)


def apply_bot_penalty(card: ScoreCard, evidence: str | None) -> ScoreCard:
    """Return a copy of ``card`` with a BOT_DETECTED deduction appended.

    Not idempotent: callers apply it at most once per report.
    """
    total = clamp_score(card.total - BOT_PENALTY)
    deduction = create_deduction(
        "BOT_DETECTED",
        BOT_PENALTY,
        evidence or "Automated browser detected",
    )
    return ScoreCard(
        total=total,
        grade=grade_for_score(total),
        verdict=verdict_for_score(total),
        deductions=[*card.deductions, deduction],
    )


__all__ = (
    "BOT_PENALTY",
    "GRADE_ORDER",
    "GRADE_THRESHOLDS",
    "VERDICT_THRESHOLDS",
    "apply_bot_penalty",
    "build_score_card",
    "compute_score",
    "grade_for_score",
    "verdict_for_score",
)
