from browserscan.api.modules.scan.services.scoring.engine import (
    BOT_PENALTY,
    GRADE_ORDER,
    apply_bot_penalty,
    compute_score,
    grade_for_score,
    verdict_for_score,
)
from browserscan.api.modules.scan.services.scoring.rules import (
    CRITICAL_PORTS,
    SCORING_RULES,
    ScoringContext,
    ScoringRule,
)

__all__ = (
    "BOT_PENALTY",
    "CRITICAL_PORTS",
    "GRADE_ORDER",
    "SCORING_RULES",
    "ScoringContext",
    "ScoringRule",
    "apply_bot_penalty",
    "compute_score",
    "grade_for_score",
    "verdict_for_score",
)
