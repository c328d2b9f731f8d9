from browserscan.api.modules.scan.schema import (
    CheckStatus,
    ConsistencyCheck,
    ScoreDeduction,
)


def create_check(status: CheckStatus, evidence: str) -> ConsistencyCheck:
    return ConsistencyCheck(status=status, evidence=evidence)


def create_deduction(code: str, points: int, desc: str) -> ScoreDeduction:
    return ScoreDeduction(code=code, score=-abs(points), desc=desc)


def clamp_score(value: int, lower: int = 0, upper: int = 100) -> int:
    return max(lower, min(upper, value))


def clean_text(value: object) -> str:
    """Return a stripped string, or an empty one for anything that is not text."""
    if not isinstance(value, str):
        return ""
    return value.strip()


__all__ = (
    "clamp_score",
    "clean_text",
    "create_check",
    "create_deduction",
)
