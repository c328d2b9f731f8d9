from browserscan.api.modules.scan.services.core.utils import (
    clamp_score,
    clean_text,
    create_check,
    create_deduction,
)

__all__ = (
    "clamp_score",
    "clean_text",
    "create_check",
    "create_deduction",
)
