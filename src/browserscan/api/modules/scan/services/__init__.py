from browserscan.api.modules.scan.services.automation import detect_automation
from browserscan.api.modules.scan.services.context import (
    check_language,
    check_os,
    check_timezone,
)
from browserscan.api.modules.scan.services.leaks import (
    classify_dns,
    classify_ipv6,
    classify_webrtc,
    run_leak_test,
)
from browserscan.api.modules.scan.services.network import (
    IpClassification,
    classify_ip,
    parse_user_agent,
)
from browserscan.api.modules.scan.services.platform import build_protocol_fingerprints
from browserscan.api.modules.scan.services.scoring import (
    apply_bot_penalty,
    compute_score,
    grade_for_score,
    verdict_for_score,
)

__all__ = (
    "IpClassification",
    "apply_bot_penalty",
    "build_protocol_fingerprints",
    "check_language",
    "check_os",
    "check_timezone",
    "classify_dns",
    "classify_ip",
    "classify_ipv6",
    "classify_webrtc",
    "compute_score",
    "detect_automation",
    "grade_for_score",
    "parse_user_agent",
    "run_leak_test",
    "verdict_for_score",
)
