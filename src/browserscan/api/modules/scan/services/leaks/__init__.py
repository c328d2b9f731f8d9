from browserscan.api.modules.scan.services.leaks.dns import classify_dns
from browserscan.api.modules.scan.services.leaks.ipv6 import classify_ipv6
from browserscan.api.modules.scan.services.leaks.report import run_leak_test
from browserscan.api.modules.scan.services.leaks.webrtc import classify_webrtc

__all__ = (
    "classify_dns",
    "classify_ipv6",
    "classify_webrtc",
    "run_leak_test",
)
