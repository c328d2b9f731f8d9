from browserscan.api.modules.scan.services.collectors.consistency import (
    build_consistency_section,
)
from browserscan.api.modules.scan.services.collectors.network import (
    build_network_section,
    leak_telemetry_from,
    network_risk_from,
)

__all__ = (
    "build_consistency_section",
    "build_network_section",
    "leak_telemetry_from",
    "network_risk_from",
)
