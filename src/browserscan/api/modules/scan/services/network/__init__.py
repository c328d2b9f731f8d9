from browserscan.api.modules.scan.services.network.common import (
    is_global_ip,
    is_link_local_ip,
    is_mdns_candidate,
    is_private_ip,
    network_prefix,
    normalize_ip,
    parse_asn,
    parse_ip,
)
from browserscan.api.modules.scan.services.network.ip import (
    IpClassification,
    classify_ip,
)
from browserscan.api.modules.scan.services.network.user_agent import (
    UserAgentInfo,
    parse_user_agent,
)

__all__ = (
    "IpClassification",
    "UserAgentInfo",
    "classify_ip",
    "is_global_ip",
    "is_link_local_ip",
    "is_mdns_candidate",
    "is_private_ip",
    "network_prefix",
    "normalize_ip",
    "parse_asn",
    "parse_ip",
    "parse_user_agent",
)
