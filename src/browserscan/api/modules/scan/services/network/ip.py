from collections.abc import Mapping
from dataclasses import dataclass

from browserscan.api.modules.scan.services.network.common import parse_asn

DATACENTER_ASNS = frozenset(
    {
        "AS13335",  # Cloudflare
        "AS16509",  # Amazon
        "AS14618",  # Amazon
        "AS15169",  # Google
        "AS396982",  # Google Cloud
        "AS8075",  # Microsoft
        "AS20940",  # Akamai
        "AS54113",  # Fastly
        "AS16276",  # OVH
        "AS24940",  # Hetzner
        "AS14061",  # DigitalOcean
        "AS63949",  # Linode
        "AS40065",  # Sharktech
        "AS36352",  # ColoCrossing
        "AS46562",  # Performive
    }
)

TOR_EXIT_ASNS = frozenset(
    {
        "AS9009",  # M247
        "AS60729",  # FlokiNET
        "AS197540",  # netcup
    }
)

TOR_SCORE = 90
PROXY_SCORE = 70
VPN_SCORE = 30
HOSTING_SCORE = 50
BOGON_SCORE = 99
TOR_EXIT_ASN_FLOOR = 85
MAX_FRAUD_SCORE = 99


@dataclass(slots=True, frozen=True)
class IpClassification:
    asn: str
    is_proxy: bool
    is_vpn: bool
    is_tor: bool
    is_hosting: bool
    fraud_score: int


def is_datacenter_asn(asn: object) -> bool:
    return parse_asn(asn) in DATACENTER_ASNS


def is_tor_exit_asn(asn: object) -> bool:
    return parse_asn(asn) in TOR_EXIT_ASNS


def _flag(signals: object, name: str) -> bool:
    if not isinstance(signals, Mapping):
        return False
    return signals.get(name) is True


def classify_ip(
    asn: object,
    privacy_signals: object,
    is_bogon: object = False,
) -> IpClassification:
    """Derive risk flags and a 0-99 fraud score for an IP.

    ``privacy_signals`` is the provider's ``{proxy, vpn, tor, hosting}``
    mapping. Anything that is not a mapping, and any flag that is not a real
    boolean ``True``, counts as absent.
    """
    normalized_asn = parse_asn(asn)

    is_proxy = _flag(privacy_signals, "proxy")
    is_vpn = _flag(privacy_signals, "vpn")
    is_tor = _flag(privacy_signals, "tor")
    is_hosting = _flag(privacy_signals, "hosting") or normalized_asn in DATACENTER_ASNS

    fraud_score = 0
    if is_tor:
        fraud_score += TOR_SCORE
    elif is_proxy:
        fraud_score += PROXY_SCORE
    elif is_vpn:
        fraud_score += VPN_SCORE
    elif is_hosting:
        fraud_score += HOSTING_SCORE

    if is_bogon is True:
        fraud_score = BOGON_SCORE

    if normalized_asn in TOR_EXIT_ASNS:
        fraud_score = max(fraud_score, TOR_EXIT_ASN_FLOOR)

    return IpClassification(
        asn=normalized_asn or "UNKNOWN",
        is_proxy=is_proxy,
        is_vpn=is_vpn,
        is_tor=is_tor,
        is_hosting=is_hosting,
        fraud_score=min(MAX_FRAUD_SCORE, fraud_score),
    )


__all__ = (
    "DATACENTER_ASNS",
    "TOR_EXIT_ASNS",
    "IpClassification",
    "classify_ip",
    "is_datacenter_asn",
    "is_tor_exit_asn",
)
