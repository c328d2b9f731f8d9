from hashlib import sha256

from browserscan.api.modules.scan.schema import ProtocolFingerprints
from browserscan.api.modules.scan.services.core import clean_text


def pseudo_ja3(tls_version: str, tls_cipher: str, http_version: str) -> str:
    # The raw ClientHello is not available behind the edge, so only the
    # negotiated parameters are hashed.
    body = f"{tls_version}|{tls_cipher}|{http_version}".encode("utf-8")
    return sha256(body).hexdigest()[:32]


def build_protocol_fingerprints(
    tls_version: object,
    tls_cipher: object,
    http_version: object,
    tcp_os_guess: object = None,
) -> ProtocolFingerprints:
    version = clean_text(tls_version) or "unknown"
    cipher = clean_text(tls_cipher) or "unknown"
    http = clean_text(http_version) or "HTTP/1.1"
    return ProtocolFingerprints(
        tls_ja3=pseudo_ja3(version, cipher, http),
        tls_version=version,
        http_version=http,
        tcp_os_guess=clean_text(tcp_os_guess) or "Unknown",
    )


__all__ = ("build_protocol_fingerprints", "pseudo_ja3")
