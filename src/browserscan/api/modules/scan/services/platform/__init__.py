from browserscan.api.modules.scan.services.platform.protocol import (
    build_protocol_fingerprints,
    pseudo_ja3,
)

__all__ = ("build_protocol_fingerprints", "pseudo_ja3")
