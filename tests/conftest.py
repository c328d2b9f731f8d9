from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from browserscan.api.modules.scan.schema import (
    ClientFingerprint,
    IpIntelPayload,
    ScanRequest,
)
from browserscan.application import get_production_app
from browserscan.settings import APIConfig, Config
from tests.helpers_scan import CHROME_WINDOWS_UA, NVIDIA_RENDERER


@pytest.fixture
def config() -> Config:
    return Config(env="prod")


@pytest.fixture
def client(config: Config) -> Iterator[TestClient]:
    with TestClient(get_production_app(config)) as test_client:
        yield test_client


@pytest.fixture
def protected_client() -> Iterator[TestClient]:
    config = Config(env="prod", api=APIConfig(api_key="s3cret-key"))
    with TestClient(get_production_app(config)) as test_client:
        yield test_client


@pytest.fixture
def clean_scan() -> ScanRequest:
    """A residential US visitor whose browser agrees with its IP."""
    return ScanRequest(
        scan_id="scan-clean",
        ip_intel=IpIntelPayload(
            ip="203.0.113.1",
            asn="AS7922",
            org="Comcast Cable Communications, LLC",
            country_code="US",
            city="Philadelphia",
            timezone="America/New_York",
            privacy={"vpn": False, "proxy": False, "tor": False, "hosting": False},
        ),
        client=ClientFingerprint(
            user_agent=CHROME_WINDOWS_UA,
            timezone="America/New_York",
            languages=["en-US", "en"],
            webgl_renderer=NVIDIA_RENDERER,
            webrtc_ips=["192.168.1.5"],
            dns_servers=["1.1.1.1"],
        ),
    )
