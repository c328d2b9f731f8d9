from __future__ import annotations

from hashlib import sha256

import pytest

from browserscan.api.modules.scan.services import (
    build_protocol_fingerprints,
    detect_automation,
    parse_user_agent,
)
from tests.helpers_scan import CHROME_WINDOWS_UA, HEADLESS_CHROME_UA, SAFARI_IPHONE_UA

ANDROID_CHROME_UA = (
    "Mozilla/5.0 (Linux; Android 14; Pixel 8) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Mobile Safari/537.36"
)
IPAD_SAFARI_UA = (
    "Mozilla/5.0 (iPad; CPU OS 16_6 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/16.6 Mobile/15E148 Safari/604.1"
)
MAC_FIREFOX_UA = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10.15; rv:121.0) "
    "Gecko/20100101 Firefox/121.0"
)
WINDOWS_EDGE_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36 Edg/120.0.2210.91"
)


@pytest.mark.parametrize(
    ("ua", "expected"),
    [
        (CHROME_WINDOWS_UA, ("Chrome", "120", "Windows", "10/11", "Desktop")),
        (WINDOWS_EDGE_UA, ("Edge", "120", "Windows", "10/11", "Desktop")),
        (MAC_FIREFOX_UA, ("Firefox", "121", "macOS", "10.15", "Desktop")),
        (SAFARI_IPHONE_UA, ("Safari", "17", "iOS", "17.2", "Mobile")),
        (IPAD_SAFARI_UA, ("Safari", "16", "iOS", "16.6", "Tablet")),
        (ANDROID_CHROME_UA, ("Chrome", "120", "Android", "14", "Mobile")),
        (HEADLESS_CHROME_UA, ("Chrome", "120", "Linux", "", "Desktop")),
    ],
)
def test_parse_user_agent(ua: str, expected: tuple[str, ...]) -> None:
    info = parse_user_agent(ua)
    assert (
        info.browser,
        info.browser_version,
        info.os,
        info.os_version,
        info.device,
    ) == expected


@pytest.mark.parametrize("ua", [None, "", "   ", 42])
def test_parse_user_agent_without_input(ua: object) -> None:
    info = parse_user_agent(ua)
    assert info.browser == "Unknown"
    assert info.os == "Unknown"
    assert info.device == "Desktop"


def test_parse_user_agent_unrecognized_client() -> None:
    info = parse_user_agent("curl/8.4.0")
    assert info.browser == "Unknown"
    assert info.os == "Unknown"


def test_detect_automation_flags_take_precedence() -> None:
    assert detect_automation(CHROME_WINDOWS_UA, is_webdriver=True) == "WebDriver detected"
    assert (
        detect_automation(CHROME_WINDOWS_UA, is_headless=True)
        == "Headless browser detected"
    )
    assert detect_automation("curl/8.4.0", is_webdriver=True) == "WebDriver detected"


@pytest.mark.parametrize(
    ("ua", "evidence"),
    [
        ("curl/8.4.0", "Non-browser client signature in User-Agent (curl)"),
        ("Wget/1.21.4", "Non-browser client signature in User-Agent (wget)"),
        (
            "python-requests/2.31.0",
            "Non-browser client signature in User-Agent (python-requests)",
        ),
        (HEADLESS_CHROME_UA, "Automation marker in User-Agent (headlesschrome)"),
        ("Mozilla/5.0 PhantomJS/2.1.1", "Automation marker in User-Agent (phantomjs)"),
    ],
)
def test_detect_automation_user_agent_markers(ua: str, evidence: str) -> None:
    assert detect_automation(ua) == evidence


def test_detect_automation_regular_browser() -> None:
    assert detect_automation(CHROME_WINDOWS_UA) is None
    assert detect_automation(SAFARI_IPHONE_UA, is_webdriver=False, is_headless=False) is None
    assert detect_automation(None) is None
    assert detect_automation("") is None


def test_detect_automation_ignores_non_boolean_flags() -> None:
    assert detect_automation(CHROME_WINDOWS_UA, is_webdriver="true") is None
    assert detect_automation(CHROME_WINDOWS_UA, is_headless=1) is None


def test_protocol_fingerprints_from_server_signals() -> None:
    protocols = build_protocol_fingerprints(
        "TLSv1.3",
        "TLS_AES_128_GCM_SHA256",
        "HTTP/2",
        "Windows",
    )
    expected = sha256(b"TLSv1.3|TLS_AES_128_GCM_SHA256|HTTP/2").hexdigest()[:32]
    assert protocols.tls_ja3 == expected
    assert protocols.tls_version == "TLSv1.3"
    assert protocols.http_version == "HTTP/2"
    assert protocols.tcp_os_guess == "Windows"


def test_protocol_fingerprints_defaults() -> None:
    protocols = build_protocol_fingerprints(None, "  ", None)
    assert protocols.tls_version == "unknown"
    assert protocols.http_version == "HTTP/1.1"
    assert protocols.tcp_os_guess == "Unknown"
    assert len(protocols.tls_ja3) == 32
    assert protocols.tls_ja3 == sha256(b"unknown|unknown|HTTP/1.1").hexdigest()[:32]


def test_protocol_fingerprint_differs_per_cipher() -> None:
    first = build_protocol_fingerprints("TLSv1.3", "TLS_AES_128_GCM_SHA256", "HTTP/2")
    second = build_protocol_fingerprints("TLSv1.3", "TLS_CHACHA20_POLY1305_SHA256", "HTTP/2")
    assert first.tls_ja3 != second.tls_ja3
