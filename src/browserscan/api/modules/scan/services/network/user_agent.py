import re
from dataclasses import dataclass

AUTOMATION_MARKERS = (
    "headlesschrome",
    "headless",
    "phantomjs",
    "puppeteer",
    "playwright",
    "selenium",
    "webdriver",
)
STRONG_BOT_UA_MARKERS = (
    "curl/",
    "wget/",
    "python-requests",
    "go-http-client",
    "httpclient",
)

_FIREFOX_VERSION = re.compile(r"Firefox/(\d+)")
_EDGE_VERSION = re.compile(r"Edg/(\d+)")
_CHROME_VERSION = re.compile(r"Chrome/(\d+)")
_SAFARI_VERSION = re.compile(r"Version/(\d+)")
_MAC_VERSION = re.compile(r"Mac OS X ([\d_.]+)")
_IOS_VERSION = re.compile(r"OS ([\d_]+) like Mac OS X")
_ANDROID_VERSION = re.compile(r"Android ([\d.]+)")

_WINDOWS_VERSIONS = (
    ("Windows NT 10", "10/11"),
    ("Windows NT 6.3", "8.1"),
    ("Windows NT 6.2", "8"),
    ("Windows NT 6.1", "7"),
)


@dataclass(slots=True, frozen=True)
class UserAgentInfo:
    browser: str = "Unknown"
    browser_version: str = ""
    os: str = "Unknown"
    os_version: str = ""
    device: str = "Desktop"


def contains_any(value: str, markers: tuple[str, ...]) -> str | None:
    """Return the first marker found in ``value``."""
    for marker in markers:
        if marker in value:
            return marker
    return None


def _first_group(pattern: re.Pattern[str], ua: str) -> str:
    match = pattern.search(ua)
    return match.group(1) if match else ""


def _parse_browser(ua: str) -> tuple[str, str]:
    if "Firefox/" in ua:
        return "Firefox", _first_group(_FIREFOX_VERSION, ua)
    if "Edg/" in ua:
        return "Edge", _first_group(_EDGE_VERSION, ua)
    if "Chrome/" in ua:
        return "Chrome", _first_group(_CHROME_VERSION, ua)
    if "Safari/" in ua:
        return "Safari", _first_group(_SAFARI_VERSION, ua)
    return "Unknown", ""


def _parse_os(ua: str) -> tuple[str, str, str]:
    if "iPhone" in ua or "iPad" in ua or "iPod" in ua:
        device = "Tablet" if "iPad" in ua else "Mobile"
        return "iOS", _first_group(_IOS_VERSION, ua).replace("_", "."), device
    if "Android" in ua:
        device = "Mobile" if "Mobile" in ua else "Tablet"
        return "Android", _first_group(_ANDROID_VERSION, ua), device
    for token, version in _WINDOWS_VERSIONS:
        if token in ua:
            return "Windows", version, "Desktop"
    if "Windows" in ua:
        return "Windows", "", "Desktop"
    if "Mac OS X" in ua or "Macintosh" in ua:
        return "macOS", _first_group(_MAC_VERSION, ua).replace("_", "."), "Desktop"
    if "CrOS" in ua:
        return "ChromeOS", "", "Desktop"
    if "Linux" in ua:
        return "Linux", "", "Desktop"
    return "Unknown", "", "Desktop"


def parse_user_agent(ua: object) -> UserAgentInfo:
    if not isinstance(ua, str) or not ua.strip():
        return UserAgentInfo()

    browser, browser_version = _parse_browser(ua)
    os_name, os_version, device = _parse_os(ua)
    return UserAgentInfo(
        browser=browser,
        browser_version=browser_version,
        os=os_name,
        os_version=os_version,
        device=device,
    )


__all__ = (
    "AUTOMATION_MARKERS",
    "STRONG_BOT_UA_MARKERS",
    "UserAgentInfo",
    "contains_any",
    "parse_user_agent",
)
