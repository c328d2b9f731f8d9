from browserscan.api.modules.scan.services.core import clean_text
from browserscan.api.modules.scan.services.network.user_agent import (
    AUTOMATION_MARKERS,
    STRONG_BOT_UA_MARKERS,
    contains_any,
)


def detect_automation(
    user_agent: object,
    is_webdriver: object = None,
    is_headless: object = None,
) -> str | None:
    """Return evidence for the bot penalty, or None for a normal browser."""
    if is_webdriver is True:
        return "WebDriver detected"

    if is_headless is True:
        return "Headless browser detected"

    ua = clean_text(user_agent).lower()
    if not ua:
        return None

    marker = contains_any(ua, STRONG_BOT_UA_MARKERS)
    if marker:
        return f"Non-browser client signature in User-Agent ({marker.rstrip('/')})"

    marker = contains_any(ua, AUTOMATION_MARKERS)
    if marker:
        return f"Automation marker in User-Agent ({marker})"

    return None


__all__ = ("detect_automation",)
