from browserscan.api.modules.scan.schema import ConsistencySection
from browserscan.api.modules.scan.services.context import (
    check_language,
    check_os,
    check_timezone,
)


def build_consistency_section(
    ip_timezone: str | None,
    client_timezone: str | None,
    ip_country_code: str | None,
    languages: list[str] | None,
    ua_os: str | None,
    webgl_renderer: str | None,
) -> ConsistencySection:
    return ConsistencySection(
        timezone_check=check_timezone(ip_timezone, client_timezone),
        language_check=check_language(ip_country_code, languages),
        os_check=check_os(ua_os, webgl_renderer),
    )


__all__ = ("build_consistency_section",)
