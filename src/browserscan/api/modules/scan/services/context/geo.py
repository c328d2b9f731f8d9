from browserscan.api.modules.scan.schema import ConsistencyCheck
from browserscan.api.modules.scan.services.core import clean_text, create_check


def timezone_region(timezone_name: str) -> str:
    # "America/New_York" -> "America"
    return timezone_name.split("/", 1)[0]


def check_timezone(ip_timezone: object, client_timezone: object) -> ConsistencyCheck:
    ip_tz = clean_text(ip_timezone)
    client_tz = clean_text(client_timezone)

    if not ip_tz or not client_tz:
        return create_check(
            "WARN",
            "Unable to determine timezone consistency",
        )

    if ip_tz == client_tz:
        return create_check("PASS", f"Timezone matches: {client_tz}")

    if timezone_region(ip_tz) == timezone_region(client_tz):
        return create_check(
            "WARN",
            f"Similar region, different timezone: IP ({ip_tz}) vs system ({client_tz})",
        )

    return create_check(
        "FAIL",
        f"Timezone mismatch: IP ({ip_tz}) != system ({client_tz})",
    )


__all__ = ("check_timezone", "timezone_region")
