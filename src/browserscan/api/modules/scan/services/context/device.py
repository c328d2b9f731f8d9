from collections.abc import Callable
from dataclasses import dataclass

from browserscan.api.modules.scan.schema import CheckStatus, ConsistencyCheck
from browserscan.api.modules.scan.services.core import clean_text, create_check

DESKTOP_GPU_VENDORS = ("apple", "amd", "nvidia", "intel")


def is_apple_os(os_name: str) -> bool:
    return "mac" in os_name or "ios" in os_name


def is_mobile_os(os_name: str) -> bool:
    return "android" in os_name or "ios" in os_name


@dataclass(slots=True, frozen=True)
class GpuRule:
    """One OS/GPU plausibility rule; ``matches`` gets lowercased OS and renderer."""

    status: CheckStatus
    matches: Callable[[str, str], bool]
    evidence: str


# First match wins.
GPU_RULES: tuple[GpuRule, ...] = (
    GpuRule(
        status="FAIL",
        matches=lambda os_name, renderer: "apple" in renderer and not is_apple_os(os_name),
        evidence="Apple Silicon GPU ({renderer}) reported on non-Apple OS ({os})",
    ),
    GpuRule(
        status="WARN",
        matches=lambda os_name, renderer: (
            "mac" in os_name
            and not any(vendor in renderer for vendor in DESKTOP_GPU_VENDORS)
        ),
        evidence="macOS with unusual GPU: {renderer}",
    ),
    GpuRule(
        status="FAIL",
        matches=lambda os_name, renderer: is_mobile_os(os_name) and "nvidia" in renderer,
        evidence="Desktop GPU (NVIDIA) detected on mobile OS ({os})",
    ),
    GpuRule(
        status="FAIL",
        matches=lambda os_name, renderer: "windows" in os_name and "apple m" in renderer,
        evidence="Apple Silicon detected on Windows ({renderer})",
    ),
)


def check_os(ua_os: object, webgl_renderer: object) -> ConsistencyCheck:
    os_name = clean_text(ua_os)
    renderer = clean_text(webgl_renderer)

    if not os_name or not renderer:
        return create_check("WARN", "Incomplete data for OS consistency check")

    lowered_os = os_name.lower()
    lowered_renderer = renderer.lower()
    for rule in GPU_RULES:
        if rule.matches(lowered_os, lowered_renderer):
            return create_check(
                rule.status,
                rule.evidence.format(os=os_name, renderer=renderer),
            )

    return create_check("PASS", f"OS ({os_name}) matches WebGL renderer ({renderer})")


__all__ = ("GPU_RULES", "GpuRule", "check_os")
