from browserscan.api.modules.scan.services.automation.automation import (
    detect_automation,
)

__all__ = ("detect_automation",)
