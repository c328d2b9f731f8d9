from browserscan.api.modules.scan.services.context.device import check_os
from browserscan.api.modules.scan.services.context.geo import check_timezone
from browserscan.api.modules.scan.services.context.locale import check_language

__all__ = (
    "check_language",
    "check_os",
    "check_timezone",
)
