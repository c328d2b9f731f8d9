import logging
from typing import Literal

LOG_FORMAT_DEBUG = (
    "[%(levelname)7s]: %(name)s - %(message)s --- %(pathname)s:%(lineno)d"
)
LOG_FORMAT_PROD = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_QUIET_LOGGERS = ("uvicorn.access", "dishka")


def setup_logging(env: Literal["local", "dev", "prod"]) -> None:
    """Configure root logging for ``env``; local and dev runs log at DEBUG."""
    verbose = env in ("local", "dev")
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT_DEBUG if verbose else LOG_FORMAT_PROD,
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
