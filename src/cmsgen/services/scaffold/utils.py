import logging
from typing import NoReturn

_LOGGER = logging.getLogger("cmsgen.cli")


__all__ = [
    "status",
    "error_exit",
]


def status(tag: str, message: str) -> None:
    _LOGGER.debug("[%s] %s", tag, message)


def error_exit(message: str, code: int = 2) -> NoReturn:
    _LOGGER.error(message)
    raise SystemExit(code)
