"""
Opt-in logging for the replace engine and the file edit helpers.

Library code never prints. Callers opt in per call:

    from smartreplace._logging import resolve_logger

    def smart_replace(..., logger=None, log: bool = False):
        log = resolve_logger(logger=logger, enabled=log, name=__name__)
        log.debug("trying strategies")  # silent unless a logger or log=True was given

Nothing here touches the root logger configuration, so importing the package
is side-effect free.
"""
from __future__ import annotations

import logging

DEFAULT_LOGGER_NAME = "smartreplace"


class NoopLogger:
    """Stand-in that accepts the logging.Logger call surface and drops everything."""

    def debug(self, *args, **kwargs):  # type: ignore[no-untyped-def]
        pass

    info = warning = error = exception = critical = debug

    def isEnabledFor(self, level: int) -> bool:  # noqa: N802 - mirrors logging.Logger
        return False


def resolve_logger(
    logger: logging.Logger | None = None,
    *,
    enabled: bool = False,
    name: str | None = None,
    level: int = logging.INFO,
) -> logging.Logger | NoopLogger:
    """
    Pick the logger a call should write to.

    - An explicit `logger` (anything with .debug/.info/...) wins.
    - `enabled=True` gives the named stdlib logger, propagating to the root
      so pytest's caplog and application handlers see the records.
    - Otherwise a NoopLogger.
    """
    if logger is not None:
        return logger
    if enabled:
        lg = logging.getLogger(name or DEFAULT_LOGGER_NAME)
        lg.setLevel(level)
        lg.propagate = True
        return lg
    return NoopLogger()
