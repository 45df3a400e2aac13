from __future__ import annotations

from logging import Logger, getLogger
from typing import Any

import attr

TRACE = 5


@attr.s(slots=True, frozen=True, kw_only=True)
class LoggerWithTrace:
    logger: Logger = attr.ib()

    @classmethod
    def get(cls, name: str) -> LoggerWithTrace:
        return LoggerWithTrace(logger=getLogger(name))

    def debug(self, *args: Any, **kwargs: Any) -> None:
        self.logger.debug(*args, **kwargs)

    def trace(self, message: str, *args: Any, **kws: Any) -> None:
        self.logger.log(TRACE, message, *args, **kws)
