"""Logging event — the adapter's input, built from a stdlib LogRecord."""

import logging
import time
from dataclasses import dataclass, field
from typing import Optional

from logtrack.models import StackFrame

# Extra key the handler reads the request context from; never part of the mdc.
CONTEXT_KEY = "request_context"

_UNKNOWN_FUNCTION = "(unknown function)"

# Standard LogRecord attributes (skip when collecting extras)
_BUILTIN = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


class ThrowableProxy:
    """Wraps the live exception carried by an event."""

    def __init__(self, throwable: Optional[BaseException]):
        self.throwable = throwable

    def __repr__(self):
        return f"ThrowableProxy({self.throwable!r})"


@dataclass
class LoggingEvent:
    formatted_message: Optional[str] = None
    message: Optional[str] = None
    level: int = logging.DEBUG
    thread_name: Optional[str] = None
    timestamp: float = field(default_factory=time.time)
    throwable_proxy: Optional[ThrowableProxy] = None
    caller_data: list[StackFrame] = field(default_factory=list)
    mdc: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_record(cls, record: logging.LogRecord) -> "LoggingEvent":
        """Build an event from a LogRecord.

        Caller data is the single frame logging resolved for the call site;
        the diagnostic context is every ``extra`` field of the record, in the
        order the record holds them, stringified.
        """
        proxy = None
        if record.exc_info and record.exc_info[1] is not None:
            proxy = ThrowableProxy(record.exc_info[1])

        caller_data = []
        if record.funcName and record.funcName != _UNKNOWN_FUNCTION:
            caller_data.append(StackFrame(
                class_name=record.module,
                method=record.funcName,
                file=record.pathname,
                line=record.lineno,
            ))

        mdc = {}
        for key, val in vars(record).items():
            if key in _BUILTIN or key == CONTEXT_KEY:
                continue
            mdc[str(key)] = str(val)

        return cls(
            formatted_message=record.getMessage(),
            message=None if record.msg is None else str(record.msg),
            level=record.levelno,
            thread_name=record.threadName,
            timestamp=record.created,
            throwable_proxy=proxy,
            caller_data=caller_data,
            mdc=mdc,
        )
