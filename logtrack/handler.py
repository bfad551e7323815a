"""Logging handler that adapts records and queues them for shipping."""

import logging
from typing import Callable, Optional

from logtrack.adapter import EventAdapter
from logtrack.buffer import RecordBuffer
from logtrack.config import Config, environment_detail
from logtrack.context import RequestContext
from logtrack.event import CONTEXT_KEY, LoggingEvent

# Our own diagnostics must not loop back into the handler.
_OWN_LOGGER_PREFIX = "logtrack"


class ErrorTrackingHandler(logging.Handler):
    def __init__(self, adapter: EventAdapter, buffer: RecordBuffer, level: int = logging.NOTSET,
                 context_provider: Optional[Callable[[], Optional[RequestContext]]] = None):
        super().__init__(level)
        self.adapter = adapter
        self.buffer = buffer
        self._context_provider = context_provider

    @classmethod
    def from_config(cls, config: Config, context_provider=None) -> "ErrorTrackingHandler":
        level = getattr(logging, config.min_level.upper(), logging.DEBUG)
        return cls(
            EventAdapter(environment_detail(config)),
            RecordBuffer(max_size=config.buffer_size),
            level=level,
            context_provider=context_provider,
        )

    def _resolve_context(self, record: logging.LogRecord) -> Optional[RequestContext]:
        """Per-call context from ``extra`` wins over the provider."""
        context = getattr(record, CONTEXT_KEY, None)
        if isinstance(context, RequestContext):
            return context
        if self._context_provider is not None:
            return self._context_provider()
        return None

    def emit(self, record: logging.LogRecord):
        name = record.name or ""
        if name == _OWN_LOGGER_PREFIX or name.startswith(_OWN_LOGGER_PREFIX + "."):
            return
        try:
            event = LoggingEvent.from_record(record)
            message = self.adapter.adapt(event, self._resolve_context(record))
            self.buffer.add(message)
        except Exception:
            self.handleError(record)
