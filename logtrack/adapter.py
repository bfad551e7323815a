"""EventAdapter — maps a LoggingEvent to a LogMessage and an optional ErrorRecord."""

import logging
from typing import Optional

from logtrack import levels
from logtrack.context import RequestContext
from logtrack.event import LoggingEvent
from logtrack.models import EnvironmentDetail, ErrorRecord, LogMessage, StackFrame
from logtrack.serializer import serialize_mdc
from logtrack.throwables import string_exception, to_error_item

logger = logging.getLogger(__name__)


def _innermost(event: LoggingEvent) -> Optional[StackFrame]:
    if event.caller_data:
        return event.caller_data[0]
    return None


def _epoch_ms(event: LoggingEvent) -> int:
    return int(event.timestamp * 1000)


class EventAdapter:
    """Stateless apart from the environment stamped on every record.

    Safe to share between threads; the request context is supplied per call.
    """

    def __init__(self, environment: EnvironmentDetail):
        self._environment = environment

    @property
    def environment(self) -> EnvironmentDetail:
        return self._environment

    def extract_throwable(self, event: LoggingEvent) -> Optional[BaseException]:
        """The exception behind the event's throwable proxy, or None."""
        proxy = event.throwable_proxy
        if proxy is None:
            return None
        return proxy.throwable

    def is_error_level(self, event: LoggingEvent) -> bool:
        return levels.is_error(event.level)

    def class_name_of(self, event: LoggingEvent) -> str:
        """Class of the innermost caller frame, "" when the call site is unknown."""
        frame = _innermost(event)
        if frame is None:
            return ""
        return frame.class_name

    def _caller_frame(self, event: LoggingEvent) -> Optional[StackFrame]:
        frame = _innermost(event)
        if frame is None:
            return None
        return StackFrame(class_name=self.class_name_of(event), method=frame.method,
                          file=frame.file, line=frame.line)

    def build_log_message(self, event: LoggingEvent, error_record: Optional[ErrorRecord] = None,
                          context: Optional[RequestContext] = None) -> LogMessage:
        frame = _innermost(event)
        return LogMessage(
            msg=event.formatted_message,
            data=serialize_mdc(event.mdc),
            level=levels.level_name(event.level),
            environment=self._environment,
            ex=error_record,
            th=event.thread_name,
            epoch_ms=_epoch_ms(event),
            src_method=frame.qualified_method if frame else None,
            src_line=frame.line if frame else None,
            trans_id=context.get_transaction_id() if context else None,
        )

    def build_error_record(self, event: LoggingEvent, throwable: Optional[BaseException] = None,
                           context: Optional[RequestContext] = None) -> ErrorRecord:
        if throwable is not None:
            error = to_error_item(throwable, event.formatted_message)
        else:
            error = string_exception(event.formatted_message, self._caller_frame(event))

        return ErrorRecord(
            environment=self._environment,
            occurred_epoch_millis=_epoch_ms(event),
            error=error,
            web_request_detail=context.get_web_request() if context else None,
            user_name=context.get_user() if context else None,
        )

    def adapt(self, event: LoggingEvent, context: Optional[RequestContext] = None) -> LogMessage:
        """Full mapping: attach an ErrorRecord when the event carries an
        exception or is logged at error level or above."""
        throwable = self.extract_throwable(event)
        error_record = None
        if throwable is not None or self.is_error_level(event):
            error_record = self.build_error_record(event, throwable, context)
            logger.debug("Built %s error record for %r",
                         error_record.error.error_type, event.formatted_message)
        return self.build_log_message(event, error_record, context)
