"""Exception capture — turns a live exception chain into ErrorItems."""

import logging
import traceback
from typing import Optional

from logtrack.models import ErrorItem, StackFrame

logger = logging.getLogger(__name__)

STRING_EXCEPTION = "StringException"


def type_name(exc: BaseException) -> str:
    """Qualified class name; builtins are reported bare (``ValueError``)."""
    cls = type(exc)
    module = cls.__module__
    if module in (None, "builtins"):
        return cls.__qualname__
    return f"{module}.{cls.__qualname__}"


def stack_frames(exc: BaseException) -> list[StackFrame]:
    """Frames of the exception's traceback, innermost (raise site) first.

    An exception that was never raised has no traceback and no frames.
    """
    frames = []
    for frame, lineno in traceback.walk_tb(exc.__traceback__):
        code = frame.f_code
        frames.append(StackFrame(
            class_name=frame.f_globals.get("__name__", ""),
            method=getattr(code, "co_qualname", code.co_name),
            file=code.co_filename,
            line=lineno,
        ))
    frames.reverse()
    return frames


def cause_chain(exc: BaseException) -> list[BaseException]:
    """The exception followed by its causes, outermost first.

    Follows ``__cause__``, or ``__context__`` unless suppressed. A cause that
    was already visited ends the walk.
    """
    chain = []
    seen = set()
    current: Optional[BaseException] = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        chain.append(current)
        if current.__cause__ is not None:
            current = current.__cause__
        elif not current.__suppress_context__:
            current = current.__context__
        else:
            current = None
    if current is not None:
        logger.debug("Cyclic cause chain on %s, stopped after %d links",
                     type_name(exc), len(chain))
    return chain


def _combined_message(log_message: Optional[str], exc: BaseException) -> Optional[str]:
    """``"log message (exception text)"``; either part alone when the other is empty."""
    text = str(exc)
    if log_message is None:
        return text
    if not text:
        return log_message
    return f"{log_message} ({text})"


def to_error_item(exc: BaseException, log_message: Optional[str] = None) -> ErrorItem:
    """Capture *exc* and every link of its cause chain as nested ErrorItems.

    The outermost item carries *log_message* ahead of the exception text;
    inner items keep their own exception text.
    """
    chain = cause_chain(exc)
    item = None
    for link in reversed(chain):
        frames = stack_frames(link)
        item = ErrorItem(
            error_type=type_name(link),
            message=_combined_message(log_message, link) if link is exc else str(link),
            source_method=frames[0].qualified_method if frames else None,
            stack_trace=frames,
            inner_error=item,
        )
    return item


def string_exception(message: Optional[str], caller: Optional[StackFrame]) -> ErrorItem:
    """Placeholder item for an error logged without an exception.

    Its single frame is the call site (with an empty file field), or an
    empty-valued frame when the call site is unknown.
    """
    if caller is not None:
        frame = StackFrame(class_name=caller.class_name, method=caller.method,
                           file="", line=caller.line)
    else:
        frame = StackFrame()
    return ErrorItem(
        error_type=STRING_EXCEPTION,
        message=message,
        source_method=frame.qualified_method if caller is not None else None,
        stack_trace=[frame],
    )
