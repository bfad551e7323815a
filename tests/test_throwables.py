"""Tests for exception chain capture."""

from logtrack.models import StackFrame
from logtrack.throwables import (
    STRING_EXCEPTION,
    cause_chain,
    stack_frames,
    string_exception,
    to_error_item,
    type_name,
)


class LookupFailed(Exception):
    pass


def _raise_chain():
    try:
        raise ValueError("inner")
    except ValueError as e:
        raise RuntimeError("outer") from e


def _raise_implicit():
    try:
        raise KeyError("k")
    except KeyError:
        raise LookupFailed("lookup")


def _raise_suppressed():
    try:
        raise KeyError("k")
    except KeyError:
        raise LookupFailed("lookup") from None


def _caught(fn):
    try:
        fn()
    except Exception as e:
        return e
    raise AssertionError("expected an exception")


class TestTypeName:
    def test_builtin(self):
        assert type_name(ValueError()) == "ValueError"

    def test_custom_is_module_qualified(self):
        name = type_name(LookupFailed())
        assert name.endswith(".LookupFailed")
        assert name != "LookupFailed"


class TestStackFrames:
    def test_never_raised(self):
        assert stack_frames(ValueError("x")) == []

    def test_innermost_first(self):
        exc = _caught(_raise_chain)
        frames = stack_frames(exc)
        assert frames[0].method == "_raise_chain"
        assert frames[-1].method == "_caught"
        assert frames[0].file.endswith("test_throwables.py")
        assert isinstance(frames[0].line, int)


class TestCauseChain:
    def test_explicit_cause(self):
        exc = _caught(_raise_chain)
        assert [type(e) for e in cause_chain(exc)] == [RuntimeError, ValueError]

    def test_implicit_context(self):
        exc = _caught(_raise_implicit)
        assert [type(e) for e in cause_chain(exc)] == [LookupFailed, KeyError]

    def test_suppressed_context(self):
        exc = _caught(_raise_suppressed)
        assert cause_chain(exc) == [exc]

    def test_cycle_terminates(self):
        a = ValueError("a")
        b = ValueError("b")
        a.__cause__ = b
        b.__cause__ = a
        assert cause_chain(a) == [a, b]

    def test_self_cause_terminates(self):
        a = ValueError("a")
        a.__cause__ = a
        assert cause_chain(a) == [a]


class TestToErrorItem:
    def test_nested_inner_errors(self):
        item = to_error_item(_caught(_raise_chain))

        assert item.error_type == "RuntimeError"
        assert item.message == "outer"
        assert item.source_method.endswith("._raise_chain")
        assert item.inner_error.error_type == "ValueError"
        assert item.inner_error.message == "inner"
        assert item.inner_error.inner_error is None
        assert len(item.chain()) == 2

    def test_inner_error_has_own_frames(self):
        item = to_error_item(_caught(_raise_chain))
        inner_methods = [f.method for f in item.inner_error.stack_trace]
        assert inner_methods == ["_raise_chain"]

    def test_cyclic_chain(self):
        a = ValueError("a")
        b = TypeError("b")
        a.__cause__ = b
        b.__cause__ = a
        item = to_error_item(a)
        assert [i.error_type for i in item.chain()] == ["ValueError", "TypeError"]


class TestStringException:
    def test_from_caller(self):
        item = string_exception("oops", StackFrame("class", "method", "file.py", 9))
        assert item.error_type == STRING_EXCEPTION
        assert item.message == "oops"
        assert item.stack_trace == [StackFrame("class", "method", "", 9)]
        assert item.source_method == "class.method"

    def test_without_caller(self):
        item = string_exception(None, None)
        assert item.error_type == "StringException"
        assert item.message is None
        assert item.stack_trace == [StackFrame("", "", "", None)]
        assert item.source_method is None

    def test_log_message_prefixes_exception_text(self):
        item = to_error_item(_caught(_raise_chain), "Order lookup failed")
        assert item.message == "Order lookup failed (outer)"
        assert item.inner_error.message == "inner"

    def test_empty_exception_text_uses_log_message(self):
        item = to_error_item(ValueError(), "Order lookup failed")
        assert item.message == "Order lookup failed"
