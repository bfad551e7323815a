import logging
import uuid

import pytest

from logtrack.adapter import EventAdapter
from logtrack.buffer import RecordBuffer
from logtrack.context import RequestContext
from logtrack.event import LoggingEvent
from logtrack.handler import ErrorTrackingHandler
from logtrack.models import EnvironmentDetail, StackFrame, WebRequestDetail


@pytest.fixture
def environment():
    return EnvironmentDetail(
        device_name="test-host",
        app_name="orders",
        app_location="/srv/orders",
        configured_app_name="orders",
        configured_environment_name="test",
    )


@pytest.fixture
def adapter(environment):
    return EventAdapter(environment)


@pytest.fixture
def caller_frame():
    return StackFrame(class_name="srcClass", method="srcMethod", file="", line=14)


@pytest.fixture
def debug_event(caller_frame):
    return LoggingEvent(
        formatted_message="msg",
        message="msg",
        level=logging.DEBUG,
        thread_name="th",
        timestamp=1700000000.5,
        caller_data=[caller_frame],
        mdc={"key": "value"},
    )


@pytest.fixture
def web_request():
    return WebRequestDetail(http_method="POST", request_url="http://localhost/orders",
                            headers={"Accept": "application/json"})


@pytest.fixture
def request_context(web_request):
    return RequestContext(user="user", transaction_id=str(uuid.uuid4()), web_request=web_request)


@pytest.fixture
def handler(adapter):
    return ErrorTrackingHandler(adapter, RecordBuffer(max_size=100))


@pytest.fixture
def tracked_logger(handler, request):
    """A non-propagating logger wired to the handler, detached after the test."""
    log = logging.getLogger(f"tests.{request.node.name}")
    log.setLevel(logging.DEBUG)
    log.propagate = False
    log.addHandler(handler)
    yield log
    log.removeHandler(handler)
