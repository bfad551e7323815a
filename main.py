"""Demo entry point: logs sample events through the handler and prints wire JSON."""

import argparse
import logging
import sys
import uuid

from logtrack.config import load_config
from logtrack.context import RequestContext
from logtrack.event import CONTEXT_KEY
from logtrack.handler import ErrorTrackingHandler
from logtrack.models import WebRequestDetail
from logtrack.serializer import log_message_to_dict, to_json


def _fail_lookup(order_id: str):
    try:
        {}[order_id]
    except KeyError as e:
        raise RuntimeError(f"order {order_id} could not be loaded") from e


def emit_samples(log: logging.Logger, count: int, context: RequestContext):
    for i in range(count):
        log.info("Processing order %d", i, extra={"order": i, CONTEXT_KEY: context})
    log.warning("Inventory low for sku %s", "A-100", extra={CONTEXT_KEY: context})
    log.error("Payment gateway returned %d", 502, extra={CONTEXT_KEY: context})
    try:
        _fail_lookup("ord-42")
    except RuntimeError:
        log.exception("Order lookup failed", extra={CONTEXT_KEY: context})


def main(argv=None):
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
        stream=sys.stderr,
    )

    parser = argparse.ArgumentParser(description="Error-tracking adapter demo")
    parser.add_argument("--config", type=str, default=None, help="optional YAML config file")
    parser.add_argument("--count", type=int, default=3, help="number of info events to emit")
    args = parser.parse_args(argv)

    config = load_config(args.config)
    handler = ErrorTrackingHandler.from_config(config)

    log = logging.getLogger("demo")
    log.setLevel(logging.DEBUG)
    log.addHandler(handler)

    context = RequestContext(
        user="demo-user",
        transaction_id=str(uuid.uuid4()),
        web_request=WebRequestDetail(http_method="GET", request_url="http://localhost/orders"),
    )
    try:
        emit_samples(log, args.count, context)
    finally:
        log.removeHandler(handler)
        context.clear()

    messages = handler.buffer.drain()
    for message in messages:
        print(to_json(log_message_to_dict(message)))

    logging.getLogger(__name__).info("Drained %d messages (%d dropped)",
                                     len(messages), handler.buffer.dropped)


if __name__ == "__main__":
    main()
