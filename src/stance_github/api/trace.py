"""
Request/response tracing.

When debugging is enabled the client dumps every request it sends and every
response it gets back, headers and body included, to the ``stance_github.trace``
logger. That logger writes to stderr and does not propagate while any client
is tracing, so traces never end up wherever the application sends its own
logs. Tokens never appear in the trace.
"""

import logging
import sys
from typing import Mapping, Optional

import requests

TRACE_LOGGER_NAME = "stance_github.trace"
REDACTED_AUTHORIZATION = "token [REDACTED]"

trace_logger = logging.getLogger(TRACE_LOGGER_NAME)

_tracing_clients = 0


class StderrHandler(logging.StreamHandler):
    """Stream handler bound to whatever ``sys.stderr`` is at emit time."""

    def __init__(self):
        super().__init__(sys.stderr)
        self.setFormatter(logging.Formatter('%(message)s'))

    def emit(self, record: logging.LogRecord) -> None:
        self.stream = sys.stderr
        super().emit(record)


def enable_tracing() -> None:
    """Route trace records to stderr for one more tracing client."""
    global _tracing_clients
    _tracing_clients += 1

    if not any(isinstance(h, StderrHandler) for h in trace_logger.handlers):
        trace_logger.addHandler(StderrHandler())
    trace_logger.setLevel(logging.DEBUG)
    trace_logger.propagate = False


def disable_tracing() -> None:
    """Undo ``enable_tracing`` once the last tracing client stops."""
    global _tracing_clients
    if _tracing_clients == 0:
        return
    _tracing_clients -= 1
    if _tracing_clients:
        return

    for handler in [h for h in trace_logger.handlers if isinstance(h, StderrHandler)]:
        trace_logger.removeHandler(handler)
    trace_logger.setLevel(logging.NOTSET)
    trace_logger.propagate = True


def _format_headers(headers: Mapping[str, str]) -> str:
    lines = []
    for name, value in headers.items():
        if name.lower() == 'authorization':
            value = REDACTED_AUTHORIZATION
        lines.append(f"{name}: {value}")
    return "\n".join(lines)


def _format_body(body: Optional[object]) -> str:
    if body is None:
        return ""
    if isinstance(body, bytes):
        return body.decode('utf-8', errors='replace')
    return str(body)


def format_request(request: requests.PreparedRequest, path: str) -> str:
    """Render a prepared request the way it goes on the wire, token redacted."""
    return (
        f"=====[ {request.method} {path} ]========================\n"
        f"{request.method} {request.url}\n"
        f"{_format_headers(request.headers)}\n"
        f"\n"
        f"{_format_body(request.body)}\n"
    )


def format_response(response: requests.Response) -> str:
    """Render a response with its status line, headers and body."""
    return (
        f"-----------------------------------------\n"
        f"{response.status_code} {response.reason or ''}\n"
        f"{_format_headers(response.headers)}\n"
        f"\n"
        f"{response.text}\n"
    )


def trace_request(request: requests.PreparedRequest, path: str) -> None:
    trace_logger.debug(format_request(request, path))


def trace_response(response: requests.Response) -> None:
    trace_logger.debug(format_response(response))
