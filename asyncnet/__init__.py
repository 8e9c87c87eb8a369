"""Asynchronous HTTP request building blocks: request options, sessions, stoppable tasks, an async queue and JSON helpers."""

__version__ = "2.0.0"

__all__ = [
    "async_queue",
    "errors",
    "json_conversions",
    "net_types",
    "network_task",
    "request",
    "response",
    "session",
]