"""
Logging of Graph API calls.

The client logs through a collaborator with a single capability: accept a
pre-formatted message. Formatting happens before the collaborator is called.
"""
import logging
from typing import Callable, Optional, Protocol


class Logger(Protocol):
    def log(self, message: str) -> None: ...


class LoggerFunc:
    """Adapt an ordinary function (print, list.append, ...) to the Logger interface."""

    def __init__(self, func: Callable[[str], object]):
        self._func = func

    def log(self, message: str) -> None:
        self._func(message)


class StandardLogger:
    """Forward API call messages to a stdlib logger. Handlers are left to the application."""

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.INFO):
        self._logger = logger or logging.getLogger("fb_fundraisers.api")
        self._level = level

    def log(self, message: str) -> None:
        self._logger.log(self._level, message)


def format_api_call(method: str, url: str, status: int, body: Optional[bytes]) -> str:
    """Build the log line for one completed call, including the raw body if one was read."""
    message = f"facebook api {method} request to {url} returned {status}"
    if body:
        message += " " + body.decode("utf-8", errors="replace")
    return message
