"""
Logging for the writing engine.

Every engine module logs through a ComponentLogger that tags messages with the
component name ("extractor", "assembler", "workflow", "export") and, once a
workflow run has started, the request id:

    [req:3f2a9c1d] [workflow] Draft ready: 182 words, 2 references

Scoring details are logged at DEBUG; run the CLI with --debug (or set
DEBUG_MODE=true) to see them.
"""

import logging
import os
import sys
from typing import Optional, TextIO


_debug_mode = os.getenv("DEBUG_MODE", "false").lower() == "true"

SIMPLE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
JSON_FORMAT = (
    '{"time": "%(asctime)s", "level": "%(levelname)s", '
    '"name": "%(name)s", "message": "%(message)s"}'
)


def set_global_debug_mode(enabled: bool) -> None:
    """Turn DEBUG output on for loggers created afterwards."""
    global _debug_mode
    _debug_mode = enabled


def is_debug_mode() -> bool:
    return _debug_mode


class ComponentLogger:
    """
    Thin wrapper over a stdlib logger that prefixes request/component tags.

    Instances are cheap; use bind() to attach a request id for one run
    instead of mutating a shared module logger.
    """

    def __init__(
        self,
        name: str,
        request_id: Optional[str] = None,
        component: Optional[str] = None,
        debug_mode: Optional[bool] = None
    ):
        self.logger = logging.getLogger(name)
        self.request_id = request_id
        self.component = component
        self._debug_mode = is_debug_mode() if debug_mode is None else debug_mode

        if self._debug_mode:
            self.logger.setLevel(logging.DEBUG)

        tags = []
        if request_id:
            tags.append(f"[req:{request_id[:8]}]")
        if component:
            tags.append(f"[{component}]")
        self._prefix = " ".join(tags)

    def bind(self, request_id: Optional[str] = None, component: Optional[str] = None) -> "ComponentLogger":
        """Same logger with request_id and/or component replaced."""
        return ComponentLogger(
            self.logger.name,
            request_id=request_id or self.request_id,
            component=component or self.component,
            debug_mode=self._debug_mode,
        )

    def _format_message(self, message: str) -> str:
        return f"{self._prefix} {message}" if self._prefix else message

    def debug(self, message: str):
        self.logger.debug(self._format_message(message))

    def info(self, message: str):
        self.logger.info(self._format_message(message))


def setup_logging(level: str = "INFO", format: str = "simple", stream: Optional[TextIO] = None) -> None:
    """
    Configure the root logger once per process (CLI entry point).

    Args:
        level: Log level name; unknown names fall back to INFO
        format: "simple" or "json"
        stream: Defaults to stderr so stdout carries only the letter
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(log_level)
    if format == "json":
        handler.setFormatter(logging.Formatter(JSON_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(SIMPLE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)


def get_logger(
    name: str,
    request_id: Optional[str] = None,
    component: Optional[str] = None,
    debug_mode: Optional[bool] = None
) -> ComponentLogger:
    """Create a ComponentLogger (usually with name=__name__ and a component tag)."""
    return ComponentLogger(name, request_id, component, debug_mode)
