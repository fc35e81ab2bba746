"""
Rampart Structured Logger
==========================

Provides :class:`RampartLogger`, a thin structured-logging facade used
by the engine and the CLI. Records go to a Rich console handler on
stderr and, optionally, to a rotating file as plain text or JSON
lines.

Each record carries the component name and, while an ``operation``
scope is active, the operation being performed (for example
``assess_symmetric`` or ``certificate``).

References:
    - Python logging HOWTO. https://docs.python.org/3/howto/logging.html
    - Rich library. https://github.com/Textualize/rich
"""

from __future__ import annotations

import json
import logging
import time
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

_LOG_THEME = Theme(
    {
        "log.level.debug": "dim cyan",
        "log.level.info": "bold bright_blue",
        "log.level.warning": "bold yellow",
        "log.level.error": "bold red",
        "log.level.critical": "bold white on red",
    }
)

_PASSTHROUGH_KEYS = frozenset({"exc_info", "stack_info", "stacklevel"})


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


# ========================== Formatters =====================================


class _JSONFormatter(logging.Formatter):
    """One JSON object per line.

    Fields: ``timestamp``, ``level``, ``logger``, ``message`` and, when
    present, ``component``, ``operation``, ``context`` (keyword data
    passed to the log call) and ``exc_info``.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for attr in ("component", "operation", "context"):
            value = getattr(record, attr, None)
            if value is not None:
                entry[attr] = value

        if record.exc_info and record.exc_info[1] is not None:
            entry["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(entry, ensure_ascii=False, default=str)


_TEXT_FORMAT = logging.Formatter(
    fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S%z",
)


def _console_handler(level: int) -> RichHandler:
    return RichHandler(
        level=level,
        console=Console(theme=_LOG_THEME, stderr=True),
        show_path=False,
        show_time=True,
        rich_tracebacks=True,
        tracebacks_show_locals=False,
        markup=False,
    )


# ========================== RampartLogger ==================================


class RampartLogger:
    """Structured logger bound to one Rampart component.

    Usage::

        log = RampartLogger("engine", log_file="rampart.log", json_logs=True)
        log.info("Assessing %s", "aes128", standard="nist")
        with log.operation("certificate"):
            log.debug("Loading %s", path)

    Keyword arguments other than ``exc_info``, ``stack_info`` and
    ``stacklevel`` are collected into the record's ``context`` field.

    Args:
        component:       Name of the component (``engine``, ``cli``).
        log_level:       Minimum severity name.
        log_file:        Rotating log file path. ``None`` or ``""``
                         disables file logging.
        json_logs:       Emit JSON lines to the log file.
        max_bytes:       Size at which the log file rotates.
        backup_count:    Number of rotated files kept.
        console_output:  Attach the Rich console handler.
    """

    def __init__(
        self,
        component: str,
        *,
        log_level: str = "INFO",
        log_file: str | Path | None = None,
        json_logs: bool = False,
        max_bytes: int = 10_485_760,
        backup_count: int = 5,
        console_output: bool = True,
    ) -> None:
        self._component = component
        self._operation: str | None = None
        level = _level(log_level)

        self._logger = logging.getLogger(f"rampart.{component}")
        self._logger.setLevel(level)
        self._logger.propagate = False
        self._logger.handlers.clear()

        if console_output:
            self._logger.addHandler(_console_handler(level))

        if log_file:
            file_path = Path(log_file)
            file_path.parent.mkdir(parents=True, exist_ok=True)
            handler = RotatingFileHandler(
                filename=str(file_path),
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
            handler.setLevel(level)
            handler.setFormatter(_JSONFormatter() if json_logs else _TEXT_FORMAT)
            self._logger.addHandler(handler)

    # ------------------------------------------------------------------ #
    #  Scopes
    # ------------------------------------------------------------------ #

    class _OperationScope:
        """Binds an operation name for the duration of a ``with`` block."""

        def __init__(self, parent: RampartLogger, name: str) -> None:
            self._parent = parent
            self._name = name
            self._previous: str | None = None

        def __enter__(self) -> RampartLogger:
            self._previous = self._parent._operation
            self._parent._operation = self._name
            return self._parent

        def __exit__(self, *exc: Any) -> None:
            self._parent._operation = self._previous

    def operation(self, name: str) -> _OperationScope:
        """Tag every record inside the block with ``operation=name``."""
        return self._OperationScope(self, name)

    class _Timer:
        """Logs start and completion of a block with its duration."""

        def __init__(self, parent: RampartLogger, label: str) -> None:
            self._parent = parent
            self._label = label
            self._start = 0.0

        def __enter__(self) -> RampartLogger._Timer:
            self._start = time.perf_counter()
            self._parent.debug("Started: %s", self._label)
            return self

        def __exit__(self, *exc: Any) -> None:
            self._parent.debug("Completed: %s (%.3f sec)", self._label, self.elapsed)

        @property
        def elapsed(self) -> float:
            return time.perf_counter() - self._start

    def timed(self, label: str) -> _Timer:
        """Context manager that logs the elapsed time of its block."""
        return self._Timer(self, label)

    # ------------------------------------------------------------------ #
    #  Log methods
    # ------------------------------------------------------------------ #

    def _log(self, level: int, msg: str, args: tuple, kwargs: dict[str, Any]) -> None:
        passthrough = {k: kwargs.pop(k) for k in list(kwargs) if k in _PASSTHROUGH_KEYS}
        extra: dict[str, Any] = {
            "component": self._component,
            "operation": self._operation,
        }
        if kwargs:
            extra["context"] = kwargs
        self._logger.log(level, msg, *args, extra=extra, **passthrough)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.DEBUG, msg, args, kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.INFO, msg, args, kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.WARNING, msg, args, kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.ERROR, msg, args, kwargs)
