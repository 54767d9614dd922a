"""Logging and tracing hooks shared by script engines."""

from __future__ import annotations

import abc
import enum
import io
import threading
from typing import Any, ClassVar, Optional

__all__ = [
    "ScriptLanguage",
    "LoggerDelegate",
    "Logger",
    "TracerDelegate",
    "Tracer",
]

_delegate_lock = threading.Lock()


class ScriptLanguage(enum.IntEnum):
    """Script languages an engine may run."""

    JAVASCRIPT = 0
    LUA = 1
    PYTHON = 2
    RUBY = 3


class LoggerDelegate(abc.ABC):
    """Receives every message written through :class:`Logger`."""

    @abc.abstractmethod
    def log(self, msg: str) -> None:
        """Handle one log message."""


class Logger(io.StringIO):
    """A text stream whose collected contents are logged when it is closed.

    The stream can be filled with ``write`` or the ``<<`` operator; on
    ``close`` (or leaving a ``with`` block) the whole text is handed to the
    current delegate, if one is set.
    """

    _delegate: ClassVar[Optional[LoggerDelegate]] = None

    @staticmethod
    def set_delegate(delegate: Optional[LoggerDelegate]) -> None:
        """Install the delegate that receives log messages, or None to drop them."""
        with _delegate_lock:
            Logger._delegate = delegate

    @staticmethod
    def log(msg: str) -> None:
        """Send one message straight to the delegate, if any."""
        delegate = Logger._delegate
        if delegate is not None:
            delegate.log(msg)

    def write(self, value: Any) -> int:
        """Append the text form of *value*; return the number of characters written."""
        return super().write(str(value))

    def __lshift__(self, value: Any) -> "Logger":
        self.write(value)
        return self

    def getvalue(self) -> str:
        """Return the text collected so far."""
        return super().getvalue()

    def close(self) -> None:
        """Log the collected text once and close the stream."""
        if self.closed:
            return
        text = super().getvalue()
        try:
            Logger.log(text)
        finally:
            super().close()

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class TracerDelegate(abc.ABC):
    """Receives the start and end of every traced section."""

    @abc.abstractmethod
    def begin_trace(self, engine: Any, trace_name: str) -> None:
        """Called when a traced section starts."""

    @abc.abstractmethod
    def end_trace(self, engine: Any) -> None:
        """Called when a traced section ends."""


class Tracer:
    """Marks a traced section for an engine; use as a context manager."""

    _delegate: ClassVar[Optional[TracerDelegate]] = None

    @staticmethod
    def set_delegate(delegate: Optional[TracerDelegate]) -> None:
        """Install the trace delegate; best done before any engine starts."""
        with _delegate_lock:
            Tracer._delegate = delegate

    def __init__(self, engine: Any, trace_name: str) -> None:
        self.engine = engine
        self.trace_name = str(trace_name)
        self._closed = False
        delegate = Tracer._delegate
        if delegate is not None:
            delegate.begin_trace(engine, self.trace_name)

    def close(self) -> None:
        """End the traced section; later calls do nothing."""
        if self._closed:
            return
        self._closed = True
        delegate = Tracer._delegate
        if delegate is not None:
            delegate.end_trace(self.engine)

    def __enter__(self) -> "Tracer":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()