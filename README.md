# scripttrace

This package provides process-wide hooks for logging and tracing in applications that embed a script engine.
The hooks do nothing until you install a delegate. After that, every `Logger` and `Tracer` in the process reports to the delegate.
All of the API is in `scripttrace.utils`.

## Installation

```
pip install scripttrace
```

## Logging

To receive log messages:

1. Subclass `LoggerDelegate` and override `log(msg)`.
2. Install the subclass with `Logger.set_delegate`.

```python
from scripttrace.utils import Logger, LoggerDelegate

class Collect(LoggerDelegate):
    def __init__(self):
        self.messages = []

    def log(self, msg):
        self.messages.append(msg)

sink = Collect()
Logger.set_delegate(sink)

Logger.log("hello")            # goes straight to the delegate

with Logger() as out:          # buffers text, then sends it as one message on exit
    out << "hello " << 1

assert sink.messages == ["hello", "hello 1"]

Logger.set_delegate(None)      # stop logging
```

A `Logger` instance is a text stream, because it subclasses `io.StringIO`:

- `write(value)` and `<<` append `str(value)` to the buffer.
- `getvalue()` returns the text buffered so far.
- `close()` sends the buffered text to the current delegate as a single message, then closes the stream. Leaving a `with` block calls `close()`.
- Later calls to `close()` do nothing.

If no delegate is installed, messages are dropped.

## Tracing

To receive trace events:

1. Subclass `TracerDelegate`.
2. Override `begin_trace(engine, trace_name)` and `end_trace(engine)`.

A `Tracer` calls the delegate at two points:

- When it is created, it calls `begin_trace`.
- When it is closed, it calls `end_trace` once. Later calls to `close()` do nothing.

Used as a context manager, a `Tracer` closes itself at the end of the block. The `engine` argument is passed through to the delegate unchanged.

```python
from scripttrace.utils import Tracer, TracerDelegate

class Timing(TracerDelegate):
    def begin_trace(self, engine, trace_name):
        print("begin", trace_name)

    def end_trace(self, engine):
        print("end")

Tracer.set_delegate(Timing())
with Tracer(engine=None, trace_name="eval"):
    ...
Tracer.set_delegate(None)
```

Exceptions raised by a delegate are not caught. They propagate to the caller.

## Script languages

`ScriptLanguage` is an integer enumeration of the script languages a host engine may report. Its members are `JAVASCRIPT`, `LUA`, `PYTHON` and `RUBY`.

## What this package does not do

This package contains no script engine and does not run scripts. It has no command-line tool.
It provides only the logging and tracing hooks, which a host engine calls.