"""Emission sinks — where submitted records go.

Every submit call hands the full record ``{name, email, agreeTerms,
gender}`` to a sink, valid or not. A sink is any callable::

    type RecordSink = Callable[[dict[str, Any]], None]

``LoggingSink`` is the default and writes the record to the
``regform.submissions`` logger. ``StreamSink`` writes one JSON line per
record to a text stream (the CLI uses it for stdout).
"""

import json
import logging
import sys
from collections.abc import Callable
from typing import Any, TextIO

type RecordSink = Callable[[dict[str, Any]], None]

logger = logging.getLogger("regform.submissions")


class LoggingSink:
    """Log each record at a fixed level."""

    __slots__ = ("level", "logger")

    def __init__(self, target: logging.Logger | None = None, level: int = logging.INFO) -> None:
        self.logger = target or logger
        self.level = level

    def __call__(self, record: dict[str, Any]) -> None:
        self.logger.log(self.level, "submission %s", record, extra={"record": record})


class StreamSink:
    """Write each record as a JSON line to *stream* (stdout by default)."""

    __slots__ = ("_stream",)

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def __call__(self, record: dict[str, Any]) -> None:
        stream = self._stream or sys.stdout
        stream.write(json.dumps(record) + "\n")
        stream.flush()
