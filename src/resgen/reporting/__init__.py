"""Progress and status reporters.

The runner talks to whichever reporter is active (see :func:`set_reporter`);
the CLI picks the backend with ``--reporter``.
"""

from .base import (
    Reporter,
    TaskStatus,
    get_reporter,
    get_verbosity,
    set_reporter,
    set_verbosity,
    task,
)
from .jsonl import JsonLinesReporter
from .plain import PlainReporter
from .rich_reporter import RichReporter
from .silent import SilentReporter

__all__ = [
    "Reporter",
    "TaskStatus",
    "get_reporter",
    "set_reporter",
    "get_verbosity",
    "set_verbosity",
    "task",
    "PlainReporter",
    "RichReporter",
    "JsonLinesReporter",
    "SilentReporter",
]
