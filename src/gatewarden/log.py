"""
Evaluation log sink and forwarding.

FilteredLog collects the human-readable narration of an evaluation.
LogHandler forwards the collected lines to a text stream with a name
prefix, remembering what has already been forwarded.
"""

from __future__ import annotations

import sys
from typing import TextIO

import structlog

logger = structlog.get_logger(__name__)

DEFAULT_MAX_LINES = 20


class FilteredLog:
    """
    Ordered collection of info and error lines.

    Only the first ``max_lines`` errors are stored; the remaining ones are
    counted and reported by :meth:`log_summary`.
    """

    def __init__(self, title: str = "Errors while evaluating quality gates:", max_lines: int = DEFAULT_MAX_LINES) -> None:
        self.title = title
        self.max_lines = max_lines
        self._info_messages: list[str] = []
        self._error_messages: list[str] = []
        self._error_count = 0

    def log_info(self, fmt: str, *args: object) -> None:
        self._info_messages.append(fmt % args if args else fmt)

    def log_error(self, fmt: str, *args: object) -> None:
        if not self._error_messages:
            self._error_messages.append(self.title)
        if self._error_count < self.max_lines:
            self._error_messages.append(fmt % args if args else fmt)
        self._error_count += 1

    def log_summary(self) -> None:
        """Append a line for the errors that were not stored."""
        skipped = self._error_count - self.max_lines
        if skipped > 0:
            self._error_messages.append(f"  ... skipped logging of {skipped} additional errors ...")

    @property
    def info_messages(self) -> list[str]:
        return list(self._info_messages)

    @property
    def error_messages(self) -> list[str]:
        return list(self._error_messages)

    def has_errors(self) -> bool:
        return self._error_count > 0

    @property
    def error_count(self) -> int:
        return self._error_count


class LogHandler:
    """
    Forwards FilteredLog lines to a text stream.

    Info lines are prefixed with ``[<name>] ``, error lines with
    ``[<name>] [-ERROR-] ``. Lines that were already in ``log`` when the
    handler was created are never forwarded.
    """

    def __init__(self, name: str, log: FilteredLog | None = None, sink: TextIO | None = None) -> None:
        self.name = name
        self.sink = sink if sink is not None else sys.stdout
        self.quiet = False

        self._info_prefix = self._create_prefix(name)
        self._error_prefix = self._create_prefix(f"[{name}] [-ERROR-]")
        self._info_position = len(log.info_messages) if log else 0
        self._error_position = len(log.error_messages) if log else 0
        self._log = logger.bind(log_name=name)

    @staticmethod
    def _create_prefix(name: str) -> str:
        if "[" in name:
            return f"{name} "
        return f"[{name}] "

    def log(self, fmt: str, *args: object) -> None:
        """Print a single formatted info line."""
        self._print(self._info_prefix, fmt % args if args else fmt)

    def log_all(self, log: FilteredLog) -> None:
        """
        Forward all lines of ``log`` that have not been forwarded yet.

        Errors are printed before info lines.
        """
        errors = log.error_messages
        if self._error_position < len(errors) and not self.quiet:
            for line in errors[self._error_position:]:
                self._print(self._error_prefix, line)
            self._error_position = len(errors)

        infos = log.info_messages
        if self._info_position < len(infos) and not self.quiet:
            for line in infos[self._info_position:]:
                self._print(self._info_prefix, line)
            self._info_position = len(infos)

    def _print(self, prefix: str, line: str) -> None:
        self._log.debug("log_line_forwarded", line=line)
        print(prefix + line, file=self.sink)
