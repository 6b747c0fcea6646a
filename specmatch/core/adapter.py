from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, Protocol
import inspect
import logging
import threading

from specmatch.core.matchers import MatchResult, Matcher, match
from specmatch.core.message import Message

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Location:
    file: str
    line: int

    def __str__(self) -> str:
        return f"{self.file}:{self.line}"

    @staticmethod
    def here(skip: int = 0) -> "Location":
        """Location of the caller, or of a frame `skip` levels further up."""
        frame = inspect.currentframe()
        try:
            target = frame.f_back if frame is not None else None
            for _ in range(skip):
                if target is None or target.f_back is None:
                    break
                target = target.f_back
            if target is None:
                return Location("<unknown>", 0)
            return Location(target.f_code.co_filename, target.f_lineno)
        finally:
            del frame


@dataclass(frozen=True)
class ExpectationError:
    message: str
    location: Optional[Location] = None

    def __str__(self) -> str:
        if self.location is None:
            return self.message
        return f"{self.message}\n    at {self.location}"


class ErrorSink(Protocol):
    def add_error(self, error: ExpectationError) -> None: ...


class ErrorLog:
    """List-backed ErrorSink that can be shared between threads."""

    def __init__(self) -> None:
        self._errors: List[ExpectationError] = []
        self._lock = threading.Lock()

    def add_error(self, error: ExpectationError) -> None:
        with self._lock:
            self._errors.append(error)

    @property
    def errors(self) -> List[ExpectationError]:
        with self._lock:
            return list(self._errors)

    def clear(self) -> None:
        with self._lock:
            self._errors.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._errors)

    def __iter__(self) -> Iterator[ExpectationError]:
        return iter(self.errors)


class MatcherAdapter:
    def __init__(self, location: Optional[Location], log: ErrorSink) -> None:
        self.location = location
        self.log = log

    def expect(self, actual: Any, matcher: Matcher, *expected: Any) -> MatchResult:
        """
        Run `matcher` against `actual` and at most one expected value. An
        error or a failed match adds exactly one ExpectationError to the log;
        a passing match renders nothing and logs nothing.
        """
        result = match(matcher, actual, *expected)
        if result.err is not None:
            logger.debug("Matcher error at %s: %s", self.location, result.err)
            self._add_error(result.err)
        elif not result.ok:
            logger.debug("Expectation failed at %s: %s", self.location, result.pos)
            self._add_error(result.pos)
        return result

    def _add_error(self, message: Optional[Message]) -> None:
        self.log.add_error(ExpectationError(str(message), self.location))
