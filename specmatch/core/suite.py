from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, List, Optional, Tuple

from specmatch.core.adapter import ErrorLog, ErrorSink, ExpectationError, Location, MatcherAdapter
from specmatch.core.matchers import Matcher, matcher_name


class ExpectationStatus(str, Enum):
    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"  # matcher could not evaluate its arguments


@dataclass(frozen=True)
class Expectation:
    actual: Any
    matcher: Matcher
    expected: Tuple[Any, ...] = ()
    name: str = ""
    location: Optional[Location] = None


@dataclass
class ExpectationOutcome:
    index: int
    name: str
    matcher_name: str
    status: ExpectationStatus
    location: Optional[Location] = None
    message: Optional[str] = None


@dataclass
class SuiteResult:
    outcomes: List[ExpectationOutcome] = field(default_factory=list)
    errors: List[ExpectationError] = field(default_factory=list)

    def _count(self, status: ExpectationStatus) -> int:
        return sum(1 for o in self.outcomes if o.status == status)

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def passed(self) -> int:
        return self._count(ExpectationStatus.PASSED)

    @property
    def failed(self) -> int:
        return self._count(ExpectationStatus.FAILED)

    @property
    def errored(self) -> int:
        return self._count(ExpectationStatus.ERROR)

    @property
    def ok(self) -> bool:
        return self.passed == self.total


class SuiteRunner:
    def __init__(self, log: Optional[ErrorSink] = None) -> None:
        self.log = log if log is not None else ErrorLog()

    def run(self, expectations: Iterable[Expectation]) -> SuiteResult:
        """
        Check every expectation in order, reporting failures to the shared log.

        Outcomes carry the rendered failure text so reports don't need the
        log; passing expectations never render a message.
        """
        result = SuiteResult()
        for i, exp in enumerate(expectations, start=1):
            adapter = MatcherAdapter(exp.location, self.log)
            res = adapter.expect(exp.actual, exp.matcher, *exp.expected)
            if res.err is not None:
                status, msg = ExpectationStatus.ERROR, str(res.err)
            elif not res.ok:
                status, msg = ExpectationStatus.FAILED, str(res.pos)
            else:
                status, msg = ExpectationStatus.PASSED, None
            if msg is not None:
                result.errors.append(ExpectationError(msg, exp.location))
            result.outcomes.append(ExpectationOutcome(
                index=i,
                name=exp.name or f"expectation {i}",
                matcher_name=matcher_name(exp.matcher),
                status=status,
                location=exp.location,
                message=msg,
            ))
        return result
