from .message import Message, errorf
from .coercion import (
    ValueKind,
    Ref,
    Stream,
    Channel,
    kind_of,
    is_nil_pointer,
    to_float64,
    pointer_of,
    to_list,
)
from .matchers import (
    MatchResult,
    Matcher,
    Equality,
    match,
    values,
    matcher_name,
    Not,
    are_equal,
    equals,
    is_same,
    is_nil,
    is_true,
    is_false,
    satisfies,
    IsWithin,
    contains,
    contains_all,
)
from .adapter import Location, ExpectationError, ErrorSink, ErrorLog, MatcherAdapter
from .suite import Expectation, ExpectationStatus, ExpectationOutcome, SuiteResult, SuiteRunner

__all__ = [
    "Message",
    "errorf",
    "ValueKind",
    "Ref",
    "Stream",
    "Channel",
    "kind_of",
    "is_nil_pointer",
    "to_float64",
    "pointer_of",
    "to_list",
    "MatchResult",
    "Matcher",
    "Equality",
    "match",
    "values",
    "matcher_name",
    "Not",
    "are_equal",
    "equals",
    "is_same",
    "is_nil",
    "is_true",
    "is_false",
    "satisfies",
    "IsWithin",
    "contains",
    "contains_all",
    "Location",
    "ExpectationError",
    "ErrorSink",
    "ErrorLog",
    "MatcherAdapter",
    "Expectation",
    "ExpectationStatus",
    "ExpectationOutcome",
    "SuiteResult",
    "SuiteRunner",
]
