from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, List, NamedTuple, Optional, Protocol, runtime_checkable
import math

import numpy as np

from specmatch.core.coercion import is_nil_pointer, pointer_of, to_float64, to_list
from specmatch.core.message import Message, errorf


class MatchResult(NamedTuple):
    """
    ok:  True when `actual` and `expected` match.
    pos: Message for a failed expectation.
    neg: Message for a failed expectation when the matcher is wrapped in Not.
    err: Message for an unrecoverable error, e.g. an argument of the wrong
         type. When set, the other three fields carry no meaning.
    """

    ok: bool
    pos: Optional[Message]
    neg: Optional[Message]
    err: Optional[Message]


@runtime_checkable
class Matcher(Protocol):
    def __call__(self, actual: Any, expected: Any) -> MatchResult: ...


@runtime_checkable
class Equality(Protocol):
    def equals(self, other: Any) -> bool: ...


def _error(err: Message) -> MatchResult:
    return MatchResult(False, None, None, err)


def match(matcher: Matcher, actual: Any, *optional_expected: Any) -> MatchResult:
    """Call the matcher with the actual value and an optional expected value (None if not given)."""
    expected = optional_expected[0] if optional_expected else None
    return matcher(actual, expected)


def values(*items: Any) -> List[Any]:
    """Pack several expected values into the single expected slot of a matcher."""
    return list(items)


def matcher_name(matcher: Matcher) -> str:
    name = getattr(matcher, "name", None)
    if isinstance(name, str):
        return name
    return getattr(matcher, "__name__", type(matcher).__name__)


@dataclass(frozen=True)
class Not:
    """Matches when the wrapped matcher does not, and the other way around."""

    matcher: Matcher

    @property
    def name(self) -> str:
        return f"not({matcher_name(self.matcher)})"

    def __call__(self, actual: Any, expected: Any) -> MatchResult:
        ok, pos, neg, err = self.matcher(actual, expected)
        return MatchResult(not ok, neg, pos, err)


def _is_bool(x: Any) -> bool:
    return isinstance(x, (bool, np.bool_))


def _containers_equal(a: Any, b: Any) -> bool:
    if isinstance(a, Mapping) and isinstance(b, Mapping):
        return a.keys() == b.keys() and all(are_equal(a[k], b[k]) for k in a)
    if isinstance(a, (list, tuple)) and type(a) is type(b):
        return len(a) == len(b) and all(are_equal(x, y) for x, y in zip(a, b))
    return False


def are_equal(a: Any, b: Any) -> bool:
    # a class defining equals() is not itself an Equality value
    if not isinstance(a, type) and isinstance(a, Equality):
        return bool(a.equals(b))
    if a is b:
        return True
    if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
        return bool(np.array_equal(a, b))
    # True == 1 in Python, but not as an expectation
    if _is_bool(a) != _is_bool(b):
        return False
    try:
        return bool(a == b)
    except ValueError:
        # containers holding numpy arrays compare element-wise and have no truth value
        return _containers_equal(a, b)


def equals(actual: Any, expected: Any) -> MatchResult:
    """
    The actual value must equal the expected value. Values implementing
    Equality decide for themselves, everything else uses ==.
    """
    ok = are_equal(actual, expected)
    pos = errorf("Expected '{0}' but was '{1}'", expected, actual)
    neg = errorf("Did not expect '{0}' but was '{1}'", expected, actual)
    return MatchResult(ok, pos, neg, None)


def is_same(actual: Any, expected: Any) -> MatchResult:
    """The actual value must refer to the same object as the expected value."""
    ptr1, err = pointer_of(actual)
    if err is not None:
        return _error(err)
    ptr2, err = pointer_of(expected)
    if err is not None:
        return _error(err)
    pos = errorf("Expected '{0}' but was '{1}'", expected, actual)
    neg = errorf("Did not expect '{0}' but was '{1}'", expected, actual)
    return MatchResult(ptr1 == ptr2, pos, neg, None)


def is_nil(actual: Any, _: Any = None) -> MatchResult:
    """The actual value must be None, or a nil pointer (Ref(None), dead weakref)."""
    ok = actual is None or is_nil_pointer(actual)
    pos = errorf("Expected <None> but was '{0}'", actual)
    neg = errorf("Did not expect <None> but was '{0}'", actual)
    return MatchResult(ok, pos, neg, None)


def is_true(actual: Any, _: Any = None) -> MatchResult:
    return equals(actual, True)


def is_false(actual: Any, _: Any = None) -> MatchResult:
    return equals(actual, False)


def satisfies(actual: Any, criteria: Any) -> MatchResult:
    """
    The actual value must satisfy the given criteria, a bool computed by the
    caller. Both messages are the same; there is no better wording for the
    negated case.
    """
    if not _is_bool(criteria):
        return _error(errorf("Expected a bool criteria, but was '{0}' of type '{0.__class__.__name__}'", criteria))
    pos = errorf("Criteria not satisfied by '{0}'", actual)
    return MatchResult(bool(criteria), pos, pos, None)


@dataclass(frozen=True)
class IsWithin:
    """
    The actual value must be strictly closer than `delta` to the expected
    value. Both must be floats (float or any numpy floating type).
    """

    delta: float

    @property
    def name(self) -> str:
        return f"is_within({self.delta})"

    def __call__(self, actual: Any, expected: Any) -> MatchResult:
        actual_f, err = to_float64(actual)
        if err is not None:
            return _error(err)
        expected_f, err = to_float64(expected)
        if err is not None:
            return _error(err)

        ok = bool(math.fabs(expected_f - actual_f) < self.delta)
        pos = errorf("Expected '{0}' ± {1} but was '{2}'", expected_f, self.delta, actual_f)
        neg = errorf("Did not expect '{0}' ± {1} but was '{2}'", expected_f, self.delta, actual_f)
        return MatchResult(ok, pos, neg, None)


def _list_contains(haystack: List[Any], needle: Any) -> bool:
    return any(are_equal(item, needle) for item in haystack)


def contains(actual: Any, expected: Any) -> MatchResult:
    """The actual collection must contain the expected value."""
    items, err = to_list(actual)
    if err is not None:
        return _error(err)

    ok = _list_contains(items, expected)
    pos = errorf("Expected '{0}' to be in '{1}' but it was not", expected, items)
    neg = errorf("Did not expect '{0}' to be in '{1}' but it was", expected, items)
    return MatchResult(ok, pos, neg, None)


def contains_all(actual: Any, expected: Any) -> MatchResult:
    """
    The actual collection must contain all expected elements. Order is not
    significant and one actual element may satisfy several expected ones.
    """
    items, err = to_list(actual)
    if err is not None:
        return _error(err)
    wanted, err = to_list(expected)
    if err is not None:
        return _error(err)

    ok = all(_list_contains(items, w) for w in wanted)
    pos = errorf("Expected all of '{0}' to be in '{1}' but they were not", wanted, items)
    neg = errorf("Did not expect all of '{0}' to be in '{1}' but they were", wanted, items)
    return MatchResult(ok, pos, neg, None)


# TODO: contains_any, contains_exactly (multiset equality), contains_in_order and
# contains_in_partial_order, built on to_list() + _list_contains() like the two above.
