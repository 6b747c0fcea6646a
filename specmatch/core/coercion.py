from __future__ import annotations
from collections.abc import Iterable, Sequence
from enum import Enum
from numbers import Number
from typing import Any, List, Optional, Protocol, Tuple, runtime_checkable
import queue
import threading
import weakref

import numpy as np

from specmatch.core.message import Message, errorf


class ValueKind(str, Enum):
    NIL = "nil"
    SCALAR = "scalar"
    FLOAT = "float"
    POINTER = "pointer"
    STREAM = "stream"
    SEQUENCE = "sequence"
    ITERABLE = "iterable"
    OBJECT = "object"


# kinds whose values have their own reference identity
_REFERENCE_KINDS = frozenset({ValueKind.STREAM, ValueKind.SEQUENCE, ValueKind.ITERABLE, ValueKind.OBJECT})


class Ref:
    """
    An explicit pointer. `Ref(obj)` points at obj, `Ref(None)` is a typed nil
    pointer: a non-None value that still counts as nil for is_nil().
    """

    __slots__ = ("target",)

    def __init__(self, target: Any = None) -> None:
        self.target = target

    def __repr__(self) -> str:
        return f"Ref({self.target!r})"


@runtime_checkable
class Stream(Protocol):
    def receive(self) -> Tuple[Any, bool]: ...


_CLOSED = object()


class Channel:
    """
    A closable FIFO stream safe to share between threads.

    receive() blocks until an item arrives or the channel is closed, so
    draining a channel that is never closed blocks forever. This includes
    passing it to contains() or contains_all().
    """

    def __init__(self, maxsize: int = 0) -> None:
        self._queue: "queue.Queue[Any]" = queue.Queue(maxsize)
        self._lock = threading.Lock()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def send(self, item: Any) -> None:
        with self._lock:
            if self._closed:
                raise ValueError("send on closed channel")
            self._queue.put(item)

    def close(self) -> None:
        with self._lock:
            if self._closed:
                raise ValueError("close of closed channel")
            self._closed = True
            self._queue.put(_CLOSED)

    def receive(self) -> Tuple[Any, bool]:
        item = self._queue.get()
        if item is _CLOSED:
            # leave the marker for any other receiver
            self._queue.put(_CLOSED)
            return None, False
        return item, True

    def __iter__(self):
        while True:
            item, ok = self.receive()
            if not ok:
                return
            yield item

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"Channel({state}, pending={self._queue.qsize()})"


def kind_of(value: Any) -> ValueKind:
    if value is None:
        return ValueKind.NIL
    if isinstance(value, (Ref, weakref.ReferenceType)):
        return ValueKind.POINTER
    if isinstance(value, (float, np.floating)):
        return ValueKind.FLOAT
    if isinstance(value, (Number, str, bytes, np.generic)):
        return ValueKind.SCALAR
    if isinstance(value, Stream):
        return ValueKind.STREAM
    if isinstance(value, (Sequence, np.ndarray)):
        return ValueKind.SEQUENCE
    if isinstance(value, Iterable):
        return ValueKind.ITERABLE
    return ValueKind.OBJECT


def _deref(pointer: Any) -> Any:
    if isinstance(pointer, Ref):
        return pointer.target
    return pointer()


def is_nil_pointer(value: Any) -> bool:
    """True for a Ref holding None or a weak reference whose referent is gone."""
    return kind_of(value) is ValueKind.POINTER and _deref(value) is None


def to_float64(value: Any) -> Tuple[float, Optional[Message]]:
    if kind_of(value) is ValueKind.FLOAT:
        return float(value), None
    return 0.0, errorf("Expected a float, but was '{0}' of type '{0.__class__.__name__}'", value)


def pointer_of(value: Any) -> Tuple[int, Optional[Message]]:
    """
    Address of what `value` refers to. Pointers resolve to their referent
    (0 when nil); reference objects are their own address. Plain values
    (None, numbers, strings) have no meaningful identity and are an error.
    """
    kind = kind_of(value)
    if kind is ValueKind.POINTER:
        target = _deref(value)
        return (0 if target is None else id(target)), None
    if kind in _REFERENCE_KINDS:
        return id(value), None
    return 0, errorf("Expected a pointer, but was '{0}' of type '{0.__class__.__name__}'", value)


def to_list(value: Any) -> Tuple[List[Any], Optional[Message]]:
    """
    Elements of a sequence (index order), a stream (receive order, drained
    until closed) or any other iterable (iterated once).
    """
    kind = kind_of(value)
    if kind is ValueKind.SEQUENCE:
        if isinstance(value, np.ndarray) and value.ndim == 0:
            return [], errorf("Unknown type '{0.__class__.__name__}', not iterable: {0}", value)
        return list(value), None
    if kind is ValueKind.STREAM:
        items: List[Any] = []
        while True:
            item, ok = value.receive()
            if not ok:
                break
            items.append(item)
        return items, None
    if kind is ValueKind.ITERABLE:
        return list(value), None
    return [], errorf("Unknown type '{0.__class__.__name__}', not iterable: {0}", value)
