import gc
import threading
import weakref

import numpy as np
import pytest

from specmatch.core.coercion import (
    Channel, Ref, ValueKind, is_nil_pointer, kind_of, pointer_of, to_float64, to_list,
)


class Box:
    pass


@pytest.mark.parametrize("value, kind", [
    (None, ValueKind.NIL),
    (1, ValueKind.SCALAR),
    (True, ValueKind.SCALAR),
    ("abc", ValueKind.SCALAR),
    (b"abc", ValueKind.SCALAR),
    (np.int64(3), ValueKind.SCALAR),
    (1.5, ValueKind.FLOAT),
    (np.float32(1.5), ValueKind.FLOAT),
    (np.float64(1.5), ValueKind.FLOAT),
    (Ref(1), ValueKind.POINTER),
    (Ref(None), ValueKind.POINTER),
    ([1, 2], ValueKind.SEQUENCE),
    ((1, 2), ValueKind.SEQUENCE),
    (np.array([1, 2]), ValueKind.SEQUENCE),
    ({1, 2}, ValueKind.ITERABLE),
    ({"a": 1}, ValueKind.ITERABLE),
    (Box(), ValueKind.OBJECT),
])
def test_kind_of(value, kind):
    assert kind_of(value) is kind


def test_kind_of_streams_and_weakrefs():
    assert kind_of(Channel()) is ValueKind.STREAM
    assert kind_of(x for x in range(3)) is ValueKind.ITERABLE
    b = Box()
    assert kind_of(weakref.ref(b)) is ValueKind.POINTER


def test_to_float64_accepts_float_family():
    assert to_float64(0.25) == (0.25, None)
    value, err = to_float64(np.float16(0.5))
    assert err is None and value == 0.5 and type(value) is float


def test_to_float64_rejects_non_floats():
    for bad in (1, "1.0", None, True):
        value, err = to_float64(bad)
        assert err is not None
        assert type(bad).__name__ in str(err)
    _, err = to_float64(7)
    assert str(err) == "Expected a float, but was '7' of type 'int'"


def test_pointer_of():
    target = Box()
    assert pointer_of(Ref(target)) == (id(target), None)
    assert pointer_of(target) == (id(target), None)
    assert pointer_of(Ref(None)) == (0, None)
    items = [1, 2]
    assert pointer_of(items) == (id(items), None)


def test_pointer_of_plain_values_is_error():
    for bad in (None, 3, 2.5, "s"):
        _, err = pointer_of(bad)
        assert err is not None
    _, err = pointer_of("s")
    assert str(err) == "Expected a pointer, but was 's' of type 'str'"


def test_is_nil_pointer():
    assert is_nil_pointer(Ref(None))
    assert not is_nil_pointer(Ref(0))
    assert not is_nil_pointer(None)

    b = Box()
    ref = weakref.ref(b)
    assert not is_nil_pointer(ref)
    del b
    gc.collect()
    assert is_nil_pointer(ref)


def test_to_list_sequences_and_iterables():
    assert to_list((1, 2, 3)) == ([1, 2, 3], None)
    assert to_list({"a": 1, "b": 2}) == (["a", "b"], None)
    assert to_list(x * 2 for x in range(3)) == ([0, 2, 4], None)
    items, err = to_list(np.array([4, 5]))
    assert err is None and items == [4, 5]


def test_to_list_drains_channel_in_order():
    ch = Channel()
    for n in (3, 1, 2):
        ch.send(n)
    ch.close()
    assert to_list(ch) == ([3, 1, 2], None)
    # already drained and closed
    assert to_list(ch) == ([], None)


def test_to_list_rejects_non_collections():
    for bad in (5, "abc", None, 1.5, Ref([1]), Box(), np.array(3)):
        items, err = to_list(bad)
        assert items == []
        assert err is not None
    _, err = to_list(5)
    assert str(err) == "Unknown type 'int', not iterable: 5"


def test_channel_close_rules():
    ch = Channel()
    ch.close()
    assert ch.closed
    assert ch.receive() == (None, False)
    assert ch.receive() == (None, False)
    with pytest.raises(ValueError):
        ch.send(1)
    with pytest.raises(ValueError):
        ch.close()


def test_channel_drained_from_another_thread():
    ch = Channel(maxsize=2)

    def produce():
        for n in range(10):
            ch.send(n)
        ch.close()

    t = threading.Thread(target=produce)
    t.start()
    items, err = to_list(ch)
    t.join(timeout=5)
    assert err is None
    assert items == list(range(10))
