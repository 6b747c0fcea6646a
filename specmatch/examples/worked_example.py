import threading

import numpy as np

from specmatch.core import (
    Channel, ErrorLog, Location, MatcherAdapter, Ref,
    IsWithin, Not, contains, contains_all, equals, is_nil, is_same, values,
)


def main():
    log = ErrorLog()
    expect = MatcherAdapter(Location.here(), log).expect

    # Plain values and numpy arrays
    expect(6 * 7, equals, 42)
    expect(np.array([1, 2, 3]), equals, np.array([1, 2, 3]))
    expect(np.float32(0.1), IsWithin(1e-10), 0.1)  # float32 rounding: fails

    # References: identity, not value
    config = {"retries": 3}
    expect(Ref(config), is_same, config)
    expect({"retries": 3}, Not(is_same), config)
    expect(Ref(None), is_nil)

    # A producer thread feeding a channel; draining waits for close()
    ch = Channel()

    def produce():
        for n in (1, 2, 3):
            ch.send(n)
        ch.close()

    threading.Thread(target=produce).start()
    expect(ch, contains_all, values(3, 1))

    expect(["a", "b"], contains, "c")  # fails

    print(f"{len(log)} failed expectation(s):")
    for err in log:
        print(err)


if __name__ == "__main__":
    main()
