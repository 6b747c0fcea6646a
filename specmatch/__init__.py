"""
specmatch: composable matchers for behaviour-driven test expectations.

This package provides a small, dependency-light core for:
- Matchers: pure predicates comparing an actual value against an optional expected value,
  returning success plus two lazily rendered messages (failure / negated failure) and an
  optional unrecoverable error
- Coercion of arbitrary runtime values into floats, reference addresses and element lists
  (sequences, numpy arrays, closable streams, iterables)
- Negation of any matcher with Not(), swapping its messages
- An adapter that runs one expectation and reports failures to an error sink
- Suites of expectations loaded from JSON/YAML and run from the command line

Matchers hold no mutable state, so a single matcher can be shared across threads.
"""

__all__ = [
    "__version__",
]

__version__ = "0.1.0"
