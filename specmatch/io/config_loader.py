from __future__ import annotations
from typing import Any, Dict, List
import json
from pathlib import Path

from specmatch.core.adapter import Location
from specmatch.core.matchers import (
    IsWithin,
    Matcher,
    Not,
    contains,
    contains_all,
    equals,
    is_false,
    is_nil,
    is_same,
    is_true,
    satisfies,
)
from specmatch.core.suite import Expectation

MATCHERS: Dict[str, Matcher] = {
    "equals": equals,
    "is_same": is_same,
    "is_nil": is_nil,
    "is_true": is_true,
    "is_false": is_false,
    "satisfies": satisfies,
    "contains": contains,
    "contains_all": contains_all,
}
# is_within is a factory and needs a delta
MATCHER_NAMES = sorted(list(MATCHERS) + ["is_within"])


def load_config(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    with p.open("r", encoding="utf-8") as f:
        text = f.read()
    suffix = p.suffix.lower()
    if suffix in (".yaml", ".yml"):
        try:
            import yaml  # type: ignore
        except Exception as e:
            raise ImportError("PyYAML is required to load YAML suite files. Install with `pip install pyyaml`.") from e
        return yaml.safe_load(text) or {}
    # default to JSON
    return json.loads(text or "{}")


def get_matcher(name: str, delta: float | None = None) -> Matcher:
    key = str(name).lower()
    if key in ("is_within", "within"):
        if delta is None:
            raise ValueError("Matcher 'is_within' requires a 'delta'")
        return IsWithin(float(delta))
    if key not in MATCHERS:
        raise ValueError(f"Unknown matcher '{name}', expected one of: {', '.join(MATCHER_NAMES)}")
    return MATCHERS[key]


def _make_expectation(spec: Dict[str, Any], location: Location) -> Expectation:
    if not isinstance(spec, dict):
        raise ValueError(f"Expectation at {location} must be a mapping, got {type(spec).__name__}")
    if "matcher" not in spec:
        raise ValueError(f"Expectation at {location} has no 'matcher'")
    matcher = get_matcher(spec["matcher"], spec.get("delta"))
    negate = spec.get("negate", False)
    if not isinstance(negate, bool):
        raise ValueError(f"Expectation at {location} has a non-bool 'negate': {negate!r}")
    if negate:
        matcher = Not(matcher)
    expected = (spec["expected"],) if "expected" in spec else ()
    return Expectation(
        actual=spec.get("actual"),
        matcher=matcher,
        expected=expected,
        name=str(spec.get("name", "")),
        location=location,
    )


def build_from_config(cfg: Dict[str, Any], source: str = "<config>") -> List[Expectation]:
    """
    Build expectations from a suite document:

        expectations:
          - {name: answer, actual: 42, matcher: equals, expected: 42}
          - {actual: 1.0, matcher: is_within, delta: 0.001, expected: 1.0005}
          - {actual: [1, 2, 3], matcher: contains, expected: 5, negate: true}

    The location of each expectation is its 1-based entry number in `source`.
    """
    entries = cfg.get("expectations") or []
    if not isinstance(entries, list):
        raise ValueError("'expectations' must be a list")
    return [
        _make_expectation(spec, Location(source, i))
        for i, spec in enumerate(entries, start=1)
    ]
