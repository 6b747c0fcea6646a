from __future__ import annotations
from typing import Any, Dict, List, Optional

from specmatch.core.suite import ExpectationOutcome, ExpectationStatus, SuiteResult


def _outcome_to_dict(o: ExpectationOutcome) -> Dict[str, Any]:
    return {
        "index": o.index,
        "name": o.name,
        "matcher": o.matcher_name,
        "status": o.status.value,
        "location": str(o.location) if o.location is not None else None,
        "message": o.message,
    }


def _trim(s: str, width: int) -> str:
    return s if len(s) <= width else (s[: max(0, width - 1)] + "…")


def format_outcome_table(
    outcomes: List[ExpectationOutcome],
    *,
    max_rows: int = 50,
    col_widths: Optional[Dict[str, int]] = None,
) -> str:
    """
    Pretty-print a text table of outcomes.

    Columns:
      IDX | NAME | MATCHER | STATUS
    """
    widths = {
        "idx": 4,
        "name": 32,
        "matcher": 24,
        "status": 7,
    }
    if col_widths:
        widths.update(col_widths)

    header = (
        f"{'IDX':>{widths['idx']}} | {'NAME':<{widths['name']}} | "
        f"{'MATCHER':<{widths['matcher']}} | {'STATUS':^{widths['status']}}"
    )
    sep = "-" * len(header)

    marks = {
        ExpectationStatus.PASSED: "✓",
        ExpectationStatus.FAILED: "✗",
        ExpectationStatus.ERROR: "!",
    }
    out_lines = [header, sep]
    for o in outcomes[:max_rows]:
        out_lines.append(
            f"{o.index:>{widths['idx']}} | {_trim(o.name, widths['name']):<{widths['name']}} | "
            f"{_trim(o.matcher_name, widths['matcher']):<{widths['matcher']}} | "
            f"{marks[o.status]:^{widths['status']}}"
        )
    if len(outcomes) > max_rows:
        out_lines.append(f"... ({len(outcomes) - max_rows} more rows)")
    return "\n".join(out_lines)


def build_json_report(result: SuiteResult) -> Dict[str, Any]:
    return {
        "ok": result.ok,
        "total": result.total,
        "passed": result.passed,
        "failed": result.failed,
        "errored": result.errored,
        "outcomes": [_outcome_to_dict(o) for o in result.outcomes],
    }


def format_text_report(
    result: SuiteResult,
    *,
    max_rows: int = 50,
    title: Optional[str] = None,
) -> str:
    """
    Build a human-friendly text report with:
      - header + pass/fail counts,
      - outcome table (first max_rows),
      - every failure and error message with its location.
    """
    lines: List[str] = []
    hdr = title or "specmatch report"
    lines.append("=" * 80)
    lines.append(hdr)
    lines.append("=" * 80)
    lines.append(f"Total:   {result.total}")
    lines.append(f"Passed:  {result.passed}")
    lines.append(f"Failed:  {result.failed}")
    lines.append(f"Errors:  {result.errored}")
    lines.append("")
    lines.append(format_outcome_table(result.outcomes, max_rows=max_rows))

    problems = [o for o in result.outcomes if o.status != ExpectationStatus.PASSED]
    if problems:
        lines.append("")
        lines.append("Failures:")
        for o in problems:
            label = "ERROR" if o.status == ExpectationStatus.ERROR else "FAIL"
            lines.append(f"[{label}] #{o.index} {o.name}: {o.message}")
            if o.location is not None:
                lines.append(f"    at {o.location}")

    lines.append("=" * 80)
    return "\n".join(lines)
