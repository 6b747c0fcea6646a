from __future__ import annotations
import argparse
from pathlib import Path
from typing import Any, Dict, List, Optional
from specmatch.io import load_suite, save_json, MATCHER_NAMES
from specmatch.core.suite import SuiteRunner
from specmatch.reporting import format_text_report, build_json_report
from specmatch.verbose import setup_logger
from specmatch import __version__

def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="specmatch", description="specmatch CLI")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_check = sub.add_parser("check", help="Run a suite of expectations (JSON or YAML)")
    p_check.add_argument("--suite", required=True, help="Path to suite file (JSON/YAML)")
    p_check.add_argument("--out", required=False, help="Path to write JSON report")
    p_check.add_argument("--verbose", action="store_true", help="Log matcher failures to stderr")
    p_check.add_argument("--debug-log", required=False, help="Path to append debug log records to")

    sub.add_parser("matchers", help="List matcher names usable in suite files")
    sub.add_parser("version", help="Show specmatch version and exit")

    args = parser.parse_args(argv)

    if args.cmd == "version":
        print(__version__)
        return

    if args.cmd == "matchers":
        for name in MATCHER_NAMES:
            print(name)
        return

    if args.cmd == "check":
        logger = setup_logger(
            Path(args.debug_log) if args.debug_log else None,
            verbose=args.verbose,
        )
        expectations = load_suite(args.suite)
        logger.debug("Loaded %d expectations from %s", len(expectations), args.suite)
        result = SuiteRunner().run(expectations)

        if args.out:
            report: Dict[str, Any] = build_json_report(result)
            save_json(args.out, report)
        else:
            print(format_text_report(result, title=f"specmatch: {args.suite}"))

        if not result.ok:
            raise SystemExit(1)

if __name__ == "__main__":
    main()
