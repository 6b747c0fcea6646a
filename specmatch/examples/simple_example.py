"""
Simple specmatch example that loads a YAML suite and prints a pretty report.
"""
from pathlib import Path
import specmatch
from specmatch.io import load_suite
from specmatch.core import SuiteRunner
from specmatch.reporting import format_text_report


def main() -> None:
    pkg_dir = Path(specmatch.__file__).resolve().parent
    suite_path = pkg_dir / "examples" / "suites" / "basic.yaml"
    expectations = load_suite(suite_path)

    result = SuiteRunner().run(expectations)

    print(format_text_report(result, max_rows=30, title="specmatch simple example"))


if __name__ == "__main__":
    main()
