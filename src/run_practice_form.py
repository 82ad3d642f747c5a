#!/usr/bin/env python3

import argparse
import html
import json
import sys
from datetime import datetime
from pathlib import Path

from form_config import PRACTICE_FORM_URL, FormConfig
from practice_form import FORM_CHECKS, run_form_checks
from waits import DEFAULT_TIMEOUT


def write_html_report(results_json: dict, html_path: Path, url: str = PRACTICE_FORM_URL):
    tests = results_json.get("tests", [])
    passed = sum(1 for r in tests if r.get("status") == "passed")
    failed = sum(1 for r in tests if r.get("status") == "failed")
    total = len(tests)

    report = f"""
<html><head><title>Practice Form Check Report</title>
<style>
body {{ font-family: Arial, sans-serif; padding: 20px; }}
.summary {{ margin-bottom: 16px; }}
.pass {{ color: #0a7b44; }}
.fail {{ color: #b00020; }}
pre {{ background: #f6f8fa; padding: 12px; border-radius: 6px; overflow: auto; }}
</style>
</head><body>
  <h1>Practice Form Check Report</h1>
  <div class="summary">
    <div><strong>Page:</strong> {html.escape(url)}</div>
    <strong>Total:</strong> {total} &nbsp; <strong class="pass">Passed:</strong> {passed} &nbsp; <strong class="fail">Failed:</strong> {failed}
  </div>
  <hr />
  {''.join(render_check_result(r) for r in tests)}
</body></html>
"""
    with open(html_path, "w", encoding="utf-8") as f:
        f.write(report)


def render_check_result(check_result: dict) -> str:
    status_class = "pass" if check_result.get("status") == "passed" else "fail"
    name = html.escape(check_result.get("name", "Unnamed Check"))
    error = check_result.get("error", "")
    screenshot = check_result.get("screenshot", "")
    duration = check_result.get("duration")
    duration_note = f" ({duration:.2f}s)" if isinstance(duration, (int, float)) else ""
    img_tag = f"<div><img src=\"{html.escape(screenshot)}\" style=\"max-width: 100%; border: 1px solid #ddd;\" /></div>" if screenshot else ""
    error_block = f"<pre>{html.escape(error)}</pre>" if error else ""
    return f"""
  <section>
    <h3 class="{status_class}">{name} — {check_result.get('status', 'unknown').upper()}{duration_note}</h3>
    {img_tag}
    {error_block}
  </section>
  <hr />
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run label-based checks against the practice form")
    parser.add_argument("--url", default=PRACTICE_FORM_URL, help="Practice form URL")
    parser.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT, help="Seconds each lookup may wait")
    parser.add_argument("--check", action="append", choices=sorted(FORM_CHECKS), help="Run only this check (repeatable)")
    parser.add_argument("--out", help="Directory for results (default data/runs/run_<timestamp>)")
    parser.add_argument("--headful", action="store_true", help="Run browser headful for debugging")
    parser.add_argument("--slow-mo", type=float, default=0, help="Delay in ms between browser operations")
    parser.add_argument("--verbose", action="store_true", help="Print lookup and step logs")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    run_dir = Path(args.out) if args.out else Path(f"data/runs/run_{timestamp}")
    run_dir.mkdir(parents=True, exist_ok=True)

    config = FormConfig(
        url=args.url,
        timeout=args.timeout,
        headless=(not args.headful),
        slow_mo=args.slow_mo,
        verbose=args.verbose,
    )

    print("🏃 Running practice form checks with Playwright...")
    results_json = run_form_checks(config, run_dir, names=args.check)

    results_path = run_dir / "results.json"
    with open(results_path, "w", encoding="utf-8") as f:
        json.dump(results_json, f, indent=2)
    print(f"📊 Results written: {results_path}")

    report_path = run_dir / "report.html"
    write_html_report(results_json, report_path, url=config.url)
    print(f"📝 HTML report: {report_path}")

    tests = results_json.get("tests", [])
    passed = sum(1 for r in tests if r.get("status") == "passed")
    failed = sum(1 for r in tests if r.get("status") == "failed")
    print(f"✅ Done. Total: {len(tests)}, Passed: {passed}, Failed: {failed}")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
