# newsletter/cli.py

from __future__ import annotations
import argparse
import json
import signal
import sys
from pathlib import Path
from typing import Any, List

from newsletter.core.subject import Subject
from newsletter.script_runner import ScriptRunner
from newsletter.subscribers.inbox import Inbox
from newsletter.subscribers.user import User


def main(argv: list[str] | None = None) -> int | None:
    parser = argparse.ArgumentParser(
        prog="newsletter",
        description="Broadcast a newsletter to its subscribers",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "script",
        type=Path,
        nargs="?",
        default=None,
        help="Path to a notification script YAML file (built-in welcome script if omitted)",
    )
    parser.add_argument(
        "--output",
        choices=["cli", "json"],
        default="cli",
        help="Output mode: 'cli' prints one line per delivery; 'json' dumps deliveries to a JSON file",
    )
    parser.add_argument(
        "--json-file",
        type=Path,
        default=Path("newsletter_output.json"),
        help="Path to JSON output file if --output=json",
    )
    parser.add_argument(
        "--isolate-failures",
        action="store_true",
        help="Keep delivering to remaining subscribers when one of them fails",
    )

    args = parser.parse_args(argv)

    if args.script is not None and not args.script.exists():
        print(f"Script file not found: {args.script}", file=sys.stderr)
        return 1

    subject = Subject(isolate_failures=args.isolate_failures)
    deliveries: List[dict[str, Any]] = []

    if args.output == "json":
        def subscriber_factory(name: str) -> Any:
            return Inbox(name, journal=deliveries)
    else:
        subscriber_factory = User

    runner = ScriptRunner(
        subject, script_path=args.script, subscriber_factory=subscriber_factory
    )

    try:
        runner.load()
    except Exception as exc:
        print(f"Failed to load script: {exc}", file=sys.stderr)
        return 2

    try:
        failures = runner.run()
    except Exception as exc:
        print(f"Notification failed: {exc}", file=sys.stderr)
        return 3

    for failure in failures:
        print(
            f"[WARN] Delivery to {failure.subscriber!r} failed: {failure.error}",
            file=sys.stderr,
        )

    if args.output == "json":
        try:
            payload = json.dumps(deliveries, indent=2, default=str)
            args.json_file.parent.mkdir(parents=True, exist_ok=True)
            with args.json_file.open("w", encoding="utf-8") as f:
                f.write(payload)
            print(f"[INFO] {len(deliveries)} deliveries dumped to {args.json_file}", file=sys.stderr)
        except Exception as exc:
            print(f"Failed to write JSON file: {exc}", file=sys.stderr)
            return 4

    return 0


if __name__ == "__main__":

    signal.signal(signal.SIGPIPE, signal.SIG_DFL)  # Ignore broken pipe
    sys.exit(main())
