"""CLI entry point: reads a JSON contact list, prints the status report."""

import sys

from .config import load_config
from .contacts import parse_contacts
from .errors import StatusReportError
from .report import build_report


def _read_input(argv) -> str:
    source = argv[0] if argv else "stdin"
    try:
        if argv:
            with open(argv[0], encoding="utf-8") as f:
                return f.read()
        return sys.stdin.read()
    except (OSError, UnicodeDecodeError) as exc:
        print(f"statusreport: cannot read {source}: {exc}", file=sys.stderr)
        sys.exit(1)


def main(argv=None) -> None:
    if argv is None:
        argv = sys.argv[1:]
    text = _read_input(argv)
    if not text.strip():
        print("statusreport: no contacts provided", file=sys.stderr)
        sys.exit(1)

    config = load_config()
    try:
        contacts = parse_contacts(text)
        stats, report = build_report(contacts, config=config)
    except StatusReportError as exc:
        print(f"statusreport: {exc}", file=sys.stderr)
        sys.exit(1)
    if config.warn_unclassified:
        for name, status in stats.unclassified:
            print(
                f"statusreport: warning: {name}: unrecognised status {status!r}",
                file=sys.stderr,
            )
    print(report, end="")
