from __future__ import annotations

import argparse
import os
from pathlib import Path

from .session import Session


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Terminal todo list and time log."
    )
    ap.add_argument(
        "--todos",
        default=os.getenv("TRACC_TODOS", "todo.json"),
        help="Todo list JSON file (default: env TRACC_TODOS or ./todo.json)",
    )
    ap.add_argument(
        "--times",
        default=os.getenv("TRACC_TIMES", "tracc.json"),
        help="Time log JSON file (default: env TRACC_TIMES or ./tracc.json)",
    )
    ap.add_argument(
        "--summary",
        action="store_true",
        help="Print the time log summary and exit without starting the editor",
    )
    return ap


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    for flag, value in (("--todos", args.todos), ("--times", args.times)):
        p = Path(value)
        if p.is_dir():
            raise SystemExit(f"Invalid {flag} value: {value!r} is a directory")
        if not p.parent.exists():
            raise SystemExit(f"Invalid {flag} value: directory {str(p.parent)!r} does not exist")

    session = Session.open(args.todos, args.times)

    if args.summary:
        for line in session.summary():
            print(line)
        return

    from .tui import run

    run(session)


if __name__ == "__main__":
    main()
