"""undoline CLI entry point.

Allows running via `python -m undoline` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import importlib.metadata
import sys
from typing import Optional

from .settings import load_settings


def get_version_string() -> str:
    try:
        return importlib.metadata.version("undoline")
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


def main(argv: Optional[list[str]] = None) -> int:
    # Very small arg parsing: version, history bound override
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return 0

    settings = load_settings()
    if len(args) >= 2 and args[0] == "--max-history":
        try:
            value = int(args[1])
        except ValueError:
            value = 0
        if value <= 0:
            print(f"--max-history expects a positive integer, got {args[1]!r}", file=sys.stderr)
            return 2
        settings.max_history_length = value
    elif args:
        print(f"Unknown arguments: {' '.join(args)}", file=sys.stderr)
        return 2

    # Lazy import to avoid importing UI deps for --version
    from .textual_app import CounterApp
    CounterApp(settings=settings).run()
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
