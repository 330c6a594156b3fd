from __future__ import annotations

import sys

from staticdoc.app import run_app


def main() -> int:
    """Module entrypoint for `python -m staticdoc` and the `staticdoc` script."""
    return run_app(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())
