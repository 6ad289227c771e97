"""Command-line interface entry point."""

import sys

from cyclopts import App, CycloptsError

from .backend import ytsections

app = App(name="ytsections")
app.default(ytsections)


def main(argv: list[str] | None = None) -> int:
    """Run the ytsections CLI."""
    argv = sys.argv[1:] if argv is None else argv
    try:
        return app(argv, print_error=False, exit_on_error=False)
    except (CycloptsError, ValueError) as e:
        # Arguments cyclopts or pydantic reject never reach ytsections().
        print(f"Error: {e}", file=sys.stderr, flush=True)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
