"""Module entry point so ``python -m lib_log_category`` behaves like the console script.

Purpose
-------
Delegate to :func:`lib_log_category.cli.main`, which runs the click group
through ``lib_cli_exit_tools`` and returns the exit code.
"""

from __future__ import annotations

from typing import Sequence

from .cli import main as cli_main


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return its exit code.

    Examples
    --------
    >>> main(["--version"])  # doctest: +SKIP
    lib_log_category version 0.1.0
    0
    """

    return cli_main(argv)


if __name__ == "__main__":
    raise SystemExit(main())
