"""Static package metadata surfaced by the CLI banner."""

from __future__ import annotations

from typing import Callable

name = "lib_log_category"
title = "Categorized logging facade with per-category log and throw thresholds"
version = "0.1.0"
homepage = "https://github.com/lib-log-category/lib_log_category"
author = "lib_log_category contributors"
author_email = "maintainers@lib-log-category.invalid"
shell_command = "lib_log_category"


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Emit the metadata banner line by line.

    Parameters
    ----------
    writer:
        Receives each line including its trailing newline; defaults to
        printing to stdout.
    """

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:\n", "\n"]
    lines.extend(f"    {label.ljust(pad)} = {value}\n" for label, value in fields)
    emit = writer if writer is not None else (lambda text: print(text, end=""))
    for line in lines:
        emit(line)


__all__ = ["author", "author_email", "homepage", "name", "print_info", "shell_command", "title", "version"]
