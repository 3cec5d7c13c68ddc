"""Source position attached to a log call.

Purpose
-------
Carry optional file/line/class/method details from the call site to the
sink, which may render them (the default console sink prefixes
``file:line``).

Contents
--------
* :class:`CallSite` – frozen dataclass with a frame-capturing constructor.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True, frozen=True)
class CallSite:
    """Location of a log statement.

    Attributes
    ----------
    file:
        Source file path as reported by the interpreter.
    line:
        One-based line number.
    class_name:
        Enclosing class when the call happened inside a method.
    method:
        Enclosing function or method name.
    """

    file: str | None = None
    line: int | None = None
    class_name: str | None = None
    method: str | None = None

    @classmethod
    def here(cls, depth: int = 1) -> "CallSite":
        """Capture the frame ``depth`` levels above this call.

        ``depth=1`` describes the function that called :meth:`here`.
        """

        frame = inspect.currentframe()
        try:
            target = frame
            for _ in range(depth):
                if target is None:
                    break
                target = target.f_back
            if target is None:
                return cls()
            code = target.f_code
            owner = target.f_locals.get("self")
            if owner is None:
                owner_cls = target.f_locals.get("cls")
                class_name = owner_cls.__name__ if isinstance(owner_cls, type) else None
            else:
                class_name = type(owner).__name__
            return cls(
                file=code.co_filename,
                line=target.f_lineno,
                class_name=class_name,
                method=code.co_name,
            )
        finally:
            del frame

    def short(self) -> str:
        """Return ``"file.py:12"`` style text, or an empty string when unknown."""

        if self.file is None:
            return ""
        name = Path(self.file).name
        return f"{name}:{self.line}" if self.line is not None else name


__all__ = ["CallSite"]
