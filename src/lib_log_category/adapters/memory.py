"""In-memory sink capturing formatted lines.

Lets tests and embedding hosts assert on log output without touching a
console.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from lib_log_category.domain.call_site import CallSite


@dataclass(slots=True)
class MemorySink:
    """Append every delivered line to :attr:`records`."""

    records: list[tuple[str, CallSite | None]] = field(default_factory=list)

    def __call__(self, message: str, call_site: CallSite | None = None) -> None:
        self.records.append((message, call_site))

    @property
    def messages(self) -> list[str]:
        return [message for message, _ in self.records]

    def clear(self) -> None:
        self.records.clear()


__all__ = ["MemorySink"]
