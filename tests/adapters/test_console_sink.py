from __future__ import annotations

from io import StringIO

import pytest
from rich.console import Console

from lib_log_category.adapters.console.rich_console import RichConsoleSink
from lib_log_category.adapters.memory import MemorySink
from lib_log_category.application.ports.sink import SinkPort
from lib_log_category.domain.call_site import CallSite
from lib_log_category.domain.errors import InvalidSeverity
from lib_log_category.domain.severity import Severity


def test_rich_console_sink_prints_message_verbatim(record_console: Console) -> None:
    sink = RichConsoleSink(console=record_console)
    sink("Special[WARN]: [not markup] x")
    assert record_console.export_text() == "Special[WARN]: [not markup] x\n"


def test_rich_console_sink_prefixes_call_site(record_console: Console) -> None:
    sink = RichConsoleSink(console=record_console)
    sink("hello", CallSite(file="/src/game/combat.py", line=12))
    assert record_console.export_text() == "combat.py:12: hello\n"


@pytest.mark.parametrize(
    "message, expected",
    [
        ("Special[ERROR]: x", "red"),
        ("WARN: x", "yellow"),
        ("Special[INFO]: x", "cyan"),
        ("VERBOSE: x", "dim"),
        ("Special: x", ""),
        ("plain text", ""),
        ("Net:io[WARN]: x", "yellow"),
        ("Special[INFO]: ratio 1:2", "cyan"),
        ("Net: ERROR: x", ""),
    ],
)
def test_style_follows_severity_tag(message: str, expected: str) -> None:
    sink = RichConsoleSink(console=Console(file=StringIO()))
    assert sink._style_for(message) == expected


def test_style_overrides_merge_with_defaults() -> None:
    sink = RichConsoleSink(console=Console(file=StringIO()), styles={Severity.WARN: "bold magenta"})
    assert sink._style_for("WARN: x") == "bold magenta"
    assert sink._style_for("ERROR: x") == "red"


def test_style_overrides_accept_severity_names() -> None:
    sink = RichConsoleSink(console=Console(file=StringIO()), styles={"info": "bold green", Severity.ERROR: "magenta"})
    assert sink._style_for("Special[INFO]: x") == "bold green"
    assert sink._style_for("ERROR: x") == "magenta"


def test_style_overrides_reject_unknown_names() -> None:
    with pytest.raises(InvalidSeverity):
        RichConsoleSink(console=Console(file=StringIO()), styles={"loud": "red"})


def test_colour_can_be_disabled() -> None:
    console = Console(file=StringIO(), force_terminal=True, record=True)
    sink = RichConsoleSink(console=console, no_color=True)
    sink("ERROR: x")
    assert "\x1b[31m" not in console.file.getvalue()  # type: ignore[attr-defined]


def test_sinks_satisfy_the_port() -> None:
    assert isinstance(RichConsoleSink(console=Console(file=StringIO())), SinkPort)
    assert isinstance(MemorySink(), SinkPort)


def test_memory_sink_records_lines_and_call_sites() -> None:
    sink = MemorySink()
    site = CallSite(file="a.py", line=1)
    sink("one")
    sink("two", site)
    assert sink.messages == ["one", "two"]
    assert sink.records[1] == ("two", site)
    sink.clear()
    assert sink.messages == []
