"""Metadata banner and module entry point behaviour."""

from __future__ import annotations

import pytest

from lib_log_category import __init__conf__, summary_info


def test_summary_info_contains_metadata() -> None:
    summary = summary_info()
    assert summary.startswith("Info for lib_log_category:\n")
    assert f"= {__init__conf__.version}\n" in summary
    assert summary.endswith("\n")


def test_summary_info_is_idempotent() -> None:
    assert summary_info() == summary_info()


def test_print_info_defaults_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    __init__conf__.print_info()
    assert capsys.readouterr().out == summary_info()


def test_module_main_prints_metadata_banner(capsys: pytest.CaptureFixture[str]) -> None:
    from lib_log_category.__main__ import main

    exit_code = main([])
    captured = capsys.readouterr()
    assert exit_code == 0
    assert "Info for lib_log_category" in captured.out


def test_module_main_version_prints_version_line(capsys: pytest.CaptureFixture[str]) -> None:
    from lib_log_category.__main__ import main

    exit_code = main(["--version"])
    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out.strip() == f"{__init__conf__.shell_command} version {__init__conf__.version}"

