"""Command-line adapter for inspecting and exercising category loggers.

Purpose
-------
Let operators check how the configuration resolves for a category and push a
message through a logger without writing code.

Contents
--------
* :func:`cli` – click group with ``--use-dotenv``, ``--traceback`` and
  ``--config-file`` switches.
* ``info`` / ``resolve`` / ``emit`` subcommands.
* :func:`main` – entry point running the group through
  :func:`lib_cli_exit_tools.run_cli`.

System Role
-----------
Presentation layer. It assembles the configuration from the environment and
an optional file, then hands it to a :class:`~lib_log_category.logger.Logger`
built for the command.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Sequence

import click
import lib_cli_exit_tools

from . import __init__conf__
from . import config as log_config
from .domain.call_site import CallSite
from .domain.errors import InvalidSeverity, ThrowThresholdError
from .domain.severity import Severity
from .lib_log_category import summary_info
from .logger import Logger

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_SEVERITY_CHOICES = [severity.name for severity in Severity]


def _severity_option(name: str, default: Severity, help_text: str):
    return click.option(
        name,
        type=click.Choice(_SEVERITY_CHOICES, case_sensitive=False),
        default=default.name,
        show_default=True,
        help=help_text,
    )


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help="Load environment variables from the nearest .env before resolving configuration.",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors.",
)
@click.option(
    "--config-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="key=value file (e.g. combat.log=verbose) merged over the environment.",
)
@click.pass_context
def cli(ctx: click.Context, use_dotenv: bool, traceback: bool, config_file: Path | None) -> None:
    """Root command storing global flags and installing the configuration."""

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not click.core.ParameterSource.DEFAULT:
        explicit = use_dotenv
    if log_config.should_use_dotenv(explicit=explicit, env_value=os.getenv(log_config.DOTENV_ENV_VAR)):
        log_config.enable_dotenv()

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    file_config = log_config.load_config_file(config_file) if config_file is not None else None
    settings = log_config.merge_configs(log_config.load_config(), file_config)
    ctx.ensure_object(dict)
    ctx.obj["config"] = settings

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print the package metadata banner."""

    click.echo(summary_info(), nl=False)


@cli.command("resolve", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("category", required=False)
@_severity_option("--priority", Severity.WARN, "Log threshold used when no configuration applies.")
@_severity_option("--throw-priority", Severity.ERROR, "Throw threshold used when no configuration applies.")
@click.pass_context
def cli_resolve(ctx: click.Context, category: str | None, priority: str, throw_priority: str) -> None:
    """Show the level sets a logger for CATEGORY would start with."""

    logger = _build_logger(ctx, category, priority, throw_priority)
    try:
        click.echo(f"log: {logger.log_levels}")
        click.echo(f"throw: {logger.throw_levels}")
    finally:
        logger.destroy()


@cli.command("emit", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("category")
@click.argument("severity", type=click.Choice(_SEVERITY_CHOICES, case_sensitive=False))
@click.argument("message")
@_severity_option("--priority", Severity.WARN, "Log threshold used when no configuration applies.")
@_severity_option("--throw-priority", Severity.ERROR, "Throw threshold used when no configuration applies.")
@click.pass_context
def cli_emit(
    ctx: click.Context,
    category: str,
    severity: str,
    message: str,
    priority: str,
    throw_priority: str,
) -> None:
    """Send MESSAGE through a CATEGORY logger at SEVERITY.

    ``NONE`` uses the unconditional path. A throwing severity exits with
    status 1 and prints the formatted message.
    """

    logger = _build_logger(ctx, category, priority, throw_priority)
    level = Severity.parse(severity)
    try:
        if level is Severity.NONE:
            logger.log(message)
        else:
            logger.log_if(level, message)
    except ThrowThresholdError as exc:
        raise click.ClickException(f"thrown: {exc.message}") from exc
    finally:
        logger.destroy()


def _build_logger(ctx: click.Context, category: str | None, priority: str, throw_priority: str) -> Logger:
    settings = ctx.obj["config"]
    try:
        return Logger(category, priority, throw_priority, config=settings, sink=_echo_sink)
    except InvalidSeverity as exc:
        raise click.ClickException(f"invalid configuration value: {exc.token!r}") from exc


def _echo_sink(message: str, call_site: CallSite | None = None) -> None:
    click.echo(message)


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Run the CLI and return its exit code.

    Traceback preferences changed by ``--traceback`` are restored afterwards
    when ``restore_traceback`` is true.
    """

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main"]
