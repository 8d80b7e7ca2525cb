"""CLI entrypoint for mo2-launch."""

import sys
from collections.abc import Callable
from functools import wraps
from typing import Any

import rich_click as click

from mo2_launch import __version__
from mo2_launch.config import Settings, parse_log_level
from mo2_launch.controllers import (
    CleanPluginCommand,
    LaunchCliController,
    LaunchCommand,
    LaunchOutcome,
)
from mo2_launch.launcher import LaunchError
from mo2_launch.logging_utils import configure_logging

click.rich_click.USE_MARKDOWN = True
LAUNCH_CONTROLLER = LaunchCliController()
_PASSTHROUGH = {"ignore_unknown_options": True}


def _config_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (ValueError, LaunchError) as error:
            raise click.ClickException(str(error)) from error

    return wrapper


def _mo2_path_option(func: Callable[..., Any]) -> Callable[..., Any]:
    return click.option(
        "--mo2-path",
        default=None,
        help="Path to ModOrganizer.exe. If omitted, MO2_LAUNCH_MO2_PATH is used.",
    )(func)


@click.group()
@click.version_option(version=__version__, prog_name="mo2-launch")
@click.option(
    "--log-level",
    default=None,
    help="Log level (DEBUG, INFO, WARNING, ...). If omitted, MO2_LAUNCH_LOG_LEVEL is used.",
)
@_config_errors
def mo2_launch(log_level: str | None) -> None:
    """Build and run `ModOrganizer.exe run` command lines.

    Arguments for the launched program go after `--`, for example
    `mo2-launch render --mo2-path MO2.exe xedit64.exe -- -sse -autoexit`.
    """

    level = log_level or Settings.from_env().log_level
    configure_logging(parse_log_level(level))


@mo2_launch.command("render", context_settings=_PASSTHROUGH)
@_mo2_path_option
@click.argument("target")
@click.argument("arguments", nargs=-1, type=click.UNPROCESSED)
@_config_errors
def render(mo2_path: str | None, target: str, arguments: tuple[str, ...]) -> None:
    """Print the quoted MO2 command line."""

    _emit_lines(
        LAUNCH_CONTROLLER.render(
            LaunchCommand(mo2_path=mo2_path, target=target, arguments=arguments),
        ),
    )


@mo2_launch.command("argv", context_settings=_PASSTHROUGH)
@_mo2_path_option
@click.argument("target")
@click.argument("arguments", nargs=-1, type=click.UNPROCESSED)
@_config_errors
def argv(mo2_path: str | None, target: str, arguments: tuple[str, ...]) -> None:
    """Print the process argument vector, one token per line."""

    _emit_lines(
        LAUNCH_CONTROLLER.argv(
            LaunchCommand(mo2_path=mo2_path, target=target, arguments=arguments),
        ),
    )


@mo2_launch.command("run", context_settings=_PASSTHROUGH)
@_mo2_path_option
@click.option(
    "--dry-run/--no-dry-run",
    default=None,
    help=(
        "Print the command line without starting MO2. "
        "If omitted, MO2_LAUNCH_DRY_RUN is used."
    ),
)
@click.argument("target")
@click.argument("arguments", nargs=-1, type=click.UNPROCESSED)
@_config_errors
def run(
    mo2_path: str | None,
    dry_run: bool | None,
    target: str,
    arguments: tuple[str, ...],
) -> None:
    """Run a program through MO2 and exit with MO2's exit code."""

    _finish(
        LAUNCH_CONTROLLER.run(
            LaunchCommand(
                mo2_path=mo2_path,
                target=target,
                arguments=arguments,
                dry_run=dry_run,
            ),
        ),
    )


@mo2_launch.command("clean")
@_mo2_path_option
@click.option(
    "--xedit-path",
    default=None,
    help="Path to xEdit (SSEEdit64.exe, ...). If omitted, MO2_LAUNCH_XEDIT_PATH is used.",
)
@click.option(
    "--game-flag",
    default=None,
    help="xEdit game mode flag such as -sse. If omitted, MO2_LAUNCH_GAME_FLAG is used.",
)
@click.option(
    "--dry-run/--no-dry-run",
    default=None,
    help=(
        "Print the command line without starting MO2. "
        "If omitted, MO2_LAUNCH_DRY_RUN is used."
    ),
)
@click.argument("plugin")
@_config_errors
def clean(
    mo2_path: str | None,
    xedit_path: str | None,
    game_flag: str | None,
    dry_run: bool | None,
    plugin: str,
) -> None:
    """Quick-auto-clean one plugin with xEdit through MO2."""

    _finish(
        LAUNCH_CONTROLLER.clean(
            CleanPluginCommand(
                mo2_path=mo2_path,
                xedit_path=xedit_path,
                plugin=plugin,
                game_flag=game_flag,
                dry_run=dry_run,
            ),
        ),
    )


def _finish(outcome: LaunchOutcome) -> None:
    _emit_lines(outcome.lines)
    if outcome.exit_code != 0:
        sys.exit(outcome.exit_code)


def _emit_lines(lines: list[str]) -> None:
    for line in lines:
        click.echo(line)


if __name__ == "__main__":  # pragma: no cover
    mo2_launch()
