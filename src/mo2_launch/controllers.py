"""Controllers for mo2-launch CLI commands."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from mo2_launch.command import CommandBuilder
from mo2_launch.config import Settings
from mo2_launch.launcher import Mo2Launcher
from mo2_launch.presets import xedit_clean_command

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LaunchCommand:
    """CLI input for render/argv/run commands."""

    mo2_path: str | None
    target: str
    arguments: tuple[str, ...]
    dry_run: bool | None = None


@dataclass(slots=True)
class CleanPluginCommand:
    """CLI input for xEdit plugin cleaning."""

    mo2_path: str | None
    xedit_path: str | None
    plugin: str
    game_flag: str | None
    dry_run: bool | None = None


@dataclass(slots=True)
class LaunchOutcome:
    """Launch report to render in CLI."""

    lines: list[str]
    exit_code: int


class LaunchCliController:
    """Coordinates builder construction, rendering, and launching."""

    def __init__(self, launcher: Mo2Launcher | None = None) -> None:
        self._launcher = launcher or Mo2Launcher()

    def render(self, command: LaunchCommand) -> list[str]:
        return [_build(command).render_string()]

    def argv(self, command: LaunchCommand) -> list[str]:
        return _build(command).to_invocation().argv

    def run(self, command: LaunchCommand) -> LaunchOutcome:
        settings = Settings.from_env()
        return self._launch(
            _build(command, settings),
            dry_run=settings.resolve_dry_run(command.dry_run),
        )

    def clean(self, command: CleanPluginCommand) -> LaunchOutcome:
        settings = Settings.from_env()
        builder = xedit_clean_command(
            settings.resolve_mo2_path(command.mo2_path),
            settings.resolve_xedit_path(command.xedit_path),
            command.plugin,
            game_flag=command.game_flag or settings.game_flag,
        )
        return self._launch(builder, dry_run=settings.resolve_dry_run(command.dry_run))

    def _launch(self, builder: CommandBuilder, *, dry_run: bool) -> LaunchOutcome:
        command_line = builder.render_string()
        if dry_run:
            logger.info("Dry run, not launching: %s", command_line)
            return LaunchOutcome(lines=[command_line], exit_code=0)

        result = self._launcher.launch(builder)
        return LaunchOutcome(
            lines=[command_line, f"MO2 exited: exit_code={result.exit_code}"],
            exit_code=result.exit_code,
        )


def _build(command: LaunchCommand, settings: Settings | None = None) -> CommandBuilder:
    effective = settings or Settings.from_env()
    effective.validate_for_launch(
        mo2_path_override=command.mo2_path,
        target_override=command.target,
    )
    return CommandBuilder(
        effective.resolve_mo2_path(command.mo2_path),
        command.target,
    ).add_arguments(command.arguments)
