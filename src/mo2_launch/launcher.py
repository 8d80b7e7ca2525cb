"""Subprocess-based runner for MO2 launch invocations."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable
from dataclasses import dataclass

from mo2_launch.command import CommandBuilder

logger = logging.getLogger(__name__)


class LaunchError(RuntimeError):
    """Launcher spawn error with retryability hint."""

    def __init__(self, message: str, *, transient: bool) -> None:
        super().__init__(message)
        self.transient = transient


@dataclass(slots=True)
class LaunchResult:
    """Outcome of one launcher process."""

    exit_code: int
    command_line: str

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


class Mo2Launcher:
    """Spawn ModOrganizer.exe from a builder's argument vector and wait for it."""

    def __init__(
        self,
        run_process: Callable[..., subprocess.CompletedProcess] = subprocess.run,
    ) -> None:
        self._run_process = run_process

    def launch(self, builder: CommandBuilder) -> LaunchResult:
        invocation = builder.to_invocation()
        command_line = builder.render_string()
        logger.info("Launching through MO2: %s", command_line)

        try:
            completed = self._run_process(  # noqa: S603
                invocation.argv,
                check=False,
            )
        except FileNotFoundError as error:
            raise LaunchError(
                f"MO2 launcher executable not found: {invocation.executable}",
                transient=False,
            ) from error
        except OSError as error:
            raise LaunchError(
                f"MO2 launcher failed to start: {error}",
                transient=True,
            ) from error

        result = LaunchResult(exit_code=completed.returncode, command_line=command_line)
        if result.ok:
            logger.info("MO2 launcher finished: exit_code=%d", result.exit_code)
        else:
            logger.warning("MO2 launcher finished: exit_code=%d", result.exit_code)
        return result
