"""Command builder for programs launched through ``ModOrganizer.exe run``."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass

StrPath = str | os.PathLike[str]

_RUN_VERB = "run"
_ARGS_FLAG = "-a"


@dataclass(frozen=True, slots=True)
class LaunchInvocation:
    """Launcher executable plus the argument vector handed to it."""

    executable: str
    args: tuple[str, ...]

    @property
    def argv(self) -> list[str]:
        return [self.executable, *self.args]


class CommandBuilder:
    """Accumulate a MO2 launch and render it as a string or an argument vector.

    ``render_string`` produces the single-line form used for logging, dry runs
    and shells that re-parse a command line::

        "<mo2>" run "<program>" -a "<args>"

    ``render_process_args`` produces the pre-split vector for ``subprocess``;
    it needs no quoting at all and is the form to use when spawning.
    """

    __slots__ = ("_arguments", "_launcher_path", "_target_path")

    def __init__(self, launcher_path: StrPath, target_path: StrPath) -> None:
        self._launcher_path = os.fspath(launcher_path)
        self._target_path = os.fspath(target_path)
        self._arguments: list[str] = []

    @property
    def launcher_path(self) -> str:
        return self._launcher_path

    @property
    def target_path(self) -> str:
        return self._target_path

    @property
    def arguments(self) -> tuple[str, ...]:
        return tuple(self._arguments)

    def add_argument(self, token: str) -> CommandBuilder:
        """Append one argument for the launched program."""
        self._arguments.append(token)
        return self

    def add_arguments(self, tokens: Iterable[str]) -> CommandBuilder:
        """Append several arguments, keeping their order."""
        for token in tokens:
            self.add_argument(token)
        return self

    def render_string(self) -> str:
        """Render the display command line.

        Quotes inside the joined arguments are backslash-escaped so MO2 does
        not end the ``-a`` value early. Paths are quoted but not escaped.
        """
        head = f"{quote_path(self._launcher_path)} {_RUN_VERB} {quote_path(self._target_path)}"
        if not self._arguments:
            return head
        escaped_args = escape_for_mo2_args(self._joined_arguments())
        return f'{head} {_ARGS_FLAG} "{escaped_args}"'

    def render_process_args(self) -> list[str]:
        """Render launcher arguments for direct process creation.

        The launcher path is not included; it is the executable.
        """
        args = [_RUN_VERB, self._target_path]
        if self._arguments:
            args.extend((_ARGS_FLAG, self._joined_arguments()))
        return args

    def to_invocation(self) -> LaunchInvocation:
        return LaunchInvocation(
            executable=self._launcher_path,
            args=tuple(self.render_process_args()),
        )

    def _joined_arguments(self) -> str:
        return " ".join(self._arguments)

    def __str__(self) -> str:
        return self.render_string()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(launcher_path={self._launcher_path!r}, "
            f"target_path={self._target_path!r}, arguments={self._arguments!r})"
        )


def quote_path(path: StrPath) -> str:
    """Wrap a path in double quotes for the Windows command line."""
    return f'"{os.fspath(path)}"'


def escape_for_mo2_args(args: str) -> str:
    """Escape double quotes for embedding inside MO2's quoted ``-a`` value.

    Only ``"`` is escaped; backslashes pass through unchanged.
    """
    return args.replace('"', '\\"')
