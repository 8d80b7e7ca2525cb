"""Build Mod Organizer 2 ``run`` command lines for third-party tools."""

from mo2_launch.command import (
    CommandBuilder,
    LaunchInvocation,
    escape_for_mo2_args,
    quote_path,
)
from mo2_launch.presets import xedit_clean_command

__version__ = "0.1.0"

__all__ = [
    "CommandBuilder",
    "LaunchInvocation",
    "__version__",
    "escape_for_mo2_args",
    "quote_path",
    "xedit_clean_command",
]
