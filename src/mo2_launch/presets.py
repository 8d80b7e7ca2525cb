"""Ready-made builders for common tools launched through MO2."""

from __future__ import annotations

from mo2_launch.command import CommandBuilder, StrPath

XEDIT_CLEAN_FLAGS = ("-qac", "-autoexit", "-autoload")


def xedit_clean_command(
    mo2_path: StrPath,
    xedit_path: StrPath,
    plugin: str,
    *,
    game_flag: str | None = None,
) -> CommandBuilder:
    """Build an xEdit quick-auto-clean run for one plugin.

    The plugin name is wrapped in literal quotes so names with spaces survive
    xEdit's own parsing once MO2 unpacks the ``-a`` value.
    """

    plugin_name = plugin.strip()
    if not plugin_name:
        raise ValueError("Plugin name for xEdit cleaning must not be empty.")

    builder = CommandBuilder(mo2_path, xedit_path)
    if game_flag:
        builder.add_argument(game_flag)
    return builder.add_arguments(XEDIT_CLEAN_FLAGS).add_argument(f'"{plugin_name}"')
