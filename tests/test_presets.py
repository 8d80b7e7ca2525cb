from __future__ import annotations

import allure
import pytest

from mo2_launch.presets import xedit_clean_command

pytestmark = [
    allure.epic("MO2 Launch"),
    allure.feature("xEdit Presets"),
]

MO2 = r"C:\Modding\MO2\ModOrganizer.exe"
SSEEDIT = r"d:\programs\xedit\SSEEdit64.exe"


def test_xedit_clean_command_quotes_plugin_inside_args_clause() -> None:
    cmd = xedit_clean_command(MO2, SSEEDIT, "MyPlugin.esp")

    assert cmd.render_string() == (
        r'"C:\Modding\MO2\ModOrganizer.exe" run "d:\programs\xedit\SSEEdit64.exe" '
        r'-a "-qac -autoexit -autoload \"MyPlugin.esp\""'
    )
    assert cmd.render_process_args() == [
        "run",
        SSEEDIT,
        "-a",
        '-qac -autoexit -autoload "MyPlugin.esp"',
    ]


def test_xedit_clean_command_prepends_game_flag() -> None:
    cmd = xedit_clean_command(MO2, SSEEDIT, "Unofficial Patch.esp", game_flag="-sse")

    assert cmd.arguments == ("-sse", "-qac", "-autoexit", "-autoload", '"Unofficial Patch.esp"')


def test_xedit_clean_command_returns_extendable_builder() -> None:
    cmd = xedit_clean_command(MO2, SSEEDIT, "MyPlugin.esp")
    cmd.add_argument("-veryquickshowconflicts")

    assert cmd.arguments[-1] == "-veryquickshowconflicts"


@pytest.mark.parametrize("plugin", ["", "   "])
def test_xedit_clean_command_rejects_blank_plugin(plugin: str) -> None:
    with pytest.raises(ValueError, match="Plugin name"):
        xedit_clean_command(MO2, SSEEDIT, plugin)
