"""Unit tests for diffall.api.tool.resolve_diff_tool and DiffTool."""

import pytest

from diffall.api.config.DiffallConfig import DiffallConfig
from diffall.api.endpoint.UsageError import UsageError
from diffall.api.tool import DiffTool, resolve_diff_tool


class TestDiffToolCommand:
    def test_placeholders_are_substituted(self):
        tool = DiffTool(name="vscode", argv=("code", "--wait", "--diff", "$LOCAL", "$REMOTE"))
        assert tool.command("cmt-abc", "working_tree") == ["code", "--wait", "--diff", "cmt-abc", "working_tree"]

    def test_directories_appended_without_placeholders(self):
        tool = DiffTool(name="meld", argv=("meld",))
        assert tool.command("l", "r") == ["meld", "l", "r"]

    def test_custom_command_is_literal(self):
        """A custom command containing $LOCAL still gets both directories appended."""
        tool = DiffTool(name="echo", argv=("echo", "$LOCAL"), placeholders=False)
        assert tool.command("l", "r") == ["echo", "$LOCAL", "l", "r"]

    def test_shell_command_is_returned_as_string(self):
        tool = DiffTool(name="mine", shell_command='mine "$LOCAL" "$REMOTE"')
        assert tool.command("l", "r") == 'mine "$LOCAL" "$REMOTE"'

    @pytest.mark.parametrize(
        "kwargs",
        [{}, {"argv": ("a",), "shell_command": "a"}, {"argv": ()}],
    )
    def test_invalid_definitions(self, kwargs):
        with pytest.raises(ValueError):
            DiffTool(name="bad", **kwargs)


class TestResolveDiffTool:
    def test_extcmd_argument_wins(self, fake_git):
        fake_git.config = {"diff.tool": "meld"}
        config = DiffallConfig(tool="kdiff3", extcmd="configured")

        tool = resolve_diff_tool(fake_git, config, extcmd="my-diff --flag 'two words'", tool="bc")

        assert tool.argv == ("my-diff", "--flag", "two words")
        assert tool.placeholders is False
        fake_git.config_get.assert_not_called()

    def test_extcmd_needs_no_tool_configuration(self, fake_git):
        tool = resolve_diff_tool(fake_git, DiffallConfig(), extcmd="customcmd")

        assert tool.command("left", "right") == ["customcmd", "left", "right"]

    def test_tool_argument_beats_config_extcmd(self, fake_git):
        tool = resolve_diff_tool(fake_git, DiffallConfig(extcmd="configured"), tool="meld")
        assert tool.argv == ("meld", "$LOCAL", "$REMOTE")

    def test_config_extcmd_used_before_git_config(self, fake_git):
        fake_git.config = {"diff.tool": "meld"}
        tool = resolve_diff_tool(fake_git, DiffallConfig(extcmd="configured -r"), None, None)
        assert tool.argv == ("configured", "-r")

    def test_config_tool_before_git_config(self, fake_git):
        fake_git.config = {"diff.tool": "meld"}
        tool = resolve_diff_tool(fake_git, DiffallConfig(tool="kompare"))
        assert tool.name == "kompare"

    def test_diff_tool_then_merge_tool(self, fake_git):
        fake_git.config = {"merge.tool": "kdiff3"}
        assert resolve_diff_tool(fake_git, DiffallConfig()).name == "kdiff3"

        fake_git.config = {"diff.tool": "tkdiff", "merge.tool": "kdiff3"}
        assert resolve_diff_tool(fake_git, DiffallConfig()).name == "tkdiff"

    def test_no_tool_configured(self, fake_git):
        with pytest.raises(UsageError, match="No default diff tool"):
            resolve_diff_tool(fake_git, DiffallConfig())

    def test_difftool_cmd_runs_through_shell(self, fake_git):
        fake_git.config = {"diff.tool": "mine", "difftool.mine.cmd": 'mine --dirs "$LOCAL" "$REMOTE"'}

        tool = resolve_diff_tool(fake_git, DiffallConfig())

        assert tool.shell_command == 'mine --dirs "$LOCAL" "$REMOTE"'
        assert tool.argv is None

    def test_difftool_cmd_overrides_built_in_entry(self, fake_git):
        fake_git.config = {"diff.tool": "meld", "difftool.meld.cmd": 'meld --diff "$LOCAL" "$REMOTE"'}

        tool = resolve_diff_tool(fake_git, DiffallConfig())

        assert tool.shell_command == 'meld --diff "$LOCAL" "$REMOTE"'
        assert tool.argv is None

    def test_known_tool_honours_path(self, fake_git):
        fake_git.config = {"diff.tool": "bc", "difftool.bc.path": "/opt/bc/bcompare"}

        tool = resolve_diff_tool(fake_git, DiffallConfig())

        assert tool.command("l", "r") == ["/opt/bc/bcompare", "l", "r"]

    def test_unknown_tool_runs_by_name(self, fake_git):
        fake_git.config = {"diff.tool": "fancydiff"}
        assert resolve_diff_tool(fake_git, DiffallConfig()).command("l", "r") == ["fancydiff", "l", "r"]

    def test_unparseable_extcmd(self, fake_git):
        with pytest.raises(UsageError, match="Cannot parse"):
            resolve_diff_tool(fake_git, DiffallConfig(), extcmd="diff 'unterminated")
