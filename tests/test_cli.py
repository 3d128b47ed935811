"""Tests for the command-line interface"""
from pathlib import Path
from unittest.mock import patch

import pytest

from git_prompt_status.cli.args import comma_list, parse_args
from git_prompt_status.cli.main import build_config, main


class TestParseArgs:
    """Test argument parsing."""

    def test_defaults(self):
        args = parse_args([])
        assert args.mode == "fancy"
        assert args.disable_stats == []
        assert args.backend == "gitpython"

    def test_comma_lists(self):
        args = parse_args(["--disable-stats", "stashed,notStaged", "--ignore-repos", "/a, /b"])
        assert args.disable_stats == ["stashed", "notStaged"]
        assert args.ignore_repos == ["/a", "/b"]

    def test_comma_list_drops_empty(self):
        assert comma_list("a,,b,") == ["a", "b"]

    def test_invalid_mode(self):
        with pytest.raises(SystemExit):
            parse_args(["--mode", "loud"])

    def test_build_config(self):
        config = build_config(parse_args(["--mode", "compact", "--no-color", "--max-steps", "10"]))
        assert config.mode == "compact"
        assert config.color is False
        assert config.max_traversal_steps == 10


class TestMain:
    """Test end-to-end rendering."""

    def test_outside_repository(self, temp_dir, capsys):
        """Outside a repository nothing is printed and the exit code is 0."""
        assert main(["--cwd", str(temp_dir), "--no-color"]) == 0
        assert capsys.readouterr().out == ""

    def test_compact_output(self, diverged_repo, capsys):
        (Path(diverged_repo.working_dir) / "new.txt").write_text("new\n")
        code = main(["--cwd", diverged_repo.working_dir, "--mode", "compact", "--ascii", "--no-color"])
        assert code == 0
        assert capsys.readouterr().out == " main 1^ 2v 1+ "

    def test_fancy_output_command_backend(self, tracked_repo, commit, capsys):
        commit(tracked_repo, "a.txt", "a\n")
        code = main(["--cwd", tracked_repo.working_dir, "--ascii", "--no-color", "--backend", "command"])
        assert code == 0
        assert capsys.readouterr().out == " main  1^ "

    def test_disable_stats(self, git_repo, capsys):
        (Path(git_repo.working_dir) / "README.md").write_text("wip\n")
        git_repo.git.stash("push")
        main(["--cwd", git_repo.working_dir, "--ascii", "--no-color", "--disable-stats", "stashed"])
        assert capsys.readouterr().out == " main "

    def test_lite(self, diverged_repo, capsys):
        main(["--cwd", diverged_repo.working_dir, "--ascii", "--no-color", "--lite"])
        assert capsys.readouterr().out == " main "

    def test_ignored_repository(self, git_repo, capsys):
        main(["--cwd", git_repo.working_dir, "--ignore-repos", git_repo.working_dir])
        assert capsys.readouterr().out == ""

    def test_invalid_config(self, capsys):
        """Invalid option values exit with status 2 and a message on stderr."""
        assert main(["--disable-stats", "modified"]) == 2
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "disable_stats" in captured.err

    def test_unexpected_error_swallowed(self, git_repo, capsys):
        """Unexpected failures never break the prompt."""
        with patch("git_prompt_status.cli.main.StatusService.collect", side_effect=RuntimeError("boom")):
            assert main(["--cwd", git_repo.working_dir, "--no-color"]) == 0
        assert capsys.readouterr().out == ""

    def test_colored_output(self, git_repo, capsys):
        main(["--cwd", git_repo.working_dir, "--ascii"])
        out = capsys.readouterr().out
        assert "\x1b[" in out
        assert "main" in out
