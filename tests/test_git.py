"""Tests for reading staged changes from git."""

import subprocess

import pytest
from unittest.mock import patch

from commit_scribe.core.errors import GitError
from commit_scribe.git import DEFAULT_EXCLUDES, get_staged_diff


def completed(returncode=0, stdout="", stderr=""):
    return subprocess.CompletedProcess(args=["git"], returncode=returncode, stdout=stdout, stderr=stderr)


class TestGetStagedDiff:
    """Tests for get_staged_diff."""

    def test_returns_diff(self, sample_diff):
        with patch("commit_scribe.git.subprocess.run", return_value=completed(stdout=sample_diff)) as run:
            diff = get_staged_diff("/repo")

        assert diff == sample_diff
        args = run.call_args.args[0]
        assert args[:4] == ["git", "diff", "--staged", "--"]
        assert run.call_args.kwargs["cwd"] == "/repo"

    def test_lock_files_are_excluded(self):
        with patch("commit_scribe.git.subprocess.run", return_value=completed()) as run:
            get_staged_diff()

        args = run.call_args.args[0]
        for pattern in DEFAULT_EXCLUDES:
            assert f":(exclude){pattern}" in args

    def test_git_failure(self):
        failure = completed(returncode=128, stderr="fatal: not a git repository\n")
        with patch("commit_scribe.git.subprocess.run", return_value=failure):
            with pytest.raises(GitError) as exc_info:
                get_staged_diff()

        assert "not a git repository" in str(exc_info.value)

    def test_git_missing(self):
        with patch("commit_scribe.git.subprocess.run", side_effect=FileNotFoundError("git")):
            with pytest.raises(GitError) as exc_info:
                get_staged_diff()

        assert isinstance(exc_info.value.cause, FileNotFoundError)
