import logging
import subprocess
from pathlib import Path

from commit_scribe.core.errors import GitError

logger = logging.getLogger(__name__)

DEFAULT_EXCLUDES = ("package-lock.json", "yarn.lock", "pnpm-lock.yaml", "poetry.lock", "uv.lock")


def _run_git(args: list[str], repo_path: str | Path) -> str:
    try:
        res = subprocess.run(
            ["git", *args],
            cwd=repo_path,
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError as e:
        raise GitError("git executable not found", cause=e) from e
    if res.returncode != 0:
        raise GitError(res.stderr.strip() or f"git {' '.join(args)} failed")
    return res.stdout


def get_staged_diff(
    repo_path: str | Path = ".",
    excludes: tuple[str, ...] = DEFAULT_EXCLUDES,
) -> str:
    """Return the unified diff of staged changes, skipping lock files."""
    pathspecs = [f":(exclude){pattern}" for pattern in excludes]
    diff = _run_git(["diff", "--staged", "--", ".", *pathspecs], repo_path)
    logger.debug(f"Read {len(diff)} characters of staged diff from {repo_path}")
    return diff
