"""
Git client infrastructure for tagsnap.

Provides a clean abstraction over git command execution.
All git operations go through this client, making them:
- Easy to mock for testing
- Consistent in error handling
- Isolated from business logic
"""

import shlex
import subprocess
from dataclasses import dataclass
from typing import Optional, List, Tuple
import logging

logger = logging.getLogger(__name__)


@dataclass
class GitResult:
    """Captured result of one git invocation."""
    stdout: str
    stderr: str
    returncode: int

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class GitClient:
    """
    Abstraction over git commands.

    Every call runs to completion before returning. No timeout is applied
    unless one is passed explicitly: a stuck git process stalls the run.

    Example:
        client = GitClient()
        for tag in client.tags("/path/to/repo"):
            print(tag)
    """

    def __init__(self, timeout: Optional[float] = None):
        """
        Initialize GitClient.

        Args:
            timeout: Command timeout in seconds (default: None, wait forever)
        """
        self.timeout = timeout

    def _run(
        self,
        cmd: str,
        cwd: str,
        check: bool = False
    ) -> GitResult:
        """
        Run a git command.

        Args:
            cmd: Command to run (arguments already shell-quoted)
            cwd: Working directory
            check: Raise CalledProcessError on failure

        Returns:
            GitResult with stdout, stderr and return code
        """
        logger.debug(f"Running in {cwd}: {cmd}")
        try:
            completed = subprocess.run(
                cmd,
                shell=True,
                cwd=cwd,
                capture_output=True,
                text=True,
                timeout=self.timeout
            )
            result = GitResult(completed.stdout or '', completed.stderr or '', completed.returncode)
        except subprocess.TimeoutExpired as e:
            logger.warning(f"Git command timed out: {cmd}")
            if check:
                raise
            result = GitResult('', str(e), -1)
        except OSError as e:
            logger.error(f"Git command failed: {cmd} - {e}")
            if check:
                raise
            result = GitResult('', str(e), -1)

        if check and not result.ok:
            raise subprocess.CalledProcessError(
                result.returncode,
                cmd,
                output=result.stdout,
                stderr=result.stderr
            )

        return result

    def tags(self, path: str) -> List[str]:
        """
        List all tags, oldest first by creation date.

        Raises:
            CalledProcessError: if git cannot list the tags
        """
        result = self._run("git tag --sort=creatordate", cwd=path, check=True)
        return [line.strip() for line in result.stdout.splitlines() if line.strip()]

    def log_grep(self, path: str, pattern: str) -> Tuple[List[str], bool]:
        """
        Search commit messages with ``git log --grep``.

        Args:
            path: Path to git repository
            pattern: Basic regex matched against each message line (the
                user's grep.patternType setting is overridden)

        Returns:
            Tuple of (matching one-line commits, whether the query succeeded)
        """
        cmd = f"git log --oneline --basic-regexp --grep={shlex.quote(pattern)}"
        result = self._run(cmd, cwd=path)
        if not result.ok:
            return [], False
        return [line for line in result.stdout.splitlines() if line.strip()], True

    def checkout(self, path: str, ref: str) -> None:
        """
        Check out a branch or tag.

        Raises:
            CalledProcessError: if the checkout fails
        """
        self._run(f"git checkout {shlex.quote(ref)}", cwd=path, check=True)

    def status_porcelain(self, path: str) -> List[str]:
        """
        Get ``git status --porcelain`` lines.

        Raises:
            CalledProcessError: if status cannot be read
        """
        result = self._run("git status --porcelain", cwd=path, check=True)
        return [line for line in result.stdout.splitlines() if line.strip()]

    def has_uncommitted_changes(self, path: str) -> bool:
        """Check if repo has added, modified, deleted or untracked files."""
        return bool(self.status_porcelain(path))

    def add_all(self, path: str) -> None:
        """Stage every change in the working tree."""
        self._run("git add .", cwd=path, check=True)

    def commit(self, path: str, message: str) -> str:
        """
        Commit staged changes.

        Returns:
            Git's commit output

        Raises:
            CalledProcessError: if the commit fails
        """
        result = self._run(f"git commit -m {shlex.quote(message)}", cwd=path, check=True)
        return result.stdout.strip()
