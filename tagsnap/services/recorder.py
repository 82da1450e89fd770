"""
Commit recorder for tagsnap.

Commits whatever the extractor changed in the tracking repository.
"""

import logging
import subprocess
from enum import Enum
from pathlib import Path
from typing import Optional, Sequence

from ..domain.commit_message import build_commit_message
from ..infra.git_client import GitClient

logger = logging.getLogger(__name__)


class CommitOutcome(Enum):
    """Result of a record() call."""
    COMMITTED = "committed"
    NO_CHANGES = "no_changes"
    FAILED = "failed"


class CommitRecorder:
    """
    Stages and commits the tracking repository's working tree.

    A failed commit is logged and reported as FAILED rather than raised;
    no marker commit exists for the tag afterwards, so the next run
    picks it up again.
    """

    def __init__(self, repo_path: Path, git_client: Optional[GitClient] = None):
        self.repo_path = repo_path
        self.git = git_client or GitClient()
        self.last_error: Optional[str] = None

    def record(self, tag: str, extracted: Sequence[str], missing: Sequence[str]) -> CommitOutcome:
        """
        Commit pending changes for ``tag``.

        Returns:
            NO_CHANGES when the working tree matches the last commit,
            COMMITTED on success, FAILED when git refused.
        """
        path = str(self.repo_path)
        self.last_error = None

        try:
            if not self.git.has_uncommitted_changes(path):
                return CommitOutcome.NO_CHANGES

            self.git.add_all(path)
            message = build_commit_message(tag, extracted, missing)
            self.git.commit(path, message)
        except (subprocess.CalledProcessError, OSError) as e:
            detail = (getattr(e, 'stderr', None) or str(e)).strip()
            logger.error(f"Failed to commit {tag}: {detail}")
            self.last_error = detail
            return CommitOutcome.FAILED

        return CommitOutcome.COMMITTED
