"""
Progress ledger for tagsnap.

Answers "has this tag already been recorded?" so that reruns skip work
that is already done. Two backends share one interface:

- CommitHistoryLedger reads the answer out of the tracking repository's
  commit messages. It is the default, and needs no extra state.
- ProcessedSetLedger keeps an explicit JSON set of processed tags next
  to the user's tagsnap settings, outside the tracking repository.
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from ..config import tracking_repo_path
from ..domain.commit_message import marker_pattern
from ..infra.file_store import FileStore
from ..infra.git_client import GitClient

logger = logging.getLogger(__name__)


class ProcessedLedger(ABC):
    """Records which tags a previous run has already committed."""

    @abstractmethod
    def is_processed(self, tag: str) -> bool:
        """True if ``tag`` was recorded by an earlier run."""

    @abstractmethod
    def mark_processed(self, tag: str) -> None:
        """Remember that a commit was recorded for ``tag``."""


class CommitHistoryLedger(ProcessedLedger):
    """
    Ledger backed by the tracking repository's commit messages.

    A tag counts as processed when some commit carries the line
    ``Add metadata for <tag>``. If git cannot answer (for instance the
    repository has no commits yet) the tag counts as not processed.
    """

    def __init__(self, repo_path: Path, git_client: Optional[GitClient] = None):
        self.repo_path = repo_path
        self.git = git_client or GitClient()

    def is_processed(self, tag: str) -> bool:
        matches, ok = self.git.log_grep(str(self.repo_path), marker_pattern(tag))
        if not ok:
            logger.debug(f"Commit history query failed in {self.repo_path}; treating {tag} as new")
            return False
        return len(matches) > 0

    def mark_processed(self, tag: str) -> None:
        # The marker commit itself is the record.
        pass


class ProcessedSetLedger(ProcessedLedger):
    """Ledger backed by a JSON file mapping tag -> processing metadata."""

    def __init__(self, store: FileStore):
        self.store = store

    def is_processed(self, tag: str) -> bool:
        return tag in self.store

    def mark_processed(self, tag: str) -> None:
        self.store.set(tag, {'processed_at': datetime.now().isoformat(timespec='seconds')})


def create_ledger(config: Dict[str, Any], git_client: Optional[GitClient] = None) -> ProcessedLedger:
    """Build the ledger selected by ``config['ledger']['backend']``."""
    ledger_config = config.get('ledger', {})
    backend = ledger_config.get('backend', 'history')

    if backend == 'file':
        path = Path(ledger_config.get('path', '~/.tagsnap/processed.json')).expanduser()
        logger.debug(f"Using processed-set ledger at {path}")
        return ProcessedSetLedger(FileStore(path))

    return CommitHistoryLedger(tracking_repo_path(config), git_client=git_client)
