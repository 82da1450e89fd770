"""
Checkout controller for tagsnap.

Moves the source repository's working tree between release tags and its
primary branch. The working tree is shared state: whatever is checked
out here is what the extractor reads next.
"""

import logging
from pathlib import Path
from typing import Optional

from ..infra.git_client import GitClient

logger = logging.getLogger(__name__)

PRIMARY_BRANCH = "main"


class CheckoutController:
    """Switches the source repository between tags and the primary branch."""

    def __init__(self, repo_path: Path, git_client: Optional[GitClient] = None):
        self.repo_path = repo_path
        self.git = git_client or GitClient()

    def checkout(self, tag: str) -> None:
        """
        Check out ``tag`` (detached HEAD).

        Raises:
            CalledProcessError: e.g. dirty working tree or unknown tag
        """
        logger.debug(f"Checking out {tag} in {self.repo_path}")
        self.git.checkout(str(self.repo_path), tag)

    def restore(self) -> None:
        """Return the source repository to its primary branch."""
        logger.debug(f"Returning {self.repo_path} to {PRIMARY_BRANCH}")
        self.git.checkout(str(self.repo_path), PRIMARY_BRANCH)
