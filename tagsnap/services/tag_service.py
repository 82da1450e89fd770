"""
Tag service for tagsnap.

Enumerates release tags of the source repository and narrows them down
to the slice a run should process.
"""

import logging
import subprocess
from pathlib import Path
from typing import List, Optional

from ..exit_codes import TagEnumerationError, TagNotFoundError
from ..infra.git_client import GitClient

logger = logging.getLogger(__name__)

VERSION_TAG_PREFIX = "v0."


class TagService:
    """
    Lists version tags of the source repository.

    Tags are re-read from git on every call; nothing is cached.

    Example:
        service = TagService(Path("~/src/gemini-cli").expanduser())
        tags = service.version_tags()
        tags = select_tags(tags, start_from="v0.1.5", limit=3)
    """

    def __init__(self, repo_path: Path, git_client: Optional[GitClient] = None):
        self.repo_path = repo_path
        self.git = git_client or GitClient()

    def version_tags(self) -> List[str]:
        """
        Return version tags, oldest first.

        Raises:
            TagEnumerationError: if the repository's tags cannot be listed
        """
        try:
            tags = self.git.tags(str(self.repo_path))
        except (subprocess.CalledProcessError, OSError) as e:
            detail = getattr(e, 'stderr', None) or str(e)
            raise TagEnumerationError(
                f"Could not list tags in {self.repo_path}: {detail.strip()}"
            ) from e

        version_tags = [tag for tag in tags if tag.startswith(VERSION_TAG_PREFIX)]
        logger.debug(f"{len(version_tags)} of {len(tags)} tags match {VERSION_TAG_PREFIX}*")
        return version_tags


def select_tags(
    tags: List[str],
    start_from: Optional[str] = None,
    limit: Optional[int] = None
) -> List[str]:
    """
    Narrow an ordered tag list for one run.

    Args:
        tags: Tags in enumeration order
        start_from: Drop every tag before this one (inclusive start)
        limit: Keep at most this many tags, applied after start_from

    Returns:
        A slice of ``tags`` in the same relative order

    Raises:
        TagNotFoundError: if start_from is not in ``tags``
    """
    selected = list(tags)

    if start_from:
        try:
            start_index = selected.index(start_from)
        except ValueError:
            raise TagNotFoundError(start_from) from None
        selected = selected[start_index:]

    if limit is not None:
        selected = selected[:limit]

    return selected
