"""
Collection service for tagsnap.

Drives the per-tag loop: ledger check, checkout, extraction and commit,
one tag at a time and strictly in order. Used by the `tagsnap` command.
"""

import logging
from typing import Dict, Any, Generator, Optional, Sequence

from ..config import load_config, source_repo_path, tracking_repo_path
from ..domain.operation import RunSummary, TagResult, TagStatus
from ..domain.source_file import SourceFileSpec
from ..infra.git_client import GitClient
from .checkout import CheckoutController
from .extractor import FileExtractor
from .ledger import ProcessedLedger, create_ledger
from .recorder import CommitOutcome, CommitRecorder
from .tag_service import TagService

logger = logging.getLogger(__name__)


class CollectService:
    """
    Service that records tracked files for each release tag.

    A failure on one tag is logged and the loop moves on to the next.
    Whatever happens inside the loop, the source repository is switched
    back to its primary branch afterwards.

    Example:
        service = CollectService()
        tags = select_tags(service.tag_service.version_tags(), start_from="v0.1.5", limit=3)

        for progress in service.collect(tags):
            print(progress)  # "[1/3] Processing v0.1.5..."

        result = service.last_result
        print(f"Committed {result.committed} tags")
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        git_client: Optional[GitClient] = None,
        ledger: Optional[ProcessedLedger] = None,
        files: Optional[Sequence[SourceFileSpec]] = None
    ):
        """
        Initialize CollectService.

        Args:
            config: Configuration dict (loads default if None)
            git_client: GitClient instance (creates new if None)
            ledger: Progress ledger (built from config if None)
            files: Tracked files (the built-in set if None)
        """
        self.config = config or load_config()
        self.git = git_client or GitClient()
        self.source_path = source_repo_path(self.config)
        self.tracking_path = tracking_repo_path(self.config)

        self.tag_service = TagService(self.source_path, git_client=self.git)
        self.ledger = ledger or create_ledger(self.config, git_client=self.git)
        self.checkout = CheckoutController(self.source_path, git_client=self.git)
        self.extractor = FileExtractor(self.source_path, self.tracking_path, files=files)
        self.recorder = CommitRecorder(self.tracking_path, git_client=self.git)

        self.last_result: Optional[RunSummary] = None

    def collect(self, tags: Sequence[str]) -> Generator[str, None, RunSummary]:
        """
        Process ``tags`` in order.

        Yields:
            Progress messages

        Returns:
            RunSummary with one TagResult per tag
        """
        result = RunSummary()
        self.last_result = result
        total = len(tags)

        try:
            for index, tag in enumerate(tags, start=1):
                yield f"[{index}/{total}] Processing {tag}..."

                if self.ledger.is_processed(tag):
                    yield "  ⊘ Skipping (already processed)"
                    yield ""
                    result.add(TagResult(tag=tag, status=TagStatus.SKIPPED))
                    continue

                try:
                    detail = yield from self._process_tag(tag)
                except Exception as e:
                    logger.error(f"Error processing {tag}: {e}")
                    detail = TagResult(tag=tag, status=TagStatus.FAILED, error=str(e))

                result.add(detail)
                yield ""
        finally:
            self.checkout.restore()

        return result

    def _process_tag(self, tag: str) -> Generator[str, None, TagResult]:
        """Checkout, extract and commit a single tag."""
        self.checkout.checkout(tag)

        extraction = self.extractor.extract()
        if extraction.extracted:
            yield f"  ✓ Extracted: {', '.join(extraction.extracted)}"
        if extraction.missing:
            yield f"  ⚠ Missing: {', '.join(extraction.missing)}"

        outcome = self.recorder.record(tag, extraction.extracted, extraction.missing)
        detail = TagResult(
            tag=tag,
            status=TagStatus.UNCHANGED,
            extracted=extraction.extracted,
            missing=extraction.missing,
        )

        if outcome == CommitOutcome.NO_CHANGES:
            yield "  No changes to commit"
        elif outcome == CommitOutcome.COMMITTED:
            self.ledger.mark_processed(tag)
            detail.status = TagStatus.COMMITTED
            yield "  ✓ Committed changes"
        else:
            detail.status = TagStatus.FAILED
            detail.error = self.recorder.last_error
            yield "  ✗ Failed to commit"

        return detail
