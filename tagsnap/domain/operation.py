"""
Run result domain objects for tagsnap.

Tracks what happened to each tag during a collection run.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Any, List, Optional


class TagStatus(Enum):
    """Status of one tag in a run."""
    COMMITTED = "committed"    # Files changed and a commit was recorded
    UNCHANGED = "unchanged"    # Processed, nothing to commit
    SKIPPED = "skipped"        # Already processed according to the ledger
    FAILED = "failed"          # Checkout, extraction or commit failed


@dataclass
class TagResult:
    """Outcome of processing a single tag."""
    tag: str
    status: TagStatus
    extracted: List[str] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result = {
            'tag': self.tag,
            'status': self.status.value,
            'extracted': self.extracted,
            'missing': self.missing,
        }
        if self.error:
            result['error'] = self.error
        return result


@dataclass
class RunSummary:
    """
    Summary of a collection run across all selected tags.
    """
    total: int = 0
    committed: int = 0
    unchanged: int = 0
    skipped: int = 0
    failed: int = 0
    details: List[TagResult] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """True if no tag failed."""
        return self.failed == 0

    @property
    def processed_tags(self) -> List[str]:
        """Tags that were checked out and extracted, in order."""
        return [d.tag for d in self.details if d.status != TagStatus.SKIPPED]

    def add(self, detail: TagResult) -> None:
        """Add a tag result and update counts."""
        self.details.append(detail)
        self.total += 1

        if detail.status == TagStatus.COMMITTED:
            self.committed += 1
        elif detail.status == TagStatus.UNCHANGED:
            self.unchanged += 1
        elif detail.status == TagStatus.SKIPPED:
            self.skipped += 1
        elif detail.status == TagStatus.FAILED:
            self.failed += 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'type': 'summary',
            'total': self.total,
            'committed': self.committed,
            'unchanged': self.unchanged,
            'skipped': self.skipped,
            'failed': self.failed,
        }
