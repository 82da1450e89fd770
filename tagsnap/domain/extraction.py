"""
Extraction result domain objects for tagsnap.

Each tracked file ends an extraction pass in one of three outcomes.
Commit messages only care about "extracted" versus "missing", so a
file that was absent and a file that could not be read are both
reported as missing; the outcome keeps the two apart for callers that
want to tell them apart.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .source_file import SourceFileSpec


class FileOutcome(Enum):
    """What happened to one tracked file."""
    EXTRACTED = "extracted"
    NOT_FOUND = "not_found"    # Source file absent at this tag
    FAILED = "failed"          # Present but unreadable, or destination unwritable


@dataclass
class FileExtraction:
    """Outcome of copying a single SourceFileSpec."""
    spec: SourceFileSpec
    outcome: FileOutcome
    error: Optional[str] = None


@dataclass
class ExtractionResult:
    """Ordered outcomes of one extraction pass."""
    files: List[FileExtraction] = field(default_factory=list)

    def add(self, spec: SourceFileSpec, outcome: FileOutcome, error: Optional[str] = None) -> None:
        self.files.append(FileExtraction(spec=spec, outcome=outcome, error=error))

    @property
    def extracted(self) -> List[str]:
        """Labels of files copied into the tracking repository."""
        return [f.spec.name for f in self.files if f.outcome == FileOutcome.EXTRACTED]

    @property
    def missing(self) -> List[str]:
        """Labels of files that were not copied, for any reason."""
        return [f.spec.name for f in self.files if f.outcome != FileOutcome.EXTRACTED]
