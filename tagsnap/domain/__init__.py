"""
Domain layer for tagsnap.

Contains pure domain objects with no I/O or side effects:
- SourceFileSpec: A file tracked across releases
- ExtractionResult: What one extraction pass copied or missed
- TagResult / RunSummary: Per-tag and per-run outcomes
- Commit message construction and the ledger marker
"""

from .source_file import SourceFileSpec, SOURCE_FILES
from .extraction import FileOutcome, FileExtraction, ExtractionResult
from .commit_message import build_commit_message, marker_line, marker_pattern
from .operation import TagStatus, TagResult, RunSummary

__all__ = [
    'SourceFileSpec',
    'SOURCE_FILES',
    'FileOutcome',
    'FileExtraction',
    'ExtractionResult',
    'build_commit_message',
    'marker_line',
    'marker_pattern',
    'TagStatus',
    'TagResult',
    'RunSummary',
]
