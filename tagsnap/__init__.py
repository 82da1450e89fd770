"""
tagsnap - Record a project's source files at every release tag.

tagsnap walks the release tags of a source repository, copies a fixed set
of files out of each tag into a separate tracking repository, and commits
them there. `git log -p` on the tracking repository then shows how those
files changed from release to release.

Quick Start:
    from tagsnap import CollectService, select_tags

    service = CollectService()
    tags = select_tags(service.tag_service.version_tags(), start_from="v0.1.5", limit=3)
    for progress in service.collect(tags):
        print(progress)

    print(service.last_result.to_dict())

Domain Objects:
    SourceFileSpec - A tracked file and where its copy goes
    ExtractionResult - Extracted and missing files for one tag
    RunSummary - Per-tag outcomes of a run

Services:
    CollectService - The per-tag loop
    TagService - Version tag enumeration
    CommitHistoryLedger / ProcessedSetLedger - "Already recorded?" checks
"""

__version__ = "0.1.0"

from .domain import (
    SourceFileSpec,
    SOURCE_FILES,
    FileOutcome,
    ExtractionResult,
    RunSummary,
    TagResult,
    TagStatus,
    build_commit_message,
)

from .services import (
    CollectService,
    TagService,
    select_tags,
    CommitHistoryLedger,
    ProcessedSetLedger,
)

from .config import load_config

__all__ = [
    "__version__",
    "SourceFileSpec",
    "SOURCE_FILES",
    "FileOutcome",
    "ExtractionResult",
    "RunSummary",
    "TagResult",
    "TagStatus",
    "build_commit_message",
    "CollectService",
    "TagService",
    "select_tags",
    "CommitHistoryLedger",
    "ProcessedSetLedger",
    "load_config",
]
