"""
Source file domain object for tagsnap.

A SourceFileSpec says where a tracked file lives in the source
repository, where its copy goes in the tracking repository, and how it
is named in commit messages. The set is fixed for the process lifetime.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class SourceFileSpec:
    """
    One file tracked across releases.

    Attributes:
        source_path: Path relative to the source repository root
        target_path: Path relative to the tracking repository root
        name: Human-readable label used in commit messages
    """

    source_path: str
    target_path: str
    name: str


SOURCE_FILES: Tuple[SourceFileSpec, ...] = (
    SourceFileSpec(
        source_path='packages/core/src/core/prompts.ts',
        target_path='prompts/prompts.ts',
        name='Core prompts',
    ),
    SourceFileSpec(
        source_path='packages/core/src/tools/tool-registry.ts',
        target_path='tools/tool-registry.ts',
        name='Tool registry',
    ),
)
