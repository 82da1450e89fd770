"""
Commit message format for tagsnap.

The first line of every commit is the marker ``Add metadata for <tag>``.
The commit history ledger greps for exactly this line, so the format
must not change.
"""

from typing import List, Sequence

MARKER_PREFIX = "Add metadata for "

# Characters with special meaning in git's default (basic) regex syntax
_BRE_SPECIAL = set('\\.[]*^$')


def marker_line(tag: str) -> str:
    """First line of the commit recorded for ``tag``."""
    return f"{MARKER_PREFIX}{tag}"


def marker_pattern(tag: str) -> str:
    """
    Pattern for ``git log --grep`` matching the marker line of ``tag``.

    The tag is escaped so that ``v0.1.0`` does not also match ``v0x1y0``,
    and the pattern is anchored at end of line so that ``v0.1.0`` does not
    match ``v0.1.0-preview``.
    """
    escaped = ''.join('\\' + c if c in _BRE_SPECIAL else c for c in tag)
    return f"{MARKER_PREFIX}{escaped}$"


def build_commit_message(tag: str, extracted: Sequence[str], missing: Sequence[str]) -> str:
    """
    Build the commit message for one processed tag.

    Example:
        >>> print(build_commit_message("v0.5.0", ["Core prompts"], ["Tool registry"]))
        Add metadata for v0.5.0
        <BLANKLINE>
        Extracted:
        - Core prompts
        <BLANKLINE>
        Missing:
        - Tool registry
        <BLANKLINE>
    """
    lines: List[str] = [marker_line(tag), "", "Extracted:"]
    lines.extend(f"- {name}" for name in extracted)

    if missing:
        lines.append("")
        lines.append("Missing:")
        lines.extend(f"- {name}" for name in missing)

    return "\n".join(lines) + "\n"
