#!/usr/bin/env python3

import logging
import sys
from typing import Optional

import click
from rich.console import Console

from tagsnap.config import load_config, configure_logging, source_repo_path
from tagsnap.exit_codes import CommandError, INTERRUPTED, get_exit_code_for_exception
from tagsnap.services.collect_service import CollectService
from tagsnap.services.tag_service import VERSION_TAG_PREFIX, select_tags

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)


def _echo(message: str) -> None:
    """Print a progress line verbatim (tags may look like rich markup)."""
    console.print(message, markup=False, highlight=False, soft_wrap=True)


def run_collection(config, start_from: Optional[str], limit: Optional[int]) -> None:
    """Enumerate, select and process tags, printing progress as it goes."""
    service = CollectService(config=config)

    _echo(f"🔍 Collecting tracked files from {source_repo_path(config)}...\n")

    all_tags = service.tag_service.version_tags()
    _echo(f"Found {len(all_tags)} {VERSION_TAG_PREFIX}* tags\n")

    tags = all_tags
    if start_from:
        tags = select_tags(all_tags, start_from=start_from)
        _echo(f"Starting from {start_from} ({len(tags)} tags to process)\n")

    if limit is not None:
        tags = select_tags(tags, limit=limit)
        _echo(f"Limiting to first {limit} tags\n")

    for progress in service.collect(tags):
        _echo(progress)

    console.print("✅ Collection complete!", highlight=False)


@click.command(name='tagsnap')
@click.option('--start-from', 'start_from', metavar='TAG',
              help='Begin at this tag (inclusive); earlier tags are skipped')
@click.option('--limit', type=click.IntRange(min=1), metavar='N',
              help='Process at most N tags in this run')
def cli(start_from: Optional[str], limit: Optional[int]):
    """tagsnap - Record tracked source files for every release tag.

    Checks out each v0.* tag of the source repository (GEMINI_REPO_PATH),
    copies the tracked files into the tracking repository
    (COLLECTION_REPO_PATH) and commits them as "Add metadata for <tag>".
    Tags that already have such a commit are skipped, so reruns resume
    where the last run stopped.

    Examples:

    \b
        tagsnap
        tagsnap --start-from=v0.1.5
        tagsnap --start-from=v0.1.5 --limit=3
    """
    try:
        config = load_config()
        configure_logging(config)
        run_collection(config, start_from, limit)
    except CommandError as e:
        err_console.print(f"❌ {e}", markup=False, highlight=False, soft_wrap=True)
        sys.exit(e.exit_code)
    except KeyboardInterrupt:
        err_console.print("Interrupted", highlight=False)
        sys.exit(INTERRUPTED)
    except Exception as e:
        logger.error(f"Fatal error: {e}")
        sys.exit(get_exit_code_for_exception(e))


def main():
    cli()

if __name__ == "__main__":
    main()
