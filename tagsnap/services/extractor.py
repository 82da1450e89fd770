"""
File extractor for tagsnap.

Copies the tracked files from the source repository's current checkout
into the tracking repository.
"""

import logging
from pathlib import Path
from typing import Optional, Sequence

from ..domain.extraction import ExtractionResult, FileOutcome
from ..domain.source_file import SourceFileSpec, SOURCE_FILES

logger = logging.getLogger(__name__)

ENCODING = 'utf-8'


class FileExtractor:
    """
    Copies each SourceFileSpec from the source to the tracking repository.

    Content is read and written as UTF-8 with newline translation
    disabled, so a copied file is byte-identical to its source. Writes
    are not atomic: a failed write can leave a truncated destination.

    Example:
        extractor = FileExtractor(source_root, tracking_root)
        result = extractor.extract()
        print(result.extracted, result.missing)
    """

    def __init__(
        self,
        source_root: Path,
        target_root: Path,
        files: Optional[Sequence[SourceFileSpec]] = None
    ):
        self.source_root = source_root
        self.target_root = target_root
        self.files = tuple(files) if files is not None else SOURCE_FILES

    def extract(self) -> ExtractionResult:
        """Copy every tracked file present at the current checkout."""
        result = ExtractionResult()

        for spec in self.files:
            source_path = self.source_root / spec.source_path
            target_path = self.target_root / spec.target_path

            try:
                with open(source_path, 'r', encoding=ENCODING, newline='') as f:
                    content = f.read()

                target_path.parent.mkdir(parents=True, exist_ok=True)
                with open(target_path, 'w', encoding=ENCODING, newline='') as f:
                    f.write(content)
            except FileNotFoundError:
                result.add(spec, FileOutcome.NOT_FOUND)
                continue
            except (OSError, UnicodeError) as e:
                logger.debug(f"Could not copy {spec.source_path}: {e}")
                result.add(spec, FileOutcome.FAILED, error=str(e))
                continue

            result.add(spec, FileOutcome.EXTRACTED)

        return result
