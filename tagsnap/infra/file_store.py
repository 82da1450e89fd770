"""
File store infrastructure for tagsnap.

Provides JSON file persistence with:
- Atomic writes (write to temp, then rename)
- Pretty formatting for human readability
- Automatic parent directory creation
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)


class FileStore:
    """
    JSON file persistence with atomic writes.

    Not safe for concurrent writers; tagsnap runs one process at a time.

    Example:
        store = FileStore(Path("~/.tagsnap/processed.json"))
        store.set("v0.1.0", {"processed_at": "..."})
        store.has("v0.1.0")
    """

    def __init__(self, path: Path, auto_create: bool = True):
        """
        Initialize FileStore.

        Args:
            path: Path to JSON file
            auto_create: Create file and parent directories if they don't exist
        """
        self.path = Path(path).expanduser().resolve()
        self._cache: Optional[Dict[str, Any]] = None

        if auto_create:
            self._ensure_exists()

    def _ensure_exists(self) -> None:
        """Create file and parent directories if needed."""
        if not self.path.parent.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)

        if not self.path.exists():
            self._write_atomic({})

    def _write_atomic(self, data: Dict[str, Any]) -> None:
        """Write data atomically using temp file and rename."""
        fd, temp_path = tempfile.mkstemp(
            dir=self.path.parent,
            prefix=f".{self.path.name}.",
            suffix=".tmp"
        )

        try:
            with os.fdopen(fd, 'w') as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
                f.write('\n')

            os.replace(temp_path, self.path)

        except Exception:
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            raise

    def read(self) -> Dict[str, Any]:
        """
        Read entire store.

        A missing or corrupt file reads as empty.
        """
        if self._cache is not None:
            return self._cache.copy()

        try:
            if self.path.exists():
                with open(self.path, 'r') as f:
                    self._cache = json.load(f)
                    return self._cache.copy()
        except (json.JSONDecodeError, IOError) as e:
            logger.warning(f"Error reading {self.path}: {e}")

        self._cache = {}
        return {}

    def set(self, key: str, value: Any) -> None:
        """
        Set single value and persist immediately.

        Args:
            key: Key to set
            value: Value to store
        """
        data = self.read()
        data[key] = value
        self._write_atomic(data)
        self._cache = data

    def has(self, key: str) -> bool:
        """Check if key exists."""
        return key in self.read()

    def __contains__(self, key: str) -> bool:
        return self.has(key)
