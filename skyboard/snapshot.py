"""
On-disk flight snapshot for the proxy endpoint.

Stores the first N raw state vectors of the latest fetch as a single
JSON file. Writes go to a temporary file in the same directory and are
moved into place with os.replace, so readers see either the previous
snapshot or the new one, never a partial file.
"""

import json
import logging
import os
import tempfile
from typing import Any, List, Optional

logger = logging.getLogger(__name__)


class SnapshotStore:
    """Single-file JSON snapshot with atomic replacement."""

    def __init__(self, path: str):
        self.path = os.path.abspath(path)

    def write(self, records: List[Any]) -> None:
        """Atomically replace the snapshot with the given records."""
        directory = os.path.dirname(self.path)
        os.makedirs(directory, exist_ok=True)

        fd, tmp_path = tempfile.mkstemp(
            dir=directory,
            prefix='.' + os.path.basename(self.path),
            suffix='.tmp',
        )
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(records, f, indent=2)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

        logger.info(f'Wrote {len(records)} records to {self.path}')

    def read_text(self) -> Optional[str]:
        """Raw snapshot contents, or None if no snapshot exists yet."""
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                return f.read()
        except FileNotFoundError:
            return None

    def read(self) -> Optional[List[Any]]:
        """Parsed snapshot records, or None if no snapshot exists yet."""
        text = self.read_text()
        if text is None:
            return None
        return json.loads(text)

    def exists(self) -> bool:
        return os.path.exists(self.path)
