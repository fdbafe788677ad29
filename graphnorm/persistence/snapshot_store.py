import json
import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Any, List, Optional

from ..config import get_config
from ..errors import SnapshotNotFoundError
from ..export.json_export import to_serializable


# ==============================================
# SnapshotStore
# ==============================================
#
# PURPOSE:
#   Keep normalized graphs on disk so that a normalization run
#   can be inspected or compared later without re-fetching.
#
# FILE STRUCTURE:
# ---------------
#   snapshots/
#   ├── <name>.json   → {"name", "saved_at", "version", "graph"}
#   └── ...
#
# Graphs are made acyclic before they are written, so a snapshot
# loads back as plain dicts/lists/strings.
#
logger = logging.getLogger(__name__)

SNAPSHOT_VERSION = "1.0"
_UNSAFE_CHARS = re.compile(r'[^A-Za-z0-9_.-]')


class SnapshotStore:
    """
    Handles persistence of normalized graphs to disk.
    """

    def __init__(self, storage_dir: Optional[str] = None, placeholder: Optional[str] = None):
        """
        Initialize the snapshot store.

        Args:
            storage_dir: Directory to store snapshot files
                (default: GRAPHNORM_SNAPSHOT_DIR)
            placeholder: Marker for circular references without an id
        """
        config = get_config()
        self.storage_dir = Path(storage_dir or config.output.snapshot_dir)
        self.placeholder = placeholder or config.traversal.circular_placeholder
        self.indent = config.output.json_indent

        # Create directory if it doesn't exist
        self.storage_dir.mkdir(parents=True, exist_ok=True)

    def path_for(self, name: str) -> Path:
        return self.storage_dir / f"{_UNSAFE_CHARS.sub('_', name)}.json"

    def save(self, name: str, graph: Any) -> Path:
        """
        Save a graph under ``name``, replacing any previous snapshot.

        Returns:
            Path of the written file
        """
        snapshot = {
            "name": name,
            "saved_at": datetime.now().isoformat(),
            "version": SNAPSHOT_VERSION,
            "graph": to_serializable(graph, self.placeholder)
        }

        path = self.path_for(name)
        with open(path, 'w') as f:
            json.dump(snapshot, f, indent=self.indent)

        logger.info("Saved snapshot %r to %s", name, path)
        return path

    def load(self, name: str) -> Any:
        """
        Load the graph saved under ``name``.

        Raises:
            SnapshotNotFoundError: if no such snapshot exists
        """
        path = self.path_for(name)
        if not path.exists():
            raise SnapshotNotFoundError(f"No snapshot named {name!r} in {self.storage_dir}")

        with open(path, 'r') as f:
            snapshot = json.load(f)

        logger.info("Loaded snapshot %r from %s", name, path)
        return snapshot["graph"]

    def exists(self, name: str) -> bool:
        return self.path_for(name).exists()

    def list(self) -> List[str]:
        """Names of all stored snapshots, sorted."""
        return sorted(path.stem for path in self.storage_dir.glob("*.json"))

    def clear(self) -> None:
        """
        Delete all snapshot files (for testing or reset).
        """
        for path in self.storage_dir.glob("*.json"):
            path.unlink()
            logger.info("Deleted %s", path)
