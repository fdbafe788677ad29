# ==============================================
# PERSISTENCE
# ==============================================
#
# - snapshot_store.py → Save / load normalized graphs as JSON files
#
# ==============================================

from .snapshot_store import SnapshotStore

__all__ = ["SnapshotStore"]
