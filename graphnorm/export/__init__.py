# ==============================================
# EXPORT
# ==============================================
#
# - json_export.py → Render normalized graphs as JSON
#
# ==============================================

from .json_export import to_serializable, dumps

__all__ = ["to_serializable", "dumps"]
