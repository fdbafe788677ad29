# ==============================================
# RecordId
# ==============================================
#
# PURPOSE:
#   Opaque store-native record identity. A record id is a
#   (cluster, position) pair rendered as "#<cluster>:<position>".
#   A negative cluster means the record is not persisted yet
#   (temporary id, e.g. inside a pending transaction).
#
# FUNCTIONS:
# ----------
# - match_record_id(value) -> bool
#     True for RecordId instances and strings shaped like "#12:3"
#     or "#-2:0".
#
# - is_temporary_id(value) -> bool
#     True when the string form starts with "#-".
#
# ==============================================

import re
from dataclasses import dataclass
from typing import Any

RECORD_ID_PATTERN = re.compile(r'^#-?\d+:\d+$')
TEMPORARY_PREFIX = "#-"


@dataclass(frozen=True)
class RecordId:
    """Store-native record identity, rendered as "#<cluster>:<position>"."""
    cluster: int
    position: int

    @classmethod
    def parse(cls, text: str) -> "RecordId":
        """
        Parse "#<cluster>:<position>" into a RecordId.

        Raises:
            ValueError: if the text is not shaped like a record id
        """
        text = str(text).strip()
        if not RECORD_ID_PATTERN.match(text):
            raise ValueError(f"Not a record id: {text!r}")
        cluster, position = text[1:].split(":")
        return cls(int(cluster), int(position))

    @property
    def is_temporary(self) -> bool:
        return self.cluster < 0

    def __str__(self) -> str:
        return f"#{self.cluster}:{self.position}"


def match_record_id(value: Any) -> bool:
    if not value:
        return False
    if isinstance(value, RecordId):
        return True
    return bool(RECORD_ID_PATTERN.match(str(value)))


def is_temporary_id(value: Any) -> bool:
    return str(value).startswith(TEMPORARY_PREFIX)
