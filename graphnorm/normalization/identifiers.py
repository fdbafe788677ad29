# ==============================================
# Record id rewriting
# ==============================================
#
# PURPOSE:
#   Records fetched from the store carry their identity in the
#   driver's "@rid" attribute (or in "rid" when it was projected
#   explicitly). Consumers expect a plain string "id" instead.
#
# FUNCTIONS:
# ----------
# - replace_key_for_id(record, key)
#     Move record[key] to record["id"] as a string and delete key.
#     Temporary ids ("#-N:M") are dropped without setting "id".
#
# - rewrite_ids(records, schema=None)
#     Normalize the id of one record or of a list of records.
#     With a schema, foreign key attributes holding a RecordId
#     are turned into strings (one level only).
#
# - rewrite_ids_recursive(records, schema=None, accumulator=None)
#     Same, then descends into every nested dict/list. The schema
#     only applies to the first level. Records whose id has been
#     processed already in this call are returned as is.
#
# All functions mutate their input in place.
#
# ==============================================

import logging
from typing import Any, Optional, Set

from ..errors import IdentifierFieldError
from ..traversal.visitor import ProcessedSet
from .record_id import RecordId, match_record_id, is_temporary_id
from .schema import foreign_key_columns
from .type_detector import NodeKindDetector

logger = logging.getLogger(__name__)

RID_KEY = "rid"
ORIENT_RID_KEY = "@rid"
ID_KEY = "id"


def replace_key_for_id(record: dict, key: str) -> None:
    """
    Replace the given key in the record with "id".

    Raises:
        IdentifierFieldError: if the key is missing or holds None
    """
    if key not in record:
        raise IdentifierFieldError(key)
    if record[key] is None:
        raise IdentifierFieldError(key, "null")

    record_id = record[key] if isinstance(record[key], str) else str(record[key])
    if is_temporary_id(record_id):
        logger.debug("Ignoring temporary id %s", record_id)
    else:
        record[ID_KEY] = record_id
    del record[key]


def _rewrite_one(record: Any, schema: Optional[dict]) -> Any:
    if not isinstance(record, dict):
        return record

    if RID_KEY in record and match_record_id(record[RID_KEY]):
        replace_key_for_id(record, RID_KEY)
        record.pop(ORIENT_RID_KEY, None)
    elif record.get(ORIENT_RID_KEY) is not None:
        replace_key_for_id(record, ORIENT_RID_KEY)

    if schema:
        for column_name in foreign_key_columns(schema):
            if isinstance(record.get(column_name), RecordId):
                record[column_name] = str(record[column_name])

    return record


def rewrite_ids(records: Any, schema: Optional[dict] = None) -> Any:
    """
    Rewrite the driver's @rid/rid attribute to a normalized "id".

    Args:
        records: A record or a list of records
        schema: Attribute definitions of the records' collection

    Returns:
        A list of the same length and order for list input,
        the single record otherwise
    """
    if isinstance(records, list):
        return [_rewrite_one(record, schema) for record in records]
    return _rewrite_one(records, schema)


def rewrite_ids_recursive(
    records: Any,
    schema: Optional[dict] = None,
    accumulator: Optional[Set[str]] = None,
    _processed: Optional[ProcessedSet] = None
) -> Any:
    """
    Rewrite @rid/rid to "id" in a record graph.

    Args:
        records: A record or a list of records
        schema: Attribute definitions, applied to the first level only
        accumulator: Ids already processed in this call, protects
            against circular references

    Returns:
        A list of the same length and order for list input,
        the single record otherwise
    """
    if accumulator is None:
        accumulator = set()
    if _processed is None:
        _processed = ProcessedSet()

    if isinstance(records, list):
        return [
            _rewrite_recursive_one(record, schema, accumulator, _processed)
            for record in records
        ]
    return _rewrite_recursive_one(records, schema, accumulator, _processed)


def _rewrite_recursive_one(
    record: Any,
    schema: Optional[dict],
    accumulator: Set[str],
    processed: ProcessedSet
) -> Any:
    if not NodeKindDetector.is_container(record):
        return record

    if isinstance(record, dict) and record.get(ID_KEY) and record[ID_KEY] in accumulator:
        logger.debug("Record %s already processed", record[ID_KEY])
        return record

    # records that never get an id still must not be walked twice
    if not processed.visit(record):
        return record

    if isinstance(record, list):
        _rewrite_children(record, accumulator, processed)
        return record

    record = rewrite_ids(record, schema)
    if record.get(ID_KEY):
        accumulator.add(record[ID_KEY])

    _rewrite_children(record, accumulator, processed)
    return record


def _rewrite_children(node: Any, accumulator: Set[str], processed: ProcessedSet) -> None:
    for key, value in NodeKindDetector.children(node):
        kind = NodeKindDetector.detect(value)
        if kind == "record_id":
            # list elements keep their RecordId, only record fields are flattened
            if isinstance(node, dict):
                node[key] = str(value)
        elif kind in NodeKindDetector.CONTAINER_KINDS:
            _rewrite_recursive_one(value, None, accumulator, processed)
