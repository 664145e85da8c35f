"""Partial Update Merge — decides which update fields overwrite a stored record.

Invariants:
    - id, created_at and updated_at are never taken from an update request
    - NON_EMPTY: None, "" and 0 (the zero values) leave the stored field untouched
    - EXPLICIT: every supplied field overwrites; None resets an optional field to its
      default; None or "" for a required field is rejected
    - The input record is never mutated; a new record is returned
"""

from dataclasses import MISSING, Field, fields, replace
from typing import Any, Mapping, TypeVar

from apm.core.domain_types import MergePolicy
from apm.core.errors import RequestValidationFailed
from apm.core.records import Record

R = TypeVar("R", bound=Record)

PROTECTED_FIELDS = frozenset({"id", "created_at", "updated_at"})


def is_empty(value: Any) -> bool:
    """True for the values that mean "not supplied" under NON_EMPTY."""
    return value is None or value == "" or value == 0


def merge_update(record: R, changes: Mapping[str, Any], policy: MergePolicy) -> R:
    """Apply `changes` (field name -> supplied value) onto `record`."""
    record_fields = {f.name: f for f in fields(record)}
    updates: dict[str, Any] = {}
    for name, value in changes.items():
        if name in PROTECTED_FIELDS or name not in record_fields:
            continue
        if policy is MergePolicy.NON_EMPTY:
            if is_empty(value):
                continue
        elif value is None or (value == "" and _is_required(record_fields[name])):
            value = _zero_value(record_fields[name])
        updates[name] = value
    if not updates:
        return record
    return replace(record, **updates)


def _is_required(field: Field) -> bool:
    return field.default is MISSING and field.default_factory is MISSING


def _zero_value(field: Field) -> Any:
    if field.default is not MISSING:
        return field.default
    if field.default_factory is not MISSING:
        return field.default_factory()
    raise RequestValidationFailed(
        f"{field.name} is required and cannot be cleared", field=field.name,
        description="Invalid request body",
    )
