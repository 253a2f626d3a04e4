"""
Constraint merging with optional per-constraint error messages.

Messages live in an ``errorMessage`` map next to the constraints (the
ajv-errors convention). The map is only created when a message is actually
written, so fragments never carry an empty one.
"""
from typing import Any, Optional

from .refs import JsonSchema, Refs


def add_error_message(fragment: JsonSchema, key: str, message: Optional[str], refs: Refs) -> None:
    if not refs.error_messages or not message:
        return
    fragment.setdefault("errorMessage", {})[key] = message


def merge_constraint(fragment: JsonSchema, key: str, value: Any, message: Optional[str], refs: Refs) -> None:
    """Writes ``value`` under ``key``; callers pass the already tightened value."""
    fragment[key] = value
    add_error_message(fragment, key, message, refs)


def remove_constraint(fragment: JsonSchema, key: str) -> None:
    """Drops ``key`` and its message, pruning an emptied ``errorMessage`` map."""
    fragment.pop(key, None)
    error_message = fragment.get("errorMessage")
    if error_message is not None:
        error_message.pop(key, None)
        if not error_message:
            del fragment["errorMessage"]


def merge_bound(
    fragment: JsonSchema,
    key: str,
    value: Any,
    message: Optional[str],
    refs: Refs,
    *,
    upper: bool,
) -> None:
    """Merges a size bound so the narrowest one wins regardless of order.

    Lower bounds keep the maximum, upper bounds the minimum. A looser bound
    leaves the value and its message untouched.
    """
    existing = fragment.get(key)
    if isinstance(existing, (int, float)):
        tightened = min(existing, value) if upper else max(existing, value)
        if tightened != value:
            return
    merge_constraint(fragment, key, value, message, refs)
