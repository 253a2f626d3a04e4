"""
Number and bigint definitions.

Bounds tighten like string lengths do: the greatest lower bound and least
upper bound win, and at an equal value an exclusive bound beats an
inclusive one. Draft 7 writes exclusivity as its own numeric keyword;
OpenAPI 3.0 as a boolean flag next to ``minimum``/``maximum``.
"""
from typing import Optional, Union

from ...exceptions import UnsupportedCheckError
from ...models.common import Target
from ...models.definitions import BigIntDef, NumberDef
from ..error_messages import add_error_message, merge_constraint, remove_constraint
from ..refs import JsonSchema, Refs

Numeric = Union[int, float]

_KEYWORDS = {
    # (upper, exclusive) -> keyword used by Draft 7
    (False, False): "minimum",
    (False, True): "exclusiveMinimum",
    (True, False): "maximum",
    (True, True): "exclusiveMaximum",
}


def parse_number_def(definition: NumberDef, refs: Refs) -> JsonSchema:
    res: JsonSchema = {"type": "number"}
    for check in definition.checks:
        if check.kind == "int":
            res["type"] = "integer"
            add_error_message(res, "type", check.message, refs)
        elif check.kind in ("min", "max"):
            _apply_bound(res, check.value, check.inclusive, check.kind == "max", check.message, refs)
        elif check.kind == "multiple_of":
            merge_constraint(res, "multipleOf", check.value, check.message, refs)
        elif check.kind == "finite":
            continue
        else:
            raise UnsupportedCheckError(check.kind, definition.kind)
    return res


def parse_bigint_def(definition: BigIntDef, refs: Refs) -> JsonSchema:
    res: JsonSchema = {"type": "integer", "format": "int64"}
    for check in definition.checks:
        if check.kind in ("min", "max"):
            _apply_bound(res, check.value, check.inclusive, check.kind == "max", check.message, refs)
        elif check.kind == "multiple_of":
            merge_constraint(res, "multipleOf", check.value, check.message, refs)
        else:
            raise UnsupportedCheckError(check.kind, definition.kind)
    return res


def _current_bound(res: JsonSchema, upper: bool, refs: Refs) -> Optional[tuple[Numeric, bool]]:
    if refs.target == Target.OPENAPI_3:
        key = "maximum" if upper else "minimum"
        if key not in res:
            return None
        return res[key], res.get("exclusiveMaximum" if upper else "exclusiveMinimum") is True
    for exclusive in (False, True):
        key = _KEYWORDS[(upper, exclusive)]
        if key in res:
            return res[key], exclusive
    return None


def _is_tighter(value: Numeric, exclusive: bool, current: tuple[Numeric, bool], upper: bool) -> bool:
    current_value, current_exclusive = current
    if value == current_value:
        return exclusive and not current_exclusive
    return value < current_value if upper else value > current_value


def _apply_bound(
    res: JsonSchema,
    value: Numeric,
    inclusive: bool,
    upper: bool,
    message: Optional[str],
    refs: Refs,
) -> None:
    exclusive = not inclusive
    current = _current_bound(res, upper, refs)
    if current is not None and not _is_tighter(value, exclusive, current, upper):
        return

    inclusive_key = _KEYWORDS[(upper, False)]
    exclusive_key = _KEYWORDS[(upper, True)]
    remove_constraint(res, inclusive_key)
    remove_constraint(res, exclusive_key)

    if refs.target == Target.OPENAPI_3:
        merge_constraint(res, inclusive_key, value, message, refs)
        if exclusive:
            merge_constraint(res, exclusive_key, True, message, refs)
    else:
        merge_constraint(res, exclusive_key if exclusive else inclusive_key, value, message, refs)
