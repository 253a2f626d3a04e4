"""
Array, tuple and set definitions.
"""
from ...exceptions import UnsupportedCheckError
from ...models.common import DefinitionKind
from ...models.definitions import ArrayDef, SetDef, TupleDef
from ..error_messages import merge_bound
from ..parse_def import parse_def
from ..refs import JsonSchema, Refs


def parse_array_def(definition: ArrayDef, refs: Refs) -> JsonSchema:
    res: JsonSchema = {"type": "array"}

    if definition.type.kind != DefinitionKind.ANY.value:
        res["items"] = parse_def(definition.type, refs.child("items"))

    _apply_size_checks(res, definition, refs)
    return res


def parse_tuple_def(definition: TupleDef, refs: Refs) -> JsonSchema:
    items = [parse_def(element, refs.child("items", i)) for i, element in enumerate(definition.items)]
    res: JsonSchema = {
        "type": "array",
        "minItems": len(definition.items),
        "items": items,
    }
    if definition.rest is not None:
        res["additionalItems"] = parse_def(definition.rest, refs.child("additionalItems"))
    else:
        res["maxItems"] = len(definition.items)
    return res


def parse_set_def(definition: SetDef, refs: Refs) -> JsonSchema:
    res: JsonSchema = {
        "type": "array",
        "uniqueItems": True,
        "items": parse_def(definition.value_type, refs.child("items")),
    }

    _apply_size_checks(res, definition, refs)
    return res


def _apply_size_checks(res: JsonSchema, definition, refs: Refs) -> None:
    for check in definition.checks:
        if check.kind == "min":
            merge_bound(res, "minItems", check.value, check.message, refs, upper=False)
        elif check.kind == "max":
            merge_bound(res, "maxItems", check.value, check.message, refs, upper=True)
        elif check.kind == "length":
            merge_bound(res, "minItems", check.value, check.message, refs, upper=False)
            merge_bound(res, "maxItems", check.value, check.message, refs, upper=True)
        else:
            raise UnsupportedCheckError(check.kind, definition.kind)
