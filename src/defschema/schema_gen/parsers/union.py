"""
Union, nullable and intersection definitions.

Unions of plain primitives collapse into a ``type`` list and unions of
literals into an ``enum``; anything else becomes ``anyOf``.
"""
from typing import Any

from ...models.common import DefinitionKind, Target
from ...models.definitions import IntersectionDef, NullableDef, UnionDef
from ..parse_def import parse_def
from ..refs import JsonSchema, Refs
from .primitives import literal_type

# definition kind -> JSON Schema type, for kinds that collapse into a type list
PRIMITIVE_MAPPINGS = {
    DefinitionKind.STRING.value: "string",
    DefinitionKind.NUMBER.value: "number",
    DefinitionKind.BIGINT.value: "integer",
    DefinitionKind.BOOLEAN.value: "boolean",
    DefinitionKind.NULL.value: "null",
}


def _is_plain_primitive(definition: Any) -> bool:
    return definition.kind in PRIMITIVE_MAPPINGS and not getattr(definition, "checks", ())


def parse_union_def(definition: UnionDef, refs: Refs) -> JsonSchema:
    if refs.target == Target.OPENAPI_3:
        return _as_any_of(definition, refs)

    options = definition.options

    if all(_is_plain_primitive(option) and not option.description for option in options):
        types: list[str] = []
        for option in options:
            json_type = PRIMITIVE_MAPPINGS[option.kind]
            if json_type not in types:
                types.append(json_type)
        return {"type": types[0] if len(types) == 1 else types}

    if all(option.kind == DefinitionKind.LITERAL.value and not option.description for option in options):
        literal_types = [literal_type(option.value) for option in options]
        if all(t is not None for t in literal_types):
            types = []
            for json_type in literal_types:
                if json_type not in types:
                    types.append(json_type)
            values: list[Any] = []
            seen: list[tuple[str, Any]] = []
            for option, json_type in zip(options, literal_types):
                # True == 1 in Python, so values are compared together with their type
                if (json_type, option.value) not in seen:
                    seen.append((json_type, option.value))
                    values.append(option.value)
            return {"type": types[0] if len(types) == 1 else types, "enum": values}

    if all(option.kind == DefinitionKind.ENUM.value for option in options):
        merged: list[str] = []
        for option in options:
            merged.extend(value for value in option.values if value not in merged)
        return {"type": "string", "enum": merged}

    return _as_any_of(definition, refs)


def _as_any_of(definition: UnionDef, refs: Refs) -> JsonSchema:
    return {"anyOf": [parse_def(option, refs.child("anyOf", i)) for i, option in enumerate(definition.options)]}


def parse_nullable_def(definition: NullableDef, refs: Refs) -> JsonSchema:
    inner = definition.inner_type

    if _is_plain_primitive(inner) and inner.kind != DefinitionKind.NULL.value and not inner.description:
        json_type = PRIMITIVE_MAPPINGS[inner.kind]
        if refs.target == Target.OPENAPI_3:
            res: JsonSchema = {"type": json_type, "nullable": True}
            if inner.kind == DefinitionKind.BIGINT.value:
                res["format"] = "int64"
            return res
        return {"type": [json_type, "null"]}

    if refs.target == Target.OPENAPI_3:
        base = parse_def(inner, refs)
        if "$ref" in base:
            return {"allOf": [base], "nullable": True}
        return {**base, "nullable": True}

    return {"anyOf": [parse_def(inner, refs.child("anyOf", 0)), {"type": "null"}]}


def parse_intersection_def(definition: IntersectionDef, refs: Refs) -> JsonSchema:
    all_of: list[JsonSchema] = []
    for i, side in enumerate((definition.left, definition.right)):
        side_schema = parse_def(side, refs.child("allOf", i))
        if set(side_schema) == {"allOf"}:
            all_of.extend(side_schema["allOf"])
        else:
            all_of.append(side_schema)
    return {"allOf": all_of}
