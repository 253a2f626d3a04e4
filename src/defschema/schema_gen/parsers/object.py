"""
Object, record and map definitions.
"""
from ...models.common import DefinitionKind, MapStrategy, Target, UnknownKeys
from ...models.definitions import MapDef, ObjectDef, RecordDef
from ..parse_def import parse_def
from ..refs import JsonSchema, Refs
from .string import parse_string_def


def parse_object_def(definition: ObjectDef, refs: Refs) -> JsonSchema:
    properties: JsonSchema = {}
    required: list[str] = []

    for key, prop_def in definition.shape.items():
        properties[key] = parse_def(prop_def, refs.at_property(key))
        if not prop_def.is_optional():
            required.append(key)

    res: JsonSchema = {"type": "object", "properties": properties}
    if required:
        res["required"] = required

    if definition.catchall is not None and definition.catchall.kind != DefinitionKind.NEVER.value:
        res["additionalProperties"] = parse_def(definition.catchall, refs.child("additionalProperties"))
    else:
        res["additionalProperties"] = definition.unknown_keys == UnknownKeys.PASSTHROUGH
    return res


def parse_record_def(definition: RecordDef, refs: Refs) -> JsonSchema:
    res: JsonSchema = {
        "type": "object",
        "additionalProperties": parse_def(definition.value_type, refs.child("additionalProperties")),
    }

    key_type = definition.key_type
    if refs.target == Target.OPENAPI_3 or key_type is None:
        return res

    if key_type.kind == DefinitionKind.STRING.value and key_type.checks:
        # Key definitions stay out of the tracker; this fragment has no "type"
        key_schema = parse_string_def(key_type, refs.child("propertyNames"))
        key_schema = {k: v for k, v in key_schema.items() if k != "type"}
        if key_schema:
            res["propertyNames"] = key_schema
    elif key_type.kind == DefinitionKind.ENUM.value:
        res["propertyNames"] = {"enum": list(key_type.values)}
    return res


def parse_map_def(definition: MapDef, refs: Refs) -> JsonSchema:
    if refs.map_strategy == MapStrategy.RECORD:
        return parse_record_def(
            RecordDef(key_type=definition.key_type, value_type=definition.value_type),
            refs,
        )

    keys = parse_def(definition.key_type, refs.child("items", "items", 0))
    values = parse_def(definition.value_type, refs.child("items", "items", 1))
    return {
        "type": "array",
        "items": {
            "type": "array",
            "items": [keys, values],
            "minItems": 2,
            "maxItems": 2,
        },
    }
