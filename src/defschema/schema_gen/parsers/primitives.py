"""
Leaf definitions without composition logic.
"""
import datetime
from typing import Any, Optional

from ...exceptions import MalformedDefinitionError, UnsupportedCheckError
from ...models.common import DateStrategy, Target
from ...models.definitions import DateDef, EnumDef, LiteralDef, NativeEnumDef
from ..error_messages import merge_bound
from ..refs import JsonSchema, Refs


def parse_boolean_def(definition: Any, refs: Refs) -> JsonSchema:
    return {"type": "boolean"}


def parse_null_def(definition: Any, refs: Refs) -> JsonSchema:
    if refs.target == Target.OPENAPI_3:
        return {"enum": ["null"], "nullable": True}
    return {"type": "null"}


def parse_any_def(definition: Any, refs: Refs) -> JsonSchema:
    return {}


def parse_never_def(definition: Any, refs: Refs) -> JsonSchema:
    """Also used for ``undefined``: no JSON value satisfies either."""
    return {"not": {}}


def literal_type(value: Any) -> Optional[str]:
    """JSON Schema type of a literal value, None when it has no primitive type."""
    # bool first: it is a subclass of int
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if value is None:
        return "null"
    return None


def parse_literal_def(definition: LiteralDef, refs: Refs) -> JsonSchema:
    value = definition.value
    json_type = literal_type(value)
    if json_type is None:
        if isinstance(value, (list, tuple)):
            return {"type": "array"}
        if isinstance(value, dict):
            return {"type": "object"}
        raise MalformedDefinitionError(
            f"Literal value of type {type(value).__name__} has no JSON representation", refs.current_path
        )
    if json_type == "null":
        return parse_null_def(definition, refs)
    if refs.target == Target.OPENAPI_3:
        return {"type": json_type, "enum": [value]}
    return {"type": json_type, "const": value}


def parse_enum_def(definition: EnumDef, refs: Refs) -> JsonSchema:
    return {"type": "string", "enum": list(definition.values)}


def parse_native_enum_def(definition: NativeEnumDef, refs: Refs) -> JsonSchema:
    values = definition.values
    types = {"string" if isinstance(value, str) else "number" for value in values}
    if len(types) == 1:
        json_type: Any = types.pop()
    else:
        json_type = ["string", "number"]
    return {"type": json_type, "enum": values}


_EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)


def epoch_millis(value: datetime.datetime) -> int:
    """Milliseconds since the Unix epoch; naive values are read as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=datetime.timezone.utc)
    return (value - _EPOCH) // datetime.timedelta(milliseconds=1)


def parse_date_def(definition: DateDef, refs: Refs) -> JsonSchema:
    if refs.date_strategy == DateStrategy.STRING:
        return {"type": "string"}
    if refs.date_strategy == DateStrategy.FORMAT_DATE_TIME:
        return {"type": "string", "format": "date-time"}

    res: JsonSchema = {"type": "integer", "format": "unix-time"}
    if refs.target == Target.OPENAPI_3:
        return res
    for check in definition.checks:
        epoch_ms = epoch_millis(check.value)
        if check.kind == "min":
            merge_bound(res, "minimum", epoch_ms, check.message, refs, upper=False)
        elif check.kind == "max":
            merge_bound(res, "maximum", epoch_ms, check.message, refs, upper=True)
        else:
            raise UnsupportedCheckError(check.kind, definition.kind)
    return res
