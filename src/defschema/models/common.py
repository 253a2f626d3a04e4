from enum import Enum

from pydantic import BaseModel


class BasePydanticModel(BaseModel):
    model_config = {
        "extra": "forbid",
        "populate_by_name": True,
        "use_enum_values": True,
    }

class FrozenModel(BasePydanticModel):
    """Definitions and checks are immutable once built; builders return copies."""
    model_config = {
        "extra": "forbid",
        "populate_by_name": True,
        "use_enum_values": True,
        "frozen": True,
    }

class DefinitionKind(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BIGINT = "bigint"
    BOOLEAN = "boolean"
    DATE = "date"
    NULL = "null"
    UNDEFINED = "undefined"
    ANY = "any"
    UNKNOWN = "unknown"
    NEVER = "never"
    LITERAL = "literal"
    ENUM = "enum"
    NATIVE_ENUM = "native_enum"
    ARRAY = "array"
    TUPLE = "tuple"
    SET = "set"
    OBJECT = "object"
    RECORD = "record"
    MAP = "map"
    UNION = "union"
    INTERSECTION = "intersection"
    OPTIONAL = "optional"
    NULLABLE = "nullable"
    DEFAULT = "default"
    CATCH = "catch"
    BRANDED = "branded"
    READONLY = "readonly"
    LAZY = "lazy"
    EFFECTS = "effects"
    PIPELINE = "pipeline"

class EffectStrategy(str, Enum):
    INPUT = "input" # describe what must be supplied
    ANY = "any"

class RefStrategy(str, Enum):
    ROOT = "root"
    RELATIVE = "relative"
    NONE = "none"
    SEEN = "seen"

class Target(str, Enum):
    JSON_SCHEMA_7 = "jsonSchema7"
    OPENAPI_3 = "openApi3"

class PipeStrategy(str, Enum):
    ALL = "all"
    INPUT = "input"
    OUTPUT = "output"

class DateStrategy(str, Enum):
    FORMAT_DATE_TIME = "format:date-time"
    STRING = "string"
    INTEGER = "integer"

class MapStrategy(str, Enum):
    ENTRIES = "entries"
    RECORD = "record"

class UnknownKeys(str, Enum):
    STRIP = "strip"
    STRICT = "strict"
    PASSTHROUGH = "passthrough"
