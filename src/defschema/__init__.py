"""defschema - convert validation definitions into JSON Schema documents.

Definitions (strings, numbers, arrays, objects, unions, effects, ...) with
their attached checks are translated into JSON Schema Draft 7 or OpenAPI 3.0
schema objects, with optional per-constraint error messages and ``$ref``
reuse for shared or recursive definitions.
"""

__version__ = "0.1.0"

from .config import Config, ConversionOptions
from .models import builders as d
from .models.definitions import parse_definition
from .schema_gen import SchemaConverterService, to_json_schema

__all__ = ["Config", "ConversionOptions", "SchemaConverterService", "d", "parse_definition", "to_json_schema"]
