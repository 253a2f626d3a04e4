"""
Dispatcher: routes a definition to its converter and handles revisits.

A definition is registered in the reference tracker *before* its children
are converted, so a definition that contains itself (through ``lazy``)
resolves to a reference instead of recursing forever.
"""
import functools
from collections.abc import Callable
from typing import Any, Optional

import structlog

from ..exceptions import MalformedDefinitionError, UnsupportedDefinitionError
from ..models.common import DefinitionKind, RefStrategy
from ..models.definitions import BaseDefinition
from .refs import JsonSchema, Refs, SeenItem

logger = structlog.get_logger(__name__)

Parser = Callable[[Any, Refs], JsonSchema]


def parse_def(definition: Any, refs: Refs, force_resolution: bool = False) -> JsonSchema:
    """Converts ``definition`` at ``refs.current_path``.

    A revisited definition becomes a reference, an empty schema, or is
    converted again, depending on the ref strategy.
    """
    if not isinstance(definition, BaseDefinition):
        raise MalformedDefinitionError(
            f"Expected a definition, got {type(definition).__name__}", refs.current_path
        )

    seen_item = refs.lookup(definition)
    if seen_item is not None and not force_resolution:
        seen_schema = _select_ref(seen_item, refs)
        if seen_schema is not None:
            return seen_schema

    new_item = refs.register(definition)
    json_schema = _select_parser(definition)(definition, refs)
    if definition.description:
        json_schema = {**json_schema, "description": definition.description}
    new_item.json_schema = json_schema
    return json_schema


def _select_ref(item: SeenItem, refs: Refs) -> Optional[JsonSchema]:
    """The fragment for a revisit, or None when it must be converted again."""
    if refs.ref_strategy == RefStrategy.ROOT:
        ref = "/".join(item.path)
        logger.debug("Emitting reference for revisited definition.", ref=ref, path="/".join(refs.current_path))
        return {"$ref": ref}
    if refs.ref_strategy == RefStrategy.RELATIVE:
        return {"$ref": _relative_path(refs.current_path, item.path)}

    if _is_cycle(item, refs):
        logger.warning(
            "Recursive reference detected but the ref strategy does not emit references; defaulting to any.",
            path="/".join(refs.current_path),
            target_path="/".join(item.path),
            ref_strategy=refs.ref_strategy,
        )
        return {}
    return {} if refs.ref_strategy == RefStrategy.SEEN else None


def _is_cycle(item: SeenItem, refs: Refs) -> bool:
    return (
        len(item.path) < len(refs.current_path)
        and refs.current_path[: len(item.path)] == item.path
    )


def _relative_path(from_path: list[str], to_path: list[str]) -> str:
    """Relative JSON pointer from ``from_path`` to ``to_path``."""
    common = 0
    for a, b in zip(from_path, to_path):
        if a != b:
            break
        common += 1
    return "/".join([str(len(from_path) - common), *to_path[common:]])


def _select_parser(definition: BaseDefinition) -> Parser:
    try:
        kind = DefinitionKind(definition.kind)
    except ValueError:
        raise UnsupportedDefinitionError(definition.kind) from None
    return _parser_table()[kind]


@functools.cache
def _parser_table() -> dict[DefinitionKind, Parser]:
    # Converters import parse_def for recursion, so they are loaded on first use
    from .parsers import array, effects, number, primitives, string, union, wrappers
    from .parsers import object as object_parsers

    return {
        DefinitionKind.STRING: string.parse_string_def,
        DefinitionKind.NUMBER: number.parse_number_def,
        DefinitionKind.BIGINT: number.parse_bigint_def,
        DefinitionKind.BOOLEAN: primitives.parse_boolean_def,
        DefinitionKind.DATE: primitives.parse_date_def,
        DefinitionKind.NULL: primitives.parse_null_def,
        DefinitionKind.UNDEFINED: primitives.parse_never_def,
        DefinitionKind.ANY: primitives.parse_any_def,
        DefinitionKind.UNKNOWN: primitives.parse_any_def,
        DefinitionKind.NEVER: primitives.parse_never_def,
        DefinitionKind.LITERAL: primitives.parse_literal_def,
        DefinitionKind.ENUM: primitives.parse_enum_def,
        DefinitionKind.NATIVE_ENUM: primitives.parse_native_enum_def,
        DefinitionKind.ARRAY: array.parse_array_def,
        DefinitionKind.TUPLE: array.parse_tuple_def,
        DefinitionKind.SET: array.parse_set_def,
        DefinitionKind.OBJECT: object_parsers.parse_object_def,
        DefinitionKind.RECORD: object_parsers.parse_record_def,
        DefinitionKind.MAP: object_parsers.parse_map_def,
        DefinitionKind.UNION: union.parse_union_def,
        DefinitionKind.INTERSECTION: union.parse_intersection_def,
        DefinitionKind.NULLABLE: union.parse_nullable_def,
        DefinitionKind.OPTIONAL: wrappers.parse_optional_def,
        DefinitionKind.DEFAULT: wrappers.parse_default_def,
        DefinitionKind.CATCH: wrappers.parse_inner_def,
        DefinitionKind.BRANDED: wrappers.parse_inner_def,
        DefinitionKind.READONLY: wrappers.parse_inner_def,
        DefinitionKind.LAZY: wrappers.parse_lazy_def,
        DefinitionKind.EFFECTS: effects.parse_effects_def,
        DefinitionKind.PIPELINE: effects.parse_pipeline_def,
    }
