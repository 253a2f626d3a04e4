"""
Wrapper definitions that mostly describe their inner definition.

Wrappers convert their inner definition at their own path; the inner
definition is registered in the reference tracker at that same path.
"""
from typing import Any

from ...exceptions import MalformedDefinitionError
from ...models.definitions import BaseDefinition, DefaultDef, LazyDef, OptionalDef
from ..parse_def import parse_def
from ..refs import JsonSchema, Refs


def parse_inner_def(definition: Any, refs: Refs) -> JsonSchema:
    """catch, branded and readonly add nothing JSON Schema can express."""
    return parse_def(definition.inner_type, refs)


def parse_optional_def(definition: OptionalDef, refs: Refs) -> JsonSchema:
    if refs.property_path is not None and refs.current_path == refs.property_path:
        # Object properties express optionality through "required"
        return parse_def(definition.inner_type, refs)

    return {"anyOf": [{"not": {}}, parse_def(definition.inner_type, refs.child("anyOf", 1))]}


def parse_default_def(definition: DefaultDef, refs: Refs) -> JsonSchema:
    inner = parse_def(definition.inner_type, refs)
    default_value = definition.default_value
    if callable(default_value):
        default_value = default_value()
    return {**inner, "default": default_value}


def parse_lazy_def(definition: LazyDef, refs: Refs) -> JsonSchema:
    resolved = definition.resolve()
    if not isinstance(resolved, BaseDefinition):
        raise MalformedDefinitionError(
            f"Lazy getter returned {type(resolved).__name__}, expected a definition", refs.current_path
        )
    return parse_def(resolved, refs)
