"""
Effects and pipeline definitions.

JSON Schema validates input data, so by default a transform is described
by the schema of what it accepts, not of what it produces.
"""
from ...models.common import EffectStrategy, PipeStrategy
from ...models.definitions import EffectsDef, PipelineDef
from ..parse_def import parse_def
from ..refs import JsonSchema, Refs


def parse_effects_def(definition: EffectsDef, refs: Refs) -> JsonSchema:
    if definition.effect_type == "refinement" or refs.effect_strategy == EffectStrategy.INPUT:
        return parse_def(definition.inner_type, refs)
    return {}


def parse_pipeline_def(definition: PipelineDef, refs: Refs) -> JsonSchema:
    if refs.pipe_strategy == PipeStrategy.INPUT:
        return parse_def(definition.in_type, refs)
    if refs.pipe_strategy == PipeStrategy.OUTPUT:
        return parse_def(definition.out_type, refs)

    return {
        "allOf": [
            parse_def(definition.in_type, refs.child("allOf", 0)),
            parse_def(definition.out_type, refs.child("allOf", 1)),
        ],
    }
