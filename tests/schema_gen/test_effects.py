"""
Unit tests for effects (refinements, transforms, preprocessing) and pipelines.
"""
import pytest

from defschema import d
from defschema.schema_gen.parse_def import parse_def
from defschema.schema_gen.parsers.effects import parse_effects_def, parse_pipeline_def
from defschema.schema_gen.refs import get_refs


def test_refinement_is_transparent() -> None:
    definition = d.number().refine(lambda x: x >= 0)
    assert parse_effects_def(definition, get_refs()) == {"type": "number"}


def test_refinement_is_transparent_under_any_strategy() -> None:
    definition = d.number().refine(lambda x: x >= 0)
    assert parse_effects_def(definition, get_refs(effect_strategy="any")) == {"type": "number"}


def test_transform_describes_input_by_default() -> None:
    definition = d.string().transform(len)
    assert parse_effects_def(definition, get_refs()) == {"type": "string"}


def test_transform_is_unconstrained_under_any_strategy() -> None:
    definition = d.string().transform(len)
    assert parse_effects_def(definition, get_refs(effect_strategy="any")) == {}


def test_preprocess_follows_effect_strategy() -> None:
    definition = d.preprocess(str.strip, d.string().min(1))
    assert parse_effects_def(definition, get_refs()) == {"type": "string", "minLength": 1}
    assert parse_effects_def(definition, get_refs(effect_strategy="any")) == {}


def test_refinement_output_equals_inner_output() -> None:
    inner = d.string().min(2).email()
    refined = inner.refine(lambda s: "@" in s)
    assert parse_def(refined, get_refs()) == parse_def(inner, get_refs())


def test_refinement_keeps_its_own_description() -> None:
    definition = d.number().refine(bool).describe("Non-zero")
    assert parse_def(definition, get_refs()) == {"type": "number", "description": "Non-zero"}


@pytest.mark.parametrize("pipe_strategy, expected", [
    ("all", {"allOf": [{"type": "string"}, {"type": "number"}]}),
    ("input", {"type": "string"}),
    ("output", {"type": "number"}),
])
def test_pipeline_strategies(pipe_strategy: str, expected: dict) -> None:
    definition = d.pipeline(d.string(), d.number())
    assert parse_pipeline_def(definition, get_refs(pipe_strategy=pipe_strategy)) == expected


def test_pipeline_from_builder() -> None:
    definition = d.string().transform(float).pipe(d.number().gte(0))
    assert parse_pipeline_def(definition, get_refs()) == {
        "allOf": [{"type": "string"}, {"type": "number", "minimum": 0}],
    }


def test_pipeline_sides_keep_their_positions() -> None:
    shared = d.string().min(1)
    result = parse_pipeline_def(d.pipeline(shared, shared), get_refs())
    assert result == {"allOf": [{"type": "string", "minLength": 1}, {"$ref": "#/allOf/0"}]}
