"""
Unit tests for optional, default, catch, branded, readonly and lazy definitions.
"""
import pytest

from defschema import d
from defschema.exceptions import MalformedDefinitionError
from defschema.schema_gen.parse_def import parse_def
from defschema.schema_gen.refs import Refs, get_refs


@pytest.fixture
def refs() -> Refs:
    return get_refs()


def test_optional_outside_object_property(refs: Refs) -> None:
    assert parse_def(d.string().optional(), refs) == {"anyOf": [{"not": {}}, {"type": "string"}]}


def test_optional_array_element(refs: Refs) -> None:
    result = parse_def(d.object({"tags": d.string().optional().array()}), refs)
    assert result["properties"]["tags"] == {
        "type": "array",
        "items": {"anyOf": [{"not": {}}, {"type": "string"}]},
    }


def test_default(refs: Refs) -> None:
    assert parse_def(d.string().default("x"), refs) == {"type": "string", "default": "x"}


def test_callable_default_is_evaluated(refs: Refs) -> None:
    assert parse_def(d.array(d.string()).default(list), refs) == {
        "type": "array",
        "items": {"type": "string"},
        "default": [],
    }


@pytest.mark.parametrize("wrap", [
    lambda inner: inner.catch("fallback"),
    lambda inner: inner.brand(),
    lambda inner: inner.readonly(),
])
def test_transparent_wrappers(refs: Refs, wrap) -> None:
    assert parse_def(wrap(d.string().min(1)), refs) == {"type": "string", "minLength": 1}


def test_lazy_resolves_getter(refs: Refs) -> None:
    assert parse_def(d.lazy(lambda: d.boolean()), refs) == {"type": "boolean"}


def test_lazy_getter_must_return_definition(refs: Refs) -> None:
    with pytest.raises(MalformedDefinitionError, match="expected a definition"):
        parse_def(d.lazy(lambda: 42), refs)
