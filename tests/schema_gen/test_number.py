"""
Unit tests for number and bigint conversion.
"""
import pytest

from defschema import d
from defschema.schema_gen.parsers.number import parse_bigint_def, parse_number_def
from defschema.schema_gen.refs import Refs, get_refs


@pytest.fixture
def refs() -> Refs:
    return get_refs()

@pytest.fixture
def openapi_refs() -> Refs:
    return get_refs(target="openApi3")


def test_plain_number(refs: Refs) -> None:
    assert parse_number_def(d.number(), refs) == {"type": "number"}


def test_int_switches_type(refs: Refs) -> None:
    assert parse_number_def(d.number().int(), refs) == {"type": "integer"}


def test_inclusive_bounds(refs: Refs) -> None:
    assert parse_number_def(d.number().gte(1).lte(9), refs) == {"type": "number", "minimum": 1, "maximum": 9}


def test_exclusive_bounds(refs: Refs) -> None:
    assert parse_number_def(d.number().gt(1).lt(9), refs) == {
        "type": "number",
        "exclusiveMinimum": 1,
        "exclusiveMaximum": 9,
    }


def test_sign_helpers(refs: Refs) -> None:
    assert parse_number_def(d.number().positive(), refs) == {"type": "number", "exclusiveMinimum": 0}
    assert parse_number_def(d.number().nonnegative(), refs) == {"type": "number", "minimum": 0}
    assert parse_number_def(d.number().negative(), refs) == {"type": "number", "exclusiveMaximum": 0}
    assert parse_number_def(d.number().nonpositive(), refs) == {"type": "number", "maximum": 0}


def test_bounds_tighten(refs: Refs) -> None:
    result = parse_number_def(d.number().gte(1).gte(5).gte(3).lte(100).lte(50).lte(70), refs)
    assert result == {"type": "number", "minimum": 5, "maximum": 50}


def test_exclusive_wins_at_equal_value(refs: Refs) -> None:
    assert parse_number_def(d.number().gte(5).gt(5), refs) == {"type": "number", "exclusiveMinimum": 5}
    assert parse_number_def(d.number().gt(5).gte(5), refs) == {"type": "number", "exclusiveMinimum": 5}


def test_looser_bound_is_ignored(refs: Refs) -> None:
    assert parse_number_def(d.number().gt(5).gte(3), refs) == {"type": "number", "exclusiveMinimum": 5}


def test_inclusive_replaces_looser_exclusive(refs: Refs) -> None:
    assert parse_number_def(d.number().lt(10).lte(8), refs) == {"type": "number", "maximum": 8}


def test_openapi_exclusivity_is_a_flag(openapi_refs: Refs) -> None:
    assert parse_number_def(d.number().gt(5).lte(9), openapi_refs) == {
        "type": "number",
        "minimum": 5,
        "exclusiveMinimum": True,
        "maximum": 9,
    }


def test_openapi_tighter_inclusive_drops_flag(openapi_refs: Refs) -> None:
    assert parse_number_def(d.number().gt(5).gte(7), openapi_refs) == {"type": "number", "minimum": 7}


def test_multiple_of_and_finite(refs: Refs) -> None:
    assert parse_number_def(d.number().multiple_of(0.5).finite(), refs) == {"type": "number", "multipleOf": 0.5}


def test_error_messages() -> None:
    refs = get_refs(error_messages=True)
    result = parse_number_def(d.number().int("Whole numbers only.").gte(1, "Too small."), refs)
    assert result == {
        "type": "integer",
        "minimum": 1,
        "errorMessage": {"type": "Whole numbers only.", "minimum": "Too small."},
    }


def test_replaced_bound_takes_its_message_along() -> None:
    refs = get_refs(error_messages=True)
    result = parse_number_def(d.number().gte(5, "At least 5.").gt(5, "More than 5."), refs)
    assert result == {
        "type": "number",
        "exclusiveMinimum": 5,
        "errorMessage": {"exclusiveMinimum": "More than 5."},
    }


def test_bigint(refs: Refs) -> None:
    assert parse_bigint_def(d.bigint(), refs) == {"type": "integer", "format": "int64"}
    assert parse_bigint_def(d.bigint().gte(0).lt(2**63), refs) == {
        "type": "integer",
        "format": "int64",
        "minimum": 0,
        "exclusiveMaximum": 2**63,
    }
