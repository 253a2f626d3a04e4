"""
Short constructors for definitions, meant to be imported as a namespace::

    from defschema import d

    user = d.object({"name": d.string().min(1), "tags": d.string().array().max(5)})
"""
from collections.abc import Callable
from enum import Enum
from typing import Any, Optional

from .definitions import (
    AnyDef,
    ArrayDef,
    BaseDefinition,
    BigIntDef,
    BooleanDef,
    DateDef,
    EffectsDef,
    EnumDef,
    IntersectionDef,
    LazyDef,
    LiteralDef,
    MapDef,
    NativeEnumDef,
    NeverDef,
    NullDef,
    NumberDef,
    ObjectDef,
    PipelineDef,
    RecordDef,
    SetDef,
    StringDef,
    TupleDef,
    UndefinedDef,
    UnionDef,
    UnknownDef,
)


def string() -> StringDef:
    return StringDef()

def number() -> NumberDef:
    return NumberDef()

def bigint() -> BigIntDef:
    return BigIntDef()

def boolean() -> BooleanDef:
    return BooleanDef()

def date() -> DateDef:
    return DateDef()

def null() -> NullDef:
    return NullDef()

def undefined() -> UndefinedDef:
    return UndefinedDef()

def any() -> AnyDef:
    return AnyDef()

def unknown() -> UnknownDef:
    return UnknownDef()

def never() -> NeverDef:
    return NeverDef()

def literal(value: Any) -> LiteralDef:
    return LiteralDef(value=value)

def enum(values: list[str]) -> EnumDef:
    return EnumDef(values=list(values))

def native_enum(enum_type: type[Enum]) -> NativeEnumDef:
    return NativeEnumDef(enum_type=enum_type)

def array(element: BaseDefinition) -> ArrayDef:
    return ArrayDef(type=element)

def tuple(items: list[BaseDefinition], rest: Optional[BaseDefinition] = None) -> TupleDef:
    return TupleDef(items=list(items), rest=rest)

def set(element: BaseDefinition) -> SetDef:
    return SetDef(value_type=element)

def object(shape: dict[str, BaseDefinition]) -> ObjectDef:
    return ObjectDef(shape=dict(shape))

def record(value_type: BaseDefinition, key_type: Optional[BaseDefinition] = None) -> RecordDef:
    return RecordDef(key_type=key_type, value_type=value_type)

def map(key_type: BaseDefinition, value_type: BaseDefinition) -> MapDef:
    return MapDef(key_type=key_type, value_type=value_type)

def union(options: list[BaseDefinition]) -> UnionDef:
    return UnionDef(options=list(options))

def intersection(left: BaseDefinition, right: BaseDefinition) -> IntersectionDef:
    return IntersectionDef(left=left, right=right)

def lazy(getter: Callable[[], BaseDefinition]) -> LazyDef:
    return LazyDef(getter=getter)

def preprocess(fn: Callable[[Any], Any], inner: BaseDefinition) -> EffectsDef:
    return EffectsDef(inner_type=inner, effect_type="preprocess", effect=fn)

def pipeline(in_type: BaseDefinition, out_type: BaseDefinition) -> PipelineDef:
    return PipelineDef(in_type=in_type, out_type=out_type)
