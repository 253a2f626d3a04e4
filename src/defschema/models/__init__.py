"""
Pydantic models for defschema: definitions, checks and shared enums.
"""
from . import builders
from .checks import (
    AffixCheck,
    BigIntCheck,
    BoundCheck,
    Check,
    DateBoundCheck,
    FiniteCheck,
    IntCheck,
    IpCheck,
    MultipleOfCheck,
    NumberCheck,
    RegexCheck,
    SizeCheck,
    StringCheck,
    StringFlagCheck,
)
from .common import (
    BasePydanticModel,
    DateStrategy,
    DefinitionKind,
    EffectStrategy,
    FrozenModel,
    MapStrategy,
    PipeStrategy,
    RefStrategy,
    Target,
    UnknownKeys,
)
from .definitions import (
    AnyDef,
    ArrayDef,
    BaseDefinition,
    BigIntDef,
    BooleanDef,
    BrandedDef,
    CatchDef,
    DateDef,
    DefaultDef,
    Definition,
    EffectsDef,
    EnumDef,
    IntersectionDef,
    LazyDef,
    LiteralDef,
    MapDef,
    NativeEnumDef,
    NeverDef,
    NullableDef,
    NullDef,
    NumberDef,
    ObjectDef,
    OptionalDef,
    PipelineDef,
    ReadonlyDef,
    RecordDef,
    SetDef,
    StringDef,
    TupleDef,
    UndefinedDef,
    UnionDef,
    UnknownDef,
    parse_definition,
)

__all__ = [
    "AffixCheck",
    "AnyDef",
    "ArrayDef",
    "BaseDefinition",
    "BasePydanticModel",
    "BigIntCheck",
    "BigIntDef",
    "BooleanDef",
    "BoundCheck",
    "BrandedDef",
    "CatchDef",
    "Check",
    "DateBoundCheck",
    "DateDef",
    "DateStrategy",
    "DefaultDef",
    "Definition",
    "DefinitionKind",
    "EffectStrategy",
    "EffectsDef",
    "EnumDef",
    "FiniteCheck",
    "FrozenModel",
    "IntCheck",
    "IntersectionDef",
    "IpCheck",
    "LazyDef",
    "LiteralDef",
    "MapDef",
    "MapStrategy",
    "MultipleOfCheck",
    "NativeEnumDef",
    "NeverDef",
    "NullDef",
    "NullableDef",
    "NumberCheck",
    "NumberDef",
    "ObjectDef",
    "OptionalDef",
    "PipeStrategy",
    "PipelineDef",
    "ReadonlyDef",
    "RecordDef",
    "RefStrategy",
    "RegexCheck",
    "SetDef",
    "SizeCheck",
    "StringCheck",
    "StringDef",
    "StringFlagCheck",
    "Target",
    "TupleDef",
    "UndefinedDef",
    "UnionDef",
    "UnknownDef",
    "UnknownKeys",
    "builders",
    "parse_definition",
]
