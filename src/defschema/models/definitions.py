"""
Definition models: the validation object model converted to JSON Schema.

Every definition is an immutable pydantic model tagged with ``kind``.
Builder methods mirror the fluent style of runtime validation libraries
(``StringDef().min(2).email()``) and always return a new definition, so a
definition object can be shared between several parents and is still the
same node (by identity) wherever it appears.
"""
import datetime
from collections.abc import Callable
from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import Field, TypeAdapter

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
from .common import FrozenModel, UnknownKeys


class BaseDefinition(FrozenModel):
    kind: str
    description: Optional[str] = None

    def _with_check(self, check: Check):
        return self.model_copy(update={"checks": (*self.checks, check)})

    def describe(self, description: str):
        return self.model_copy(update={"description": description})

    def is_optional(self) -> bool:
        """Whether a missing value is accepted (drives object ``required``)."""
        return False

    def optional(self) -> "OptionalDef":
        return OptionalDef(inner_type=self)

    def nullable(self) -> "NullableDef":
        return NullableDef(inner_type=self)

    def default(self, value: Any) -> "DefaultDef":
        return DefaultDef(inner_type=self, default_value=value)

    def catch(self, value: Any) -> "CatchDef":
        return CatchDef(inner_type=self, catch_value=value)

    def brand(self) -> "BrandedDef":
        return BrandedDef(inner_type=self)

    def readonly(self) -> "ReadonlyDef":
        return ReadonlyDef(inner_type=self)

    def array(self) -> "ArrayDef":
        return ArrayDef(type=self)

    def or_(self, other: "BaseDefinition") -> "UnionDef":
        return UnionDef(options=[self, other])

    def and_(self, other: "BaseDefinition") -> "IntersectionDef":
        return IntersectionDef(left=self, right=other)

    def refine(self, predicate: Callable[[Any], Any]) -> "EffectsDef":
        return EffectsDef(inner_type=self, effect_type="refinement", effect=predicate)

    def transform(self, fn: Callable[[Any], Any]) -> "EffectsDef":
        return EffectsDef(inner_type=self, effect_type="transform", effect=fn)

    def pipe(self, target: "BaseDefinition") -> "PipelineDef":
        return PipelineDef(in_type=self, out_type=target)


# --- Leaf definitions ---

class StringDef(BaseDefinition):
    kind: Literal["string"] = "string"
    checks: tuple[StringCheck, ...] = ()

    def min(self, value: int, message: Optional[str] = None) -> "StringDef":
        return self._with_check(SizeCheck(kind="min", value=value, message=message))

    def max(self, value: int, message: Optional[str] = None) -> "StringDef":
        return self._with_check(SizeCheck(kind="max", value=value, message=message))

    def length(self, value: int, message: Optional[str] = None) -> "StringDef":
        return self._with_check(SizeCheck(kind="length", value=value, message=message))

    def nonempty(self, message: Optional[str] = None) -> "StringDef":
        return self.min(1, message)

    def email(self, message: Optional[str] = None) -> "StringDef":
        return self._with_check(StringFlagCheck(kind="email", message=message))

    def url(self, message: Optional[str] = None) -> "StringDef":
        return self._with_check(StringFlagCheck(kind="url", message=message))

    def uuid(self, message: Optional[str] = None) -> "StringDef":
        return self._with_check(StringFlagCheck(kind="uuid", message=message))

    def cuid(self, message: Optional[str] = None) -> "StringDef":
        return self._with_check(StringFlagCheck(kind="cuid", message=message))

    def cuid2(self, message: Optional[str] = None) -> "StringDef":
        return self._with_check(StringFlagCheck(kind="cuid2", message=message))

    def ulid(self, message: Optional[str] = None) -> "StringDef":
        return self._with_check(StringFlagCheck(kind="ulid", message=message))

    def emoji(self, message: Optional[str] = None) -> "StringDef":
        return self._with_check(StringFlagCheck(kind="emoji", message=message))

    def datetime(self, message: Optional[str] = None) -> "StringDef":
        return self._with_check(StringFlagCheck(kind="datetime", message=message))

    def regex(self, pattern: Any, message: Optional[str] = None) -> "StringDef":
        # Accepts a compiled re.Pattern as well as its source
        source = getattr(pattern, "pattern", pattern)
        return self._with_check(RegexCheck(pattern=source, message=message))

    def starts_with(self, value: str, message: Optional[str] = None) -> "StringDef":
        return self._with_check(AffixCheck(kind="starts_with", value=value, message=message))

    def ends_with(self, value: str, message: Optional[str] = None) -> "StringDef":
        return self._with_check(AffixCheck(kind="ends_with", value=value, message=message))

    def includes(self, value: str, message: Optional[str] = None) -> "StringDef":
        return self._with_check(AffixCheck(kind="includes", value=value, message=message))

    def ip(self, version: Optional[str] = None, message: Optional[str] = None) -> "StringDef":
        return self._with_check(IpCheck(version=version, message=message))

    def trim(self) -> "StringDef":
        return self._with_check(StringFlagCheck(kind="trim"))

    def to_lower_case(self) -> "StringDef":
        return self._with_check(StringFlagCheck(kind="to_lower_case"))

    def to_upper_case(self) -> "StringDef":
        return self._with_check(StringFlagCheck(kind="to_upper_case"))


class _NumericBounds:
    """Bound builders shared by number and bigint definitions."""

    def gte(self, value, message: Optional[str] = None):
        return self._with_check(BoundCheck(kind="min", value=value, message=message))

    def gt(self, value, message: Optional[str] = None):
        return self._with_check(BoundCheck(kind="min", value=value, inclusive=False, message=message))

    def lte(self, value, message: Optional[str] = None):
        return self._with_check(BoundCheck(kind="max", value=value, message=message))

    def lt(self, value, message: Optional[str] = None):
        return self._with_check(BoundCheck(kind="max", value=value, inclusive=False, message=message))

    min = gte
    max = lte

    def positive(self, message: Optional[str] = None):
        return self.gt(0, message)

    def nonnegative(self, message: Optional[str] = None):
        return self.gte(0, message)

    def negative(self, message: Optional[str] = None):
        return self.lt(0, message)

    def nonpositive(self, message: Optional[str] = None):
        return self.lte(0, message)

    def multiple_of(self, value, message: Optional[str] = None):
        return self._with_check(MultipleOfCheck(value=value, message=message))


class NumberDef(_NumericBounds, BaseDefinition):
    kind: Literal["number"] = "number"
    checks: tuple[NumberCheck, ...] = ()

    def finite(self, message: Optional[str] = None) -> "NumberDef":
        return self._with_check(FiniteCheck(message=message))

    def int(self, message: Optional[str] = None) -> "NumberDef":
        return self._with_check(IntCheck(message=message))


class BigIntDef(_NumericBounds, BaseDefinition):
    kind: Literal["bigint"] = "bigint"
    checks: tuple[BigIntCheck, ...] = ()


class DateDef(BaseDefinition):
    kind: Literal["date"] = "date"
    checks: tuple[DateBoundCheck, ...] = ()

    def min(self, value: datetime.datetime, message: Optional[str] = None) -> "DateDef":
        return self._with_check(DateBoundCheck(kind="min", value=value, message=message))

    def max(self, value: datetime.datetime, message: Optional[str] = None) -> "DateDef":
        return self._with_check(DateBoundCheck(kind="max", value=value, message=message))


class BooleanDef(BaseDefinition):
    kind: Literal["boolean"] = "boolean"

class NullDef(BaseDefinition):
    kind: Literal["null"] = "null"

class UndefinedDef(BaseDefinition):
    kind: Literal["undefined"] = "undefined"

    def is_optional(self) -> bool:
        return True

class AnyDef(BaseDefinition):
    kind: Literal["any"] = "any"

    def is_optional(self) -> bool:
        return True

class UnknownDef(BaseDefinition):
    kind: Literal["unknown"] = "unknown"

    def is_optional(self) -> bool:
        return True

class NeverDef(BaseDefinition):
    kind: Literal["never"] = "never"

class LiteralDef(BaseDefinition):
    kind: Literal["literal"] = "literal"
    value: Any

class EnumDef(BaseDefinition):
    kind: Literal["enum"] = "enum"
    values: list[str] = Field(..., min_length=1)

class NativeEnumDef(BaseDefinition):
    kind: Literal["native_enum"] = "native_enum"
    enum_type: type[Enum]

    @property
    def values(self) -> list[Any]:
        return [member.value for member in self.enum_type]


# --- Composite definitions ---

class ArrayDef(BaseDefinition):
    kind: Literal["array"] = "array"
    type: "Definition"
    checks: tuple[SizeCheck, ...] = ()

    def min(self, value: int, message: Optional[str] = None) -> "ArrayDef":
        return self._with_check(SizeCheck(kind="min", value=value, message=message))

    def max(self, value: int, message: Optional[str] = None) -> "ArrayDef":
        return self._with_check(SizeCheck(kind="max", value=value, message=message))

    def length(self, value: int, message: Optional[str] = None) -> "ArrayDef":
        return self._with_check(SizeCheck(kind="length", value=value, message=message))

    def nonempty(self, message: Optional[str] = None) -> "ArrayDef":
        return self.min(1, message)

class TupleDef(BaseDefinition):
    kind: Literal["tuple"] = "tuple"
    items: list["Definition"] = Field(default_factory=list)
    rest: Optional["Definition"] = None

    def with_rest(self, rest: BaseDefinition) -> "TupleDef":
        return self.model_copy(update={"rest": rest})

class SetDef(BaseDefinition):
    kind: Literal["set"] = "set"
    value_type: "Definition"
    checks: tuple[SizeCheck, ...] = ()

    def min(self, value: int, message: Optional[str] = None) -> "SetDef":
        return self._with_check(SizeCheck(kind="min", value=value, message=message))

    def max(self, value: int, message: Optional[str] = None) -> "SetDef":
        return self._with_check(SizeCheck(kind="max", value=value, message=message))

    def size(self, value: int, message: Optional[str] = None) -> "SetDef":
        return self._with_check(SizeCheck(kind="length", value=value, message=message))

class ObjectDef(BaseDefinition):
    kind: Literal["object"] = "object"
    shape: dict[str, "Definition"] = Field(default_factory=dict)
    unknown_keys: UnknownKeys = UnknownKeys.STRIP
    catchall: Optional["Definition"] = None

    def strict(self) -> "ObjectDef":
        return self.model_copy(update={"unknown_keys": UnknownKeys.STRICT.value})

    def passthrough(self) -> "ObjectDef":
        return self.model_copy(update={"unknown_keys": UnknownKeys.PASSTHROUGH.value})

    def strip(self) -> "ObjectDef":
        return self.model_copy(update={"unknown_keys": UnknownKeys.STRIP.value})

    def with_catchall(self, catchall: BaseDefinition) -> "ObjectDef":
        return self.model_copy(update={"catchall": catchall})

    def extend(self, shape: dict[str, BaseDefinition]) -> "ObjectDef":
        return self.model_copy(update={"shape": {**self.shape, **shape}})

class RecordDef(BaseDefinition):
    kind: Literal["record"] = "record"
    key_type: Optional["Definition"] = None # None means any string key
    value_type: "Definition"

class MapDef(BaseDefinition):
    kind: Literal["map"] = "map"
    key_type: "Definition"
    value_type: "Definition"

class UnionDef(BaseDefinition):
    kind: Literal["union"] = "union"
    options: list["Definition"] = Field(..., min_length=1)

    def is_optional(self) -> bool:
        return any(option.is_optional() for option in self.options)

class IntersectionDef(BaseDefinition):
    kind: Literal["intersection"] = "intersection"
    left: "Definition"
    right: "Definition"


# --- Wrappers ---

class OptionalDef(BaseDefinition):
    kind: Literal["optional"] = "optional"
    inner_type: "Definition"

    def is_optional(self) -> bool:
        return True

class NullableDef(BaseDefinition):
    kind: Literal["nullable"] = "nullable"
    inner_type: "Definition"

    def is_optional(self) -> bool:
        return self.inner_type.is_optional()

class DefaultDef(BaseDefinition):
    kind: Literal["default"] = "default"
    inner_type: "Definition"
    default_value: Any = None

    def is_optional(self) -> bool:
        return True

class CatchDef(BaseDefinition):
    kind: Literal["catch"] = "catch"
    inner_type: "Definition"
    catch_value: Any = None

    def is_optional(self) -> bool:
        return True

class BrandedDef(BaseDefinition):
    kind: Literal["branded"] = "branded"
    inner_type: "Definition"

    def is_optional(self) -> bool:
        return self.inner_type.is_optional()

class ReadonlyDef(BaseDefinition):
    kind: Literal["readonly"] = "readonly"
    inner_type: "Definition"

    def is_optional(self) -> bool:
        return self.inner_type.is_optional()

class LazyDef(BaseDefinition):
    """Deferred definition; the getter is resolved at conversion time so a
    definition can refer to itself."""
    kind: Literal["lazy"] = "lazy"
    getter: Callable[[], Any] = Field(exclude=True)

    def resolve(self) -> Any:
        return self.getter()

class EffectsDef(BaseDefinition):
    kind: Literal["effects"] = "effects"
    inner_type: "Definition"
    effect_type: Literal["refinement", "transform", "preprocess"] = "refinement"
    effect: Optional[Callable[[Any], Any]] = Field(default=None, exclude=True)

    def is_optional(self) -> bool:
        return self.inner_type.is_optional()

class PipelineDef(BaseDefinition):
    kind: Literal["pipeline"] = "pipeline"
    in_type: "Definition"
    out_type: "Definition"


Definition = Annotated[
    Union[
        StringDef,
        NumberDef,
        BigIntDef,
        DateDef,
        BooleanDef,
        NullDef,
        UndefinedDef,
        AnyDef,
        UnknownDef,
        NeverDef,
        LiteralDef,
        EnumDef,
        NativeEnumDef,
        ArrayDef,
        TupleDef,
        SetDef,
        ObjectDef,
        RecordDef,
        MapDef,
        UnionDef,
        IntersectionDef,
        OptionalDef,
        NullableDef,
        DefaultDef,
        CatchDef,
        BrandedDef,
        ReadonlyDef,
        LazyDef,
        EffectsDef,
        PipelineDef,
    ],
    Field(discriminator="kind"),
]

for _model in (
    ArrayDef, TupleDef, SetDef, ObjectDef, RecordDef, MapDef, UnionDef, IntersectionDef,
    OptionalDef, NullableDef, DefaultDef, CatchDef, BrandedDef, ReadonlyDef, EffectsDef, PipelineDef,
):
    _model.model_rebuild()

_definition_adapter: TypeAdapter = TypeAdapter(Definition)


def parse_definition(data: Any) -> BaseDefinition:
    """Validates a JSON-compatible document into a definition graph."""
    return _definition_adapter.validate_python(data)
