"""Checks: the constraints attached to leaf definitions.

Each check is a tagged model (``kind``) with an optional custom error
message. Families are grouped into discriminated unions so a JSON
document can be validated straight into the right check class.
"""
import datetime
from typing import Annotated, Literal, Optional, Union

from pydantic import Field

from .common import FrozenModel


class Check(FrozenModel):
    kind: str
    message: Optional[str] = None

class SizeCheck(Check):
    """min/max/length on strings (characters) and arrays/sets (items)."""
    kind: Literal["min", "max", "length"]
    value: int = Field(..., ge=0)

class StringFlagCheck(Check):
    kind: Literal[
        "email",
        "url",
        "uuid",
        "cuid",
        "cuid2",
        "ulid",
        "emoji",
        "datetime",
        "to_lower_case",
        "to_upper_case",
        "trim",
    ]

class RegexCheck(Check):
    kind: Literal["regex"] = "regex"
    pattern: str # pattern source, without delimiters or flags

class AffixCheck(Check):
    kind: Literal["starts_with", "ends_with", "includes"]
    value: str

class IpCheck(Check):
    kind: Literal["ip"] = "ip"
    version: Optional[Literal["v4", "v6"]] = None

class IntCheck(Check):
    kind: Literal["int"] = "int"

class BoundCheck(Check):
    kind: Literal["min", "max"]
    value: Union[int, float]
    inclusive: bool = True

class MultipleOfCheck(Check):
    kind: Literal["multiple_of"] = "multiple_of"
    value: Union[int, float] = Field(..., gt=0)

class FiniteCheck(Check):
    kind: Literal["finite"] = "finite"

class DateBoundCheck(Check):
    kind: Literal["min", "max"]
    value: datetime.datetime


StringCheck = Annotated[
    Union[SizeCheck, StringFlagCheck, RegexCheck, AffixCheck, IpCheck],
    Field(discriminator="kind"),
]

NumberCheck = Annotated[
    Union[IntCheck, BoundCheck, MultipleOfCheck, FiniteCheck],
    Field(discriminator="kind"),
]

BigIntCheck = Annotated[
    Union[BoundCheck, MultipleOfCheck],
    Field(discriminator="kind"),
]
