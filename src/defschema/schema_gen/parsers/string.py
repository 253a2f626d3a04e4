"""
String definitions -> JSON Schema string fragments.

JSON Schema has one ``format`` and one ``pattern`` slot per schema, but a
string may carry several format or pattern checks. The first one of each
family goes into the plain slot; when a second arrives the first is
demoted into a composition list: ``anyOf`` for formats (a string can only
be one format at a time) and ``allOf`` for patterns (every pattern must
match).
"""
from typing import Optional

import structlog

from ...exceptions import UnsupportedCheckError
from ...models.definitions import StringDef
from ..error_messages import merge_bound, merge_constraint
from ..refs import JsonSchema, Refs

logger = structlog.get_logger(__name__)

CUID_PATTERN = r"^c[^\s-]{8,}$"
CUID2_PATTERN = r"^[a-z][a-z0-9]*$"
ULID_PATTERN = "/[0-9A-HJKMNP-TV-Z]{26}/"
EMOJI_PATTERN = r"/^(\p{Extended_Pictographic}|\p{Emoji_Component})+$/u"

_FORMATS = {
    "email": "email",
    "url": "uri",
    "uuid": "uuid",
    "datetime": "date-time",
}

_FIXED_PATTERNS = {
    "cuid": CUID_PATTERN,
    "cuid2": CUID2_PATTERN,
    "ulid": ULID_PATTERN,
    "emoji": EMOJI_PATTERN,
}

# Normalising checks; JSON Schema has no vocabulary for them
_NO_OPS = frozenset({"to_lower_case", "to_upper_case", "trim"})


def parse_string_def(definition: StringDef, refs: Refs) -> JsonSchema:
    res: JsonSchema = {"type": "string"}

    for check in definition.checks:
        kind = check.kind
        if kind == "min":
            merge_bound(res, "minLength", check.value, check.message, refs, upper=False)
        elif kind == "max":
            merge_bound(res, "maxLength", check.value, check.message, refs, upper=True)
        elif kind == "length":
            merge_bound(res, "minLength", check.value, check.message, refs, upper=False)
            merge_bound(res, "maxLength", check.value, check.message, refs, upper=True)
        elif kind in _FORMATS:
            add_format(res, _FORMATS[kind], check.message, refs)
        elif kind == "ip":
            if check.version != "v6":
                add_format(res, "ipv4", check.message, refs)
            if check.version != "v4":
                add_format(res, "ipv6", check.message, refs)
        elif kind == "regex":
            add_pattern(res, check.pattern, check.message, refs)
        elif kind in _FIXED_PATTERNS:
            add_pattern(res, _FIXED_PATTERNS[kind], check.message, refs)
        elif kind == "starts_with":
            add_pattern(res, "^" + escape_non_alphanumeric(check.value), check.message, refs)
        elif kind == "ends_with":
            add_pattern(res, escape_non_alphanumeric(check.value) + "$", check.message, refs)
        elif kind == "includes":
            add_pattern(res, escape_non_alphanumeric(check.value), check.message, refs)
        elif kind in _NO_OPS:
            continue
        else:
            raise UnsupportedCheckError(kind, definition.kind)

    return res


def escape_non_alphanumeric(value: str) -> str:
    """Backslash-escapes every character that is not ASCII alphanumeric."""
    return "".join(c if c.isascii() and c.isalnum() else "\\" + c for c in value)


def add_format(schema: JsonSchema, value: str, message: Optional[str], refs: Refs) -> None:
    _add_composed(schema, "format", "anyOf", value, message, refs)


def add_pattern(schema: JsonSchema, value: str, message: Optional[str], refs: Refs) -> None:
    _add_composed(schema, "pattern", "allOf", value, message, refs)


def _add_composed(
    schema: JsonSchema,
    key: str,
    composition: str,
    value: str,
    message: Optional[str],
    refs: Refs,
) -> None:
    entries = schema.get(composition)
    if key not in schema and not (entries and any(key in entry for entry in entries)):
        merge_constraint(schema, key, value, message, refs)
        return

    entries = schema.setdefault(composition, [])

    if key in schema:
        # Demote the single value, taking its message along
        demoted: JsonSchema = {key: schema.pop(key)}
        error_message = schema.get("errorMessage")
        if error_message is not None and key in error_message:
            if refs.error_messages:
                demoted["errorMessage"] = {key: error_message[key]}
            del error_message[key]
            if not error_message:
                del schema["errorMessage"]
        entries.append(demoted)
        logger.debug("Demoted single constraint into composition.", constraint=key, composition=composition)

    entry: JsonSchema = {key: value}
    if message and refs.error_messages:
        entry["errorMessage"] = {key: message}
    entries.append(entry)
