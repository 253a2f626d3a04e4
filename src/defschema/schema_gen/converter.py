"""
Top-level conversion: builds a fresh context per call, converts named
definitions and the root definition, and assembles the document.
"""
from typing import Any, Optional

import structlog
from pydantic import BaseModel

from ..config import Config, ConversionOptions
from ..exceptions import DefSchemaError
from ..models.common import Target
from ..models.definitions import BaseDefinition
from .parse_def import parse_def
from .refs import JsonSchema, get_refs

logger = structlog.get_logger(__name__)

JSON_SCHEMA_7_URI = "http://json-schema.org/draft-07/schema#"


def to_json_schema(
    definition: BaseDefinition,
    options: Optional[ConversionOptions] = None,
    *,
    name: Optional[str] = None,
    definitions: Optional[dict[str, BaseDefinition]] = None,
) -> JsonSchema:
    """Converts ``definition`` into a JSON Schema document.

    Args:
        definition: The root definition.
        options: Conversion options; defaults apply when omitted.
        name: When given, the root is emitted under
              ``<definition_path>/<name>`` and the document is a ``$ref`` to it.
        definitions: Named definitions emitted under ``definition_path``;
                     every other occurrence of them becomes a ``$ref``.
    """
    refs = get_refs(options)
    definitions = definitions
    definition_path = refs.definition_path
    log = logger.bind(name=name, target=refs.target, ref_strategy=refs.ref_strategy)
    log.debug("Starting conversion.", named_definitions=len(definitions))

    # Registered up front so references between named definitions resolve
    for def_name, named in definitions.items():
        refs.register(named, [*refs.current_path, definition_path, def_name])

    emitted: JsonSchema = {}
    for def_name, named in definitions.items():
        emitted[def_name] = parse_def(named, refs.child(definition_path, def_name), force_resolution=True)

    if name is None:
        main = parse_def(definition, refs)
        combined: JsonSchema = dict(main)
        if emitted:
            combined[definition_path] = emitted
    else:
        main_refs = refs.child(definition_path, name)
        main = parse_def(definition, main_refs)
        combined = {
            "$ref": "/".join(main_refs.current_path),
            definition_path: {**emitted, name: main},
        }

    if refs.target == Target.JSON_SCHEMA_7:
        combined = {"$schema": JSON_SCHEMA_7_URI, **combined}

    log.info("Conversion finished.", definitions_seen=len(refs.seen))
    return combined


class ConversionServiceResult(BaseModel):
    json_schema: Optional[dict[str, Any]] = None
    error_message: Optional[str] = None # For errors preventing conversion

    @property
    def has_errors(self) -> bool:
        return self.error_message is not None


class SchemaConverterService:
    """
    Converts definitions with the options of the application configuration.
    """

    def __init__(self, app_config: Config):
        self.app_config = app_config
        self.logger = logger.bind(service="SchemaConverterService")

    def options(self, **overrides: Any) -> ConversionOptions:
        """Configured options, with validated per-call overrides."""
        options = self.app_config.conversion
        if overrides:
            options = ConversionOptions.model_validate({**options.model_dump(), **overrides})
        return options

    def convert(
        self,
        definition: BaseDefinition,
        name: Optional[str] = None,
        definitions: Optional[dict[str, BaseDefinition]] = None,
        **overrides: Any,
    ) -> JsonSchema:
        return to_json_schema(definition, self.options(**overrides), name=name, definitions=definitions)

    def convert_many(
        self,
        named_definitions: dict[str, BaseDefinition],
        fail_fast: bool = False,
    ) -> dict[str, ConversionServiceResult]:
        """
        Converts each definition into its own document named after its key.
        A failing definition is reported in its result; with ``fail_fast`` the
        error is raised instead and the remaining definitions are skipped.
        """
        log = self.logger.bind(num_definitions=len(named_definitions), fail_fast=fail_fast)
        log.info("Converting definitions.")

        results: dict[str, ConversionServiceResult] = {}
        for def_name, definition in named_definitions.items():
            def_log = log.bind(definition_name=def_name)
            try:
                json_schema = self.convert(definition, name=def_name)
            except DefSchemaError as e:
                def_log.error("Definition conversion failed.", error=str(e))
                if fail_fast:
                    raise
                results[def_name] = ConversionServiceResult(error_message=f"Conversion failed: {e}")
                continue
            results[def_name] = ConversionServiceResult(json_schema=json_schema)

        failed = sum(1 for result in results.values() if result.has_errors)
        log.info("Definitions converted.", succeeded=len(results) - failed, failed=failed)
        return results
