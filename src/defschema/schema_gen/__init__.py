"""
Schema generation: conversion of definitions into JSON Schema.

The dispatcher (``parse_def``) routes each definition to its converter in
``parsers``; ``refs`` holds the run-scoped reference tracker and
``error_messages`` the constraint merger shared by all converters.
"""

from .converter import ConversionServiceResult, SchemaConverterService, to_json_schema
from .parse_def import parse_def
from .refs import JsonSchema, Refs, SeenItem, get_refs

__all__ = [
    "ConversionServiceResult",
    "JsonSchema",
    "Refs",
    "SchemaConverterService",
    "SeenItem",
    "get_refs",
    "parse_def",
    "to_json_schema",
]
