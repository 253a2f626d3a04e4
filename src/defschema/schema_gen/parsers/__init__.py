"""
Per-kind converters: ``(definition, refs) -> JSON Schema fragment``.

Converters are looked up by the dispatcher in ``parse_def``; they recurse
through ``parse_def`` and never call each other for child definitions.
"""
