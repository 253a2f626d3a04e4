"""
Custom exceptions for defschema conversions.
"""
from typing import Any, Optional


class DefSchemaError(Exception):
    """Base class for all defschema errors."""
    pass

class UnsupportedCheckError(DefSchemaError):
    """Raised when a converter meets a check kind it has no translation for.
    Dropping it silently would emit an under-constrained schema."""
    def __init__(self, check_kind: Any, definition_kind: str, message: Optional[str] = None):
        super().__init__(message or f"Unsupported check '{check_kind}' on '{definition_kind}' definition")
        self.check_kind = check_kind
        self.definition_kind = definition_kind

class UnsupportedDefinitionError(DefSchemaError):
    """Raised by the dispatcher for a definition kind with no converter."""
    def __init__(self, definition_kind: Any):
        super().__init__(f"No converter registered for definition kind '{definition_kind}'")
        self.definition_kind = definition_kind

class MalformedDefinitionError(DefSchemaError):
    """Raised when a value lacks the fields its kind requires."""
    def __init__(self, message: str, path: Optional[list[str]] = None):
        if path:
            message = f"{message} (at {'/'.join(path)})"
        super().__init__(message)
        self.path = path
