"""
Run-scoped conversion context and the reference tracker.

One ``Refs`` is created per top-level conversion. ``child()`` copies it with
a longer ``current_path`` while sharing the ``seen`` registry, so every
converter in the run sees the same definition-identity -> path mapping and
nothing leaks into the next run.
"""
from dataclasses import dataclass, field, replace
from typing import Any, Optional

from ..config import ConversionOptions

JsonSchema = dict[str, Any]


@dataclass
class SeenItem:
    definition: Any # kept alive so its id() is not reused during the run
    path: list[str]
    json_schema: Optional[JsonSchema] = None


@dataclass
class Refs:
    options: ConversionOptions
    current_path: list[str]
    property_path: Optional[list[str]] = None
    seen: dict[int, SeenItem] = field(default_factory=dict)

    @property
    def error_messages(self) -> bool:
        return self.options.error_messages

    @property
    def effect_strategy(self) -> str:
        return self.options.effect_strategy

    @property
    def ref_strategy(self) -> str:
        return self.options.ref_strategy

    @property
    def target(self) -> str:
        return self.options.target

    @property
    def definition_path(self) -> str:
        return self.options.definition_path

    @property
    def pipe_strategy(self) -> str:
        return self.options.pipe_strategy

    @property
    def date_strategy(self) -> str:
        return self.options.date_strategy

    @property
    def map_strategy(self) -> str:
        return self.options.map_strategy

    def child(self, *segments: Any, property_path: Optional[list[str]] = None) -> "Refs":
        """Context for a nested definition at ``current_path + segments``."""
        child_path = [*self.current_path, *(str(segment) for segment in segments)]
        return replace(
            self,
            current_path=child_path,
            property_path=property_path if property_path is not None else self.property_path,
        )

    def at_property(self, key: str) -> "Refs":
        path = [*self.current_path, "properties", key]
        return replace(self, current_path=path, property_path=path)

    def lookup(self, definition: Any) -> Optional[SeenItem]:
        return self.seen.get(id(definition))

    def register(self, definition: Any, path: Optional[list[str]] = None) -> SeenItem:
        item = SeenItem(definition=definition, path=list(path if path is not None else self.current_path))
        self.seen[id(definition)] = item
        return item


def get_refs(options: Optional[ConversionOptions] = None, **overrides: Any) -> Refs:
    """Fresh context for one conversion run.

    Keyword overrides are validated against ``ConversionOptions``, e.g.
    ``get_refs(error_messages=True, target="openApi3")``.
    """
    if options is None:
        options = ConversionOptions(**overrides)
    elif overrides:
        options = ConversionOptions.model_validate({**options.model_dump(), **overrides})
    return Refs(options=options, current_path=list(options.base_path))
