from __future__ import annotations
from typing import Any, Mapping, Protocol, Sequence, Union, runtime_checkable

Fixtures = Union[Mapping[str, Any], Sequence[Any]]


@runtime_checkable
class TemplateEngineProtocol(Protocol):
    """Protocol for single-pass, string-based template engines."""

    def render(self, template: str, fixtures: Fixtures) -> str:
        ...
