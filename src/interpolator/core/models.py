from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from interpolator.errors import ConfigurationError


@dataclass(frozen=True)
class LiteralSpan:
    """Template text emitted verbatim."""
    text: str


@dataclass(frozen=True)
class PlaceholderToken:
    """A syntactically valid placeholder and the backslashes preceding it.

    ``filters`` is ``None`` when the placeholder has no ``|`` at all and the
    (possibly empty) specifier string otherwise.
    """
    backslashes: int
    name: str
    filters: Optional[str]
    raw: str

    @property
    def escaped(self) -> bool:
        return self.backslashes % 2 == 1

    @property
    def specifiers(self) -> Tuple[str, ...]:
        return tuple(self.filters or '')


Segment = Union[LiteralSpan, PlaceholderToken]


@dataclass(frozen=True)
class EngineOptions:
    """Recognised engine options. Field names are the option names."""
    strict: bool = True

    @classmethod
    def names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def check_name(cls, name: str) -> None:
        if name not in cls.names():
            raise ConfigurationError(f'Unrecognised option: {name}')

    @classmethod
    def from_mapping(cls, options: Optional[Mapping[str, Any]]) -> 'EngineOptions':
        opts = cls()
        for name, value in (options or {}).items():
            opts = opts.with_option(name, value)
        return opts

    def with_option(self, name: str, value: Any) -> 'EngineOptions':
        self.check_name(name)
        return replace(self, **{name: value})

    def get(self, name: str) -> Any:
        self.check_name(name)
        return getattr(self, name)

    def as_dict(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in self.names()}
