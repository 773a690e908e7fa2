"""Exception hierarchy for the interpolation engine.

Configuration errors are raised by the mutating accessors of
:class:`~interpolator.rendering.interpolator.Interpolator`; render errors are
raised by ``render`` and abort the whole call.
"""

from typing import Optional


class InterpolatorError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(InterpolatorError, ValueError):
    """Invalid option, filter or auto-filter configuration."""


class FilterNotFoundError(ConfigurationError, LookupError):
    """Requested filter specifier is not registered."""

    def __init__(self, specifier: str) -> None:
        super().__init__(f'Unrecognised specifier: {specifier}')
        self.specifier = specifier


class RenderError(InterpolatorError, RuntimeError):
    """Base class for failures raised while rendering a template."""


class FixtureNotFoundError(RenderError):
    def __init__(self, name: str) -> None:
        super().__init__(f'Fixture not found: {name}')
        self.name = name


class UnsupportedFixtureTypeError(RenderError, TypeError):
    def __init__(self, name: str, type_name: str) -> None:
        super().__init__(f'Unsupported fixture value type: {name} ({type_name})')
        self.name = name
        self.type_name = type_name


class UnrecognisedFilterSpecifierError(RenderError):
    """Raised in strict and non-strict mode alike."""

    def __init__(self, specifier: str, *, placeholder: Optional[str] = None) -> None:
        msg = f'Unrecognised or invalid filter specifier: {specifier!r}'
        if placeholder:
            msg += f' in {placeholder}'
        super().__init__(msg)
        self.specifier = specifier
        self.placeholder = placeholder
