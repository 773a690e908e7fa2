from __future__ import annotations

from typing import Any, Mapping, Optional

from interpolator.errors import (
    ConfigurationError,
    FilterNotFoundError,
    FixtureNotFoundError,
    InterpolatorError,
    RenderError,
    UnrecognisedFilterSpecifierError,
    UnsupportedFixtureTypeError,
)
from interpolator.core.models import EngineOptions, LiteralSpan, PlaceholderToken
from interpolator.core.interfaces.templating import Fixtures, TemplateEngineProtocol
from interpolator.parsing.tokenizer import PlaceholderTokenizer
from interpolator.processing.filter_registry import FilterRegistry
from interpolator.processing.filters import default_filters
from interpolator.rendering.interpolator import Interpolator
from interpolator.logging.helpers import get_logger

__version__ = '1.0.0'


def render(template: str, fixtures: Fixtures, *, options: Optional[Mapping[str, Any]] = None) -> str:
    """One-shot helper: render *template* with a default-configured engine."""
    return Interpolator(options).render(template, fixtures)


__all__ = [
    'Interpolator',
    'render',
    'default_filters',
    'EngineOptions',
    'FilterRegistry',
    'PlaceholderTokenizer',
    'LiteralSpan',
    'PlaceholderToken',
    'TemplateEngineProtocol',
    'InterpolatorError',
    'ConfigurationError',
    'FilterNotFoundError',
    'RenderError',
    'FixtureNotFoundError',
    'UnsupportedFixtureTypeError',
    'UnrecognisedFilterSpecifierError',
    'get_logger',
]
