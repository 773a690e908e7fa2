from __future__ import annotations

"""Public surface for interpolator.core.

Protocol types and the plain data models shared by the tokenizer, the
processing stages and the engine:

    from interpolator.core import EngineOptions, PlaceholderToken, ...
"""

from interpolator.core.interfaces import (
    FilterFn,
    FilterRegistryProtocol,
    Fixtures,
    LoggerFactoryProtocol,
    LoggerLikeProtocol,
    TemplateEngineProtocol,
)
from interpolator.core.models import (
    EngineOptions,
    LiteralSpan,
    PlaceholderToken,
    Segment,
)

__all__ = [
    # Protocols
    "FilterFn",
    "FilterRegistryProtocol",
    "Fixtures",
    "LoggerFactoryProtocol",
    "LoggerLikeProtocol",
    "TemplateEngineProtocol",
    # Models
    "EngineOptions",
    "LiteralSpan",
    "PlaceholderToken",
    "Segment",
]
