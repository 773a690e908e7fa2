from __future__ import annotations
"""Logging protocol definitions.

The engine and its processing stages accept any object satisfying
``LoggerLikeProtocol`` as their ``logger`` argument; the CLI configures its
diagnostics through a ``LoggerFactoryProtocol``.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class LoggerLikeProtocol(Protocol):
    """Logging calls made by the engine (debug) and the CLI (error)."""

    def debug(self, msg: str, *args, **kwargs) -> None: ...

    def error(self, msg: str, *args, **kwargs) -> None: ...


@runtime_checkable
class LoggerFactoryProtocol(Protocol):
    """Hands out scoped loggers, configuring output on first use."""

    def get_logger(self, name: str) -> LoggerLikeProtocol:
        ...
