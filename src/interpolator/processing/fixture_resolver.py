"""
fixture_resolver – Map placeholder names to substitution strings.

Coercion rules:

  • None → "", True → "1", False → "", int → decimal digits
  • float → shortest round-trip form without a trailing ".0" (-0.0 keeps its sign),
    infinities and NaN render as "INF", "-INF" and "NAN"
  • str → unchanged
  • objects whose class defines its own ``__str__`` → ``str(value)``
  • anything else (sequences, mappings, sets, bytes, bare objects) is
    unsupported: strict mode raises, non-strict mode substitutes the type
    name ("array" for containers, "object" otherwise)
"""

import math
from collections.abc import Mapping, Sequence, Set
from typing import Any, Dict, Optional

from interpolator.core.interfaces.templating import Fixtures
from interpolator.errors import FixtureNotFoundError, UnsupportedFixtureTypeError
from interpolator.core.interfaces.logging import LoggerLikeProtocol
from interpolator.logging.helpers import get_logger

_CONTAINER_TYPES = (Mapping, Sequence, Set, bytes, bytearray, memoryview)


class FixtureResolver:
    """Resolve fixture names against a fixture set under a strictness policy."""

    def __init__(self, *, strict: bool = True, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._strict = bool(strict)
        self._log = logger or get_logger('processing.fixtures')

    @property
    def strict(self) -> bool:
        return self._strict

    @staticmethod
    def normalize(fixtures: Optional[Fixtures]) -> Dict[str, Any]:
        """Return *fixtures* as a ``{str: value}`` dict.

        Sequences are keyed by their decimal index ("0", "1", ...); mapping
        keys are converted with ``str()``.
        """
        if fixtures is None:
            return {}
        if isinstance(fixtures, Mapping):
            return {str(k): v for k, v in fixtures.items()}
        if isinstance(fixtures, (str, bytes, bytearray)) or not isinstance(fixtures, Sequence):
            raise TypeError(
                f'fixtures must be a mapping or a sequence (got {type(fixtures).__name__})'
            )
        return {str(i): v for i, v in enumerate(fixtures)}

    def resolve(self, name: str, fixtures: Mapping[str, Any]) -> str:
        """Return the substitution string for *name*.

        Raises:
            FixtureNotFoundError: strict mode and *name* is absent.
            UnsupportedFixtureTypeError: strict mode and the value cannot be
                converted to a string.
        """
        if name not in fixtures:
            if self._strict:
                raise FixtureNotFoundError(name)
            self._log.debug('fixture %r not found, substituting empty string', name)
            return ''

        value = fixtures[name]
        text = self.to_string(value)
        if text is not None:
            return text

        type_name = self.type_name(value)
        if self._strict:
            raise UnsupportedFixtureTypeError(name, type_name)
        self._log.debug('fixture %r has unsupported type %s, substituting type name', name, type_name)
        return type_name

    @staticmethod
    def to_string(value: Any) -> Optional[str]:
        """Canonical string for *value*, or None when it is not convertible."""
        if value is None or value is False:
            return ''
        if value is True:
            return '1'
        if isinstance(value, str):
            return value
        if isinstance(value, int):
            return str(int(value))
        if isinstance(value, float):
            return _format_float(value)
        if isinstance(value, _CONTAINER_TYPES):
            return None
        if type(value).__str__ is not object.__str__:
            return str(value)
        return None

    @staticmethod
    def type_name(value: Any) -> str:
        if isinstance(value, _CONTAINER_TYPES):
            return 'array'
        return 'object'


def _format_float(value: float) -> str:
    if math.isnan(value):
        return 'NAN'
    if math.isinf(value):
        return 'INF' if value > 0 else '-INF'
    text = repr(value)
    return text[:-2] if text.endswith('.0') else text
