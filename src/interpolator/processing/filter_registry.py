from __future__ import annotations
"""
FilterRegistry

Instance-scoped mapping of single-letter specifiers to ``str -> str``
callables. Registries are independent: mutating one never affects another
or the module-level default table.

Specifier rules:
    * exactly one ASCII letter (``A``-``Z``, ``a``-``z``), case-sensitive
    * ``-`` is reserved (suppresses auto filters) and can never be registered
"""

import re
from typing import Callable, Dict, Mapping, Optional

from interpolator.errors import ConfigurationError, FilterNotFoundError
from interpolator.core.interfaces.logging import LoggerLikeProtocol
from interpolator.logging.helpers import get_logger
from interpolator.processing.filters import default_filters

FilterFn = Callable[[str], str]

_SPECIFIER_RX = re.compile(r'[A-Za-z]')


class FilterRegistry:
    def __init__(self, filters: Optional[Mapping[str, FilterFn]] = None, *,
                 logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._log = logger or get_logger('processing.filters')
        self._filters: Dict[str, FilterFn] = {}
        self.set_filters(filters)

    @classmethod
    def empty(cls) -> 'FilterRegistry':
        return cls({})

    @staticmethod
    def validate_specifier(specifier: str) -> None:
        if not isinstance(specifier, str) or not _SPECIFIER_RX.fullmatch(specifier):
            raise ConfigurationError(f'Illegal specifier: {specifier!r}')

    def set_filters(self, filters: Optional[Mapping[str, FilterFn]] = None) -> None:
        """Replace the registry contents.

        ``None`` restores the default table, an empty mapping unregisters
        every filter, anything else becomes the new table. Every entry is
        validated before the table is swapped, so a bad entry leaves the
        registry unchanged.
        """
        if filters is None:
            self._filters = default_filters()
            self._log.debug('filters reset to defaults (%d)', len(self._filters))
            return
        if not isinstance(filters, Mapping):
            raise ConfigurationError(f'Expected mapping of filters (got {type(filters).__name__})')
        table: Dict[str, FilterFn] = {}
        for specifier, fn in filters.items():
            self._check_entry(specifier, fn)
            table[specifier] = fn
        self._filters = table
        self._log.debug('filters replaced (%d)', len(table))

    def _check_entry(self, specifier: str, fn: FilterFn) -> None:
        self.validate_specifier(specifier)
        if not callable(fn):
            raise ConfigurationError(f'Expected callable (got {type(fn).__name__})')

    def set_filter(self, specifier: str, fn: FilterFn) -> None:
        self._check_entry(specifier, fn)
        self._filters[specifier] = fn
        self._log.debug('filter %r registered', specifier)

    def get_filter(self, specifier: str) -> FilterFn:
        fn = self._filters.get(specifier)
        if fn is None:
            raise FilterNotFoundError(specifier)
        return fn

    def lookup(self, specifier: str) -> Optional[FilterFn]:
        return self._filters.get(specifier)

    def get_filters(self) -> Dict[str, FilterFn]:
        return dict(self._filters)

    def copy(self) -> 'FilterRegistry':
        clone = FilterRegistry.empty()
        clone._log = self._log
        clone._filters = dict(self._filters)
        return clone

    def __contains__(self, specifier: object) -> bool:
        return specifier in self._filters

    def __len__(self) -> int:
        return len(self._filters)
