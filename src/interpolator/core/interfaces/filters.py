from __future__ import annotations
"""Filter and filter registry protocol definitions."""

from typing import Callable, Dict, Protocol, runtime_checkable

FilterFn = Callable[[str], str]


@runtime_checkable
class FilterRegistryProtocol(Protocol):
    """Mapping of single-letter specifiers to string transforms.

    Methods:
        set_filter: Register (or overwrite) one filter; validates the specifier.
        get_filter: Return the filter for a specifier or raise a lookup error.
        get_filters: Return a copy of the whole mapping.
        lookup: Return the filter for a specifier or ``None``.
    """

    def set_filter(self, specifier: str, fn: FilterFn) -> None:
        ...

    def get_filter(self, specifier: str) -> FilterFn:
        ...

    def get_filters(self) -> Dict[str, FilterFn]:
        ...

    def lookup(self, specifier: str) -> FilterFn | None:
        ...
