from .filter_chain import FilterChainExecutor
from .filter_registry import FilterRegistry
from .filters import default_filters
from .fixture_resolver import FixtureResolver

__all__ = [
    'FilterChainExecutor',
    'FilterRegistry',
    'FixtureResolver',
    'default_filters',
]
