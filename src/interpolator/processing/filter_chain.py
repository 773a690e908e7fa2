from typing import Optional, Sequence

from interpolator.constants import SUPPRESS_AUTO_FILTERS
from interpolator.core.interfaces.filters import FilterRegistryProtocol
from interpolator.errors import UnrecognisedFilterSpecifierError
from interpolator.core.interfaces.logging import LoggerLikeProtocol
from interpolator.logging.helpers import get_logger


class FilterChainExecutor:
    """Apply per-placeholder filters, then the auto filters.

    Each filter receives the previous filter's output. The reserved ``-``
    specifier transforms nothing; it only switches the auto filters off for
    the current placeholder. Unknown specifiers always raise, whatever the
    strictness of the engine.
    """

    def __init__(
        self,
        registry: FilterRegistryProtocol,
        auto_filters: Sequence[str] = (),
        *,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._registry = registry
        self._auto = tuple(auto_filters)
        self._log = logger or get_logger('processing.chain')

    def apply(self, value: str, specifiers: Sequence[str], *, placeholder: Optional[str] = None) -> str:
        apply_auto = True

        for spec in specifiers:
            if spec == SUPPRESS_AUTO_FILTERS:
                apply_auto = False
                continue
            value = self._run(spec, value, placeholder)

        if apply_auto:
            for spec in self._auto:
                value = self._run(spec, value, placeholder)

        return str(value)

    def _run(self, spec: str, value: str, placeholder: Optional[str]) -> str:
        fn = self._registry.lookup(spec)
        if fn is None:
            raise UnrecognisedFilterSpecifierError(spec, placeholder=placeholder)
        return fn(value)
