"""
interpolator – The ``%{name|filters}`` interpolation engine.

An :class:`Interpolator` owns three pieces of configuration:

  • options       → :class:`EngineOptions` (``strict``, default True)
  • filters       → a :class:`FilterRegistry` (default table unless replaced)
  • auto filters  → specifiers applied to every placeholder after its own
                    filters, unless the placeholder carries ``-``

Configuration is read-mostly: setters hold the instance lock, ``render``
snapshots the configuration under the same lock and then works lock-free,
so renders may run concurrently with each other.

Typical use::

    engine = Interpolator({'strict': False}, auto_filters='h')
    engine.render('<a title="%{0}">%{name|u-}</a>', {'0': 'x', 'name': 'dana'})
"""

import threading
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from interpolator.constants import ESCAPE_CHAR, SUPPRESS_AUTO_FILTERS
from interpolator.core.interfaces.templating import Fixtures, TemplateEngineProtocol
from interpolator.core.models import EngineOptions, LiteralSpan, Segment
from interpolator.errors import ConfigurationError, UnrecognisedFilterSpecifierError
from interpolator.core.interfaces.logging import LoggerLikeProtocol
from interpolator.logging.helpers import get_logger
from interpolator.parsing.tokenizer import PlaceholderTokenizer
from interpolator.processing.filter_chain import FilterChainExecutor
from interpolator.processing.filter_registry import FilterFn, FilterRegistry
from interpolator.processing.filters import default_filters
from interpolator.processing.fixture_resolver import FixtureResolver

AutoFilterSpec = Union[str, Sequence[str], None]


class Interpolator(TemplateEngineProtocol):
    """Single-pass placeholder interpolator with filters and auto filters."""

    def __init__(
        self,
        options: Optional[Mapping[str, Any]] = None,
        filters: Optional[Mapping[str, FilterFn]] = None,
        auto_filters: AutoFilterSpec = None,
        *,
        tokenizer: Optional[PlaceholderTokenizer] = None,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._log = logger or get_logger('engine')
        self._lock = threading.RLock()
        self._tokenizer = tokenizer or PlaceholderTokenizer()
        self._options = EngineOptions()
        self._registry = FilterRegistry(logger=self._log)
        self._auto_filters: Tuple[str, ...] = ()

        self.set_options(options)
        self.set_filters(filters)
        self.set_auto_filters(auto_filters)

    # ------------------------------------------------------------------ #
    #  Options                                                           #
    # ------------------------------------------------------------------ #
    @staticmethod
    def default_options() -> Dict[str, Any]:
        return EngineOptions().as_dict()

    def set_options(self, options: Optional[Mapping[str, Any]] = None) -> 'Interpolator':
        """Set several options at once; None or empty restores the defaults."""
        with self._lock:
            if not options:
                self._options = EngineOptions()
            else:
                self._options = EngineOptions.from_mapping(
                    {**self._options.as_dict(), **dict(options)}
                )
            self._log.debug('options set: %r', self._options.as_dict())
        return self

    def set_option(self, name: str, value: Any) -> 'Interpolator':
        with self._lock:
            self._options = self._options.with_option(name, value)
            self._log.debug('option %s=%r', name, value)
        return self

    def get_options(self) -> Dict[str, Any]:
        with self._lock:
            return self._options.as_dict()

    def get_option(self, name: str) -> Any:
        with self._lock:
            return self._options.get(name)

    # ------------------------------------------------------------------ #
    #  Filters                                                           #
    # ------------------------------------------------------------------ #
    @staticmethod
    def default_filters() -> Dict[str, FilterFn]:
        return default_filters()

    def set_filters(self, filters: Optional[Mapping[str, FilterFn]] = None) -> 'Interpolator':
        """Replace the filter table (None → defaults, empty → no filters).

        Auto filters are not re-validated here; a specifier that disappears
        from the table fails at render time instead.
        """
        with self._lock:
            self._registry.set_filters(filters)
        return self

    def set_filter(self, specifier: str, fn: FilterFn) -> 'Interpolator':
        with self._lock:
            self._registry.set_filter(specifier, fn)
        return self

    def get_filters(self) -> Dict[str, FilterFn]:
        with self._lock:
            return self._registry.get_filters()

    def get_filter(self, specifier: str) -> FilterFn:
        with self._lock:
            return self._registry.get_filter(specifier)

    def set_auto_filters(self, specifiers: AutoFilterSpec = None) -> 'Interpolator':
        """Set the filters applied after every placeholder's own filters.

        *specifiers* may be a string (one specifier per character) or a
        sequence of specifiers. None or empty disables auto filters.

        Raises:
            ConfigurationError: *specifiers* is neither a string nor a
                sequence, or a specifier is reserved, repeated or unknown.
        """
        if specifiers is not None and not isinstance(specifiers, (str, Sequence)):
            raise ConfigurationError(
                f'Expected string or sequence of specifiers (got {type(specifiers).__name__})'
            )
        specs = tuple(specifiers or ())
        with self._lock:
            seen = set()
            for spec in specs:
                if spec == SUPPRESS_AUTO_FILTERS:
                    raise ConfigurationError(
                        f'{SUPPRESS_AUTO_FILTERS!r} cannot be used as an auto filter'
                    )
                if spec in seen:
                    raise ConfigurationError(f'Duplicate auto filter specifier: {spec}')
                if spec not in self._registry:
                    raise ConfigurationError(f'Unrecognised specifier: {spec}')
                seen.add(spec)
            self._auto_filters = specs
            self._log.debug('auto filters set: %r', ''.join(specs))
        return self

    def get_auto_filters(self) -> Tuple[str, ...]:
        with self._lock:
            return self._auto_filters

    # ------------------------------------------------------------------ #
    #  Rendering                                                         #
    # ------------------------------------------------------------------ #
    def tokenize(self, template: str) -> List[Segment]:
        return self._tokenizer.tokenize(template)

    def render(self, template: str, fixtures: Fixtures) -> str:
        """Render *template* by substituting every live placeholder.

        Args:
            template: Text containing ``%{name}`` / ``%{name|specs}`` tokens.
            fixtures: Mapping of names to values, or a sequence addressed by
                index ("0", "1", ...).

        Returns:
            The interpolated string. Templates without ``%{`` are returned
            unchanged.

        Raises:
            FixtureNotFoundError: strict mode, unknown fixture name.
            UnsupportedFixtureTypeError: strict mode, unconvertible value.
            UnrecognisedFilterSpecifierError: unknown specifier (any mode).
        """
        if not self._tokenizer.has_placeholders(template):
            return template

        with self._lock:
            strict = self._options.strict
            chain = FilterChainExecutor(self._registry.copy(), self._auto_filters, logger=self._log)

        resolver = FixtureResolver(strict=strict, logger=self._log)
        values = resolver.normalize(fixtures)

        out: List[str] = []
        for seg in self._tokenizer.tokenize(template):
            if isinstance(seg, LiteralSpan):
                out.append(seg.text)
                continue

            out.append(ESCAPE_CHAR * (seg.backslashes // 2))
            if seg.escaped:
                out.append(seg.raw)
                continue

            value = resolver.resolve(seg.name, values)
            if seg.filters == '':
                raise UnrecognisedFilterSpecifierError('', placeholder=seg.raw)
            out.append(chain.apply(value, seg.specifiers, placeholder=seg.raw))

        return ''.join(out)

    def __call__(self, template: str, fixtures: Fixtures) -> str:
        return self.render(template, fixtures)

    def __repr__(self) -> str:
        return (
            f'{type(self).__name__}(options={self.get_options()!r}, '
            f'filters={"".join(sorted(self.get_filters()))!r}, '
            f'auto_filters={"".join(self.get_auto_filters())!r})'
        )
