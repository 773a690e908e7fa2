from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Any, Dict, Iterator, NoReturn, Optional, Sequence, Tuple

from interpolator.core.interfaces.logging import LoggerFactoryProtocol
from interpolator.errors import InterpolatorError
from interpolator.logging.factory import DefaultLoggerFactory
from interpolator.logging.helpers import get_logger
from interpolator.rendering.interpolator import Interpolator
from interpolator.utils.imports import load_object_from_ref

logger = get_logger('cli')


def _configure_logging(enable_json: bool, verbose: bool,
                       factory: Optional[LoggerFactoryProtocol] = None) -> None:
    """Configure process-wide logging, either JSON or plain text.

    A *factory* replaces the default one; the flags only shape the default.
    """
    global logger
    if factory is None:
        level = logging.DEBUG if verbose else logging.INFO
        factory = DefaultLoggerFactory(json_logs=enable_json, level=level)
    logger = factory.get_logger('cli')


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog='interpolator',
        description='Render %{name|filters} templates against JSON fixtures.',
    )
    p.add_argument('templates', nargs='*', metavar='TEMPLATE', help='template string(s) to render')
    p.add_argument('-o', '--options', metavar='JSON', help='engine options as a JSON object, e.g. \'{"strict": false}\'')
    p.add_argument('-f', '--fixtures', metavar='JSON', default='[]',
                   help='fixtures as a JSON array (positional) or object (named)')
    p.add_argument('-a', '--auto-filters', metavar='SPECS', default='', help='auto-filter specifiers, e.g. "h"')
    p.add_argument('-F', '--filter', dest='extra_filters', action='append', default=[], metavar='X=MODULE:ATTR',
                   help='register an extra filter under specifier X (repeatable)')
    p.add_argument('--non-strict', action='store_true', help='shorthand for -o \'{"strict": false}\'')
    p.add_argument('--list-filters', action='store_true', help='print the registered filters and exit')
    p.add_argument('--json-logs', action='store_true', help='emit diagnostics as JSON lines')
    p.add_argument('-v', '--verbose', action='store_true', help='debug logging')
    return p


def _parse_json(parser: argparse.ArgumentParser, raw: Optional[str], flag: str, kinds: Tuple[type, ...]) -> Any:
    if raw is None:
        return None
    try:
        value = json.loads(raw)
    except ValueError as exc:
        parser.error(f'{flag}: invalid JSON ({exc})')
    if not isinstance(value, kinds):
        names = ' or '.join('array' if k is list else 'object' for k in kinds)
        parser.error(f'{flag}: expected a JSON {names}')
    return value


def _parse_filter_refs(parser: argparse.ArgumentParser, items: Sequence[str]) -> Dict[str, Any]:
    """Turn ``X=module:attr`` items into ``{X: callable}``."""
    out: Dict[str, Any] = {}
    for item in items:
        spec, sep, ref = item.partition('=')
        if not sep or not ref:
            parser.error(f'--filter: expected X=MODULE:ATTR (got {item!r})')
        try:
            out[spec] = load_object_from_ref(ref)
        except ImportError as exc:
            parser.error(f'--filter: {exc}')
    return out


class InterpolatorCli:
    """Command-style façade over a single :class:`Interpolator`."""

    def __init__(self, ns: argparse.Namespace, extra_filters: Dict[str, Any], options: Dict[str, Any]) -> None:
        self._ns = ns
        self.engine = Interpolator(options or None)
        for spec, fn in extra_filters.items():
            self.engine.set_filter(spec, fn)
        self.engine.set_auto_filters(ns.auto_filters)

    @property
    def list_only(self) -> bool:
        return bool(self._ns.list_filters)

    @classmethod
    def from_argv(cls, argv: Sequence[str]) -> Tuple['InterpolatorCli', Any]:
        parser = _build_parser()
        ns = parser.parse_args(list(argv))
        options = _parse_json(parser, ns.options, '--options', (dict,)) or {}
        if ns.non_strict:
            options['strict'] = False
        fixtures = _parse_json(parser, ns.fixtures, '--fixtures', (list, dict))
        extra = _parse_filter_refs(parser, ns.extra_filters)
        if not ns.templates and not ns.list_filters:
            parser.error('at least one TEMPLATE is required')
        return cls(ns, extra, options), fixtures

    def describe_filters(self) -> Iterator[str]:
        for spec, fn in sorted(self.engine.get_filters().items(), key=lambda kv: (kv[0].lower(), kv[0])):
            doc = (getattr(fn, '__doc__', None) or '').strip().splitlines()
            name = getattr(fn, '__name__', type(fn).__name__)
            yield f'{spec}  {name}' + (f' - {doc[0]}' if doc else '')

    def render_all(self, fixtures: Any) -> Iterator[str]:
        for template in self._ns.templates:
            result = self.engine.render(template, fixtures)
            logger.debug('rendered %r', template)
            yield f'{template} -> {result}'


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Entry point for the `interpolator` console script and `python -m interpolator`."""
    args = list(sys.argv[1:] if argv is None else argv)
    json_logs = '--json-logs' in args or os.getenv('INTERPOLATOR_JSON_LOGS') == '1'
    _configure_logging(json_logs, '-v' in args or '--verbose' in args)

    try:
        cli, fixtures = InterpolatorCli.from_argv(args)
        lines = cli.describe_filters() if cli.list_only else cli.render_all(fixtures)
        for line in lines:
            print(line)
        raise SystemExit(0)
    except InterpolatorError as exc:
        logger.error('%s: %s', type(exc).__name__, exc)
        raise SystemExit(1)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s: %s', type(exc).__name__, exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
