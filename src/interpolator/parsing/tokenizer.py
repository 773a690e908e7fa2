from __future__ import annotations

"""
PlaceholderTokenizer – single-pass scanner for ``%{name|filters}`` tokens.

The scanner walks the template left-to-right and splits it into
:class:`LiteralSpan` and :class:`PlaceholderToken` segments:

  • ``%{name}`` / ``%{name|specs}`` → PlaceholderToken
  • the run of backslashes directly before a placeholder is *owned* by the
    token (``backslashes`` count) and removed from the literal text
  • any ``%{`` that does not form a valid placeholder (bad characters,
    whitespace, missing ``}``) stays in the literal text untouched

Matching is non-overlapping and never looks at substituted output, so
``%{%{0}}`` yields the literal ``%{``, one placeholder and the literal ``}``.
"""

import re
from typing import List

from interpolator.constants import (
    ESCAPE_CHAR,
    FILTER_SEPARATOR,
    FILTER_SPEC_CHARS,
    FIXTURE_NAME_CHARS,
    PLACEHOLDER_CLOSE,
    PLACEHOLDER_OPEN,
)
from interpolator.core.models import LiteralSpan, PlaceholderToken, Segment


class PlaceholderTokenizer:
    """Split templates into literal spans and placeholder tokens."""

    _BODY_RX = re.compile(
        rf'([{FIXTURE_NAME_CHARS}]+)'
        rf'(?:{re.escape(FILTER_SEPARATOR)}([{FILTER_SPEC_CHARS}]*))?'
        rf'{re.escape(PLACEHOLDER_CLOSE)}'
    )

    @staticmethod
    def has_placeholders(template: str) -> bool:
        """Cheap pre-check: can *template* contain a placeholder at all?"""
        return PLACEHOLDER_OPEN in template

    def tokenize(self, template: str) -> List[Segment]:
        """Return the ordered segments of *template*.

        Concatenating the ``text`` of every LiteralSpan with, for each token,
        ``ESCAPE_CHAR * backslashes + raw`` reproduces the input exactly.
        """
        segments: List[Segment] = []
        literal_start = 0
        pos = 0
        opener = len(PLACEHOLDER_OPEN)

        while True:
            idx = template.find(PLACEHOLDER_OPEN, pos)
            if idx == -1:
                break
            m = self._BODY_RX.match(template, idx + opener)
            if m is None:
                # Not a placeholder: keep scanning after the opener.
                pos = idx + opener
                continue

            start = idx
            while start > literal_start and template[start - 1] == ESCAPE_CHAR:
                start -= 1
            if start > literal_start:
                segments.append(LiteralSpan(template[literal_start:start]))

            segments.append(
                PlaceholderToken(
                    backslashes=idx - start,
                    name=m.group(1),
                    filters=m.group(2),
                    raw=template[idx:m.end()],
                )
            )
            literal_start = pos = m.end()

        if literal_start < len(template):
            segments.append(LiteralSpan(template[literal_start:]))
        return segments
