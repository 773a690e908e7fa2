from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates the placeholder grammar so the tokenizer, the registry
and the CLI agree on a single definition.
"""

# Opening sequence of every placeholder. Templates without it are returned as-is.
PLACEHOLDER_OPEN: str = '%{'
PLACEHOLDER_CLOSE: str = '}'
FILTER_SEPARATOR: str = '|'
ESCAPE_CHAR: str = '\\'

# Reserved specifier: disables auto filters for one placeholder.
SUPPRESS_AUTO_FILTERS: str = '-'

# Character classes of the placeholder grammar (ASCII only).
FIXTURE_NAME_CHARS: str = r'A-Za-z0-9_.-'
FILTER_SPEC_CHARS: str = r'A-Za-z0-9-'
