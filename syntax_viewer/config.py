"""
Runtime configuration.

The three value budgets (node properties, token properties, ToString) and
the trivia preview budget are kept as separate settings.
"""

import os
import platform
from typing import NamedTuple


class ViewerConfig(NamedTuple):
    node_value_max_length: int = 50
    token_value_max_length: int = 100
    trivia_preview_max_length: int = 30
    trivia_preview_count: int = 3
    to_string_max_length: int = 50
    max_depth: int = 256

    @classmethod
    def from_env(cls, environ=None) -> "ViewerConfig":
        environ = os.environ if environ is None else environ
        values = {}
        for field in cls._fields:
            raw = environ.get(f"SYNTAX_VIEWER_{field.upper()}")
            if raw is None:
                continue
            try:
                values[field] = int(raw)
            except ValueError:
                raise ValueError(f"SYNTAX_VIEWER_{field.upper()} must be an integer, got {raw!r}")
        return cls(**values)


DEFAULT_CONFIG = ViewerConfig()

# Properties hidden from node inspection: the indexer and the numeric
# duplicate of Kind.
NODE_SKIPPED_PROPERTIES = frozenset({"Item", "RawKind"})
TOKEN_SKIPPED_PROPERTIES = frozenset()


def colors_enabled() -> bool:
    # ANSI colours only if not on Windows or if explicitly enabled
    return platform.system() != "Windows" or bool(os.getenv("ANSICON"))
