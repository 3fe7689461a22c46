"""
Generic property inspector.

Walks the property schema of whatever element variant it is given and
formats every value by its shape. Nothing here knows about particular node
or token kinds. One failing property becomes an error entry and
enumeration continues; inspect() itself never raises.
"""

import logging
from collections.abc import Iterable, Sized
from typing import List, NamedTuple

from syntax_viewer.config import DEFAULT_CONFIG, NODE_SKIPPED_PROPERTIES, TOKEN_SKIPPED_PROPERTIES
from syntax_viewer.core.syntax import SyntaxNode, SyntaxToken, SyntaxTriviaList
from syntax_viewer.errors import PropertyComputationFailure
from syntax_viewer.utils.log_setup import ensure_logging
from syntax_viewer.utils.truncation import truncate

ensure_logging()
logger = logging.getLogger("syntax_viewer.inspector")

TO_STRING = "ToString()"

PRIMITIVES = (bool, int, float, str)


class PropertyEntry(NamedTuple):
    name: str
    formatted_value: str
    is_error: bool = False


def format_trivia_list(trivia: SyntaxTriviaList, config=DEFAULT_CONFIG, max_length=None) -> str:
    """
    "Count: N" plus one line per previewed trivia. max_length applies to the
    head only; each preview line has its own limit.
    """
    text = f"Count: {len(trivia)}"
    if max_length is not None:
        text = truncate(text, max_length)
    for i, item in enumerate(trivia[:config.trivia_preview_count]):
        preview = truncate(item.to_string(), config.trivia_preview_max_length)
        text += f'\n  [{i}] {item.kind.name}: "{preview}"'
    return text


def format_value(value, config=DEFAULT_CONFIG) -> str:
    if value is None:
        return "null"
    if isinstance(value, SyntaxNode):
        return f"{value.kind.name} ({value.type_name})"
    if isinstance(value, SyntaxTriviaList):
        return format_trivia_list(value, config)
    if isinstance(value, PRIMITIVES):
        return str(value)
    if isinstance(value, Sized) and isinstance(value, Iterable):
        return f"Count: {len(value)} ({type(value).__name__})"
    return f"{value} ({type(value).__name__})"


def _error_entry(name: str, exc: BaseException) -> PropertyEntry:
    failure = PropertyComputationFailure(name, exc)
    logger.warning("Inspector: %s", failure)
    return PropertyEntry(name, f"Error: {exc}", True)


def inspect(element, max_length: int, skipped=frozenset(), config=DEFAULT_CONFIG) -> List[PropertyEntry]:
    """
    Ordered property entries of element, plus a final ToString() entry.
    Indexers and names in `skipped` are left out.
    """
    entries: List[PropertyEntry] = []
    schema_of = getattr(type(element), "property_schema", None)
    schema = schema_of() if schema_of is not None else ()

    for spec in schema:
        if spec.parameters or spec.name in skipped:
            continue
        try:
            value = spec.accessor(element)
            if isinstance(value, SyntaxTriviaList):
                text = format_trivia_list(value, config, max_length)
            else:
                text = truncate(format_value(value, config), max_length)
        except Exception as exc:
            entries.append(_error_entry(spec.name, exc))
            continue
        entries.append(PropertyEntry(spec.name, text))

    try:
        to_string = element.to_string() if hasattr(element, "to_string") else str(element)
        entries.append(PropertyEntry(TO_STRING, truncate(to_string, config.to_string_max_length)))
    except Exception as exc:
        entries.append(_error_entry(TO_STRING, exc))

    logger.debug("Inspector: %s -> %d entries", type(element).__name__, len(entries))
    return entries


def get_properties(element, config=DEFAULT_CONFIG) -> List[PropertyEntry]:
    """Inspect with the budget of the element's context (node or token)."""
    if isinstance(element, SyntaxToken):
        return inspect(element, config.token_value_max_length, TOKEN_SKIPPED_PROPERTIES, config)
    return inspect(element, config.node_value_max_length, NODE_SKIPPED_PROPERTIES, config)
