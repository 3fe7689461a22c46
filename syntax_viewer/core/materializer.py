"""
Tree materializer: raw syntax tree -> ordered display tree.

The walk is iterative with an explicit stack and depth counter, so deeply
nested input cannot exhaust the interpreter stack. A node deeper than
max_depth is replaced by a single placeholder leaf, and so is any child
that is neither a SyntaxNode nor a SyntaxToken. Traversal carries on past
both.
"""

import enum
import logging
import weakref
from typing import List, NamedTuple, Optional, Tuple

from syntax_viewer.config import DEFAULT_CONFIG
from syntax_viewer.core.syntax import SyntaxNode, SyntaxToken
from syntax_viewer.errors import TraversalAnomaly
from syntax_viewer.utils.log_setup import ensure_logging

ensure_logging()
logger = logging.getLogger("syntax_viewer.materializer")


class Classification(enum.Enum):
    NODE = "Node"
    TOKEN = "Token"

    def __str__(self):
        return self.value


class DisplayNode(NamedTuple):
    label: str
    classification: Classification
    element_ref: Optional[weakref.ref]
    children: Tuple["DisplayNode", ...] = ()
    anomaly: Optional[str] = None

    @property
    def element(self):
        """The backing SyntaxNode/SyntaxToken, or None for placeholders."""
        return self.element_ref() if self.element_ref is not None else None

    @property
    def is_placeholder(self) -> bool:
        return self.anomaly is not None

    def find(self, path):
        """Resolve a child-index path (sequence of ints) below this node."""
        node = self
        for index in path:
            node = node.children[index]
        return node

    def walk(self):
        """Pre-order traversal, iterative."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


def node_label(node: SyntaxNode) -> str:
    return f"{node.kind.name} - {node.type_name}"


def token_label(token: SyntaxToken) -> str:
    label = token.kind.name
    if token.text:
        label += f': "{token.text}"'
    return label


def _token_display(token: SyntaxToken) -> DisplayNode:
    return DisplayNode(token_label(token), Classification.TOKEN, weakref.ref(token))


def _placeholder(anomaly: TraversalAnomaly) -> DisplayNode:
    logger.warning("Materializer: %s", anomaly)
    return DisplayNode(f"<{anomaly}>", Classification.TOKEN, None, (), str(anomaly))


class _Frame:
    __slots__ = ("node", "depth", "children", "index", "built")

    def __init__(self, node, depth):
        self.node = node
        self.depth = depth
        self.children = node.child_nodes_and_tokens()
        self.index = 0
        self.built: List[DisplayNode] = []


def materialize(root, max_depth: Optional[int] = None) -> DisplayNode:
    """
    Build the display tree for root. Child order is source order; nothing
    is reordered, filtered or merged.
    """
    if max_depth is None:
        max_depth = DEFAULT_CONFIG.max_depth
    if isinstance(root, SyntaxToken):
        return _token_display(root)
    if not isinstance(root, SyntaxNode):
        return _placeholder(TraversalAnomaly(f"unexpected root: {type(root).__name__}"))

    logger.info("Materializer: materialize started (max_depth=%d)", max_depth)
    stack = [_Frame(root, 0)]
    count = 1
    result = None

    while stack:
        frame = stack[-1]
        if frame.index < len(frame.children):
            child = frame.children[frame.index]
            frame.index += 1
            if isinstance(child, SyntaxToken):
                frame.built.append(_token_display(child))
            elif isinstance(child, SyntaxNode):
                if frame.depth + 1 > max_depth:
                    frame.built.append(_placeholder(TraversalAnomaly(
                        f"depth limit exceeded at {node_label(child)}")))
                else:
                    stack.append(_Frame(child, frame.depth + 1))
            else:
                frame.built.append(_placeholder(TraversalAnomaly(
                    f"unexpected child: {type(child).__name__}")))
            count += 1
            continue

        stack.pop()
        built = DisplayNode(node_label(frame.node), Classification.NODE,
                            weakref.ref(frame.node), tuple(frame.built))
        if stack:
            stack[-1].built.append(built)
        else:
            result = built

    logger.info("Materializer: materialize finished, display nodes = %d", count)
    return result
