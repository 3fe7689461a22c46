"""
Viewer session: one immutable snapshot of (source, syntax tree, display
tree) at a time.

reload() builds the complete new snapshot before swapping it in. A failed
parse leaves the previous snapshot in place. Properties are computed only
for the element the caller selects.
"""

import logging
from typing import List, NamedTuple, Optional, Tuple

from syntax_viewer.config import DEFAULT_CONFIG, ViewerConfig
from syntax_viewer.core.materializer import DisplayNode, materialize
from syntax_viewer.core.parser_cst import parse_source
from syntax_viewer.core.syntax import SyntaxNode
from syntax_viewer.errors import ParseOutcome
from syntax_viewer.inspection.inspector import PropertyEntry, get_properties
from syntax_viewer.utils.log_setup import ensure_logging

ensure_logging()
logger = logging.getLogger("syntax_viewer.session")


class Snapshot(NamedTuple):
    source: str
    root: SyntaxNode
    display_root: DisplayNode


def parse_path(path) -> List[int]:
    """'0.3.1' or [0, 3, 1] -> [0, 3, 1]. The empty path is the root."""
    if isinstance(path, str):
        if path == "":
            return []
        segments = path.split(".")
        if any(not segment.strip() for segment in segments):
            raise ValueError(f"empty segment in path {path!r}")
        parts = [int(segment) for segment in segments]
    else:
        parts = [int(part) for part in path]
    if any(part < 0 for part in parts):
        raise ValueError(f"negative index in path {path!r}")
    return parts


class ViewerSession:
    def __init__(self, config: Optional[ViewerConfig] = None):
        self.config = config or DEFAULT_CONFIG
        self._snapshot: Optional[Snapshot] = None

    @property
    def snapshot(self) -> Optional[Snapshot]:
        return self._snapshot

    def load(self, source: str) -> Tuple[ParseOutcome, Optional[Snapshot]]:
        """
        Parse and materialize source, then swap the result in. Returns the
        outcome together with the snapshot built by this call (None on
        failure), so callers never have to read the shared snapshot back.
        """
        logger.info("Session: reload started (%d chars)", len(source))
        outcome = parse_source(source)
        if not outcome.ok:
            logger.warning("Session: reload kept previous snapshot: %s", outcome.failure)
            return outcome, None

        display_root = materialize(outcome.root, self.config.max_depth)
        snapshot = Snapshot(source, outcome.root, display_root)
        self._snapshot = snapshot
        logger.info("Session: snapshot replaced")
        return outcome, snapshot

    def reload(self, source: str) -> ParseOutcome:
        return self.load(source)[0]

    def select(self, path, snapshot: Optional[Snapshot] = None) -> DisplayNode:
        """Display node at path. Raises LookupError if there is none."""
        if snapshot is None:
            snapshot = self._snapshot
        if snapshot is None:
            raise LookupError("No source loaded")
        try:
            return snapshot.display_root.find(parse_path(path))
        except (IndexError, ValueError):
            raise LookupError(f"No display node at path {path!r}")

    def properties(self, path, snapshot: Optional[Snapshot] = None) -> List[PropertyEntry]:
        node = self.select(path, snapshot)
        element = node.element
        if element is None:
            return [PropertyEntry("Anomaly", node.anomaly or "element no longer available", True)]
        return get_properties(element, self.config)
