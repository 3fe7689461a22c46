import logging

from syntax_viewer.config import ViewerConfig
from syntax_viewer.core.materializer import DisplayNode
from syntax_viewer.core.tree_printer import PLAIN, render_tree
from syntax_viewer.session import ViewerSession
from syntax_viewer.utils.log_setup import ensure_logging

ensure_logging()
logger = logging.getLogger("syntax_viewer.app")

# one desktop-style viewer per process: the current snapshot is shared
session = ViewerSession(ViewerConfig.from_env())


def view_source(code: str, filename: str = "input.cs"):
    outcome, snapshot = session.load(code)
    if not outcome.ok:
        logger.warning("App: parse failed for %s: %s", filename, outcome.failure)
        return {
            "status": "error",
            "file_name": filename,
            "message": "Parse failed",
            "error": outcome.failure.to_dict(),
        }

    display_root = snapshot.display_root
    return {
        "status": "success",
        "file_name": filename,
        "tree": serialize_display_tree(display_root),
        "tree_text": render_tree(display_root, PLAIN),
    }


def view_properties(path: str):
    # both lookups read the same snapshot
    snapshot = session.snapshot
    node = session.select(path, snapshot)
    return {
        "status": "success",
        "path": path,
        "label": node.label,
        "classification": str(node.classification),
        "properties": [
            {"name": e.name, "value": e.formatted_value, "is_error": e.is_error}
            for e in session.properties(path, snapshot)
        ],
    }


# ─────────────────────────────
# Helpers
# ─────────────────────────────

def serialize_display_tree(root: DisplayNode):
    """Nested dicts with a child-index path per node; built iteratively."""
    def shell(node, path):
        data = {
            "path": ".".join(map(str, path)),
            "label": node.label,
            "classification": str(node.classification),
            "children": [],
        }
        if node.is_placeholder:
            data["anomaly"] = node.anomaly
        return data

    top = shell(root, ())
    stack = [(root, (), top)]
    while stack:
        node, path, data = stack.pop()
        for i, child in enumerate(node.children):
            child_path = path + (i,)
            child_data = shell(child, child_path)
            data["children"].append(child_data)
            stack.append((child, child_path, child_data))
    return top
