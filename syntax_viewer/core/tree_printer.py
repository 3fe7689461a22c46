# ==========================================================
# DISPLAY TREE PRINTER — TERMINAL EDITION
# ==========================================================
"""
Renders a materialized display tree and a property table as text.

The core only emits classifications (Node / Token); colours come from the
Theme passed in by the caller.
"""

from typing import Iterable, List, NamedTuple

from syntax_viewer.config import colors_enabled
from syntax_viewer.core.materializer import Classification, DisplayNode


# ---------------- THEMES ------------------
class Theme(NamedTuple):
    node: str = ''
    token: str = ''
    anomaly: str = ''
    header: str = ''
    error: str = ''
    reset: str = ''


PLAIN = Theme()

# bright green tokens / bright blue nodes suit dark terminals
DARK = Theme(
    node='\033[38;5;39m',
    token='\033[38;5;46m',
    anomaly='\033[38;5;198m',
    header='\033[1m\033[38;5;118m',
    error='\033[38;5;198m',
    reset='\033[0m',
)


def default_theme() -> Theme:
    return DARK if colors_enabled() else PLAIN


def color_for(node: DisplayNode, theme: Theme) -> str:
    if node.is_placeholder:
        return theme.anomaly
    if node.classification is Classification.TOKEN:
        return theme.token
    return theme.node


# ---------------- CORE TREE PRINTER ------------------------
def render_tree(root: DisplayNode, theme: Theme = PLAIN, show_paths: bool = False) -> str:
    """
    One line per display node, box-drawing branches, root without a
    branch symbol. Iterative, so deep trees render too.
    """
    lines: List[str] = []
    # (node, prefix for this line, prefix for its children, path)
    stack = [(root, "", "", ())]
    while stack:
        node, prefix, child_prefix, path = stack.pop()
        label = node.label
        if show_paths:
            label = f"[{'.'.join(map(str, path))}] {label}"
        lines.append(prefix + color_for(node, theme) + label + theme.reset)

        total = len(node.children)
        for i in reversed(range(total)):
            last = i == total - 1
            branch = "└── " if last else "├── "
            below = "    " if last else "│   "
            stack.append((node.children[i], child_prefix + branch, child_prefix + below, path + (i,)))
    return "\n".join(lines)


def render_properties(entries: Iterable, theme: Theme = PLAIN) -> str:
    entries = list(entries)
    if not entries:
        return ""
    width = max(len(e.name) for e in entries)
    lines = [theme.header + "PROPERTY".ljust(width) + "  VALUE" + theme.reset]
    for entry in entries:
        value = entry.formatted_value.replace("\n", "\n" + " " * (width + 2))
        color = theme.error if entry.is_error else ""
        reset = theme.reset if entry.is_error else ""
        lines.append(f"{entry.name.ljust(width)}  {color}{value}{reset}")
    return "\n".join(lines)


# ---------------- ENTRY POINT -----------------------------
def print_tree(root: DisplayNode, theme: Theme = None, show_paths: bool = False):
    theme = default_theme() if theme is None else theme
    print("\n" + theme.header + "=== SYNTAX TREE ===" + theme.reset)
    print(render_tree(root, theme, show_paths))
    print(theme.header + "=" * 55 + theme.reset)
