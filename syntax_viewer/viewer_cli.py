from syntax_viewer.config import ViewerConfig
from syntax_viewer.core.lexer_cs import lex_code
from syntax_viewer.core.tree_printer import default_theme, print_tree, render_properties
from syntax_viewer.errors import ParseFailure
from syntax_viewer.session import ViewerSession
from pathlib import Path
import sys


# TOKEN TABLE PRINTER

RESET   = "\033[0m"
CYAN    = "\033[96m"
YELLOW  = "\033[93m"
GREEN   = "\033[92m"
RED     = "\033[91m"
DIM     = "\033[2m"

def format_text(text):
    """Colorize token text nicely."""
    if text == "":
        return DIM + "<empty>" + RESET
    return GREEN + repr(text) + RESET

def print_tokens(lexed):
    """Aligned token table with trivia counts."""
    print("\n" + CYAN + "=== LEXER: TOKENIZATION ===" + RESET + "\n")

    header = f"{YELLOW}LINE COL  KIND{' ' * 24}LEAD TRAIL  TEXT{RESET}"
    print(header)
    print(DIM + "-" * 78 + RESET)

    for item in lexed:
        line = f"{item.line}".rjust(4)
        col  = f"{item.column}".rjust(4)

        kind = (CYAN + item.token.kind.name + RESET).ljust(37)
        lead = f"{len(item.token.leading_trivia)}".rjust(4)
        trail = f"{len(item.token.trailing_trivia)}".rjust(5)

        print(f"{line} {col}  {kind} {lead} {trail}  {format_text(item.token.text)}")


def run_pipeline(input_path, selection=None):
    code = Path(input_path).read_text(encoding="utf-8", errors="replace")
    print(f"\n[SOURCE] {input_path}: {len(code)} chars")

    # Tokens
    print_tokens(lex_code(code))

    # Parse + materialize
    session = ViewerSession(ViewerConfig.from_env())
    outcome = session.reload(code)
    if not outcome.ok:
        raise outcome.failure

    theme = default_theme()
    print_tree(session.snapshot.display_root, theme, show_paths=True)

    # Properties of the selected element
    if selection is not None:
        node = session.select(selection)
        print(f"\n{theme.header}=== PROPERTIES: {node.label} ==={theme.reset}")
        print(render_properties(session.properties(selection), theme))

    return session


if __name__ == "__main__":

    if len(sys.argv) not in (2, 3):
        print("Usage: python -m syntax_viewer.viewer_cli <file.cs> [path]")
        sys.exit(1)

    try:
        run_pipeline(sys.argv[1], sys.argv[2] if len(sys.argv) == 3 else None)
    except ParseFailure as failure:
        print(f"\n{RED}[✗] {failure}{RESET}")
        sys.exit(2)
    except LookupError as e:
        print(f"\n{RED}[✗] {e}{RESET}")
        sys.exit(3)
