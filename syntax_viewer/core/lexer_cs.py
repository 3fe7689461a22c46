"""
PLY-based lexer (C# subset) with full-fidelity trivia

- Input: raw C# source text
- Output: list of SyntaxToken objects, each carrying its leading and
  trailing trivia, terminated by an EndOfFileToken
- Whitespace, line breaks and comments are real lex tokens here; they are
  folded into trivia instead of being ignored
- Trailing trivia: everything after a token on the same line, up to and
  including the first end-of-line. Everything else leads the next token.
- Illegal characters are logged and surfaced as BAD_CHARACTER tokens so the
  parser can report them with a position
"""

import logging
import re
import sys
import traceback
from typing import Iterator, List, NamedTuple, Optional

import ply.lex as lex

from syntax_viewer.core.syntax import SyntaxKind, SyntaxToken, SyntaxTrivia
from syntax_viewer.utils.log_setup import ensure_logging

ensure_logging()
logger = logging.getLogger("syntax_viewer.lexer")

#------RESERVED KEYWORD------
_reserved = {
    'abstract': 'ABSTRACT', 'bool': 'BOOL', 'byte': 'BYTE', 'char': 'CHAR', 'class': 'CLASS',
    'const': 'CONST', 'decimal': 'DECIMAL', 'double': 'DOUBLE', 'else': 'ELSE', 'enum': 'ENUM',
    'false': 'FALSE', 'float': 'FLOAT', 'if': 'IF', 'int': 'INT', 'interface': 'INTERFACE',
    'internal': 'INTERNAL', 'long': 'LONG', 'namespace': 'NAMESPACE', 'new': 'NEW',
    'null': 'NULL', 'object': 'OBJECT', 'override': 'OVERRIDE', 'partial': 'PARTIAL',
    'private': 'PRIVATE', 'protected': 'PROTECTED', 'public': 'PUBLIC', 'readonly': 'READONLY',
    'return': 'RETURN', 'sealed': 'SEALED', 'static': 'STATIC', 'string': 'STRING',
    'struct': 'STRUCT', 'this': 'THIS', 'true': 'TRUE', 'using': 'USING', 'virtual': 'VIRTUAL',
    'void': 'VOID', 'while': 'WHILE',
}

# Lex token types that become trivia instead of parser tokens
TRIVIA_TYPES = {
    'WHITESPACE': SyntaxKind.WhitespaceTrivia,
    'END_OF_LINE': SyntaxKind.EndOfLineTrivia,
    'SINGLE_LINE_COMMENT': SyntaxKind.SingleLineCommentTrivia,
    'MULTI_LINE_COMMENT': SyntaxKind.MultiLineCommentTrivia,
}

#-----Token names required by PLY------
tokens = [
    #IDENTIFIER AND LITERALS
    'IDENTIFIER', 'NUMERIC_LITERAL', 'STRING_LITERAL', 'CHARACTER_LITERAL',

    #OPERATORS
    'PLUS', 'MINUS', 'TIMES', 'DIVIDE', 'MOD',
    'ASSIGN', 'PLUS_ASSIGN', 'MINUS_ASSIGN',
    'EQ', 'NEQ', 'LT', 'GT', 'LE', 'GE',
    'AND', 'OR', 'NOT',

    #PUNCTUATORS
    'LPAREN', 'RPAREN', 'LBRACE', 'RBRACE',
    'SEMICOLON', 'COMMA', 'DOT', 'COLON',

    #SYNTHETIC
    'END_OF_FILE', 'BAD_CHARACTER',
] + list(TRIVIA_TYPES) + list(_reserved.values())

KIND_BY_TYPE = {
    'IDENTIFIER': SyntaxKind.IdentifierToken,
    'NUMERIC_LITERAL': SyntaxKind.NumericLiteralToken,
    'STRING_LITERAL': SyntaxKind.StringLiteralToken,
    'CHARACTER_LITERAL': SyntaxKind.CharacterLiteralToken,
    'PLUS': SyntaxKind.PlusToken,
    'MINUS': SyntaxKind.MinusToken,
    'TIMES': SyntaxKind.AsteriskToken,
    'DIVIDE': SyntaxKind.SlashToken,
    'MOD': SyntaxKind.PercentToken,
    'ASSIGN': SyntaxKind.EqualsToken,
    'PLUS_ASSIGN': SyntaxKind.PlusEqualsToken,
    'MINUS_ASSIGN': SyntaxKind.MinusEqualsToken,
    'EQ': SyntaxKind.EqualsEqualsToken,
    'NEQ': SyntaxKind.ExclamationEqualsToken,
    'LT': SyntaxKind.LessThanToken,
    'GT': SyntaxKind.GreaterThanToken,
    'LE': SyntaxKind.LessThanEqualsToken,
    'GE': SyntaxKind.GreaterThanEqualsToken,
    'AND': SyntaxKind.AmpersandAmpersandToken,
    'OR': SyntaxKind.BarBarToken,
    'NOT': SyntaxKind.ExclamationToken,
    'LPAREN': SyntaxKind.OpenParenToken,
    'RPAREN': SyntaxKind.CloseParenToken,
    'LBRACE': SyntaxKind.OpenBraceToken,
    'RBRACE': SyntaxKind.CloseBraceToken,
    'SEMICOLON': SyntaxKind.SemicolonToken,
    'COMMA': SyntaxKind.CommaToken,
    'DOT': SyntaxKind.DotToken,
    'COLON': SyntaxKind.ColonToken,
    'END_OF_FILE': SyntaxKind.EndOfFileToken,
}
for _word, _type in _reserved.items():
    KIND_BY_TYPE[_type] = SyntaxKind[("ReadOnly" if _word == "readonly" else _word.capitalize()) + "Keyword"]

#-------SIMPLE TOKEN REGEXES--------
t_PLUS = r'\+'
t_MINUS = r'-'
t_TIMES = r'\*'
t_DIVIDE = r'/'
t_MOD = r'%'

t_ASSIGN = r'='
t_PLUS_ASSIGN = r'\+='
t_MINUS_ASSIGN = r'-='

t_EQ = r'=='
t_NEQ = r'!='
t_LT = r'<'
t_GT = r'>'
t_LE = r'<='
t_GE = r'>='

t_AND = r'&&'
t_OR = r'\|\|'
t_NOT = r'!'

t_LPAREN = r'\('
t_RPAREN = r'\)'
t_LBRACE = r'\{'
t_RBRACE = r'\}'

t_SEMICOLON = r';'
t_COMMA = r','
t_DOT = r'\.'
t_COLON = r':'

# ---------------- Complex tokens: order matters ----------------

def t_END_OF_LINE(t):
    r'\r\n|\r|\n'
    t.lexer.lineno += 1
    return t

def t_WHITESPACE(t):
    r'[ \t\f\v]+'
    return t

def t_SINGLE_LINE_COMMENT(t):
    r'//[^\r\n]*'
    return t

def t_MULTI_LINE_COMMENT(t):
    r'/\*[\s\S]*?\*/'
    t.lexer.lineno += t.value.count("\n")
    return t

# String literal (double-quoted) - escapes are interpreted lazily by SyntaxToken.value
def t_STRING_LITERAL(t):
    r'"([^"\\\r\n]|\\.)*"'
    return t

#-----------CHARACTER CONSTANT----------
def t_CHARACTER_LITERAL(t):
    r"'([^'\\\r\n]|\\.)*'"
    return t

# Floating point before integers so "1.5" is not split
def t_NUMERIC_LITERAL_REAL(t):
    r'(\d[\d_]*\.\d[\d_]*([eE][+-]?\d+)?|\d[\d_]*[eE][+-]?\d+)[fFdDmM]?|\d[\d_]*[fFdDmM]'
    t.type = 'NUMERIC_LITERAL'
    return t

#HEXADECIMAL integer literal
def t_NUMERIC_LITERAL_HEX(t):
    r'0[xX][0-9a-fA-F_]+[uUlL]*'
    t.type = 'NUMERIC_LITERAL'
    return t

#BINARY literal
def t_NUMERIC_LITERAL_BIN(t):
    r'0[bB][01_]+[uUlL]*'
    t.type = 'NUMERIC_LITERAL'
    return t

#DECIMAL integer
def t_NUMERIC_LITERAL_DEC(t):
    r'\d[\d_]*[uUlL]*'
    t.type = 'NUMERIC_LITERAL'
    return t

#IDENTIFIER and KEYWORDS
def t_IDENTIFIER(t):
    r'@?[A-Za-z_][A-Za-z0-9_]*'
    t.type = _reserved.get(t.value, 'IDENTIFIER')
    return t

#ERROR HANDLING RULE
def t_error(t):
    bad_char = t.value[0]
    col = _find_column(t.lexer.lexdata, t)
    logger.warning(f"Lexer: illegal character {bad_char!r} at line {t.lineno} col {col}")
    #return it as a token so the parser can report it with its position
    t.type = 'BAD_CHARACTER'
    t.value = bad_char
    t.lexer.skip(1)
    return t

#---------HELPER: compute column------------
def _find_column(input_text: str, token) -> int:
    # token.lexpos gives position in the whole input text
    last_cr = input_text.rfind('\n', 0, token.lexpos)
    return token.lexpos - last_cr


class LexedToken(NamedTuple):
    """A significant token ready for the parser: lex type + syntax token."""
    type: str
    token: SyntaxToken
    line: int
    column: int


# master lexer; every call works on a clone to avoid state carryover
_master_lexer = lex.lex(module=sys.modules[__name__], reflags=re.UNICODE, optimize=False)


def build_lexer():
    lexer = _master_lexer.clone()
    lexer.lineno = 1
    return lexer


def iter_tokens(code: str) -> Iterator[LexedToken]:
    """
    Yield significant tokens with trivia attached. The last one is always
    END_OF_FILE, owning any trivia left after the final token.
    """
    lexer = build_lexer()
    lexer.input(code)

    leading: List[SyntaxTrivia] = []
    trailing: List[SyntaxTrivia] = []
    pending: Optional[tuple] = None  # (raw LexToken, leading trivia) awaiting its trailing trivia
    collecting_trailing = False

    def finish(raw, lead, trail):
        kind = KIND_BY_TYPE.get(raw.type, SyntaxKind.IdentifierToken)
        token = SyntaxToken(kind, raw.value, lead, trail, raw.lexpos)
        return LexedToken(raw.type, token, raw.lineno, _find_column(code, raw))

    for raw in lexer:
        if raw.type in TRIVIA_TYPES:
            trivia = SyntaxTrivia(TRIVIA_TYPES[raw.type], raw.value, raw.lexpos)
            if collecting_trailing:
                trailing.append(trivia)
                if raw.type == 'END_OF_LINE':
                    collecting_trailing = False
            else:
                leading.append(trivia)
            continue

        if pending is not None:
            yield finish(pending[0], pending[1], trailing)
        pending = (raw, leading)
        leading, trailing = [], []
        collecting_trailing = True

    if pending is not None:
        yield finish(pending[0], pending[1], trailing)

    eof = SyntaxToken(SyntaxKind.EndOfFileToken, "", leading, (), len(code))
    line = code.count("\n") + 1
    yield LexedToken('END_OF_FILE', eof, line, len(code) - code.rfind("\n"))


#-------MAIN API: LEXCODE--------

def lex_code(code: str) -> List[LexedToken]:
    """
    Tokenize code and return every significant token (EOF included) with
    its trivia attached.
    """
    logger.info("Lexer: lex_code started")
    try:
        lexed = []
        for item in iter_tokens(code):
            lexed.append(item)
            logger.debug(
                f"Lexer: token {item.type} "
                f"text = {item.token.text!r} "
                f"at ({item.line}, {item.column}) "
                f"leading = {len(item.token.leading_trivia)} trailing = {len(item.token.trailing_trivia)}"
            )
        logger.info(f"Lexer: lex_code finished, tokens = {len(lexed)}")
        return lexed
    except Exception as e:
        logger.error("Lexer: lex_code failed: %s", e)
        logger.debug(traceback.format_exc())
        raise


class TokenStream:
    """
    Adapter exposing iter_tokens() through the token() interface PLY's yacc
    expects. Each LexToken's value is the SyntaxToken itself.
    """

    def __init__(self, code: str):
        self._tokens = iter_tokens(code)
        self.last = None

    def input(self, code):
        self._tokens = iter_tokens(code)

    def token(self):
        item = next(self._tokens, None)
        if item is None:
            return None
        tok = lex.LexToken()
        tok.type = item.type
        tok.value = item.token
        tok.lineno = item.line
        tok.lexpos = item.token.position
        tok.column = item.column
        self.last = item
        return tok
