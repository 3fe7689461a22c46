"""
Full-fidelity C# syntax model.

Produced by the parser (parser_cst.py) and only read by the materializer and
the inspector.

- SyntaxNode: interior element. Each concrete variant names its slots in
  SLOTS; children are the slot values flattened in source order.
- SyntaxToken: leaf element with literal text and leading/trailing trivia.
- SyntaxTrivia: whitespace, line breaks and comments attached to tokens.

Every element class declares an ordered property schema (name, accessor)
used by the inspector, so no runtime type metadata is needed.
"""

import enum
import operator
from collections.abc import Sequence
from typing import Any, Callable, Iterator, List, NamedTuple, Optional, Tuple, Union

LANGUAGE = "C#"


class SyntaxKind(enum.Enum):
    # ---------------- trivia ----------------
    WhitespaceTrivia = enum.auto()
    EndOfLineTrivia = enum.auto()
    SingleLineCommentTrivia = enum.auto()
    MultiLineCommentTrivia = enum.auto()

    # ---------------- tokens ----------------
    IdentifierToken = enum.auto()
    NumericLiteralToken = enum.auto()
    StringLiteralToken = enum.auto()
    CharacterLiteralToken = enum.auto()
    EndOfFileToken = enum.auto()

    OpenBraceToken = enum.auto()
    CloseBraceToken = enum.auto()
    OpenParenToken = enum.auto()
    CloseParenToken = enum.auto()
    SemicolonToken = enum.auto()
    CommaToken = enum.auto()
    DotToken = enum.auto()
    ColonToken = enum.auto()
    EqualsToken = enum.auto()
    PlusEqualsToken = enum.auto()
    MinusEqualsToken = enum.auto()
    PlusToken = enum.auto()
    MinusToken = enum.auto()
    AsteriskToken = enum.auto()
    SlashToken = enum.auto()
    PercentToken = enum.auto()
    EqualsEqualsToken = enum.auto()
    ExclamationEqualsToken = enum.auto()
    LessThanToken = enum.auto()
    GreaterThanToken = enum.auto()
    LessThanEqualsToken = enum.auto()
    GreaterThanEqualsToken = enum.auto()
    AmpersandAmpersandToken = enum.auto()
    BarBarToken = enum.auto()
    ExclamationToken = enum.auto()

    # ---------------- keywords ----------------
    AbstractKeyword = enum.auto()
    BoolKeyword = enum.auto()
    ByteKeyword = enum.auto()
    CharKeyword = enum.auto()
    ClassKeyword = enum.auto()
    ConstKeyword = enum.auto()
    DecimalKeyword = enum.auto()
    DoubleKeyword = enum.auto()
    ElseKeyword = enum.auto()
    EnumKeyword = enum.auto()
    FalseKeyword = enum.auto()
    FloatKeyword = enum.auto()
    IfKeyword = enum.auto()
    IntKeyword = enum.auto()
    InterfaceKeyword = enum.auto()
    InternalKeyword = enum.auto()
    LongKeyword = enum.auto()
    NamespaceKeyword = enum.auto()
    NewKeyword = enum.auto()
    NullKeyword = enum.auto()
    ObjectKeyword = enum.auto()
    OverrideKeyword = enum.auto()
    PartialKeyword = enum.auto()
    PrivateKeyword = enum.auto()
    ProtectedKeyword = enum.auto()
    PublicKeyword = enum.auto()
    ReadOnlyKeyword = enum.auto()
    ReturnKeyword = enum.auto()
    SealedKeyword = enum.auto()
    StaticKeyword = enum.auto()
    StringKeyword = enum.auto()
    StructKeyword = enum.auto()
    ThisKeyword = enum.auto()
    TrueKeyword = enum.auto()
    UsingKeyword = enum.auto()
    VirtualKeyword = enum.auto()
    VoidKeyword = enum.auto()
    WhileKeyword = enum.auto()
    GetKeyword = enum.auto()
    SetKeyword = enum.auto()

    # ---------------- nodes ----------------
    CompilationUnit = enum.auto()
    UsingDirective = enum.auto()
    NamespaceDeclaration = enum.auto()
    ClassDeclaration = enum.auto()
    StructDeclaration = enum.auto()
    InterfaceDeclaration = enum.auto()
    EnumDeclaration = enum.auto()
    EnumMemberDeclaration = enum.auto()
    BaseList = enum.auto()
    SimpleBaseType = enum.auto()
    FieldDeclaration = enum.auto()
    VariableDeclaration = enum.auto()
    VariableDeclarator = enum.auto()
    EqualsValueClause = enum.auto()
    MethodDeclaration = enum.auto()
    ConstructorDeclaration = enum.auto()
    PropertyDeclaration = enum.auto()
    AccessorList = enum.auto()
    GetAccessorDeclaration = enum.auto()
    SetAccessorDeclaration = enum.auto()
    ParameterList = enum.auto()
    Parameter = enum.auto()
    Block = enum.auto()
    LocalDeclarationStatement = enum.auto()
    ExpressionStatement = enum.auto()
    ReturnStatement = enum.auto()
    IfStatement = enum.auto()
    ElseClause = enum.auto()
    WhileStatement = enum.auto()
    EmptyStatement = enum.auto()
    IdentifierName = enum.auto()
    QualifiedName = enum.auto()
    PredefinedType = enum.auto()
    ArgumentList = enum.auto()
    Argument = enum.auto()
    InvocationExpression = enum.auto()
    SimpleMemberAccessExpression = enum.auto()
    ObjectCreationExpression = enum.auto()
    ThisExpression = enum.auto()
    ParenthesizedExpression = enum.auto()
    NumericLiteralExpression = enum.auto()
    StringLiteralExpression = enum.auto()
    CharacterLiteralExpression = enum.auto()
    TrueLiteralExpression = enum.auto()
    FalseLiteralExpression = enum.auto()
    NullLiteralExpression = enum.auto()
    LogicalNotExpression = enum.auto()
    UnaryMinusExpression = enum.auto()
    AddExpression = enum.auto()
    SubtractExpression = enum.auto()
    MultiplyExpression = enum.auto()
    DivideExpression = enum.auto()
    ModuloExpression = enum.auto()
    EqualsExpression = enum.auto()
    NotEqualsExpression = enum.auto()
    LessThanExpression = enum.auto()
    GreaterThanExpression = enum.auto()
    LessThanOrEqualExpression = enum.auto()
    GreaterThanOrEqualExpression = enum.auto()
    LogicalAndExpression = enum.auto()
    LogicalOrExpression = enum.auto()
    SimpleAssignmentExpression = enum.auto()
    AddAssignmentExpression = enum.auto()
    SubtractAssignmentExpression = enum.auto()

    def __str__(self):
        return self.name


class TextSpan:
    """Half-open character range. A scalar value, not a collection."""

    __slots__ = ("start", "length")

    def __init__(self, start: int, length: int):
        self.start = start
        self.length = length

    @property
    def end(self) -> int:
        return self.start + self.length

    def __eq__(self, other):
        if not isinstance(other, TextSpan):
            return NotImplemented
        return (self.start, self.length) == (other.start, other.length)

    def __hash__(self):
        return hash((self.start, self.length))

    def __str__(self):
        return f"[{self.start}..{self.end})"

    def __repr__(self):
        return f"TextSpan({self.start}, {self.length})"


class PropertySpec(NamedTuple):
    """One inspectable property. Non-empty `parameters` marks an indexer."""
    name: str
    accessor: Callable[..., Any]
    parameters: Tuple[str, ...] = ()


# ==========================================================
# TRIVIA
# ==========================================================

class SyntaxTrivia:
    def __init__(self, kind: SyntaxKind, text: str, position: int = 0):
        self.kind = kind
        self.text = text
        self.position = position
        self.token = None

    @property
    def span(self) -> TextSpan:
        return TextSpan(self.position, len(self.text))

    def to_string(self) -> str:
        return self.text

    def __str__(self):
        return self.text

    def __repr__(self):
        return f"SyntaxTrivia({self.kind.name}, {self.text!r})"


class SyntaxTriviaList(Sequence):
    def __init__(self, trivia=()):
        self._items = tuple(trivia)

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self):
        return len(self._items)

    @property
    def count(self) -> int:
        return len(self._items)

    @property
    def width(self) -> int:
        return sum(len(t.text) for t in self._items)

    def to_string(self) -> str:
        return "".join(t.text for t in self._items)

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"SyntaxTriviaList({list(self._items)!r})"


# ==========================================================
# TOKENS
# ==========================================================

_SIMPLE_ESCAPES = {
    "'": "'", '"': '"', "\\": "\\", "0": "\0", "a": "\a", "b": "\b",
    "f": "\f", "n": "\n", "r": "\r", "t": "\t", "v": "\v",
}


def unescape(body: str) -> str:
    out = []
    i = 0
    while i < len(body):
        ch = body[i]
        if ch != "\\":
            out.append(ch)
            i += 1
            continue
        if i + 1 >= len(body):
            raise ValueError("Unterminated escape sequence")
        code = body[i + 1]
        if code in _SIMPLE_ESCAPES:
            out.append(_SIMPLE_ESCAPES[code])
            i += 2
        elif code == "u":
            digits = body[i + 2:i + 6]
            if len(digits) != 4:
                raise ValueError(f"Invalid unicode escape '\\u{digits}'")
            out.append(chr(int(digits, 16)))
            i += 6
        else:
            raise ValueError(f"Unrecognized escape sequence '\\{code}'")
    return "".join(out)


def _numeric_value(text: str):
    raw = text.replace("_", "")
    if raw[:2] in ("0x", "0X"):
        return int(raw[2:].rstrip("uUlL"), 16)
    if raw[:2] in ("0b", "0B"):
        return int(raw[2:].rstrip("uUlL"), 2)
    stripped = raw.rstrip("uUlLfFdDmM")
    if any(c in stripped for c in ".eE") or stripped != raw.rstrip("uUlL"):
        return float(stripped)
    return int(stripped)


class SyntaxToken:
    def __init__(self, kind: SyntaxKind, text: str, leading=(), trailing=(), position: int = 0):
        self.kind = kind
        self.text = text
        self.leading_trivia = SyntaxTriviaList(leading)
        self.trailing_trivia = SyntaxTriviaList(trailing)
        self.position = position
        self.parent = None
        for trivia in self.leading_trivia:
            trivia.token = self
        for trivia in self.trailing_trivia:
            trivia.token = self

    def with_kind(self, kind: SyntaxKind) -> "SyntaxToken":
        return SyntaxToken(kind, self.text, self.leading_trivia, self.trailing_trivia, self.position)

    @property
    def type_name(self) -> str:
        return type(self).__name__

    @property
    def raw_kind(self) -> int:
        return self.kind.value

    @property
    def value(self):
        kind = self.kind
        if kind is SyntaxKind.NumericLiteralToken:
            return _numeric_value(self.text)
        if kind is SyntaxKind.StringLiteralToken:
            return unescape(self.text[1:-1])
        if kind is SyntaxKind.CharacterLiteralToken:
            value = unescape(self.text[1:-1])
            if len(value) != 1:
                raise ValueError(f"Too many characters in character literal {self.text}")
            return value
        if kind is SyntaxKind.TrueKeyword:
            return True
        if kind is SyntaxKind.FalseKeyword:
            return False
        if kind is SyntaxKind.NullKeyword or kind is SyntaxKind.EndOfFileToken:
            return None
        return self.text

    @property
    def value_text(self) -> str:
        value = self.value
        return value if isinstance(value, str) else self.text

    @property
    def span(self) -> TextSpan:
        return TextSpan(self.position, len(self.text))

    @property
    def full_span(self) -> TextSpan:
        start = self.position - self.leading_trivia.width
        return TextSpan(start, self.leading_trivia.width + len(self.text) + self.trailing_trivia.width)

    @property
    def is_missing(self) -> bool:
        return self.text == "" and self.kind is not SyntaxKind.EndOfFileToken

    def to_string(self) -> str:
        return self.text

    def to_full_string(self) -> str:
        return self.leading_trivia.to_string() + self.text + self.trailing_trivia.to_string()

    @classmethod
    def property_schema(cls) -> Tuple[PropertySpec, ...]:
        return _TOKEN_PROPERTIES

    def __str__(self):
        return self.text

    def __repr__(self):
        return f"SyntaxToken({self.kind.name}, {self.text!r})"


_TOKEN_PROPERTIES = (
    PropertySpec("Kind", operator.attrgetter("kind")),
    PropertySpec("RawKind", operator.attrgetter("raw_kind")),
    PropertySpec("Text", operator.attrgetter("text")),
    PropertySpec("ValueText", operator.attrgetter("value_text")),
    PropertySpec("Value", operator.attrgetter("value")),
    PropertySpec("Language", lambda element: LANGUAGE),
    PropertySpec("Span", operator.attrgetter("span")),
    PropertySpec("FullSpan", operator.attrgetter("full_span")),
    PropertySpec("SpanStart", operator.attrgetter("position")),
    PropertySpec("Width", lambda token: len(token.text)),
    PropertySpec("FullWidth", lambda token: token.full_span.length),
    PropertySpec("Parent", operator.attrgetter("parent")),
    PropertySpec("LeadingTrivia", operator.attrgetter("leading_trivia")),
    PropertySpec("TrailingTrivia", operator.attrgetter("trailing_trivia")),
    PropertySpec("HasLeadingTrivia", lambda token: len(token.leading_trivia) > 0),
    PropertySpec("HasTrailingTrivia", lambda token: len(token.trailing_trivia) > 0),
    PropertySpec("IsMissing", operator.attrgetter("is_missing")),
)


# ==========================================================
# LISTS
# ==========================================================

class SyntaxList(Sequence):
    """Ordered list of nodes held by one slot."""

    def __init__(self, items=()):
        self._items = tuple(items)

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self):
        return len(self._items)

    def nodes_and_tokens(self) -> Tuple:
        return self._items

    def __str__(self):
        return "".join(item.to_full_string() for item in self._items)

    def __repr__(self):
        return f"{type(self).__name__}({list(self._items)!r})"


class SyntaxTokenList(SyntaxList):
    """Ordered list of tokens (modifiers)."""


class SeparatedSyntaxList(SyntaxList):
    """
    Nodes interleaved with separator tokens: [node, comma, node, ...].
    Length and indexing only see the nodes.
    """

    def __init__(self, items=()):
        self._all = tuple(items)
        super().__init__(item for item in self._all if isinstance(item, SyntaxNode))

    @property
    def separators(self) -> Tuple["SyntaxToken", ...]:
        return tuple(item for item in self._all if isinstance(item, SyntaxToken))

    def nodes_and_tokens(self) -> Tuple:
        return self._all

    def __str__(self):
        return "".join(item.to_full_string() for item in self._all)


# ==========================================================
# NODES
# ==========================================================

def _camel(name: str) -> str:
    return "".join(part[:1].upper() + part[1:] for part in name.split("_"))


def _walk_tokens(node, reverse=False) -> Iterator[SyntaxToken]:
    stack = [node]
    while stack:
        current = stack.pop()
        if isinstance(current, SyntaxToken):
            yield current
            continue
        children = current.child_nodes_and_tokens()
        stack.extend(children if reverse else reversed(children))


class SyntaxNode:
    KIND: Optional[SyntaxKind] = None
    SLOTS: Tuple[str, ...] = ()

    def __init__(self, kind: Optional[SyntaxKind] = None, **slots):
        unknown = set(slots) - set(self.SLOTS)
        if unknown:
            raise TypeError(f"{type(self).__name__} has no slot(s) {sorted(unknown)}")
        self.kind = kind or self.KIND
        if self.kind is None:
            raise TypeError(f"{type(self).__name__} needs an explicit kind")
        self._slots = {name: slots.get(name) for name in self.SLOTS}
        self.parent = None

        children: List[Union["SyntaxNode", SyntaxToken]] = []
        for name in self.SLOTS:
            value = self._slots[name]
            if value is None:
                continue
            if isinstance(value, SyntaxList):
                children.extend(value.nodes_and_tokens())
            else:
                children.append(value)
        self._children = tuple(children)
        for child in self._children:
            child.parent = self

    def __getattr__(self, name):
        slots = self.__dict__.get("_slots")
        if slots is not None:
            key = _camel(name)
            if key in slots:
                return slots[key]
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def slot(self, name: str):
        return self._slots[name]

    def child_nodes_and_tokens(self) -> Tuple:
        return self._children

    def child_nodes(self) -> Tuple["SyntaxNode", ...]:
        return tuple(c for c in self._children if isinstance(c, SyntaxNode))

    def child_at(self, index: int):
        return self._children[index]

    def descendant_tokens(self) -> Iterator[SyntaxToken]:
        return _walk_tokens(self)

    def first_token(self) -> Optional[SyntaxToken]:
        return next(_walk_tokens(self), None)

    def last_token(self) -> Optional[SyntaxToken]:
        return next(_walk_tokens(self, reverse=True), None)

    @property
    def type_name(self) -> str:
        return type(self).__name__

    @property
    def raw_kind(self) -> int:
        return self.kind.value

    @property
    def span(self) -> TextSpan:
        first, last = self.first_token(), self.last_token()
        if first is None:
            return TextSpan(0, 0)
        return TextSpan(first.span.start, last.span.end - first.span.start)

    @property
    def full_span(self) -> TextSpan:
        first, last = self.first_token(), self.last_token()
        if first is None:
            return TextSpan(0, 0)
        start = first.full_span.start
        return TextSpan(start, last.full_span.end - start)

    @property
    def has_leading_trivia(self) -> bool:
        first = self.first_token()
        return first is not None and len(first.leading_trivia) > 0

    @property
    def has_trailing_trivia(self) -> bool:
        last = self.last_token()
        return last is not None and len(last.trailing_trivia) > 0

    def to_full_string(self) -> str:
        return "".join(t.to_full_string() for t in _walk_tokens(self))

    def to_string(self) -> str:
        full = self.to_full_string()
        first, last = self.first_token(), self.last_token()
        if first is None:
            return full
        end = len(full) - last.trailing_trivia.width
        return full[first.leading_trivia.width:end]

    @classmethod
    def property_schema(cls) -> Tuple[PropertySpec, ...]:
        schema = cls.__dict__.get("_schema")
        if schema is None:
            slots = tuple(PropertySpec(name, operator.methodcaller("slot", name)) for name in cls.SLOTS)
            schema = slots + _NODE_PROPERTIES
            cls._schema = schema
        return schema

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"{self.type_name}({self.kind.name})"


_NODE_PROPERTIES = (
    PropertySpec("Kind", operator.attrgetter("kind")),
    PropertySpec("RawKind", operator.attrgetter("raw_kind")),
    PropertySpec("Language", lambda element: LANGUAGE),
    PropertySpec("Span", operator.attrgetter("span")),
    PropertySpec("FullSpan", operator.attrgetter("full_span")),
    PropertySpec("SpanStart", lambda node: node.span.start),
    PropertySpec("Width", lambda node: node.span.length),
    PropertySpec("FullWidth", lambda node: node.full_span.length),
    PropertySpec("Parent", operator.attrgetter("parent")),
    PropertySpec("HasLeadingTrivia", operator.attrgetter("has_leading_trivia")),
    PropertySpec("HasTrailingTrivia", operator.attrgetter("has_trailing_trivia")),
    PropertySpec("IsMissing", lambda node: False),
    PropertySpec("ChildCount", lambda node: len(node.child_nodes_and_tokens())),
    PropertySpec("ChildAt", SyntaxNode.child_at, ("index",)),
)


SyntaxElement = Union[SyntaxNode, SyntaxToken]


def is_token(element) -> bool:
    return isinstance(element, SyntaxToken)


def is_node(element) -> bool:
    return isinstance(element, SyntaxNode)


# ---------------- declarations ----------------

class CompilationUnitSyntax(SyntaxNode):
    KIND = SyntaxKind.CompilationUnit
    SLOTS = ("Usings", "Members", "EndOfFileToken")


class UsingDirectiveSyntax(SyntaxNode):
    KIND = SyntaxKind.UsingDirective
    SLOTS = ("UsingKeyword", "Name", "SemicolonToken")


class NamespaceDeclarationSyntax(SyntaxNode):
    KIND = SyntaxKind.NamespaceDeclaration
    SLOTS = ("NamespaceKeyword", "Name", "OpenBraceToken", "Usings", "Members",
             "CloseBraceToken", "SemicolonToken")


_TYPE_DECLARATION_SLOTS = ("Modifiers", "Keyword", "Identifier", "BaseList", "OpenBraceToken",
                           "Members", "CloseBraceToken", "SemicolonToken")


class ClassDeclarationSyntax(SyntaxNode):
    KIND = SyntaxKind.ClassDeclaration
    SLOTS = _TYPE_DECLARATION_SLOTS


class StructDeclarationSyntax(SyntaxNode):
    KIND = SyntaxKind.StructDeclaration
    SLOTS = _TYPE_DECLARATION_SLOTS


class InterfaceDeclarationSyntax(SyntaxNode):
    KIND = SyntaxKind.InterfaceDeclaration
    SLOTS = _TYPE_DECLARATION_SLOTS


class EnumDeclarationSyntax(SyntaxNode):
    KIND = SyntaxKind.EnumDeclaration
    SLOTS = ("Modifiers", "EnumKeyword", "Identifier", "BaseList", "OpenBraceToken",
             "Members", "CloseBraceToken", "SemicolonToken")


class EnumMemberDeclarationSyntax(SyntaxNode):
    KIND = SyntaxKind.EnumMemberDeclaration
    SLOTS = ("Identifier", "EqualsValue")


class BaseListSyntax(SyntaxNode):
    KIND = SyntaxKind.BaseList
    SLOTS = ("ColonToken", "Types")


class SimpleBaseTypeSyntax(SyntaxNode):
    KIND = SyntaxKind.SimpleBaseType
    SLOTS = ("Type",)


class FieldDeclarationSyntax(SyntaxNode):
    KIND = SyntaxKind.FieldDeclaration
    SLOTS = ("Modifiers", "Declaration", "SemicolonToken")


class VariableDeclarationSyntax(SyntaxNode):
    KIND = SyntaxKind.VariableDeclaration
    SLOTS = ("Type", "Variables")


class VariableDeclaratorSyntax(SyntaxNode):
    KIND = SyntaxKind.VariableDeclarator
    SLOTS = ("Identifier", "Initializer")


class EqualsValueClauseSyntax(SyntaxNode):
    KIND = SyntaxKind.EqualsValueClause
    SLOTS = ("EqualsToken", "Value")


class MethodDeclarationSyntax(SyntaxNode):
    KIND = SyntaxKind.MethodDeclaration
    SLOTS = ("Modifiers", "ReturnType", "Identifier", "ParameterList", "Body", "SemicolonToken")


class ConstructorDeclarationSyntax(SyntaxNode):
    KIND = SyntaxKind.ConstructorDeclaration
    SLOTS = ("Modifiers", "Identifier", "ParameterList", "Body", "SemicolonToken")


class PropertyDeclarationSyntax(SyntaxNode):
    KIND = SyntaxKind.PropertyDeclaration
    SLOTS = ("Modifiers", "Type", "Identifier", "AccessorList")


class AccessorListSyntax(SyntaxNode):
    KIND = SyntaxKind.AccessorList
    SLOTS = ("OpenBraceToken", "Accessors", "CloseBraceToken")


class AccessorDeclarationSyntax(SyntaxNode):
    SLOTS = ("Modifiers", "Keyword", "Body", "SemicolonToken")


class ParameterListSyntax(SyntaxNode):
    KIND = SyntaxKind.ParameterList
    SLOTS = ("OpenParenToken", "Parameters", "CloseParenToken")


class ParameterSyntax(SyntaxNode):
    KIND = SyntaxKind.Parameter
    SLOTS = ("Type", "Identifier")


# ---------------- statements ----------------

class BlockSyntax(SyntaxNode):
    KIND = SyntaxKind.Block
    SLOTS = ("OpenBraceToken", "Statements", "CloseBraceToken")


class LocalDeclarationStatementSyntax(SyntaxNode):
    KIND = SyntaxKind.LocalDeclarationStatement
    SLOTS = ("Declaration", "SemicolonToken")


class ExpressionStatementSyntax(SyntaxNode):
    KIND = SyntaxKind.ExpressionStatement
    SLOTS = ("Expression", "SemicolonToken")


class ReturnStatementSyntax(SyntaxNode):
    KIND = SyntaxKind.ReturnStatement
    SLOTS = ("ReturnKeyword", "Expression", "SemicolonToken")


class IfStatementSyntax(SyntaxNode):
    KIND = SyntaxKind.IfStatement
    SLOTS = ("IfKeyword", "OpenParenToken", "Condition", "CloseParenToken", "Statement", "Else")


class ElseClauseSyntax(SyntaxNode):
    KIND = SyntaxKind.ElseClause
    SLOTS = ("ElseKeyword", "Statement")


class WhileStatementSyntax(SyntaxNode):
    KIND = SyntaxKind.WhileStatement
    SLOTS = ("WhileKeyword", "OpenParenToken", "Condition", "CloseParenToken", "Statement")


class EmptyStatementSyntax(SyntaxNode):
    KIND = SyntaxKind.EmptyStatement
    SLOTS = ("SemicolonToken",)


# ---------------- names & expressions ----------------

class IdentifierNameSyntax(SyntaxNode):
    KIND = SyntaxKind.IdentifierName
    SLOTS = ("Identifier",)


class QualifiedNameSyntax(SyntaxNode):
    KIND = SyntaxKind.QualifiedName
    SLOTS = ("Left", "DotToken", "Right")


class PredefinedTypeSyntax(SyntaxNode):
    KIND = SyntaxKind.PredefinedType
    SLOTS = ("Keyword",)


class ArgumentListSyntax(SyntaxNode):
    KIND = SyntaxKind.ArgumentList
    SLOTS = ("OpenParenToken", "Arguments", "CloseParenToken")


class ArgumentSyntax(SyntaxNode):
    KIND = SyntaxKind.Argument
    SLOTS = ("Expression",)


class InvocationExpressionSyntax(SyntaxNode):
    KIND = SyntaxKind.InvocationExpression
    SLOTS = ("Expression", "ArgumentList")


class MemberAccessExpressionSyntax(SyntaxNode):
    KIND = SyntaxKind.SimpleMemberAccessExpression
    SLOTS = ("Expression", "OperatorToken", "Name")


class ObjectCreationExpressionSyntax(SyntaxNode):
    KIND = SyntaxKind.ObjectCreationExpression
    SLOTS = ("NewKeyword", "Type", "ArgumentList")


class ThisExpressionSyntax(SyntaxNode):
    KIND = SyntaxKind.ThisExpression
    SLOTS = ("Token",)


class ParenthesizedExpressionSyntax(SyntaxNode):
    KIND = SyntaxKind.ParenthesizedExpression
    SLOTS = ("OpenParenToken", "Expression", "CloseParenToken")


class LiteralExpressionSyntax(SyntaxNode):
    SLOTS = ("Token",)


class PrefixUnaryExpressionSyntax(SyntaxNode):
    SLOTS = ("OperatorToken", "Operand")


class BinaryExpressionSyntax(SyntaxNode):
    SLOTS = ("Left", "OperatorToken", "Right")


class AssignmentExpressionSyntax(SyntaxNode):
    SLOTS = ("Left", "OperatorToken", "Right")
