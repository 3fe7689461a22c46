"""
PLY-based parser building a full-fidelity syntax tree (C# subset)

- Consumes raw source text through lexer_cs.TokenStream
- Every token, trivia included, ends up in the tree, so the tree's full
  text is the source text
- Produces a CompilationUnitSyntax root
- Syntax errors raise ParseFailure with line/column; no partial tree is
  ever returned
"""

import logging
import traceback
from pathlib import Path

import ply.yacc as yacc

from syntax_viewer.core import lexer_cs as lexer_module
from syntax_viewer.core.syntax import (
    AccessorDeclarationSyntax, AccessorListSyntax, ArgumentListSyntax, ArgumentSyntax,
    AssignmentExpressionSyntax, BaseListSyntax, BinaryExpressionSyntax, BlockSyntax,
    ClassDeclarationSyntax, CompilationUnitSyntax, ConstructorDeclarationSyntax,
    ElseClauseSyntax, EmptyStatementSyntax, EnumDeclarationSyntax, EnumMemberDeclarationSyntax,
    EqualsValueClauseSyntax, ExpressionStatementSyntax, FieldDeclarationSyntax,
    IdentifierNameSyntax, IfStatementSyntax, InterfaceDeclarationSyntax,
    InvocationExpressionSyntax, LiteralExpressionSyntax, LocalDeclarationStatementSyntax,
    MemberAccessExpressionSyntax, MethodDeclarationSyntax, NamespaceDeclarationSyntax,
    ObjectCreationExpressionSyntax, ParameterListSyntax, ParameterSyntax,
    ParenthesizedExpressionSyntax, PredefinedTypeSyntax, PrefixUnaryExpressionSyntax,
    PropertyDeclarationSyntax, QualifiedNameSyntax, ReturnStatementSyntax,
    SeparatedSyntaxList, SimpleBaseTypeSyntax, StructDeclarationSyntax, SyntaxKind,
    SyntaxList, SyntaxTokenList, ThisExpressionSyntax, UsingDirectiveSyntax,
    VariableDeclarationSyntax, VariableDeclaratorSyntax, WhileStatementSyntax,
)
from syntax_viewer.errors import ParseFailure, ParseOutcome
from syntax_viewer.utils.log_setup import ensure_logging

ensure_logging()
logger = logging.getLogger("syntax_viewer.parser")


# ---------------------Parser tokens (taken from lexer module)------------------------------
# trivia never reaches the grammar
tokens = tuple(t for t in lexer_module.tokens if t not in lexer_module.TRIVIA_TYPES)

start = 'compilation_unit'

precedence = (
    ('nonassoc', 'IFX'),
    ('nonassoc', 'ELSE'),
    ('right', 'ASSIGN', 'PLUS_ASSIGN', 'MINUS_ASSIGN'),
    ('left', 'OR'),
    ('left', 'AND'),
    ('left', 'EQ', 'NEQ'),
    ('left', 'LT', 'GT', 'LE', 'GE'),
    ('left', 'PLUS', 'MINUS'),
    ('left', 'TIMES', 'DIVIDE', 'MOD'),
    ('right', 'NOT', 'UMINUS'),
)

BINARY_KINDS = {
    'PLUS': SyntaxKind.AddExpression,
    'MINUS': SyntaxKind.SubtractExpression,
    'TIMES': SyntaxKind.MultiplyExpression,
    'DIVIDE': SyntaxKind.DivideExpression,
    'MOD': SyntaxKind.ModuloExpression,
    'EQ': SyntaxKind.EqualsExpression,
    'NEQ': SyntaxKind.NotEqualsExpression,
    'LT': SyntaxKind.LessThanExpression,
    'GT': SyntaxKind.GreaterThanExpression,
    'LE': SyntaxKind.LessThanOrEqualExpression,
    'GE': SyntaxKind.GreaterThanOrEqualExpression,
    'AND': SyntaxKind.LogicalAndExpression,
    'OR': SyntaxKind.LogicalOrExpression,
}

ASSIGNMENT_KINDS = {
    'ASSIGN': SyntaxKind.SimpleAssignmentExpression,
    'PLUS_ASSIGN': SyntaxKind.AddAssignmentExpression,
    'MINUS_ASSIGN': SyntaxKind.SubtractAssignmentExpression,
}

LITERAL_KINDS = {
    'NUMERIC_LITERAL': SyntaxKind.NumericLiteralExpression,
    'STRING_LITERAL': SyntaxKind.StringLiteralExpression,
    'CHARACTER_LITERAL': SyntaxKind.CharacterLiteralExpression,
    'TRUE': SyntaxKind.TrueLiteralExpression,
    'FALSE': SyntaxKind.FalseLiteralExpression,
    'NULL': SyntaxKind.NullLiteralExpression,
}

ACCESSOR_KINDS = {
    'get': (SyntaxKind.GetKeyword, SyntaxKind.GetAccessorDeclaration),
    'set': (SyntaxKind.SetKeyword, SyntaxKind.SetAccessorDeclaration),
}


def name_to_expression(name):
    """A dotted name used as an expression becomes a member-access chain."""
    qualified = []
    while isinstance(name, QualifiedNameSyntax):
        qualified.append(name)
        name = name.left

    expression = name
    for node in reversed(qualified):
        expression = MemberAccessExpressionSyntax(
            Expression=expression,
            OperatorToken=node.dot_token,
            Name=node.right,
        )
    return expression


def slot_position(p, index):
    tok = p.slice[index]
    return getattr(tok, "lineno", None), getattr(tok, "column", None)


# --------------------Grammar rules---------------------------
def p_compilation_unit(p):
    """compilation_unit : using_list namespace_member_list END_OF_FILE"""
    p[0] = CompilationUnitSyntax(
        Usings=SyntaxList(p[1]),
        Members=SyntaxList(p[2]),
        EndOfFileToken=p[3],
    )

def p_empty(p):
    "empty :"
    p[0] = None

def p_using_list(p):
    """using_list : using_list using_directive
                  | empty"""
    p[0] = p[1] + [p[2]] if len(p) == 3 else []

def p_using_directive(p):
    """using_directive : USING name SEMICOLON"""
    p[0] = UsingDirectiveSyntax(UsingKeyword=p[1], Name=p[2], SemicolonToken=p[3])

def p_namespace_member_list(p):
    """namespace_member_list : namespace_member_list namespace_member
                             | empty"""
    p[0] = p[1] + [p[2]] if len(p) == 3 else []

def p_namespace_member(p):
    """namespace_member : namespace_declaration
                        | type_declaration"""
    p[0] = p[1]

def p_namespace_declaration(p):
    """namespace_declaration : NAMESPACE name LBRACE using_list namespace_member_list RBRACE semicolon_opt"""
    p[0] = NamespaceDeclarationSyntax(
        NamespaceKeyword=p[1], Name=p[2], OpenBraceToken=p[3],
        Usings=SyntaxList(p[4]), Members=SyntaxList(p[5]),
        CloseBraceToken=p[6], SemicolonToken=p[7],
    )

def p_semicolon_opt(p):
    """semicolon_opt : SEMICOLON
                     | empty"""
    p[0] = p[1]

# ---------------- modifiers ----------------

def p_modifiers_opt(p):
    """modifiers_opt : modifiers_opt modifier
                     | empty"""
    p[0] = p[1] + [p[2]] if len(p) == 3 else []

def p_modifier(p):
    """modifier : PUBLIC
                | PRIVATE
                | PROTECTED
                | INTERNAL
                | STATIC
                | READONLY
                | CONST
                | ABSTRACT
                | VIRTUAL
                | OVERRIDE
                | SEALED
                | PARTIAL"""
    p[0] = p[1]

# ---------------- type declarations ----------------

def p_type_declaration(p):
    """type_declaration : class_declaration
                        | enum_declaration"""
    p[0] = p[1]

def p_class_declaration(p):
    """class_declaration : modifiers_opt type_keyword IDENTIFIER base_list_opt LBRACE class_member_list RBRACE semicolon_opt"""
    keyword = p[2]
    variant = {
        SyntaxKind.ClassKeyword: ClassDeclarationSyntax,
        SyntaxKind.StructKeyword: StructDeclarationSyntax,
        SyntaxKind.InterfaceKeyword: InterfaceDeclarationSyntax,
    }[keyword.kind]
    p[0] = variant(
        Modifiers=SyntaxTokenList(p[1]), Keyword=keyword, Identifier=p[3],
        BaseList=p[4], OpenBraceToken=p[5], Members=SyntaxList(p[6]),
        CloseBraceToken=p[7], SemicolonToken=p[8],
    )

def p_type_keyword(p):
    """type_keyword : CLASS
                    | STRUCT
                    | INTERFACE"""
    p[0] = p[1]

def p_base_list_opt(p):
    """base_list_opt : COLON base_type_list
                     | empty"""
    if len(p) == 3:
        p[0] = BaseListSyntax(ColonToken=p[1], Types=SeparatedSyntaxList(p[2]))
    else:
        p[0] = None

def p_base_type_list(p):
    """base_type_list : base_type_list COMMA name
                      | name"""
    if len(p) == 4:
        p[0] = p[1] + [p[2], SimpleBaseTypeSyntax(Type=p[3])]
    else:
        p[0] = [SimpleBaseTypeSyntax(Type=p[1])]

def p_enum_declaration(p):
    """enum_declaration : modifiers_opt ENUM IDENTIFIER base_list_opt LBRACE enum_body RBRACE semicolon_opt"""
    p[0] = EnumDeclarationSyntax(
        Modifiers=SyntaxTokenList(p[1]), EnumKeyword=p[2], Identifier=p[3],
        BaseList=p[4], OpenBraceToken=p[5], Members=SeparatedSyntaxList(p[6]),
        CloseBraceToken=p[7], SemicolonToken=p[8],
    )

def p_enum_body(p):
    """enum_body : enum_member_list
                 | enum_member_list COMMA
                 | empty"""
    if p[1] is None:
        p[0] = []
    elif len(p) == 3:
        p[0] = p[1] + [p[2]]
    else:
        p[0] = p[1]

def p_enum_member_list(p):
    """enum_member_list : enum_member_list COMMA enum_member
                        | enum_member"""
    p[0] = p[1] + [p[2], p[3]] if len(p) == 4 else [p[1]]

def p_enum_member(p):
    """enum_member : IDENTIFIER
                   | IDENTIFIER equals_value"""
    p[0] = EnumMemberDeclarationSyntax(Identifier=p[1], EqualsValue=p[2] if len(p) == 3 else None)

# ---------------- class members ----------------

def p_class_member_list(p):
    """class_member_list : class_member_list class_member
                         | empty"""
    p[0] = p[1] + [p[2]] if len(p) == 3 else []

def p_class_member(p):
    """class_member : field_declaration
                    | method_declaration
                    | constructor_declaration
                    | property_declaration
                    | type_declaration"""
    p[0] = p[1]

def p_field_declaration(p):
    """field_declaration : modifiers_opt variable_declaration SEMICOLON"""
    p[0] = FieldDeclarationSyntax(Modifiers=SyntaxTokenList(p[1]), Declaration=p[2], SemicolonToken=p[3])

def p_method_declaration(p):
    """method_declaration : modifiers_opt type IDENTIFIER parameter_list block
                          | modifiers_opt type IDENTIFIER parameter_list SEMICOLON"""
    body = p[5] if isinstance(p[5], BlockSyntax) else None
    p[0] = MethodDeclarationSyntax(
        Modifiers=SyntaxTokenList(p[1]), ReturnType=p[2], Identifier=p[3],
        ParameterList=p[4], Body=body, SemicolonToken=None if body else p[5],
    )

def p_constructor_declaration(p):
    """constructor_declaration : modifiers_opt IDENTIFIER parameter_list block"""
    p[0] = ConstructorDeclarationSyntax(
        Modifiers=SyntaxTokenList(p[1]), Identifier=p[2], ParameterList=p[3], Body=p[4],
    )

def p_property_declaration(p):
    """property_declaration : modifiers_opt type IDENTIFIER LBRACE accessor_list RBRACE"""
    accessors = AccessorListSyntax(OpenBraceToken=p[4], Accessors=SyntaxList(p[5]), CloseBraceToken=p[6])
    p[0] = PropertyDeclarationSyntax(
        Modifiers=SyntaxTokenList(p[1]), Type=p[2], Identifier=p[3], AccessorList=accessors,
    )

def p_accessor_list(p):
    """accessor_list : accessor_list accessor_declaration
                     | empty"""
    p[0] = p[1] + [p[2]] if len(p) == 3 else []

def p_accessor_declaration(p):
    """accessor_declaration : modifiers_opt IDENTIFIER SEMICOLON
                            | modifiers_opt IDENTIFIER block"""
    word = p[2]
    if word.text not in ACCESSOR_KINDS:
        line, column = slot_position(p, 2)
        raise ParseFailure(f"Syntax error: expected 'get' or 'set', found {word.text!r}", line, column)
    keyword_kind, declaration_kind = ACCESSOR_KINDS[word.text]
    body = p[3] if isinstance(p[3], BlockSyntax) else None
    p[0] = AccessorDeclarationSyntax(
        declaration_kind,
        Modifiers=SyntaxTokenList(p[1]), Keyword=word.with_kind(keyword_kind),
        Body=body, SemicolonToken=None if body else p[3],
    )

def p_parameter_list(p):
    """parameter_list : LPAREN parameters RPAREN
                      | LPAREN RPAREN"""
    if len(p) == 4:
        p[0] = ParameterListSyntax(OpenParenToken=p[1], Parameters=SeparatedSyntaxList(p[2]), CloseParenToken=p[3])
    else:
        p[0] = ParameterListSyntax(OpenParenToken=p[1], Parameters=SeparatedSyntaxList(), CloseParenToken=p[2])

def p_parameters(p):
    """parameters : parameters COMMA parameter
                  | parameter"""
    p[0] = p[1] + [p[2], p[3]] if len(p) == 4 else [p[1]]

def p_parameter(p):
    """parameter : type IDENTIFIER"""
    p[0] = ParameterSyntax(Type=p[1], Identifier=p[2])

# ---------------- types & names ----------------

def p_type(p):
    """type : predefined_type
            | name"""
    p[0] = p[1]

def p_predefined_type(p):
    """predefined_type : VOID
                       | INT
                       | LONG
                       | BYTE
                       | BOOL
                       | CHAR
                       | STRING
                       | OBJECT
                       | DOUBLE
                       | FLOAT
                       | DECIMAL"""
    p[0] = PredefinedTypeSyntax(Keyword=p[1])

def p_name(p):
    """name : name DOT IDENTIFIER
            | IDENTIFIER"""
    if len(p) == 4:
        p[0] = QualifiedNameSyntax(Left=p[1], DotToken=p[2], Right=IdentifierNameSyntax(Identifier=p[3]))
    else:
        p[0] = IdentifierNameSyntax(Identifier=p[1])

# ---------------- variables ----------------

def p_variable_declaration(p):
    """variable_declaration : type variable_declarators"""
    p[0] = VariableDeclarationSyntax(Type=p[1], Variables=SeparatedSyntaxList(p[2]))

def p_variable_declarators(p):
    """variable_declarators : variable_declarators COMMA variable_declarator
                            | variable_declarator"""
    p[0] = p[1] + [p[2], p[3]] if len(p) == 4 else [p[1]]

def p_variable_declarator(p):
    """variable_declarator : IDENTIFIER
                           | IDENTIFIER equals_value"""
    p[0] = VariableDeclaratorSyntax(Identifier=p[1], Initializer=p[2] if len(p) == 3 else None)

def p_equals_value(p):
    """equals_value : ASSIGN expression"""
    p[0] = EqualsValueClauseSyntax(EqualsToken=p[1], Value=p[2])

# ---------------- statements ----------------

def p_block(p):
    """block : LBRACE statement_list RBRACE"""
    p[0] = BlockSyntax(OpenBraceToken=p[1], Statements=SyntaxList(p[2]), CloseBraceToken=p[3])

def p_statement_list(p):
    """statement_list : statement_list statement
                      | empty"""
    p[0] = p[1] + [p[2]] if len(p) == 3 else []

def p_statement(p):
    """statement : block
                 | local_declaration_statement
                 | expression_statement
                 | return_statement
                 | if_statement
                 | while_statement
                 | empty_statement"""
    p[0] = p[1]

def p_local_declaration_statement(p):
    """local_declaration_statement : variable_declaration SEMICOLON"""
    p[0] = LocalDeclarationStatementSyntax(Declaration=p[1], SemicolonToken=p[2])

def p_expression_statement(p):
    """expression_statement : expression SEMICOLON"""
    p[0] = ExpressionStatementSyntax(Expression=p[1], SemicolonToken=p[2])

def p_return_statement(p):
    """return_statement : RETURN expression SEMICOLON
                        | RETURN SEMICOLON"""
    if len(p) == 4:
        p[0] = ReturnStatementSyntax(ReturnKeyword=p[1], Expression=p[2], SemicolonToken=p[3])
    else:
        p[0] = ReturnStatementSyntax(ReturnKeyword=p[1], SemicolonToken=p[2])

def p_if_statement(p):
    """if_statement : IF LPAREN expression RPAREN statement %prec IFX
                    | IF LPAREN expression RPAREN statement ELSE statement"""
    else_clause = ElseClauseSyntax(ElseKeyword=p[6], Statement=p[7]) if len(p) == 8 else None
    p[0] = IfStatementSyntax(
        IfKeyword=p[1], OpenParenToken=p[2], Condition=p[3], CloseParenToken=p[4],
        Statement=p[5], Else=else_clause,
    )

def p_while_statement(p):
    """while_statement : WHILE LPAREN expression RPAREN statement"""
    p[0] = WhileStatementSyntax(
        WhileKeyword=p[1], OpenParenToken=p[2], Condition=p[3], CloseParenToken=p[4], Statement=p[5],
    )

def p_empty_statement(p):
    """empty_statement : SEMICOLON"""
    p[0] = EmptyStatementSyntax(SemicolonToken=p[1])

# ---------------- expressions ----------------

def p_expression_binary(p):
    """expression : expression OR expression
                  | expression AND expression
                  | expression EQ expression
                  | expression NEQ expression
                  | expression LT expression
                  | expression GT expression
                  | expression LE expression
                  | expression GE expression
                  | expression PLUS expression
                  | expression MINUS expression
                  | expression TIMES expression
                  | expression DIVIDE expression
                  | expression MOD expression"""
    kind = BINARY_KINDS[p.slice[2].type]
    p[0] = BinaryExpressionSyntax(kind, Left=p[1], OperatorToken=p[2], Right=p[3])

def p_expression_assignment(p):
    """expression : expression ASSIGN expression
                  | expression PLUS_ASSIGN expression
                  | expression MINUS_ASSIGN expression"""
    kind = ASSIGNMENT_KINDS[p.slice[2].type]
    p[0] = AssignmentExpressionSyntax(kind, Left=p[1], OperatorToken=p[2], Right=p[3])

def p_expression_not(p):
    """expression : NOT expression"""
    p[0] = PrefixUnaryExpressionSyntax(SyntaxKind.LogicalNotExpression, OperatorToken=p[1], Operand=p[2])

def p_expression_uminus(p):
    """expression : MINUS expression %prec UMINUS"""
    p[0] = PrefixUnaryExpressionSyntax(SyntaxKind.UnaryMinusExpression, OperatorToken=p[1], Operand=p[2])

def p_expression_primary(p):
    """expression : primary"""
    p[0] = p[1]

def p_primary(p):
    """primary : name
               | primary_no_name"""
    p[0] = name_to_expression(p[1])

def p_primary_literal(p):
    """primary_no_name : NUMERIC_LITERAL
                       | STRING_LITERAL
                       | CHARACTER_LITERAL
                       | TRUE
                       | FALSE
                       | NULL"""
    p[0] = LiteralExpressionSyntax(LITERAL_KINDS[p.slice[1].type], Token=p[1])

def p_primary_this(p):
    """primary_no_name : THIS"""
    p[0] = ThisExpressionSyntax(Token=p[1])

def p_primary_parenthesized(p):
    """primary_no_name : LPAREN expression RPAREN"""
    p[0] = ParenthesizedExpressionSyntax(OpenParenToken=p[1], Expression=p[2], CloseParenToken=p[3])

def p_primary_invocation(p):
    """primary_no_name : name argument_list
                       | primary_no_name argument_list"""
    p[0] = InvocationExpressionSyntax(Expression=name_to_expression(p[1]), ArgumentList=p[2])

def p_primary_member_access(p):
    """primary_no_name : primary_no_name DOT IDENTIFIER"""
    p[0] = MemberAccessExpressionSyntax(
        Expression=p[1], OperatorToken=p[2], Name=IdentifierNameSyntax(Identifier=p[3]),
    )

def p_primary_object_creation(p):
    """primary_no_name : NEW type argument_list"""
    p[0] = ObjectCreationExpressionSyntax(NewKeyword=p[1], Type=p[2], ArgumentList=p[3])

def p_argument_list(p):
    """argument_list : LPAREN arguments RPAREN
                     | LPAREN RPAREN"""
    if len(p) == 4:
        p[0] = ArgumentListSyntax(OpenParenToken=p[1], Arguments=SeparatedSyntaxList(p[2]), CloseParenToken=p[3])
    else:
        p[0] = ArgumentListSyntax(OpenParenToken=p[1], Arguments=SeparatedSyntaxList(), CloseParenToken=p[2])

def p_arguments(p):
    """arguments : arguments COMMA expression
                 | expression"""
    if len(p) == 4:
        p[0] = p[1] + [p[2], ArgumentSyntax(Expression=p[3])]
    else:
        p[0] = [ArgumentSyntax(Expression=p[1])]

# Error handling

def p_error(p):
    if p is None:
        raise ParseFailure("Syntax error: unexpected end of input")
    column = getattr(p, "column", None)
    if p.type == 'BAD_CHARACTER':
        msg = f"Unexpected character {p.value.text!r}"
    elif p.type == 'END_OF_FILE':
        msg = "Syntax error: unexpected end of file"
    else:
        msg = f"Syntax error at {p.value.kind.name} {p.value.text!r}"
    logger.error(f"Parser: {msg} line={p.lineno} col={column}")
    raise ParseFailure(msg, p.lineno, column)

# Build parser once; tables stay in memory
parser = yacc.yacc(debug=False, write_tables=False, errorlog=logger)

# Public API: parse_code(), parse_source() and parse_file()
def parse_code(code: str) -> CompilationUnitSyntax:
    """
    Parse source text and return the CompilationUnit root. Raises
    ParseFailure when the text cannot be parsed.
    """
    logger.info("Parser: parse_code started")
    try:
        result = parser.parse(lexer=lexer_module.TokenStream(code))
    except ParseFailure:
        raise
    except Exception as e:
        logger.error("Parser: parse_code failed: %s", e)
        logger.debug(traceback.format_exc())
        raise ParseFailure(f"Parser failure: {e}") from e
    logger.info("Parser: parse_code finished")
    return result


def parse_source(code: str) -> ParseOutcome:
    """parse_code() returning the failure as a value instead of raising."""
    try:
        return ParseOutcome(parse_code(code))
    except ParseFailure as failure:
        return ParseOutcome(None, failure)


def parse_file(path: str) -> CompilationUnitSyntax:
    p = Path(path)
    if not p.exists():
        msg = f"Parser: parse_file - file not found: {path}"
        logger.error(msg)
        raise FileNotFoundError(msg)
    code = p.read_text(encoding='utf-8', errors='replace')
    return parse_code(code)
