"""
Tests for the parser adapter: tree shape, fidelity and failures.
"""

import pytest

from syntax_viewer.core.parser_cst import parse_code, parse_source
from syntax_viewer.core.syntax import SyntaxKind, SyntaxNode, SyntaxToken
from syntax_viewer.errors import ParseFailure


def method_body_of(root):
    """Statements of the first method of the first class."""
    return root.members[0].members[0].body.statements


def method_body(source):
    return method_body_of(parse_code(source))


class TestTreeShape:

    def test_class_with_method(self, class_tree):
        assert class_tree.kind is SyntaxKind.CompilationUnit
        cls = class_tree.members[0]
        assert cls.kind is SyntaxKind.ClassDeclaration
        assert cls.identifier.text == "Foo"
        method = cls.members[0]
        assert method.kind is SyntaxKind.MethodDeclaration
        assert method.identifier.text == "Bar"
        assert method.return_type.kind is SyntaxKind.PredefinedType
        assert method.body.kind is SyntaxKind.Block

    def test_parent_links(self, class_tree):
        cls = class_tree.members[0]
        method = cls.members[0]
        assert method.parent is cls
        assert cls.identifier.parent is cls
        assert class_tree.parent is None

    def test_namespace_using_and_members(self, sample_tree):
        assert sample_tree.usings[0].name.identifier.text == "System"
        ns = sample_tree.members[0]
        assert ns.kind is SyntaxKind.NamespaceDeclaration
        cls = ns.members[0]
        assert [m.kind for m in cls.members] == [
            SyntaxKind.FieldDeclaration,
            SyntaxKind.PropertyDeclaration,
            SyntaxKind.ConstructorDeclaration,
            SyntaxKind.MethodDeclaration,
        ]
        assert [t.kind for t in cls.modifiers] == [SyntaxKind.PublicKeyword]
        assert cls.base_list.types[0].type.identifier.text == "Base"

    def test_property_accessors(self, sample_tree):
        prop = sample_tree.members[0].members[0].members[1]
        accessors = prop.accessor_list.accessors
        assert [a.kind for a in accessors] == [
            SyntaxKind.GetAccessorDeclaration,
            SyntaxKind.SetAccessorDeclaration,
        ]
        assert accessors[0].keyword.kind is SyntaxKind.GetKeyword
        assert accessors[0].body is None

    def test_enum_with_trailing_comma(self):
        root = parse_code("enum Color { Red, Green = 2, }")
        enum = root.members[0]
        assert len(enum.members) == 2
        assert len(enum.members.separators) == 2
        assert enum.members[1].equals_value.value.token.value == 2

    def test_interface_method_without_body(self):
        root = parse_code("interface IShape { double Area(); }")
        method = root.members[0].members[0]
        assert method.body is None
        assert method.semicolon_token.kind is SyntaxKind.SemicolonToken


class TestStatementsAndExpressions:

    def test_local_declaration_versus_expression(self):
        statements = method_body("class A { void M() { Foo x = new Foo(); x = 1; } }")
        assert statements[0].kind is SyntaxKind.LocalDeclarationStatement
        declarator = statements[0].declaration.variables[0]
        assert declarator.initializer.value.kind is SyntaxKind.ObjectCreationExpression
        assert statements[1].kind is SyntaxKind.ExpressionStatement
        assert statements[1].expression.kind is SyntaxKind.SimpleAssignmentExpression

    def test_dotted_call_becomes_member_access(self):
        statements = method_body("class A { void M() { a.b.c(); } }")
        call = statements[0].expression
        assert call.kind is SyntaxKind.InvocationExpression
        access = call.expression
        assert access.kind is SyntaxKind.SimpleMemberAccessExpression
        assert access.name.identifier.text == "c"
        assert access.expression.kind is SyntaxKind.SimpleMemberAccessExpression
        assert access.expression.expression.kind is SyntaxKind.IdentifierName

    def test_long_dotted_call_does_not_overflow(self):
        """A call through thousands of member accesses still parses."""
        source = "class A { void M() { " + ".".join(["a"] * 3000) + "(); } }"
        outcome = parse_source(source)
        assert outcome.ok
        assert outcome.root.to_full_string() == source

        access = method_body_of(outcome.root)[0].expression.expression
        depth = 0
        while access.kind is SyntaxKind.SimpleMemberAccessExpression:
            assert access.name.identifier.text == "a"
            access = access.expression
            depth += 1
        assert depth == 2999
        assert access.kind is SyntaxKind.IdentifierName

    def test_operator_precedence(self):
        statements = method_body("class A { void M() { x = 1 + 2 * 3; } }")
        assignment = statements[0].expression
        add = assignment.right
        assert add.kind is SyntaxKind.AddExpression
        assert add.right.kind is SyntaxKind.MultiplyExpression

    def test_dangling_else_binds_to_inner_if(self):
        statements = method_body("class A { void M() { if (a) if (b) x(); else y(); } }")
        outer = statements[0]
        assert outer.slot("Else") is None
        assert outer.statement.slot("Else").kind is SyntaxKind.ElseClause

    def test_unary_and_literals(self):
        statements = method_body("class A { void M() { return !flag && -1 < 2 || null == this; } }")
        expression = statements[0].expression
        assert expression.kind is SyntaxKind.LogicalOrExpression
        assert expression.left.left.kind is SyntaxKind.LogicalNotExpression


class TestFidelity:

    def test_full_text_round_trip(self, sample_tree, sample_source):
        assert sample_tree.to_full_string() == sample_source

    def test_to_string_drops_outer_trivia(self):
        root = parse_code("  class A { }  \n")
        cls = root.members[0]
        assert cls.to_string() == "class A { }"
        assert cls.span.start == 2

    def test_tokens_in_source_order(self, class_tree):
        texts = [t.text for t in class_tree.descendant_tokens()]
        assert texts == ["class", "Foo", "{", "void", "Bar", "(", ")", "{", "}", "}", ""]


class TestFailures:

    def test_syntax_error_raises_with_position(self):
        with pytest.raises(ParseFailure) as info:
            parse_code("class {\n}")
        assert info.value.line == 1
        assert info.value.column == 7

    def test_parse_source_returns_failure_value(self):
        outcome = parse_source("class A {")
        assert not outcome.ok
        assert outcome.root is None
        assert isinstance(outcome.failure, ParseFailure)

    def test_parse_source_success(self):
        outcome = parse_source("class A {}")
        assert outcome.ok
        assert isinstance(outcome.root, SyntaxNode)

    def test_illegal_character(self):
        with pytest.raises(ParseFailure, match="Unexpected character"):
            parse_code("class A { # }")

    def test_unknown_accessor(self):
        with pytest.raises(ParseFailure, match="expected 'get' or 'set'"):
            parse_code("class A { int P { fetch; } }")
