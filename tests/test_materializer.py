"""
Tests for the tree materializer: labels, order, classification, depth guard.
"""

from syntax_viewer.core.materializer import Classification, materialize, node_label, token_label
from syntax_viewer.core.parser_cst import parse_code
from syntax_viewer.core.syntax import (
    LiteralExpressionSyntax, ParenthesizedExpressionSyntax, SyntaxKind, SyntaxNode, SyntaxToken,
)


def leaves(display):
    return [node for node in display.walk() if not node.children and node.classification is Classification.TOKEN]


def nested_parentheses(depth):
    expr = LiteralExpressionSyntax(
        SyntaxKind.NumericLiteralExpression, Token=SyntaxToken(SyntaxKind.NumericLiteralToken, "1"))
    for _ in range(depth):
        expr = ParenthesizedExpressionSyntax(
            OpenParenToken=SyntaxToken(SyntaxKind.OpenParenToken, "("),
            Expression=expr,
            CloseParenToken=SyntaxToken(SyntaxKind.CloseParenToken, ")"),
        )
    return expr


class TestLabels:

    def test_class_scenario(self, class_tree):
        display = materialize(class_tree)
        assert display.label == "CompilationUnit - CompilationUnitSyntax"
        cls = display.children[0]
        assert cls.label == "ClassDeclaration - ClassDeclarationSyntax"
        assert cls.classification is Classification.NODE
        assert [c.label for c in cls.children] == [
            'ClassKeyword: "class"',
            'IdentifierToken: "Foo"',
            'OpenBraceToken: "{"',
            "MethodDeclaration - MethodDeclarationSyntax",
            'CloseBraceToken: "}"',
        ]
        method = cls.children[3]
        assert 'IdentifierToken: "Bar"' in [c.label for c in method.children]

    def test_empty_token_text_has_no_suffix(self, class_tree):
        display = materialize(class_tree)
        assert display.children[-1].label == "EndOfFileToken"

    def test_label_helpers(self, class_tree):
        cls = class_tree.members[0]
        assert node_label(cls) == "ClassDeclaration - ClassDeclarationSyntax"
        assert token_label(cls.identifier) == 'IdentifierToken: "Foo"'


class TestOrderAndClassification:

    def test_leaves_reproduce_source(self, sample_tree, sample_source):
        display = materialize(sample_tree)
        text = "".join(leaf.element.to_full_string() for leaf in leaves(display))
        assert text == sample_source

    def test_children_match_element_children(self, sample_tree):
        for node in materialize(sample_tree).walk():
            element = node.element
            if isinstance(element, SyntaxNode):
                assert node.classification is Classification.NODE
                assert [c.element for c in node.children] == list(element.child_nodes_and_tokens())
            else:
                assert isinstance(element, SyntaxToken)
                assert node.classification is Classification.TOKEN
                assert node.children == ()

    def test_display_tree_is_a_tree(self, sample_tree):
        display = materialize(sample_tree)
        seen = [id(node) for node in display.walk()]
        assert len(seen) == len(set(seen))

    def test_deterministic(self, sample_tree):
        assert materialize(sample_tree) == materialize(sample_tree)

    def test_token_root(self):
        token = SyntaxToken(SyntaxKind.IdentifierToken, "x")
        display = materialize(token)
        assert display.classification is Classification.TOKEN
        assert display.element is token


class TestAnomalies:

    def test_depth_limit_substitutes_placeholder(self):
        root = nested_parentheses(5000)
        display = materialize(root, max_depth=100)
        node = display
        for _ in range(100):
            node = node.children[1]
        placeholder = node.children[1]
        assert placeholder.is_placeholder
        assert "depth limit exceeded" in placeholder.label
        assert placeholder.element is None
        assert placeholder.children == ()
        # the closing paren after the placeholder is still there
        assert node.children[2].label == 'CloseParenToken: ")"'

    def test_deep_parsed_expression_does_not_overflow(self):
        source = "class A { int x = " + "(" * 2000 + "1" + ")" * 2000 + "; }"
        display = materialize(parse_code(source))
        assert any(node.is_placeholder for node in display.walk())

    def test_unexpected_child_becomes_placeholder(self):
        class Stray:
            pass

        class OddSyntax(SyntaxNode):
            KIND = SyntaxKind.Block
            SLOTS = ("OpenBraceToken", "Extra", "CloseBraceToken")

        node = OddSyntax(
            OpenBraceToken=SyntaxToken(SyntaxKind.OpenBraceToken, "{"),
            Extra=Stray(),
            CloseBraceToken=SyntaxToken(SyntaxKind.CloseBraceToken, "}"),
        )
        display = materialize(node)
        assert [c.is_placeholder for c in display.children] == [False, True, False]
        assert "unexpected child: Stray" in display.children[1].anomaly
