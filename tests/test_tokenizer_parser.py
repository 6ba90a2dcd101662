import pytest

from render_pipeline.scripting import (
    TokenType, tokenize, parse, ScriptSyntaxError,
)
from render_pipeline.scripting import ast_nodes as ast


def kinds(source):
    return [(token.type, token.value) for token in tokenize(source)]


class TestTokenizer:
    def test_declaration(self):
        assert kinds("var x = 1 + 2; x") == [
            (TokenType.KEYWORD, "var"),
            (TokenType.IDENTIFIER, "x"),
            (TokenType.ASSIGN, "="),
            (TokenType.NUMBER, 1),
            (TokenType.PLUS, "+"),
            (TokenType.NUMBER, 2),
            (TokenType.SEMICOLON, ";"),
            (TokenType.IDENTIFIER, "x"),
        ]

    def test_two_char_operators_win(self):
        types = [t for t, _ in kinds("a == b != c ++ -- = !")]
        assert types == [
            TokenType.IDENTIFIER, TokenType.EQUALS, TokenType.IDENTIFIER,
            TokenType.NOT_EQUALS, TokenType.IDENTIFIER, TokenType.INCREMENT,
            TokenType.DECREMENT, TokenType.ASSIGN, TokenType.NOT,
        ]

    def test_strings_and_escapes(self):
        tokens = tokenize('"a\\nb" \'it\\\'s\' "tab\\there"')
        assert [t.value for t in tokens] == ["a\nb", "it's", "tab\there"]
        assert all(t.type == TokenType.STRING for t in tokens)

    def test_unterminated_string_runs_to_end(self):
        assert kinds('"abc') == [(TokenType.STRING, "abc")]

    def test_numbers(self):
        assert kinds("3.14") == [(TokenType.NUMBER, 3.14)]
        assert kinds("1.2.3") == [
            (TokenType.NUMBER, 1.2), (TokenType.DOT, "."), (TokenType.NUMBER, 3),
        ]

    def test_keywords_and_identifiers(self):
        assert kinds("function fn $el _x") == [
            (TokenType.KEYWORD, "function"),
            (TokenType.IDENTIFIER, "fn"),
            (TokenType.IDENTIFIER, "$el"),
            (TokenType.IDENTIFIER, "_x"),
        ]

    def test_unknown_characters_are_dropped(self):
        assert kinds("x @ # y") == [
            (TokenType.IDENTIFIER, "x"), (TokenType.IDENTIFIER, "y"),
        ]

    def test_line_comments_are_skipped(self):
        assert kinds("x // note\ny") == [
            (TokenType.IDENTIFIER, "x"), (TokenType.IDENTIFIER, "y"),
        ]

    def test_punctuation(self):
        types = [t for t, _ in kinds("( ) { } [ ] ; , * / < > .")]
        assert types == [
            TokenType.LPAREN, TokenType.RPAREN, TokenType.LBRACE,
            TokenType.RBRACE, TokenType.LBRACKET, TokenType.RBRACKET,
            TokenType.SEMICOLON, TokenType.COMMA, TokenType.MULTIPLY,
            TokenType.DIVIDE, TokenType.LESS_THAN, TokenType.GREATER_THAN,
            TokenType.DOT,
        ]


def parse_source(source):
    return parse(tokenize(source))


class TestParser:
    def test_two_statement_program(self):
        program = parse_source("var x = 1 + 2; x")
        assert len(program.body) == 2
        decl, stmt = program.body
        assert decl == ast.VarDecl("var", "x", ast.Binary(
            "+", ast.Literal(1.0), ast.Literal(2.0)))
        assert stmt == ast.ExpressionStatement(ast.Identifier("x"))

    def test_precedence(self):
        expr = parse_source("1 + 2 * 3 < 10 == true").body[0].expression
        assert expr.op == "=="
        comparison = expr.left
        assert comparison.op == "<"
        assert comparison.left == ast.Binary(
            "+", ast.Literal(1.0),
            ast.Binary("*", ast.Literal(2.0), ast.Literal(3.0)))

    def test_assignment_is_right_associative(self):
        expr = parse_source("a = b = 1").body[0].expression
        assert expr == ast.Assign(ast.Identifier("a"),
                                  ast.Assign(ast.Identifier("b"), ast.Literal(1.0)))

    def test_call_and_member_chain(self):
        expr = parse_source("a.b(c)[0]").body[0].expression
        assert expr == ast.Member(
            ast.Call(ast.Member(ast.Identifier("a"), "b", computed=False),
                     [ast.Identifier("c")]),
            ast.Literal(0.0), computed=True)

    def test_unary_and_update(self):
        body = parse_source("!-x; ++i; i--").body
        assert body[0].expression == ast.Unary("!", ast.Unary("-", ast.Identifier("x")))
        assert body[1].expression == ast.Update("++", ast.Identifier("i"), prefix=True)
        assert body[2].expression == ast.Update("--", ast.Identifier("i"), prefix=False)

    def test_function_declaration_and_expression(self):
        program = parse_source(
            "function add(a, b) { return a + b } var f = function (x) { return x; };")
        decl, var = program.body
        assert decl.name == "add" and decl.params == ["a", "b"]
        assert isinstance(decl.body[0], ast.Return)
        assert isinstance(var.init, ast.FunctionExpr)
        assert var.init.params == ["x"]

    def test_control_flow(self):
        program = parse_source(
            "if (a) { b } else if (c) d; else e;"
            "for (var i = 0; i < 3; i++) x;"
            "for (;;) {}"
            "while (n) n = n - 1;")
        if_stmt, for_stmt, empty_for, while_stmt = program.body
        assert isinstance(if_stmt.alternate, ast.If)
        assert isinstance(for_stmt.init, ast.VarDecl)
        assert for_stmt.update == ast.Update("++", ast.Identifier("i"), prefix=False)
        assert empty_for.init is None and empty_for.test is None
        assert isinstance(while_stmt, ast.While)

    def test_literals(self):
        values = [stmt.expression.value
                  for stmt in parse_source("true; false; null; 'x'").body]
        assert values == [True, False, None, "x"]

    def test_terminator_optional_before_brace_and_end(self):
        program = parse_source("function f() { return 1 } f()")
        assert len(program.body) == 2

    def test_missing_terminator_is_an_error(self):
        with pytest.raises(ScriptSyntaxError) as info:
            parse_source("x y")
        assert info.value.expected == "SEMICOLON"
        assert info.value.found == "IDENTIFIER"

    def test_error_names_expected_and_found(self):
        with pytest.raises(ScriptSyntaxError) as info:
            parse_source("var = 3")
        assert info.value.expected == "IDENTIFIER"
        assert info.value.found == "ASSIGN"
        assert "IDENTIFIER" in str(info.value)

    def test_unclosed_call(self):
        with pytest.raises(ScriptSyntaxError) as info:
            parse_source("foo(1, 2")
        assert info.value.found == "end of input"

    def test_invalid_assignment_target(self):
        with pytest.raises(ScriptSyntaxError):
            parse_source("1 = 2")

    def test_unclosed_block(self):
        with pytest.raises(ScriptSyntaxError):
            parse_source("function f() { return 1")
