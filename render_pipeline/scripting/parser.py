"""재귀 하강 파서

우선순위: assignment -> equality -> comparison -> additive ->
multiplicative -> unary -> postfix -> call/member -> primary
"""
from typing import List, Optional

from . import ast_nodes as ast
from .errors import ScriptSyntaxError
from .tokenizer import Token, TokenType
from .values import UNDEFINED

VAR_KEYWORDS = ["var", "let", "const"]
LITERAL_KEYWORDS = {"true": True, "false": False, "null": None}


class Parser:
    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.i = 0

    def peek(self) -> Optional[Token]:
        return self.tokens[self.i] if self.i < len(self.tokens) else None

    def check(self, type, value=None) -> bool:
        token = self.peek()
        return token is not None and token.type == type and \
            (value is None or token.value == value)

    def advance(self) -> Token:
        token = self.tokens[self.i]
        self.i += 1
        return token

    def found(self) -> str:
        token = self.peek()
        return "end of input" if token is None else token.type.name

    def expect(self, type, value=None) -> Token:
        if not self.check(type, value):
            expected = type.name if value is None else f"{type.name} {value!r}"
            raise ScriptSyntaxError(expected, self.found(), self.i)
        return self.advance()

    def terminator(self):
        """';' 또는 '}' / 입력 끝 앞에서는 생략 가능"""
        if self.check(TokenType.SEMICOLON):
            self.advance()
        elif self.peek() is not None and not self.check(TokenType.RBRACE):
            raise ScriptSyntaxError("SEMICOLON", self.found(), self.i)

    def parse(self) -> ast.Program:
        body = []
        while self.peek() is not None:
            body.append(self.statement())
        return ast.Program(body)

    # 문장

    def statement(self):
        token = self.peek()
        if token.type == TokenType.KEYWORD:
            if token.value in VAR_KEYWORDS:
                return self.var_decl()
            # 'function' 뒤에 이름이 없으면 함수 표현식
            if token.value == "function" and self.i + 1 < len(self.tokens) \
                    and self.tokens[self.i + 1].type == TokenType.IDENTIFIER:
                return self.function_decl()
            if token.value == "if":
                return self.if_statement()
            if token.value == "for":
                return self.for_statement()
            if token.value == "while":
                return self.while_statement()
            if token.value == "return":
                return self.return_statement()
        if token.type == TokenType.LBRACE:
            return self.block()
        if token.type == TokenType.SEMICOLON:
            self.advance()
            return ast.Block([])
        expression = self.expression()
        self.terminator()
        return ast.ExpressionStatement(expression)

    def var_decl(self, terminated=True):
        kind = self.advance().value
        name = self.expect(TokenType.IDENTIFIER).value
        init = None
        if self.check(TokenType.ASSIGN):
            self.advance()
            init = self.expression()
        if terminated:
            self.terminator()
        return ast.VarDecl(kind, name, init)

    def params(self) -> List[str]:
        self.expect(TokenType.LPAREN)
        names = []
        while not self.check(TokenType.RPAREN):
            names.append(self.expect(TokenType.IDENTIFIER).value)
            if not self.check(TokenType.RPAREN):
                self.expect(TokenType.COMMA)
        self.expect(TokenType.RPAREN)
        return names

    def function_body(self) -> List:
        self.expect(TokenType.LBRACE)
        body = []
        while not self.check(TokenType.RBRACE):
            if self.peek() is None:
                raise ScriptSyntaxError("RBRACE", self.found(), self.i)
            body.append(self.statement())
        self.expect(TokenType.RBRACE)
        return body

    def function_decl(self):
        self.expect(TokenType.KEYWORD, "function")
        name = self.expect(TokenType.IDENTIFIER).value
        params = self.params()
        return ast.FunctionDecl(name, params, self.function_body())

    def block(self):
        return ast.Block(self.function_body())

    def if_statement(self):
        self.expect(TokenType.KEYWORD, "if")
        self.expect(TokenType.LPAREN)
        test = self.expression()
        self.expect(TokenType.RPAREN)
        consequent = self.statement()
        alternate = None
        if self.check(TokenType.KEYWORD, "else"):
            self.advance()
            alternate = self.statement()
        return ast.If(test, consequent, alternate)

    def for_statement(self):
        self.expect(TokenType.KEYWORD, "for")
        self.expect(TokenType.LPAREN)

        init = None
        if self.check(TokenType.KEYWORD) and self.peek().value in VAR_KEYWORDS:
            init = self.var_decl(terminated=False)
        elif not self.check(TokenType.SEMICOLON):
            init = ast.ExpressionStatement(self.expression())
        self.expect(TokenType.SEMICOLON)

        test = None if self.check(TokenType.SEMICOLON) else self.expression()
        self.expect(TokenType.SEMICOLON)

        update = None if self.check(TokenType.RPAREN) else self.expression()
        self.expect(TokenType.RPAREN)
        return ast.For(init, test, update, self.statement())

    def while_statement(self):
        self.expect(TokenType.KEYWORD, "while")
        self.expect(TokenType.LPAREN)
        test = self.expression()
        self.expect(TokenType.RPAREN)
        return ast.While(test, self.statement())

    def return_statement(self):
        self.expect(TokenType.KEYWORD, "return")
        argument = None
        if self.peek() is not None and \
                not self.check(TokenType.SEMICOLON) and \
                not self.check(TokenType.RBRACE):
            argument = self.expression()
        self.terminator()
        return ast.Return(argument)

    # 표현식

    def expression(self):
        return self.assignment()

    def assignment(self):
        target = self.equality()
        if self.check(TokenType.ASSIGN):
            if not isinstance(target, (ast.Identifier, ast.Member)):
                raise ScriptSyntaxError("assignable expression", "ASSIGN", self.i)
            self.advance()
            return ast.Assign(target, self.assignment())
        return target

    def binary(self, operand, types):
        expr = operand()
        while self.peek() is not None and self.peek().type in types:
            op = self.advance().value
            expr = ast.Binary(op, expr, operand())
        return expr

    def equality(self):
        return self.binary(self.comparison,
                           [TokenType.EQUALS, TokenType.NOT_EQUALS])

    def comparison(self):
        return self.binary(self.additive,
                           [TokenType.LESS_THAN, TokenType.GREATER_THAN])

    def additive(self):
        return self.binary(self.multiplicative,
                           [TokenType.PLUS, TokenType.MINUS])

    def multiplicative(self):
        return self.binary(self.unary,
                           [TokenType.MULTIPLY, TokenType.DIVIDE])

    def unary(self):
        if self.check(TokenType.NOT) or self.check(TokenType.MINUS):
            op = self.advance().value
            return ast.Unary(op, self.unary())
        if self.check(TokenType.INCREMENT) or self.check(TokenType.DECREMENT):
            op = self.advance().value
            return ast.Update(op, self.assignable(self.unary()), prefix=True)
        return self.postfix()

    def postfix(self):
        expr = self.call()
        if self.check(TokenType.INCREMENT) or self.check(TokenType.DECREMENT):
            op = self.advance().value
            return ast.Update(op, self.assignable(expr), prefix=False)
        return expr

    def assignable(self, expr):
        if not isinstance(expr, (ast.Identifier, ast.Member)):
            raise ScriptSyntaxError("assignable expression",
                                    type(expr).__name__, self.i)
        return expr

    def call(self):
        expr = self.primary()
        while True:
            if self.check(TokenType.LPAREN):
                self.advance()
                args = []
                while not self.check(TokenType.RPAREN):
                    args.append(self.expression())
                    if not self.check(TokenType.RPAREN):
                        self.expect(TokenType.COMMA)
                self.expect(TokenType.RPAREN)
                expr = ast.Call(expr, args)
            elif self.check(TokenType.LBRACKET):
                self.advance()
                prop = self.expression()
                self.expect(TokenType.RBRACKET)
                expr = ast.Member(expr, prop, computed=True)
            elif self.check(TokenType.DOT):
                self.advance()
                name = self.peek()
                # 키워드도 속성 이름으로 쓸 수 있음
                if name is None or name.type not in \
                        [TokenType.IDENTIFIER, TokenType.KEYWORD]:
                    raise ScriptSyntaxError("IDENTIFIER", self.found(), self.i)
                self.advance()
                expr = ast.Member(expr, name.value, computed=False)
            else:
                return expr

    def primary(self):
        token = self.peek()
        if token is None:
            raise ScriptSyntaxError("expression", "end of input", self.i)

        if token.type in [TokenType.NUMBER, TokenType.STRING]:
            self.advance()
            return ast.Literal(token.value)
        if token.type == TokenType.IDENTIFIER:
            self.advance()
            return ast.Identifier(token.value)
        if token.type == TokenType.KEYWORD:
            if token.value in LITERAL_KEYWORDS:
                self.advance()
                return ast.Literal(LITERAL_KEYWORDS[token.value])
            if token.value == "undefined":
                self.advance()
                return ast.Literal(UNDEFINED)
            if token.value == "function":
                self.advance()
                if self.check(TokenType.IDENTIFIER):
                    self.advance()  # 함수 표현식의 이름은 바인딩하지 않음
                params = self.params()
                return ast.FunctionExpr(params, self.function_body())
        if token.type == TokenType.LPAREN:
            self.advance()
            expr = self.expression()
            self.expect(TokenType.RPAREN)
            return expr
        raise ScriptSyntaxError("expression", token.type.name, self.i)


def parse(tokens: List[Token]) -> ast.Program:
    return Parser(tokens).parse()
