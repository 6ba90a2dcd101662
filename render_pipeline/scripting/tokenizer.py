"""스크립트 토크나이저

알 수 없는 문자는 버리고 진행하므로 tokenize()는 예외를 던지지 않습니다.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, List


class TokenType(Enum):
    KEYWORD = "KEYWORD"
    IDENTIFIER = "IDENTIFIER"
    NUMBER = "NUMBER"
    STRING = "STRING"
    EQUALS = "EQUALS"
    NOT_EQUALS = "NOT_EQUALS"
    INCREMENT = "INCREMENT"
    DECREMENT = "DECREMENT"
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    LBRACE = "LBRACE"
    RBRACE = "RBRACE"
    LBRACKET = "LBRACKET"
    RBRACKET = "RBRACKET"
    SEMICOLON = "SEMICOLON"
    COMMA = "COMMA"
    ASSIGN = "ASSIGN"
    PLUS = "PLUS"
    MINUS = "MINUS"
    MULTIPLY = "MULTIPLY"
    DIVIDE = "DIVIDE"
    LESS_THAN = "LESS_THAN"
    GREATER_THAN = "GREATER_THAN"
    NOT = "NOT"
    DOT = "DOT"


KEYWORDS = [
    "var", "let", "const", "function", "if", "else", "for", "while",
    "return", "true", "false", "null", "undefined",
]

# 한 글자 연산자보다 먼저 검사
TWO_CHAR_OPERATORS = {
    "==": TokenType.EQUALS,
    "!=": TokenType.NOT_EQUALS,
    "++": TokenType.INCREMENT,
    "--": TokenType.DECREMENT,
}

SINGLE_CHAR_OPERATORS = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    ";": TokenType.SEMICOLON,
    ",": TokenType.COMMA,
    "=": TokenType.ASSIGN,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "<": TokenType.LESS_THAN,
    ">": TokenType.GREATER_THAN,
    "!": TokenType.NOT,
    ".": TokenType.DOT,
}

ESCAPES = {"n": "\n", "t": "\t"}


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: Any

    def __repr__(self) -> str:
        return f"{self.type.name} {self.value!r}"


class Tokenizer:
    def __init__(self, source: str):
        self.s = source
        self.i = 0

    def tokenize(self) -> List[Token]:
        tokens = []
        while True:
            self.skip_whitespace()
            if self.i >= len(self.s):
                break
            c = self.s[self.i]
            pair = self.s[self.i:self.i + 2]

            if c in "\"'":
                tokens.append(self.string())
            elif c.isdigit():
                tokens.append(self.number())
            elif c.isalpha() or c in "_$":
                tokens.append(self.identifier())
            elif pair in TWO_CHAR_OPERATORS:
                tokens.append(Token(TWO_CHAR_OPERATORS[pair], pair))
                self.i += 2
            elif c in SINGLE_CHAR_OPERATORS:
                tokens.append(Token(SINGLE_CHAR_OPERATORS[c], c))
                self.i += 1
            else:
                self.i += 1
        return tokens

    def skip_whitespace(self):
        """공백과 // 주석 건너뛰기"""
        while self.i < len(self.s):
            if self.s[self.i].isspace():
                self.i += 1
            elif self.s.startswith("//", self.i):
                end = self.s.find("\n", self.i)
                self.i = len(self.s) if end == -1 else end + 1
            else:
                break

    def string(self) -> Token:
        quote = self.s[self.i]
        self.i += 1
        chars = []
        while self.i < len(self.s) and self.s[self.i] != quote:
            c = self.s[self.i]
            if c == "\\" and self.i + 1 < len(self.s):
                self.i += 1
                c = ESCAPES.get(self.s[self.i], self.s[self.i])
            chars.append(c)
            self.i += 1
        self.i += 1  # 닫는 따옴표 (없으면 입력 끝)
        return Token(TokenType.STRING, "".join(chars))

    def number(self) -> Token:
        start = self.i
        seen_dot = False
        while self.i < len(self.s):
            c = self.s[self.i]
            if c.isdigit():
                self.i += 1
            elif c == "." and not seen_dot and \
                    self.i + 1 < len(self.s) and self.s[self.i + 1].isdigit():
                seen_dot = True
                self.i += 1
            else:
                break
        return Token(TokenType.NUMBER, float(self.s[start:self.i]))

    def identifier(self) -> Token:
        start = self.i
        while self.i < len(self.s) and \
                (self.s[self.i].isalnum() or self.s[self.i] in "_$"):
            self.i += 1
        word = self.s[start:self.i]
        kind = TokenType.KEYWORD if word in KEYWORDS else TokenType.IDENTIFIER
        return Token(kind, word)


def tokenize(source: str) -> List[Token]:
    return Tokenizer(source).tokenize()
