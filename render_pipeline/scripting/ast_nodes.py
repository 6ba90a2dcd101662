"""구문 트리 노드"""
from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass
class Program:
    body: List[Any] = field(default_factory=list)


# 문장

@dataclass
class VarDecl:
    kind: str
    name: str
    init: Optional[Any] = None


@dataclass
class FunctionDecl:
    name: str
    params: List[str]
    body: List[Any]


@dataclass
class If:
    test: Any
    consequent: Any
    alternate: Optional[Any] = None


@dataclass
class For:
    init: Optional[Any]
    test: Optional[Any]
    update: Optional[Any]
    body: Any


@dataclass
class While:
    test: Any
    body: Any


@dataclass
class Return:
    argument: Optional[Any] = None


@dataclass
class Block:
    body: List[Any]


@dataclass
class ExpressionStatement:
    expression: Any


# 표현식

@dataclass
class Assign:
    target: Any
    value: Any


@dataclass
class Binary:
    op: str
    left: Any
    right: Any


@dataclass
class Unary:
    op: str
    operand: Any


@dataclass
class Update:
    """++ / -- (prefix 이면 새 값, postfix 이면 이전 값을 돌려줌)"""
    op: str
    target: Any
    prefix: bool


@dataclass
class Call:
    callee: Any
    args: List[Any]


@dataclass
class Member:
    """obj.name (computed=False, property는 str) 또는 obj[expr]"""
    object: Any
    property: Any
    computed: bool


@dataclass
class Identifier:
    name: str


@dataclass
class Literal:
    value: Any


@dataclass
class FunctionExpr:
    params: List[str]
    body: List[Any]
