"""AST 평가기

환경은 이름 -> 값의 평면 dict 하나입니다. 함수 호출은 환경 전체를
(선언 시점 스냅샷 + 매개변수)로 바꿨다가 호출이 끝나면 되돌립니다.
호출 환경에 없는 이름은 살아있는 전역 환경에서 찾습니다.
"""
import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Optional

from . import ast_nodes as ast
from .errors import ScriptRuntimeError
from .parser import parse
from .tokenizer import tokenize
from .values import (
    UNDEFINED, JSFunction, JSObject, NativeFunction,
    is_truthy, loose_equals, to_js_string, to_number,
)

logger = logging.getLogger(__name__)


@dataclass
class ReturnSignal:
    """return 문이 문장 실행을 거슬러 올라가며 전달하는 값"""
    value: Any


class Interpreter:
    def __init__(self, globals: Optional[Dict[str, Any]] = None,
                 property_access=None):
        self.globals = globals if globals is not None else {}
        self.env = self.globals
        self.outer = None
        # 호스트 객체(DOM 핸들 등)의 속성 접근 위임. (get, set) 튜플
        self.property_access = property_access

    def evaluate(self, program: ast.Program):
        result = UNDEFINED
        for statement in program.body:
            result = self.execute(statement)
            if isinstance(result, ReturnSignal):
                return result.value
        return result

    # 문장

    def execute(self, node):
        method = getattr(self, "exec_" + type(node).__name__, None)
        if method is None:
            return self.eval(node)
        return method(node)

    def exec_block_body(self, body):
        result = UNDEFINED
        for statement in body:
            result = self.execute(statement)
            if isinstance(result, ReturnSignal):
                return result
        return result

    def exec_Block(self, node):
        return self.exec_block_body(node.body)

    def exec_VarDecl(self, node):
        value = UNDEFINED if node.init is None else self.eval(node.init)
        self.env[node.name] = value
        return value

    def exec_FunctionDecl(self, node):
        self.env[node.name] = JSFunction(
            node.params, node.body, dict(self.env), node.name)
        return UNDEFINED

    def exec_If(self, node):
        if is_truthy(self.eval(node.test)):
            return self.execute(node.consequent)
        elif node.alternate is not None:
            return self.execute(node.alternate)
        return UNDEFINED

    def exec_For(self, node):
        if node.init is not None:
            self.execute(node.init)
        while node.test is None or is_truthy(self.eval(node.test)):
            result = self.execute(node.body)
            if isinstance(result, ReturnSignal):
                return result
            if node.update is not None:
                self.eval(node.update)
        return UNDEFINED

    def exec_While(self, node):
        while is_truthy(self.eval(node.test)):
            result = self.execute(node.body)
            if isinstance(result, ReturnSignal):
                return result
        return UNDEFINED

    def exec_Return(self, node):
        value = UNDEFINED if node.argument is None else self.eval(node.argument)
        return ReturnSignal(value)

    def exec_ExpressionStatement(self, node):
        return self.eval(node.expression)

    # 표현식

    def eval(self, node):
        method = getattr(self, "eval_" + type(node).__name__, None)
        if method is None:
            raise ScriptRuntimeError(f"cannot evaluate {type(node).__name__}")
        return method(node)

    def eval_Literal(self, node):
        return node.value

    def eval_Identifier(self, node):
        if node.name in self.env:
            return self.env[node.name]
        if self.outer is not None and node.name in self.outer:
            return self.outer[node.name]
        if node.name in self.globals:
            return self.globals[node.name]
        raise ScriptRuntimeError(f"undefined identifier '{node.name}'")

    def eval_FunctionExpr(self, node):
        return JSFunction(node.params, node.body, dict(self.env))

    def eval_Assign(self, node):
        value = self.eval(node.value)
        self.store(node.target, value)
        return value

    def eval_Update(self, node):
        old = to_number(self.eval(node.target))
        new = old + 1 if node.op == "++" else old - 1
        self.store(node.target, new)
        return new if node.prefix else old

    def store(self, target, value):
        if isinstance(target, ast.Identifier):
            self.env[target.name] = value
            return
        obj = self.eval(target.object)
        self.set_property(obj, self.property_name(target), value)

    def eval_Unary(self, node):
        operand = self.eval(node.operand)
        if node.op == "!":
            return not is_truthy(operand)
        elif node.op == "-":
            return -to_number(operand)
        raise ScriptRuntimeError(f"unknown unary operator '{node.op}'")

    def eval_Binary(self, node):
        left = self.eval(node.left)
        right = self.eval(node.right)
        return self.binary(node.op, left, right)

    def binary(self, op, left, right):
        if op == "+":
            if isinstance(left, str) or isinstance(right, str):
                return to_js_string(left) + to_js_string(right)
            return to_number(left) + to_number(right)
        elif op == "-":
            return to_number(left) - to_number(right)
        elif op == "*":
            return to_number(left) * to_number(right)
        elif op == "/":
            numerator, denominator = to_number(left), to_number(right)
            if denominator == 0:
                if numerator == 0 or math.isnan(numerator):
                    return math.nan
                return math.copysign(math.inf, numerator) * \
                    math.copysign(1, denominator)
            return numerator / denominator
        elif op == "==":
            return loose_equals(left, right)
        elif op == "!=":
            return not loose_equals(left, right)
        elif op in ("<", ">"):
            if isinstance(left, str) and isinstance(right, str):
                return left < right if op == "<" else left > right
            left, right = to_number(left), to_number(right)
            return left < right if op == "<" else left > right
        raise ScriptRuntimeError(f"unknown binary operator '{op}'")

    def eval_Member(self, node):
        obj = self.eval(node.object)
        return self.get_property(obj, self.property_name(node))

    def property_name(self, node):
        if node.computed:
            key = self.eval(node.property)
            return to_js_string(key)
        return node.property

    def get_property(self, obj, name):
        if obj is None or obj is UNDEFINED:
            raise ScriptRuntimeError(
                f"cannot read property '{name}' of {to_js_string(obj)}")
        if isinstance(obj, JSObject):
            return obj.get(name)
        if isinstance(obj, str):
            if name == "length":
                return float(len(obj))
            if name.isdigit() and int(name) < len(obj):
                return obj[int(name)]
            return UNDEFINED
        if self.property_access is not None:
            return self.property_access[0](obj, name)
        return UNDEFINED

    def set_property(self, obj, name, value):
        if obj is None or obj is UNDEFINED:
            raise ScriptRuntimeError(
                f"cannot set property '{name}' of {to_js_string(obj)}")
        if isinstance(obj, JSObject):
            obj.set(name, value)
        elif self.property_access is not None:
            self.property_access[1](obj, name, value)
        else:
            raise ScriptRuntimeError(
                f"cannot set property '{name}' of {to_js_string(obj)}")

    def eval_Call(self, node):
        callee = self.eval(node.callee)
        args = [self.eval(arg) for arg in node.args]
        if not isinstance(callee, (JSFunction, NativeFunction)):
            raise ScriptRuntimeError(
                f"{self.describe(node.callee)} is not a function "
                f"(got {to_js_string(callee)})")
        return self.call_function(callee, args)

    def describe(self, node):
        if isinstance(node, ast.Identifier):
            return node.name
        if isinstance(node, ast.Member) and not node.computed:
            return f"{self.describe(node.object)}.{node.property}"
        return "expression"

    def call_function(self, func, args, env=None):
        """함수 호출

        env 를 주면 호출 환경에 없는 이름을 전역보다 먼저 env 에서 찾는다
        (setTimeout 콜백은 등록 시점의 환경 객체를 그대로 사용함).
        """
        if isinstance(func, NativeFunction):
            try:
                return func(*args)
            except TypeError as e:
                raise ScriptRuntimeError(f"{func.name}: {e}") from e
        if not isinstance(func, JSFunction):
            raise ScriptRuntimeError(f"{to_js_string(func)} is not a function")

        caller_env, caller_outer = self.env, self.outer
        if env is not None:
            self.outer = env
        call_env = dict(func.snapshot)
        for i, param in enumerate(func.params):
            call_env[param] = args[i] if i < len(args) else UNDEFINED
        self.env = call_env
        try:
            result = self.exec_block_body(func.body)
        except RecursionError:
            raise ScriptRuntimeError("maximum call stack size exceeded") from None
        finally:
            self.env, self.outer = caller_env, caller_outer
        if isinstance(result, ReturnSignal):
            return result.value
        return UNDEFINED


def run(source: str, env: Optional[Dict[str, Any]] = None):
    """tokenize + parse + evaluate"""
    program = parse(tokenize(source))
    return Interpreter(env).evaluate(program)
