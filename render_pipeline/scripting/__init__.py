# Script engine: tokenizer -> parser -> interpreter, plus DOM bindings
from .errors import ScriptError, ScriptSyntaxError, ScriptRuntimeError
from .tokenizer import Token, TokenType, Tokenizer, tokenize
from .parser import Parser, parse
from .interpreter import Interpreter, ReturnSignal, run
from .values import (
    UNDEFINED, JSFunction, JSObject, NativeFunction,
    is_truthy, to_js_string, to_number,
)
from .dom_bindings import ElementHandle
from .js_context import JSContext

__all__ = [
    'ScriptError',
    'ScriptSyntaxError',
    'ScriptRuntimeError',
    'Token',
    'TokenType',
    'Tokenizer',
    'tokenize',
    'Parser',
    'parse',
    'Interpreter',
    'ReturnSignal',
    'run',
    'UNDEFINED',
    'JSFunction',
    'JSObject',
    'NativeFunction',
    'is_truthy',
    'to_js_string',
    'to_number',
    'ElementHandle',
    'JSContext',
]
