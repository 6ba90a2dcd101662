"""스크립트 값 타입과 변환 규칙

숫자는 float, 문자열은 str, 불리언은 bool, null은 None 으로 표현합니다.
"""
import inspect
import math


class Undefined:
    def __repr__(self):
        return "undefined"

    def __bool__(self):
        return False


UNDEFINED = Undefined()


class JSFunction:
    """사용자 정의 함수. 선언 시점 환경의 스냅샷을 가짐"""

    def __init__(self, params, body, snapshot, name=None):
        self.params = params
        self.body = body
        self.snapshot = snapshot
        self.name = name

    def __repr__(self):
        return f"<function {self.name or 'anonymous'}>"


class NativeFunction:
    """호스트(Python)가 제공하는 함수"""

    def __init__(self, name, fn):
        self.name = name
        self.fn = fn
        self.required, self.limit = positional_arity(fn)

    def __call__(self, *args):
        # JS 호출 규칙: 남는 인자는 버리고 빠진 필수 인자는 undefined
        if self.limit is not None:
            args = args[:self.limit]
        if len(args) < self.required:
            args = args + (UNDEFINED,) * (self.required - len(args))
        return self.fn(*args)

    def __repr__(self):
        return f"<native function {self.name}>"


def positional_arity(fn):
    """(필수 위치 인자 수, 최대 위치 인자 수). *args 를 받으면 최대는 None"""
    try:
        parameters = inspect.signature(fn).parameters.values()
    except ValueError:
        return 0, None
    required, limit = 0, 0
    for param in parameters:
        if param.kind == param.VAR_POSITIONAL:
            return required, None
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            limit += 1
            if param.default is param.empty:
                required += 1
    return required, limit


class JSObject:
    """console, document, 이벤트 객체 같은 단순 속성 묶음"""

    def __init__(self, properties=None):
        self.properties = dict(properties or {})

    def get(self, name):
        return self.properties.get(name, UNDEFINED)

    def set(self, name, value):
        self.properties[name] = value

    def __repr__(self):
        return f"JSObject({sorted(self.properties)})"


def is_truthy(value) -> bool:
    if value is None or value is UNDEFINED:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, float):
        return value != 0 and not math.isnan(value)
    if isinstance(value, str):
        return value != ""
    return True


def to_number(value) -> float:
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        return float(value)
    if value is None:
        return 0.0
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        try:
            return float(text)
        except ValueError:
            return math.nan
    return math.nan


def to_js_string(value) -> str:
    if value is None:
        return "null"
    if value is UNDEFINED:
        return "undefined"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, str):
        return value
    if isinstance(value, (JSFunction, NativeFunction)):
        return "function"
    return str(value)


def loose_equals(left, right) -> bool:
    """== 비교. null 과 undefined 는 서로 같고, 숫자/문자열은 숫자로 비교"""
    nullish = (None, UNDEFINED)
    if left in nullish or right in nullish:
        return left in nullish and right in nullish
    numeric = (bool, float, int)
    if isinstance(left, numeric) and isinstance(right, str) or \
            isinstance(left, str) and isinstance(right, numeric):
        return to_number(left) == to_number(right)
    if isinstance(left, str) or isinstance(right, str):
        return left == right
    if isinstance(left, numeric) and isinstance(right, numeric):
        return to_number(left) == to_number(right)
    return left is right
