"""스크립트 엔진 오류

어휘 오류는 토크나이저가 조용히 건너뛰므로 별도 타입이 없습니다.
"""


class ScriptError(Exception):
    """스크립트 하나의 실행을 중단시키는 오류의 기반 클래스"""


class ScriptSyntaxError(ScriptError):
    def __init__(self, expected, found, position=None):
        super().__init__(f"expected {expected}, found {found}")
        self.expected = expected
        self.found = found
        self.position = position


class ScriptRuntimeError(ScriptError):
    pass
