"""파서가 복구하면서 남기는 진단 정보"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Diagnostic:
    """복구된 파싱 문제 하나

    source: "html" 또는 "css"
    position: 입력 텍스트 안의 문자 위치
    """
    source: str
    position: int
    message: str

    def __str__(self) -> str:
        return f"{self.source}:{self.position}: {self.message}"
