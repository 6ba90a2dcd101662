"""CSS Parser

태그 셀렉터와 자손 셀렉터만 지원하는 복구형 파서.
규칙 하나의 오류는 다음 ';' 또는 '}' 까지 건너뛰고 계속 진행합니다.
"""
import logging
from typing import Dict, List

from ..common.diagnostics import Diagnostic
from .tag_selector import TagSelector
from .descendant_selector import DescendantSelector

logger = logging.getLogger(__name__)


class CSSParseError(Exception):
    """파서 내부에서만 쓰이는 오류 - parse() 밖으로 나가지 않음"""

    def __init__(self, position: int, message: str):
        super().__init__(message)
        self.position = position
        self.message = message


class CSSParser:
    WORD_CHARS = "#-.%_"

    def __init__(self, s):
        self.s = s
        self.i = 0
        self.diagnostics: List[Diagnostic] = []

    def whitespace(self):
        while self.i < len(self.s):
            if self.s[self.i].isspace():
                self.i += 1
            elif self.s.startswith("/*", self.i):
                end = self.s.find("*/", self.i + 2)
                self.i = len(self.s) if end == -1 else end + 2
            else:
                break

    def literal(self, literal):
        if not (self.i < len(self.s) and self.s[self.i] == literal):
            found = self.s[self.i] if self.i < len(self.s) else "end of input"
            raise CSSParseError(self.i, f"expected {literal!r}, found {found!r}")
        self.i += 1

    def word(self):
        start = self.i
        while self.i < len(self.s):
            if self.s[self.i].isalnum() or self.s[self.i] in self.WORD_CHARS:
                self.i += 1
            else:
                break
        if not (self.i > start):
            found = self.s[self.i] if self.i < len(self.s) else "end of input"
            raise CSSParseError(start, f"expected a word, found {found!r}")
        return self.s[start:self.i]

    def value(self):
        start = self.i
        while self.i < len(self.s) and self.s[self.i] not in ";}":
            self.i += 1
        value = self.s[start:self.i].strip()
        if not value:
            raise CSSParseError(start, "empty declaration value")
        return value

    def ignore_until(self, chars):
        while self.i < len(self.s):
            if self.s[self.i] in chars:
                return self.s[self.i]
            else:
                self.i += 1
        return None

    def report(self, error: CSSParseError):
        self.diagnostics.append(Diagnostic("css", error.position, error.message))
        logger.debug("CSS recovered at %d: %s", error.position, error.message)

    def pair(self):
        prop = self.word()
        self.whitespace()
        self.literal(":")
        self.whitespace()
        val = self.value()
        return prop.casefold(), val

    def body(self) -> Dict[str, str]:
        pairs = {}
        self.whitespace()
        while self.i < len(self.s) and self.s[self.i] != "}":
            try:
                prop, val = self.pair()
                pairs[prop] = val
                self.whitespace()
                if self.i < len(self.s) and self.s[self.i] == ";":
                    self.literal(";")
                    self.whitespace()
            except CSSParseError as e:
                self.report(e)
                why = self.ignore_until([";", "}"])
                if why == ";":
                    self.literal(";")
                    self.whitespace()
                else:
                    break
        return pairs

    def selector(self):
        out = TagSelector(self.word().casefold())
        self.whitespace()
        while self.i < len(self.s) and self.s[self.i] not in "{,":
            tag = self.word()
            descendant = TagSelector(tag.casefold())
            out = DescendantSelector(out, descendant)
            self.whitespace()
        return out

    def selector_list(self):
        """'h1, h2 { ... }' 처럼 쉼표로 묶인 셀렉터 목록"""
        selectors = [self.selector()]
        while self.i < len(self.s) and self.s[self.i] == ",":
            self.literal(",")
            self.whitespace()
            selectors.append(self.selector())
        return selectors

    def parse(self):
        rules = []
        self.whitespace()
        while self.i < len(self.s):
            try:
                selectors = self.selector_list()
                self.literal("{")
                body = self.body()
                self.literal("}")
                for selector in selectors:
                    rules.append((selector, body))
            except CSSParseError as e:
                self.report(e)
                why = self.ignore_until(["}"])
                if why == "}":
                    self.literal("}")
                else:
                    break
            self.whitespace()
        return rules
