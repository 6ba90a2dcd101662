"""HTML 파서 - 마크업 텍스트를 DOM 트리로 변환

파서는 절대 실패하지 않습니다. 잘못된 입력은 건너뛰고
diagnostics에 기록한 뒤 가능한 만큼의 트리를 만듭니다.
"""
import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional

from ..common.diagnostics import Diagnostic
from .element import Element
from .text import Text

logger = logging.getLogger(__name__)


@dataclass
class ParseResult:
    """파싱 결과 트리와 복구 과정에서 남은 진단 목록"""
    tree: Element
    diagnostics: List[Diagnostic] = field(default_factory=list)


class HTMLParser:
    SELF_CLOSING_TAGS = [
        "area", "base", "br", "col", "embed", "hr", "img", "input",
        "link", "meta", "param", "source", "track", "wbr"
    ]
    HEAD_TAGS = [
        "base", "basefont", "bgsound", "noscript",
        "link", "meta", "title", "style", "script",
    ]
    # 닫는 태그가 나올 때까지 내용을 그대로 텍스트로 취급
    RAW_TEXT_TAGS = ["script", "style"]

    def __init__(self, body):
        self.body = body
        self.unfinished: List[Element] = []
        self.diagnostics: List[Diagnostic] = []
        self.position = 0

    def parse(self):
        text = ""
        in_tag = False
        i = 0
        while i < len(self.body):
            c = self.body[i]
            self.position = i
            if c == "<":
                if in_tag:
                    self.report("unexpected '<' inside tag")
                elif text:
                    self.add_text(text)
                in_tag = True
                text = ""
            elif c == ">" and in_tag:
                in_tag = False
                self.add_tag(text)
                text = ""
                i = self.raw_text(i + 1)
                continue
            else:
                text += c
            i += 1

        self.position = len(self.body)
        if in_tag:
            self.report("unterminated tag at end of input")
        elif text:
            self.add_text(text)
        return self.finish()

    def raw_text(self, start: int) -> int:
        """방금 연 태그가 script/style 이면 닫는 태그 직전까지를 텍스트로 추가"""
        if not self.unfinished or \
                self.unfinished[-1].tag not in self.RAW_TEXT_TAGS:
            return start
        tag = self.unfinished[-1].tag
        match = re.compile("</" + tag, re.IGNORECASE).search(self.body, start)
        end = match.start() if match else len(self.body)
        text = self.body[start:end]
        if text:
            self.add_text(text)
        return end

    def report(self, message: str):
        self.diagnostics.append(Diagnostic("html", self.position, message))
        logger.debug("HTML recovered at %d: %s", self.position, message)

    def implicit_tags(self, tag):
        while True:
            open_tags = [node.tag for node in self.unfinished]

            if open_tags == [] and tag != "html":
                self.add_tag("html")

            elif open_tags == ["html"] \
                and tag not in ["head", "body", "/html"]:
                # head가 아직 없으면 빈 head를 먼저 열고 닫음
                if tag in self.HEAD_TAGS or \
                        self.find_child(self.unfinished[0], "head") is None:
                    self.open_section("head")
                else:
                    self.open_section("body")

            elif open_tags == ["html", "head"] and \
                tag not in ["/head"] + self.HEAD_TAGS:
                self.add_tag("/head")

            else:
                break

    def find_child(self, node: Element, tag: str) -> Optional[Element]:
        for child in node.children:
            if isinstance(child, Element) and child.tag == tag:
                return child
        return None

    def open_section(self, tag: str):
        """head/body를 열되, 이미 닫힌 것이 있으면 다시 연다"""
        html = self.unfinished[-1]
        existing = self.find_child(html, tag)
        if existing is None:
            self.add_tag(tag)
            return
        html.children.remove(existing)
        self.unfinished.append(existing)

    def add_text(self, text: str):
        if text.isspace(): return
        self.implicit_tags(None)
        parent = self.unfinished[-1]
        node = Text(text, parent)
        parent.children.append(node)

    def add_tag(self, tag: str):
        tag, attributes = self.get_attributes(tag)
        if not tag:
            self.report("empty tag")
            return
        if tag.startswith("!"): return

        self.implicit_tags(tag)
        if tag.startswith("/"):
            if len(self.unfinished) == 1:
                if tag != "/html":
                    self.report(f"unmatched closing tag <{tag}>")
                return
            node = self.unfinished.pop()
            if node.tag != tag[1:]:
                self.report(f"mismatched closing tag <{tag}> for <{node.tag}>")
            parent = self.unfinished[-1]
            parent.children.append(node)

        elif tag in self.SELF_CLOSING_TAGS:
            parent = self.unfinished[-1]
            node = Element(tag, attributes, parent)
            parent.children.append(node)

        elif tag in ["head", "body"] and self.unfinished \
                and self.unfinished[-1].tag == "html":
            html = self.unfinished[-1]
            if self.find_child(html, tag) is not None:
                self.open_section(tag)
                return
            if tag == "body" and self.find_child(html, "head") is None:
                html.children.append(Element("head", {}, html))
            self.unfinished.append(Element(tag, attributes, html))

        else:
            parent = self.unfinished[-1] if self.unfinished else None
            node = Element(tag, attributes, parent)
            self.unfinished.append(node)

    def finish(self):
        if not self.unfinished:
            self.implicit_tags(None)

        while len(self.unfinished) > 1:
            node = self.unfinished.pop()
            parent = self.unfinished[-1]
            parent.children.append(node)
        root = self.unfinished.pop()
        self.normalize_root(root)
        return root

    def normalize_root(self, root: Element):
        """html 아래에 head, body가 이 순서로 하나씩 있도록 보정"""
        if root.tag != "html":
            return
        for tag in ["head", "body"]:
            if self.find_child(root, tag) is None:
                root.children.append(Element(tag, {}, root))
        root.children.sort(
            key=lambda child: 0 if isinstance(child, Element)
            and child.tag == "head" else 1)

    def get_attributes(self, text: str):
        text = text.strip()
        if len(text) > 1 and text.endswith("/"):
            text = text[:-1]  # <br/> 형태
        parts = text.split(None, 1)  # 태그와 나머지를 분리
        tag = parts[0].casefold() if parts else ""
        attributes = {}

        if len(parts) > 1:
            rest = parts[1]
            i = 0
            while i < len(rest):
                # 공백 건너뛰기
                while i < len(rest) and rest[i].isspace():
                    i += 1
                if i >= len(rest):
                    break

                # 속성 이름 찾기
                key_start = i
                while i < len(rest) and rest[i] != "=" and not rest[i].isspace():
                    i += 1
                key = rest[key_start:i]

                if not key:
                    # '=' 로 시작하는 토큰은 버림
                    i += 1
                    continue

                if i >= len(rest) or rest[i] != "=":
                    attributes[key.casefold()] = ""
                    continue

                i += 1  # '=' 건너뛰기

                # 값 파싱 (따옴표 처리)
                if i < len(rest) and rest[i] in ["'", "\""]:
                    quote = rest[i]
                    i += 1
                    value_start = i
                    while i < len(rest) and rest[i] != quote:
                        i += 1
                    value = rest[value_start:i]
                    if i < len(rest):
                        i += 1  # 닫는 따옴표 건너뛰기
                else:
                    value_start = i
                    while i < len(rest) and not rest[i].isspace():
                        i += 1
                    value = rest[value_start:i]

                attributes[key.casefold()] = value

        return tag, attributes


def parse_html(text: str) -> ParseResult:
    """마크업을 파싱하고 트리와 진단 목록을 함께 반환"""
    parser = HTMLParser(text)
    tree = parser.parse()
    return ParseResult(tree, parser.diagnostics)
