"""
Frame - HTML 문서 하나의 DOM/스타일/레이아웃/스크립트 상태 관리

Frame은 파이프라인의 호스트 역할을 하며:
- 마크업 파싱, 스타일 적용, 레이아웃, 페인트를 순서대로 수행
- 인라인 <script>를 문서 순서대로 실행 (src 스크립트는 호스트가 가져옴)
- DOM 변경을 dom_generation 카운터로 추적해 다시 그릴지 판단
- 클릭/키 입력을 DOM 이벤트와 이동 요청(NavigationRequest)으로 변환

네트워크 접근은 하지 않습니다. 링크와 폼 제출은 NavigationRequest로 돌려줍니다.
"""
import logging
import urllib.parse
from dataclasses import dataclass
from typing import List, Optional

from ..common.constants import WIDTH
from ..css import apply_styles
from ..dom import Element, Text, build_id_map, parse_html, text_content, \
    tree_to_list
from ..layout import LayoutError, layout_document, paint_document
from ..profiling import MeasureTime, trace_instant
from ..rendering import Rect
from ..scripting import JSContext

logger = logging.getLogger(__name__)


@dataclass
class NavigationRequest:
    """링크 클릭이나 폼 제출로 생긴 페이지 이동 요청"""
    url: str
    method: str = "GET"
    body: Optional[str] = None


class Frame:
    def __init__(self, width=WIDTH, font_factory=None, user_css="",
                 timer_factory=None):
        self.width = width
        self.font_factory = font_factory
        self.user_css = user_css
        self.timer_factory = timer_factory

        # DOM 및 레이아웃 상태
        self.base_url = "about:blank"
        self.author_css = ""
        self.nodes: Optional[Element] = None
        self.document = None  # 레이아웃 트리
        self.display_list = []
        self.html_diagnostics = []
        self.diagnostics = []  # 마크업 + CSS 진단
        self.external_scripts: List[str] = []

        self.js_context: Optional[JSContext] = None
        self.focus: Optional[Element] = None

        # 렌더링 상태
        self.dom_generation = 0
        self.rendered_generation = -1

    @property
    def needs_render(self):
        return self.dom_generation != self.rendered_generation

    def set_needs_render(self):
        """DOM이 바뀌었음을 기록 (스크립트의 on_mutation 훅)"""
        self.dom_generation += 1

    def load(self, html: str, base_url: str = "about:blank", author_css: str = ""):
        """마크업을 로드하고 렌더링한 뒤 인라인 스크립트를 실행"""
        with MeasureTime("frame_load", "load"):
            self.base_url = base_url
            self.author_css = author_css
            self.focus = None

            with MeasureTime("parse_html", "parse"):
                result = parse_html(html)
            self.nodes = result.tree
            self.html_diagnostics = result.diagnostics
            if result.diagnostics:
                logger.info("Recovered from %d markup error(s)",
                            len(result.diagnostics))

            if self.js_context:
                self.js_context.discard()
            self.js_context = JSContext(on_mutation=self.set_needs_render,
                                        timer_factory=self.timer_factory)

            self.set_needs_render()
            self.render()
            self.load_scripts()
            if self.needs_render:
                self.render()

    def load_scripts(self):
        """인라인 스크립트는 실행하고 src 스크립트는 절대 URL로 모아둠"""
        scripts = [node for node in tree_to_list(self.nodes, [])
                   if isinstance(node, Element) and node.tag == "script"]

        self.external_scripts = []
        for index, script in enumerate(scripts):
            if "src" in script.attributes:
                self.external_scripts.append(
                    urllib.parse.urljoin(self.base_url, script.attributes["src"]))
                trace_instant("external_script", "script",
                              {"url": self.external_scripts[-1]})
                continue
            self.run_script(text_content(script), f"inline script #{index}")

    def run_script(self, code: str, name: str = "<script>"):
        """호스트가 가져온 스크립트도 이 메서드로 실행"""
        self.js_context.set_id_map(build_id_map(self.nodes))
        return self.js_context.run(code, name)

    def render(self):
        """스타일 적용, 레이아웃 계산, 페인트"""
        with MeasureTime("style", "style"):
            css_diagnostics = apply_styles(self.nodes, self.author_css,
                                           self.user_css)
        self.diagnostics = list(self.html_diagnostics) + list(css_diagnostics)

        try:
            self.document = layout_document(self.nodes, self.width,
                                            self.font_factory)
            self.display_list = paint_document(self.document)
        except LayoutError:
            logger.exception("Layout failed, rendering a blank viewport")
            self.document = None
            self.display_list = []
        self.rendered_generation = self.dom_generation

    def dispatch_event(self, type, elt):
        """JavaScript 이벤트 디스패치 (기본 동작을 막았으면 True)"""
        if not self.js_context:
            return False
        self.js_context.set_id_map(build_id_map(self.nodes))
        return self.js_context.dispatch_event(elt, type)

    def hit_test(self, x, y):
        """(x, y)에 있는 가장 깊은 레이아웃 객체의 DOM 노드"""
        if not self.document:
            return None
        objs = [obj for obj in tree_to_list(self.document, [])
                if Rect(obj.x, obj.y, obj.x + obj.width,
                        obj.y + obj.height).contains_point(x, y)]
        return objs[-1].node if objs else None

    def click(self, x, y) -> Optional[NavigationRequest]:
        """클릭 처리. 페이지 이동이 필요하면 NavigationRequest 반환"""
        if self.focus:
            self.focus.is_focus = False
            self.focus = None
            self.set_needs_render()

        elt = self.hit_test(x, y)
        navigation = None
        while elt:
            if isinstance(elt, Text):
                pass

            elif elt.tag == "a" and "href" in elt.attributes:
                if not self.dispatch_event("click", elt):
                    url = urllib.parse.urljoin(self.base_url, elt.attributes["href"])
                    navigation = NavigationRequest(url)
                break

            elif elt.tag == "input":
                if not self.dispatch_event("click", elt):
                    elt.attributes["value"] = ""
                    self.focus = elt
                    elt.is_focus = True
                    self.set_needs_render()
                break

            elif elt.tag == "button":
                if not self.dispatch_event("click", elt):
                    form = elt.parent
                    while form and not (form.tag == "form"
                                        and "action" in form.attributes):
                        form = form.parent
                    if form:
                        navigation = self.submit_form(form)
                break

            # 그 밖의 요소는 조상으로 올라가며 click 전달
            elif self.dispatch_event("click", elt):
                break

            elt = elt.parent

        if self.needs_render:
            self.render()
        return navigation

    def submit_form(self, elt) -> Optional[NavigationRequest]:
        """폼 제출 - submit 이벤트 후 urlencoded POST 요청 생성"""
        if self.dispatch_event("submit", elt): return None
        inputs = [node for node in tree_to_list(elt, [])
                  if isinstance(node, Element)
                  and node.tag == "input"
                  and "name" in node.attributes]

        pairs = []
        for input in inputs:
            name = urllib.parse.quote(input.attributes["name"])
            value = urllib.parse.quote(input.attributes.get("value", ""))
            pairs.append(f"{name}={value}")
        url = urllib.parse.urljoin(self.base_url, elt.attributes["action"])
        logger.info("Submitting form to %s", url)
        return NavigationRequest(url, "POST", "&".join(pairs))

    def keypress(self, char):
        """포커스된 input에 문자 입력"""
        if self.focus:
            if self.dispatch_event("keydown", self.focus): return
            self.focus.attributes["value"] = \
                self.focus.attributes.get("value", "") + char
            self.set_needs_render()
            self.render()

    def backspace(self):
        if self.focus and self.focus.attributes.get("value"):
            self.focus.attributes["value"] = self.focus.attributes["value"][:-1]
            self.set_needs_render()
            self.render()

    def run_pending_tasks(self) -> int:
        """타이머 Task를 실행하고 DOM이 바뀌었으면 다시 렌더링"""
        if not self.js_context:
            return 0
        self.js_context.set_id_map(build_id_map(self.nodes))
        count = self.js_context.run_pending()
        if self.needs_render:
            self.render()
        return count
