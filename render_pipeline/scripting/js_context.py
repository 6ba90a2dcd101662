"""
JSContext - 페이지 스크립트 실행 컨텍스트

각 Frame은 자신만의 JSContext를 가지며:
- 전역 환경(document, window, console, alert, setTimeout)을 소유
- Element마다 하나의 핸들을 만들어 재사용 (같은 요소면 같은 핸들)
- (element, 이벤트 타입) 별 리스너 목록을 관리
- 스크립트나 리스너 하나가 실패해도 다음 실행에는 영향을 주지 않음

setTimeout 콜백은 타이머 스레드에서 TaskRunner에 Task로 쌓이고
호스트가 run_pending()으로 꺼내 실행합니다. 내부 잠금은 없으므로
호스트가 실행을 직렬화해야 합니다.
"""
import logging
import threading
from typing import Callable, Dict, List, Optional

from ..background.task import Task, TaskRunner
from ..dom import Element
from ..profiling import MeasureTime
from .dom_bindings import (
    ElementHandle, get_host_property, set_host_property,
    make_console, make_document, make_window,
)
from .errors import ScriptError
from .interpreter import Interpreter
from .parser import parse
from .tokenizer import tokenize
from .values import JSObject, NativeFunction, UNDEFINED, to_js_string, to_number

logger = logging.getLogger(__name__)


class JSContext:
    def __init__(self, id_map: Optional[Dict[str, Element]] = None,
                 on_mutation: Optional[Callable[[], None]] = None,
                 timer_factory=None, task_runner: Optional[TaskRunner] = None):
        self.id_map = id_map or {}
        self.on_mutation = on_mutation
        self.timer_factory = timer_factory or threading.Timer
        self.task_runner = task_runner or TaskRunner()

        self.node_to_handle: Dict[Element, ElementHandle] = {}
        self.listeners: Dict[tuple, List] = {}
        self.alerts: List[str] = []
        self.console_messages: List[str] = []
        self.discarded = False
        self.timers = []

        window = make_window(self)
        self.globals = {
            "document": make_document(self),
            "window": window,
            "console": make_console(self),
            "alert": window.get("alert"),
            "setTimeout": window.get("setTimeout"),
        }
        self.interp = Interpreter(
            self.globals, property_access=(get_host_property, set_host_property))

    def set_id_map(self, id_map: Dict[str, Element]):
        """스크립트 실행 전 호스트가 id -> Element 매핑을 공급"""
        self.id_map = id_map

    def run(self, code: str, script: str = "<inline>"):
        """스크립트 실행. 실패하면 로그를 남기고 None 반환"""
        try:
            with MeasureTime("script", "script", {"script": script}):
                program = parse(tokenize(code))
                return self.interp.evaluate(program)
        except ScriptError as e:
            logger.warning("Script %s error: %s", script, e)
            return None

    def get_handle(self, elt: Element) -> ElementHandle:
        if elt not in self.node_to_handle:
            self.node_to_handle[elt] = ElementHandle(elt, self)
        return self.node_to_handle[elt]

    def lookup(self, id: str):
        elt = self.id_map.get(id)
        return None if elt is None else self.get_handle(elt)

    def notify_mutation(self):
        if self.on_mutation is not None:
            self.on_mutation()

    def add_listener(self, elt: Element, type: str, listener):
        self.listeners.setdefault((elt, type), []).append(listener)

    def dispatch_event(self, elt: Element, type: str) -> bool:
        """등록된 리스너를 모두 호출. preventDefault()가 불렸으면 True"""
        listeners = list(self.listeners.get((elt, type), []))
        if not listeners:
            return False

        prevented = []
        event = JSObject({
            "type": type,
            "target": self.get_handle(elt),
            "preventDefault": NativeFunction(
                "preventDefault", lambda: prevented.append(True)),
        })
        for listener in listeners:
            try:
                self.interp.call_function(listener, [event])
            except ScriptError as e:
                logger.warning("Listener for %s on %r failed: %s", type, elt, e)
        return bool(prevented)

    def alert(self, message=UNDEFINED):
        text = to_js_string(message)
        self.alerts.append(text)
        logger.info("Alert: %s", text)
        return UNDEFINED

    def console_log(self, *args):
        text = " ".join(to_js_string(arg) for arg in args)
        self.console_messages.append(text)
        logger.info("console.log: %s", text)
        return UNDEFINED

    def dispatch_set_timeout(self, callback, env):
        if self.discarded: return
        try:
            self.interp.call_function(callback, [], env=env)
        except ScriptError as e:
            logger.warning("setTimeout callback failed: %s", e)

    def set_timeout(self, callback, delay=0.0):
        env = self.interp.env

        def run_callback():
            task = Task(self.dispatch_set_timeout, callback, env)
            self.task_runner.schedule_task(task)

        timer = self.timer_factory(max(0.0, to_number(delay)) / 1000.0,
                                   run_callback)
        # 대기 중인 타이머는 프로세스 종료를 막지 않음
        timer.daemon = True
        self.timers.append(timer)
        timer.start()
        return UNDEFINED

    def discard(self):
        """페이지를 떠날 때 호출. 남은 타이머를 취소하고 이후 콜백은 무시"""
        self.discarded = True
        for timer in self.timers:
            timer.cancel()
        self.timers = []

    def run_pending(self) -> int:
        """쌓인 타이머 Task를 모두 실행하고 실행한 개수를 반환"""
        if not self.task_runner.has_pending():
            return 0
        return self.task_runner.run_all()
